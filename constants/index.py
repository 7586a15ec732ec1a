import os
from dotenv import load_dotenv

load_dotenv()

STOP_WORDS = frozenset(
    {
        "a",
        "is",
        "the",
        "of",
        "all",
        "and",
        "to",
        "can",
        "be",
        "as",
        "once",
        "for",
        "at",
        "am",
        "are",
        "has",
        "have",
        "had",
        "up",
        "his",
        "her",
        "in",
        "on",
        "no",
        "we",
        "do",
    }
)

STEMMER_ALGORITHM = "porter"

MIN_TOKEN_LENGTH = 2
SUMMARY_LENGTH = 50
DEFAULT_PROXIMITY_WINDOW = 1

AND_OPERATOR = "AND"
OR_OPERATOR = "OR"
WINDOW_PREFIX = "/"

SNAPSHOT_PATH = os.getenv("BOOLEAN_RETRIEVAL_SNAPSHOT", "boolean_model.pkl")
