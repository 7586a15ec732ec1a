import logging

from dataclasses import dataclass
from preprocessing import Term
from preprocessing.normalizer import (
    Normalizer,
    StopWordNormalizer,
    StemmingNormalizer,
)

from constants.index import MIN_TOKEN_LENGTH

logger = logging.getLogger(__name__)


@dataclass
class TokenizedOutput:
    tokenized_text: list[Term]
    original_number_of_words: int = 0


def split_tokens(text: str, min_length: int = MIN_TOKEN_LENGTH) -> list[str]:
    """Splits on single spaces and drops tokens shorter than `min_length`"""
    return [token for token in text.split(" ") if len(token) >= min_length]


def BuildNormalizerOperations(stop_words_file: str = "", stemming: bool = True):
    operations = [StopWordNormalizer(stop_words_file=stop_words_file)]
    if stemming:
        operations.append(StemmingNormalizer())

    return operations


class Tokenizer:
    def __init__(self, normalizer_operations=None, min_length=MIN_TOKEN_LENGTH):
        if normalizer_operations is None:
            normalizer_operations = BuildNormalizerOperations()

        self.min_length = min_length
        self.normalizer = Normalizer(normalizer_operations)

    def __repr__(self):
        return f"Tokenizer(min_length={self.min_length}, normalizer={self.normalizer.operations})"

    def __call__(self, *args, **kwargs):
        return self.tokenize(*args, **kwargs)

    def tokenize(self, normalized_text: str) -> TokenizedOutput:
        """
        Splits already normalized text into terms and runs the normalizer chain.
        Positions are assigned after filtering so they index the filtered stream
        """
        if not normalized_text:
            return TokenizedOutput(tokenized_text=[], original_number_of_words=0)

        tokens = [
            Term(term=token, original_term=token)
            for token in split_tokens(normalized_text, self.min_length)
        ]
        terms = self.normalizer(tokens)
        for position, term in enumerate(terms):
            term.position = position

        logger.debug(f"Tokenized {len(tokens)} tokens into {len(terms)} terms")
        return TokenizedOutput(
            tokenized_text=terms, original_number_of_words=len(tokens)
        )
