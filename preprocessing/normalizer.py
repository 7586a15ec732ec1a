import os
import re
import Stemmer

from abc import ABC, abstractmethod
from preprocessing import Term

from constants.index import STEMMER_ALGORITHM, STOP_WORDS

NON_ALPHANUMERIC_RE = re.compile(r"[^a-z0-9]")


def normalize_text(text: str) -> str:
    """
    Lowercases the text and replaces every character that is not an ASCII
    letter or digit with a space.
    """
    return NON_ALPHANUMERIC_RE.sub(" ", text.lower())


class SubNormalizer(ABC):
    def normalize(self, terms: list[Term]):
        for term in terms:
            self.normalize_term(term)

        return terms

    @abstractmethod
    def normalize_term(self, term: Term):
        pass


class StopWordNormalizer(SubNormalizer):
    def __init__(self, stop_words_file: str = "", stop_words_set=STOP_WORDS):
        if len(stop_words_file) > 0:
            if not os.path.exists(stop_words_file):
                raise FileNotFoundError(f"Stop words file {stop_words_file} not found.")

            with open(stop_words_file, "r") as f:
                self.stop_words = frozenset(f.read().split())
        else:
            self.stop_words = frozenset(stop_words_set)

    def normalize_term(self, term: Term):
        if term.term in self.stop_words:
            term.term = ""


class StemmingNormalizer(SubNormalizer):
    def __init__(self, algorithm: str = STEMMER_ALGORITHM):
        self.algorithm = algorithm
        self.stemmer = Stemmer.Stemmer(self.algorithm)

    def __getstate__(self) -> object:
        data = self.__dict__.copy()
        del data["stemmer"]

        return data

    def __setstate__(self, state: object) -> None:
        self.__dict__.update(state)
        self.stemmer = Stemmer.Stemmer(self.algorithm)

    def stem(self, word: str) -> str:
        return self.stemmer.stemWord(word)

    def normalize_term(self, term: Term):
        if term.term:
            term.term = self.stem(term.term)


class Normalizer:
    def __init__(self, operations: list[SubNormalizer] | None = None):
        self.operations = operations if operations is not None else []

    def __call__(self, *args, **kwargs):
        return self.normalize(*args, **kwargs)

    def normalize(self, terms, filter_empty_terms=True):
        new_terms = []
        for term in terms:
            for operation in self.operations:
                operation.normalize_term(term)

            if not filter_empty_terms or len(term.term) > 0:
                new_terms.append(term)

        return new_terms
