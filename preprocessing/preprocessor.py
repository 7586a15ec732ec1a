import logging

from preprocessing import PreprocessedText
from preprocessing.normalizer import StemmingNormalizer, normalize_text
from preprocessing.tokenizer import BuildNormalizerOperations, Tokenizer


logger = logging.getLogger(__name__)


class Preprocessor:
    def __init__(self, stop_words_file: str = "", stemming: bool = True):
        self.stop_words_file = stop_words_file
        self.stemming = stemming

        self.normalizer_operations = BuildNormalizerOperations(
            stop_words_file=stop_words_file, stemming=stemming
        )
        self.tokenizer = Tokenizer(normalizer_operations=self.normalizer_operations)

        self.stemmer = next(
            (
                op
                for op in self.normalizer_operations
                if isinstance(op, StemmingNormalizer)
            ),
            None,
        )

    def __call__(self, text):
        return self.preprocess(text)

    def preprocess(self, text: str) -> PreprocessedText:
        normalized_text = normalize_text(text)
        tokenized_out = self.tokenizer(normalized_text)

        return PreprocessedText(
            normalized_text=normalized_text, words=tokenized_out.tokenized_text
        )

    def query_term(self, token: str) -> str:
        """Lowercases and stems a single query token without stopword removal"""
        term = token.lower()
        if self.stemmer is None:
            return term

        return self.stemmer.stem(term)


if __name__ == "__main__":
    import argparse
    import pprint

    parser = argparse.ArgumentParser()
    parser.add_argument("text", type=str)
    parser.add_argument("--stop-words-file", type=str, default="")
    parser.add_argument("--no-stemming", action="store_true")
    args = parser.parse_args()

    preprocessor = Preprocessor(
        stop_words_file=args.stop_words_file, stemming=not args.no_stemming
    )
    pprint.pp(preprocessor(args.text))
