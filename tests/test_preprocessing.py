import pickle

import pytest

from preprocessing import Term
from preprocessing.normalizer import (
    Normalizer,
    StemmingNormalizer,
    StopWordNormalizer,
    normalize_text,
)
from preprocessing.preprocessor import Preprocessor
from preprocessing.tokenizer import Tokenizer, split_tokens


def test_normalize_text_replaces_non_alphanumerics():
    assert normalize_text("Hello, World! 42") == "hello  world  42"


def test_normalize_text_keeps_length():
    text = "Ünïcode—dash"
    assert len(normalize_text(text)) == len(text)
    assert normalize_text(text) == " n code dash"


def test_split_tokens_drops_short_tokens():
    assert split_tokens("a  bc d efg ") == ["bc", "efg"]


def test_stop_word_normalizer_blanks_stop_words():
    terms = [Term("the"), Term("cat")]
    StopWordNormalizer().normalize(terms)
    assert [t.term for t in terms] == ["", "cat"]


def test_stop_word_normalizer_reads_file(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_text("cat\nmat\n")
    normalizer = StopWordNormalizer(stop_words_file=str(path))
    assert normalizer.stop_words == frozenset({"cat", "mat"})


def test_stop_word_normalizer_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        StopWordNormalizer(stop_words_file=str(tmp_path / "missing.txt"))


def test_stemming_normalizer_stems():
    stemmer = StemmingNormalizer()
    assert stemmer.stem("running") == "run"
    assert stemmer.stem("cats") == "cat"


def test_stemming_normalizer_pickles_without_stemmer():
    stemmer = StemmingNormalizer()
    assert "stemmer" not in stemmer.__getstate__()

    restored = pickle.loads(pickle.dumps(stemmer))
    assert restored.stem("connections") == stemmer.stem("connections")


def test_normalizer_filters_empty_terms():
    normalizer = Normalizer([StopWordNormalizer(), StemmingNormalizer()])
    terms = normalizer([Term("the"), Term("dogs"), Term("of"), Term("running")])
    assert [t.term for t in terms] == ["dog", "run"]


def test_tokenizer_positions_index_filtered_stream():
    out = Tokenizer()("the cat is on the mat")
    assert [(t.term, t.position) for t in out.tokenized_text] == [("cat", 0), ("mat", 1)]
    assert out.original_number_of_words == 6


def test_tokenizer_empty_text():
    out = Tokenizer()("")
    assert out.tokenized_text == []


def test_preprocessor_returns_normalized_text_and_terms():
    preprocessed = Preprocessor()("The Cats' hats!")
    assert preprocessed.normalized_text == "the cats  hats "
    assert [t.term for t in preprocessed] == ["cat", "hat"]
    assert [t.original_term for t in preprocessed] == ["cats", "hats"]


def test_preprocessor_query_term_keeps_stop_words():
    preprocessor = Preprocessor()
    assert preprocessor.query_term("The") == "the"
    assert preprocessor.query_term("Running") == "run"


def test_preprocessor_without_stemming():
    preprocessor = Preprocessor(stemming=False)
    assert [t.term for t in preprocessor("running dogs")] == ["running", "dogs"]
    assert preprocessor.query_term("Dogs") == "dogs"


def test_normalizer_keeps_empty_terms_when_not_filtering():
    normalizer = Normalizer([StopWordNormalizer()])
    terms = normalizer([Term("the"), Term("dogs")], filter_empty_terms=False)
    assert [t.term for t in terms] == ["", "dogs"]
