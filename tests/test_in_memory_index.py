import pytest

from indexor.in_memory_index import InMemoryIndex
from indexor.structures import Posting


def test_insert_creates_and_extends_postings():
    index = InMemoryIndex()
    index.insert("cat", 1, 0)
    index.insert("cat", 1, 4)
    index.insert("cat", 2, 1)

    assert index.lookup("cat") == [Posting(1, [0, 4]), Posting(2, [1])]
    assert index.get_document_frequency("cat") == 2


def test_insert_keeps_doc_ids_sorted():
    index = InMemoryIndex()
    for doc_id in (5, 2, 9, 2, 1):
        index.insert("dog", doc_id, 0)

    assert [p.doc_id for p in index.lookup("dog")] == [1, 2, 5, 9]
    assert index.get_posting_list("dog", 2).positions == [0, 0]


def test_lookup_unknown_term_is_empty():
    index = InMemoryIndex()
    assert index.lookup("missing") == []
    assert index.get_posting_list("missing", 1) is None
    assert "missing" not in index


def test_get_term_unknown_raises():
    with pytest.raises(ValueError):
        InMemoryIndex().get_term("missing")


def test_get_posting_list_outside_range():
    index = InMemoryIndex()
    index.insert("cat", 3, 0)
    assert index.get_posting_list("cat", 1) is None
    assert index.get_posting_list("cat", 4) is None
    assert index["cat"].get_posting_list(3) == Posting(3, [0])


def test_txt_dump_round_trip(tmp_path):
    index = InMemoryIndex()
    index.insert("cat", 1, 0)
    index.insert("cat", 2, 3)
    index.insert("cat", 2, 7)
    index.insert("mat", 1, 2)

    path = tmp_path / "index.txt"
    index.write_index_to_txt(str(path))

    assert path.read_text() == "cat\t2\n\t1\t0\n\t2\t3,7\nmat\t1\n\t1\t2\n"
    assert InMemoryIndex(load_path=str(path)) == index


def test_load_missing_txt(tmp_path):
    with pytest.raises(FileNotFoundError):
        InMemoryIndex(load_path=str(tmp_path / "missing.txt"))


@pytest.mark.parametrize(
    "content",
    [
        "\t1\t0\n",
        "cat\n\t1\t0\n",
        "cat\t2\n\t1\t0\n",
        "cat\t1\n\t1\t0\ncat\t1\n\t2\t0\n",
    ],
)
def test_load_malformed_txt(tmp_path, content):
    path = tmp_path / "index.txt"
    path.write_text(content)
    with pytest.raises(ValueError):
        InMemoryIndex(load_path=str(path))
