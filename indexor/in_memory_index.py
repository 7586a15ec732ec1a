import os
import logging

from indexor.structures import Term, Posting, IndexBase

logger = logging.getLogger(__name__)


class InMemoryIndex(IndexBase):
    """
    Posting store: term -> posting list sorted by document id. Each document
    appears at most once per term; repeated occurrences extend its positions
    """

    def __init__(self, load_path=None):
        self.load_path = load_path

        self.term_map: dict[str, Term] = {}

        if self.load_path is not None:
            self._load_index(self.load_path)

    def __getitem__(self, term: str) -> Term:
        return self.get_term(term)

    def __contains__(self, term: str) -> bool:
        return term in self.term_map

    def __eq__(self, other):
        if not isinstance(other, InMemoryIndex):
            return NotImplemented

        return self.term_map == other.term_map

    def insert(self, term: str, doc_id: int, position: int) -> None:
        term_obj = self.term_map.get(term, None)
        if term_obj is None:
            term_obj = Term(term)
            self.term_map[term] = term_obj

        term_obj.update_with_position(doc_id, position)

    def lookup(self, term: str) -> list[Posting]:
        term_obj = self.term_map.get(term, None)
        if term_obj is None:
            return []

        return term_obj.posting_lists

    def get_term(self, term: str) -> Term:
        term_obj = self.term_map.get(term, None)
        if term_obj is None:
            raise ValueError(f"Term {term} not found in index")

        return term_obj

    def get_document_frequency(self, term: str) -> int:
        return len(self.lookup(term))

    def get_posting_list(self, term: str, doc_id: int) -> Posting | None:
        term_obj = self.term_map.get(term, None)
        if term_obj is None:
            return None

        return term_obj.get_posting_list(doc_id)

    def get_term_count(self) -> int:
        return len(self.term_map)

    def terms(self):
        return sorted(self.term_map.keys())

    def to_json(self):
        return {
            term: [posting.to_json() for posting in self.term_map[term].posting_lists]
            for term in self.terms()
        }

    def write_index_to_txt(self, path: str):
        with open(path, "w") as f:
            for term in self.terms():
                term_obj = self.term_map[term]
                f.write(f"{term}\t{term_obj.document_frequency}\n")
                for posting in term_obj.posting_lists:
                    positions = ",".join(str(p) for p in posting.positions)
                    f.write(f"\t{posting.doc_id}\t{positions}\n")

        logger.info(f"Wrote {len(self.term_map)} terms to {path}")

    def _load_index(self, index_path):
        logger.info(f"Loading index from {index_path}")

        if not os.path.exists(index_path):
            raise FileNotFoundError(f"Index path {index_path} does not exist")

        if not os.path.isfile(index_path):
            raise ValueError(f"Index path {index_path} is not a file")

        self._load_index_partition(index_path)

    def _load_index_partition(self, index_path):
        def _commit(term_obj, expected_frequency):
            if term_obj is None:
                return
            if term_obj.term in self.term_map:
                raise ValueError(f"Duplicate term {term_obj.term} found in index")
            if term_obj.document_frequency != expected_frequency:
                raise ValueError(
                    f"Term {term_obj.term} declares {expected_frequency} documents "
                    f"but has {term_obj.document_frequency}"
                )
            self.term_map[term_obj.term] = term_obj

        with open(index_path) as f:
            curr_term = None
            curr_frequency = 0
            for line in f:
                if not line.strip():
                    continue

                if line[0] == "\t":
                    if curr_term is None:
                        raise ValueError("Invalid index format")

                    values = line.strip().split("\t")
                    if len(values) != 2:
                        raise ValueError("Invalid index format: " + line)

                    doc_id, postings = values
                    postings = [int(p) for p in postings.split(",")]
                    curr_term.update_with_postings(int(doc_id), postings)
                else:
                    _commit(curr_term, curr_frequency)

                    values = line.strip().split("\t")
                    if len(values) != 2:
                        raise ValueError("Invalid index format: " + line)

                    term, document_frequency = values
                    curr_term = Term(term)
                    curr_frequency = int(document_frequency)

            _commit(curr_term, curr_frequency)
