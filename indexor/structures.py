import bisect
import pprint
import logging

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Posting:
    doc_id: int
    positions: list[int] = field(default_factory=list)

    def update_with_positions(self, new_positions: list[int]):
        self.positions.extend(new_positions)

    def to_json(self):
        return {"doc_id": self.doc_id, "positions": list(self.positions)}


@dataclass
class Document:
    """A query result: a document id and the positions carried by the match"""

    id: int
    positions: list[int] = field(default_factory=list)

    @staticmethod
    def from_posting(posting: Posting) -> "Document":
        return Document(posting.doc_id, list(posting.positions))


@dataclass
class DocumentDetails:
    name: str = ""
    summary: str = ""
    text: str = ""

    def to_json(self):
        return {"name": self.name, "summary": self.summary, "text": self.text}


@dataclass
class Term:
    term: str
    posting_lists: list[Posting] = field(default_factory=list)

    def __str__(self):
        posting_list = [x for x in self.posting_lists][:10]
        if len(self.posting_lists) > 10:
            posting_list[-1] = "..."
        str_posting_list = pprint.pformat(posting_list)

        return f"{self.term}({self.document_frequency},{str_posting_list})"

    @property
    def document_frequency(self) -> int:
        return len(self.posting_lists)

    def _find(self, doc_id: int) -> int:
        return bisect.bisect_left(self.posting_lists, doc_id, key=lambda x: x.doc_id)

    def update_with_position(self, doc_id: int, position: int):
        idx = self._find(doc_id)
        if idx < len(self.posting_lists) and self.posting_lists[idx].doc_id == doc_id:
            self.posting_lists[idx].positions.append(position)
        else:
            self.posting_lists.insert(idx, Posting(doc_id, [position]))

    def update_with_postings(self, doc_id: int, new_positions: list[int]):
        idx = self._find(doc_id)
        if idx < len(self.posting_lists) and self.posting_lists[idx].doc_id == doc_id:
            self.posting_lists[idx].update_with_positions(new_positions)
        else:
            self.posting_lists.insert(idx, Posting(doc_id, list(new_positions)))

    def get_posting_list(self, doc_id: int) -> Posting | None:
        if len(self.posting_lists) == 0 or doc_id < self.posting_lists[0].doc_id:
            return None

        if doc_id > self.posting_lists[-1].doc_id:
            return None

        idx = self._find(doc_id)
        if idx < len(self.posting_lists) and self.posting_lists[idx].doc_id == doc_id:
            return self.posting_lists[idx]

        logger.debug(f"Doc ID {doc_id} not found in the posting list of {self.term}")
        return None


class IndexBase(ABC):
    @abstractmethod
    def insert(self, term: str, doc_id: int, position: int) -> None:
        pass

    @abstractmethod
    def lookup(self, term: str) -> list[Posting]:
        pass

    @abstractmethod
    def get_term(self, term: str) -> Term:
        pass

    @abstractmethod
    def get_document_frequency(self, term: str) -> int:
        pass

    @abstractmethod
    def get_posting_list(self, term: str, doc_id: int) -> Posting | None:
        pass
