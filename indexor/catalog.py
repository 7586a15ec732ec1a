import logging

from indexor.structures import DocumentDetails

from constants.index import SUMMARY_LENGTH

logger = logging.getLogger(__name__)


def summarize(normalized_text: str, length: int = SUMMARY_LENGTH) -> str:
    return normalized_text[:length]


class DocumentCatalog:
    def __init__(self):
        self.documents: dict[int, DocumentDetails] = {}

    def __len__(self):
        return len(self.documents)

    def __contains__(self, doc_id: int) -> bool:
        return doc_id in self.documents

    def __eq__(self, other):
        if not isinstance(other, DocumentCatalog):
            return NotImplemented

        return self.documents == other.documents

    def add(self, doc_id: int, name: str, normalized_text: str, text: str):
        if doc_id in self.documents:
            raise ValueError(f"Document {doc_id} already in catalog")

        self.documents[doc_id] = DocumentDetails(
            name=name, summary=summarize(normalized_text), text=text
        )

    def get(self, doc_id: int) -> DocumentDetails | None:
        return self.documents.get(doc_id, None)

    def doc_ids(self):
        return sorted(self.documents.keys())

    def to_json(self):
        return {
            str(doc_id): self.documents[doc_id].to_json() for doc_id in self.doc_ids()
        }
