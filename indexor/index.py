import json
import logging
import os
import pickle

from filelock import FileLock

from indexor.catalog import DocumentCatalog
from indexor.errors import FileUnreadable
from indexor.in_memory_index import InMemoryIndex
from indexor.index_builder import IndexBuilder
from indexor.query import BooleanQuery, ProximityQuery, is_proximity_query
from indexor.structures import Document, DocumentDetails, Posting
from preprocessing.preprocessor import Preprocessor

logger = logging.getLogger(__name__)


class BooleanModel:
    """
    Owned index state: a posting store and a document catalog built from one
    directory, plus the preprocessor used for both documents and queries.

    `index` rebuilds everything from scratch. Queries never raise; unknown
    terms and malformed operators produce empty or partial results.
    """

    def __init__(self, stop_words_file: str = "", show_progress: bool = False):
        self.preprocessor = Preprocessor(stop_words_file=stop_words_file)
        self.show_progress = show_progress

        self.posting_store = InMemoryIndex()
        self.catalog = DocumentCatalog()
        self.errors: list[FileUnreadable] = []
        self.directory_path: str | None = None

    def __eq__(self, other):
        if not isinstance(other, BooleanModel):
            return NotImplemented

        return (
            self.posting_store == other.posting_store and self.catalog == other.catalog
        )

    def index(self, directory_path) -> dict:
        builder = IndexBuilder(
            directory_path,
            preprocessor=self.preprocessor,
            show_progress=self.show_progress,
        )
        posting_store, catalog = builder.build()

        self.posting_store = posting_store
        self.catalog = catalog
        self.errors = builder.errors
        self.directory_path = builder.directory_path

        return builder.summary()

    def lookup(self, term: str) -> list[Posting]:
        return self.posting_store.lookup(self.preprocessor.query_term(term))

    def query_boolean(self, query: str) -> list[Document]:
        postings = BooleanQuery(query, self.preprocessor).evaluate(self.posting_store)
        return [Document.from_posting(posting) for posting in postings]

    def query_positional(self, query: str) -> list[Document]:
        proximity_query = ProximityQuery(query, self.preprocessor)
        postings = proximity_query.evaluate(self.posting_store)
        logger.debug(f"{query!r} window={proximity_query.window} -> {postings}")

        return [Document.from_posting(posting) for posting in postings]

    def search(self, query: str) -> list[Document]:
        if is_proximity_query(query):
            return self.query_positional(query)

        return self.query_boolean(query)

    def get_doc(self, doc_id: int) -> DocumentDetails | None:
        return self.catalog.get(doc_id)

    def get_document_count(self) -> int:
        return len(self.catalog)

    def get_term_count(self) -> int:
        return self.posting_store.get_term_count()

    def to_json(self) -> str:
        return json.dumps(
            {
                "posting_list": self.posting_store.to_json(),
                "documents": self.catalog.to_json(),
            },
            indent=2,
        )

    def save(self, path):
        path = os.fspath(path)
        with FileLock(path + ".lock"):
            with open(path, "wb") as f:
                pickle.dump(self, f)

        logger.info(f"Saved model with {self.get_term_count()} terms to {path}")

    @staticmethod
    def load(path) -> "BooleanModel":
        path = os.fspath(path)
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Model snapshot {path} does not exist")

        with FileLock(path + ".lock"):
            with open(path, "rb") as f:
                try:
                    model = pickle.load(f)
                except (pickle.UnpicklingError, EOFError) as e:
                    raise ValueError(f"File {path} is not a model snapshot") from e

        if not isinstance(model, BooleanModel):
            raise ValueError(f"File {path} does not contain a BooleanModel")

        logger.info(f"Loaded model with {model.get_term_count()} terms from {path}")
        return model
