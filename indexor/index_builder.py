import logging
import os
import time

from tqdm import tqdm

from indexor.catalog import DocumentCatalog
from indexor.errors import DirectoryUnreadable, FileUnreadable
from indexor.in_memory_index import InMemoryIndex
from preprocessing.preprocessor import Preprocessor

logger = logging.getLogger(__name__)


def sort_key(name: str):
    encoded = os.fsencode(name)
    return (len(encoded), encoded)


def list_dir_sorted(directory_path) -> list[str]:
    """
    Lists the entries of `directory_path` ordered by name length, then by name.
    This order decides document ids and must not change
    """
    try:
        names = os.listdir(directory_path)
    except OSError as e:
        raise DirectoryUnreadable(directory_path, e) from e

    return sorted(names, key=sort_key)


class IndexBuilder:
    def __init__(
        self,
        directory_path,
        preprocessor: Preprocessor | None = None,
        show_progress: bool = False,
    ) -> None:
        """
        Args:
            directory_path: str | os.PathLike
                Directory whose entries are indexed. Subdirectories are not walked
            preprocessor: Preprocessor
                Text pipeline shared with query parsing so terms match
            show_progress: bool
                If True, display a progress bar while reading files
        """
        self.directory_path = os.fspath(directory_path)
        self.preprocessor = preprocessor if preprocessor is not None else Preprocessor()
        self.show_progress = show_progress

        self.index = InMemoryIndex()
        self.catalog = DocumentCatalog()
        self.errors: list[FileUnreadable] = []

    def __str__(self):
        return (
            f"IndexBuilder(documents={len(self.catalog)}, skipped={len(self.errors)}, "
            f"terms={self.index.get_term_count()})"
        )

    def build(self) -> tuple[InMemoryIndex, DocumentCatalog]:
        """
        Main entry point. Lists the directory, assigns ids 1..N in sorted order
        and ingests every readable file. A file that cannot be read is recorded
        and skipped but still consumes its id
        """
        start = time.time()
        names = list_dir_sorted(self.directory_path)
        logger.info(f"Indexing {len(names)} entries from {self.directory_path}")

        for doc_id, name in enumerate(
            tqdm(names, desc="Indexing", disable=not self.show_progress), start=1
        ):
            path = os.path.join(self.directory_path, name)
            text = self._read(doc_id, path)
            if text is None:
                continue

            self._process_document(doc_id, name, text)

        logger.info(f"Built index in {time.time() - start:.3f} seconds => {self}")
        return self.index, self.catalog

    def summary(self) -> dict:
        return {
            "documents": len(self.catalog),
            "skipped": len(self.errors),
            "terms": self.index.get_term_count(),
        }

    def _read(self, doc_id: int, path: str) -> str | None:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            error = FileUnreadable(doc_id, path, str(e))
            self.errors.append(error)
            logger.warning(str(error))
            return None

    def _process_document(self, doc_id: int, name: str, text: str):
        preprocessed = self.preprocessor(text)
        for word in preprocessed:
            self.index.insert(word.term, doc_id, word.position)

        self.catalog.add(doc_id, name, preprocessed.normalized_text, text)

        logger.debug(f"Indexed {name} as document {doc_id} ({len(preprocessed)} terms)")
