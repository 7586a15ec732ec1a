from dataclasses import dataclass


class IndexorError(Exception):
    pass


class DirectoryUnreadable(IndexorError, OSError):
    def __init__(self, path, reason=None):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read directory {self.path}: {reason}")


@dataclass
class FileUnreadable:
    """A file skipped during indexing. Its document id is still consumed"""

    doc_id: int
    path: str
    reason: str

    def __str__(self):
        return f"Cannot read file {self.path} (doc {self.doc_id}): {self.reason}"


@dataclass
class MalformedProximityWindow:
    token: str
    fallback: int

    def __str__(self):
        return f"Invalid proximity window {self.token!r}, using {self.fallback}"
