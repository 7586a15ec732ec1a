"""Shared fixtures: small text corpora written to a temporary directory."""

from pathlib import Path

import pytest

from indexor.index import BooleanModel


@pytest.fixture
def make_corpus(tmp_path: Path):
    def _make(files: dict[str, str | bytes], name: str = "docs") -> Path:
        directory = tmp_path / name
        directory.mkdir()
        for filename, content in files.items():
            path = directory / filename
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return directory

    return _make


@pytest.fixture
def example_dir(make_corpus) -> Path:
    return make_corpus({"a.txt": "cat sat mat", "b.txt": "cat ran fast"})


@pytest.fixture
def example_model(example_dir: Path) -> BooleanModel:
    model = BooleanModel()
    model.index(example_dir)
    return model
