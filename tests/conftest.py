from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from tests.helpers import write_docs

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

DocsTree = Callable[..., Path]


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("CI", "RUN_ID", "I18NCTL_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def docs_tree(tmp_path: Path) -> DocsTree:
    """Build `<tmp>/docs/<lang>/<relpath>` files from a `{lang: [relpath]}` layout."""

    def _make(layout: dict[str, Iterable[str]], content: str = "# Doc\n") -> Path:
        root = tmp_path / "docs"
        root.mkdir(exist_ok=True)
        for lang, rels in layout.items():
            (root / lang).mkdir(parents=True, exist_ok=True)
            write_docs(root / lang, {rel: content for rel in rels})
        return root

    return _make
