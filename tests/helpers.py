from __future__ import annotations

from pathlib import Path

from i18nctl.core.config import I18nConfig, build_config
from i18nctl.core.context import RunContext

PLACEHOLDER = "# TODO: Translate from English"


def write_docs(root: Path, files: dict[str, str]) -> Path:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def make_config(root: Path, **values: object) -> I18nConfig:
    return build_config({"root": str(root), **values}, cwd=root.parent)


def make_ctx(cfg: I18nConfig, **kwargs: object) -> RunContext:
    return RunContext.from_args("pytest-run", cfg, **kwargs)  # type: ignore[arg-type]


def snapshot(root: Path) -> dict[str, bytes]:
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}
