"""Document set resolution over the canonical language tree."""

from __future__ import annotations

from pathlib import Path

from .core.config import I18nConfig
from .core.errors import ScriptError
from .core.exit_codes import ERR_CONFIG


def require_source_tree(cfg: I18nConfig) -> Path:
    root = cfg.canonical_root
    if not root.is_dir():
        raise ScriptError(f"missing source tree: {root}", ERR_CONFIG, kind="missing_source_tree")
    return root


def _walk(base: Path, extension: str) -> list[Path]:
    return [p for p in base.rglob(f"*{extension}") if p.is_file()]


def resolve_documents(cfg: I18nConfig) -> list[str]:
    """Return the sorted relative paths of every canonical document.

    With categories configured only `<canonical>/<category>/` subtrees are
    walked; otherwise the whole canonical tree is. Paths use `/` separators
    and are relative to the canonical root.
    """
    root = require_source_tree(cfg)
    found: set[str] = set()
    if cfg.categories:
        for category in cfg.categories:
            base = root / category
            if base.is_dir():
                found.update(p.relative_to(root).as_posix() for p in _walk(base, cfg.extension))
    else:
        found.update(p.relative_to(root).as_posix() for p in _walk(root, cfg.extension))
    return sorted(found)
