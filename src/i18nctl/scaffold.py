from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .core.config import I18nConfig
from .core.context import RunContext
from .core.fs import create_text_file, ensure_dir
from .core.logging import log_event
from .sync import SyncFailure


@dataclass
class ScaffoldResult:
    directories: list[Path] = field(default_factory=list)
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[SyncFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def render_readme(cfg: I18nConfig, code: str) -> str:
    links = " | ".join(
        f"[{name}](../{lang}/README.md)" for lang, name in cfg.languages.items() if lang in cfg.all_languages
    )
    return (
        f"# Documentation ({code})\n"
        "\n"
        f"> 🌍 {links}\n"
        "\n"
        "## Table of Contents\n"
        "\n"
        "<!-- Add your language-specific content here -->\n"
    )


def scaffold_structure(ctx: RunContext) -> ScaffoldResult:
    """Create language and category directories plus a README per language."""
    cfg = ctx.config
    result = ScaffoldResult()
    for code in cfg.all_languages:
        lang_root = cfg.language_root(code)
        directory = lang_root
        try:
            for directory in (lang_root, *(lang_root / category for category in cfg.categories)):
                if not directory.is_dir():
                    ensure_dir(directory)
                    result.directories.append(directory)
        except OSError as exc:
            result.failed.append(SyncFailure(directory, exc.strerror or str(exc)))
            log_event(ctx, "error", "scaffold", "mkdir_failed", path=directory, reason=str(exc))
            continue
        readme = lang_root / "README.md"
        try:
            written = create_text_file(readme, render_readme(cfg, code))
        except OSError as exc:
            result.failed.append(SyncFailure(readme, exc.strerror or str(exc)))
            log_event(ctx, "error", "scaffold", "write_failed", path=readme, reason=str(exc))
            continue
        (result.created if written else result.skipped).append(readme)
    log_event(
        ctx,
        "info",
        "scaffold",
        "finished",
        languages=",".join(cfg.all_languages),
        directories=len(result.directories),
        created=len(result.created),
        failed=len(result.failed),
    )
    return result


def scaffold_payload(ctx: RunContext, result: ScaffoldResult) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "i18nctl",
        "kind": "i18n-init",
        "status": "ok" if result.ok else "fail",
        "run_id": ctx.run_id,
        "languages": list(ctx.config.all_languages),
        "directories": [str(p) for p in result.directories],
        "created": [str(p) for p in result.created],
        "skipped": [str(p) for p in result.skipped],
        "failed": [{"path": str(f.path), "reason": f.reason} for f in result.failed],
    }
