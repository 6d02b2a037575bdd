"""Placeholder creation for missing translations.

Every missing `<target>/<relpath>` slot gets a one-line placeholder file.
Existing files are never touched, so repeated runs converge and stop writing.
Write failures are collected per path and the run carries on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .core.context import RunContext
from .core.fs import create_text_file
from .core.logging import log_event
from .docset import resolve_documents


@dataclass(frozen=True)
class SyncFailure:
    path: Path
    reason: str


@dataclass
class SyncResult:
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[SyncFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def placeholder_content(placeholder: str) -> str:
    return placeholder.strip() + "\n"


def sync_stubs(ctx: RunContext, dry_run: bool = False) -> SyncResult:
    cfg = ctx.config
    content = placeholder_content(cfg.placeholder)
    result = SyncResult()
    for rel in resolve_documents(cfg):
        for code in cfg.targets:
            target = cfg.language_root(code) / rel
            try:
                if target.is_file():
                    result.skipped.append(target)
                    continue
                if target.exists() or target.is_symlink():
                    result.failed.append(SyncFailure(target, "not a regular file"))
                    log_event(ctx, "error", "sync", "slot_blocked", path=target)
                    continue
                if dry_run:
                    result.created.append(target)
                    continue
                written = create_text_file(target, content)
            except OSError as exc:
                reason = exc.strerror or str(exc)
                result.failed.append(SyncFailure(target, reason))
                log_event(ctx, "error", "sync", "write_failed", path=target, reason=reason)
                continue
            if written:
                result.created.append(target)
                log_event(ctx, "info", "sync", "created", path=target)
            else:
                result.skipped.append(target)
    log_event(
        ctx,
        "info",
        "sync",
        "finished",
        created=len(result.created),
        skipped=len(result.skipped),
        failed=len(result.failed),
        dry_run=dry_run,
    )
    return result


def sync_payload(ctx: RunContext, result: SyncResult, dry_run: bool = False) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "i18nctl",
        "kind": "i18n-sync",
        "status": "ok" if result.ok else "fail",
        "run_id": ctx.run_id,
        "dry_run": dry_run,
        "created": [str(p) for p in result.created],
        "skipped": [str(p) for p in result.skipped],
        "failed": [{"path": str(f.path), "reason": f.reason} for f in result.failed],
    }
