"""Translation status reporting.

For each canonical document, probe every target language tree and record
whether the matching file exists. Nothing is cached: each call reads the
filesystem fresh.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .core.config import I18nConfig
from .core.context import RunContext
from .core.logging import log_event
from .docset import resolve_documents

PRESENT = "present"
ABSENT = "absent"
STUB = "stub"

SlotState = Literal["present", "absent", "stub"]

_MARKERS = {PRESENT: "✅", ABSENT: "❌", STUB: "⏳"}


@dataclass(frozen=True)
class DocumentStatus:
    path: str
    languages: tuple[tuple[str, SlotState], ...]

    def state(self, code: str) -> SlotState:
        return dict(self.languages)[code]

    @property
    def translated_count(self) -> int:
        return sum(1 for _, state in self.languages if state == PRESENT)


@dataclass(frozen=True)
class StatusReport:
    targets: tuple[str, ...]
    documents: tuple[DocumentStatus, ...]

    def summary(self) -> dict[str, dict[str, int]]:
        out: dict[str, dict[str, int]] = {}
        for code in self.targets:
            counts = {PRESENT: 0, ABSENT: 0, STUB: 0}
            for doc in self.documents:
                counts[doc.state(code)] += 1
            out[code] = {**counts, "total": len(self.documents)}
        return out

    def untranslated(self) -> list[str]:
        return [doc.path for doc in self.documents if doc.translated_count == 0]


def is_stub(path: Path, placeholder: str) -> bool:
    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError):
        return False
    return text.strip() == placeholder.strip()


def probe(cfg: I18nConfig, code: str, rel_path: str, detect_stubs: bool = False) -> SlotState:
    target = cfg.language_root(code) / rel_path
    if not target.is_file():
        return ABSENT
    if detect_stubs and is_stub(target, cfg.placeholder):
        return STUB
    return PRESENT


def collect_status(cfg: I18nConfig, detect_stubs: bool = False) -> StatusReport:
    documents = tuple(
        DocumentStatus(
            path=rel,
            languages=tuple((code, probe(cfg, code, rel, detect_stubs)) for code in cfg.targets),
        )
        for rel in resolve_documents(cfg)
    )
    return StatusReport(targets=cfg.targets, documents=documents)


def render_status_text(report: StatusReport, markers: bool = False) -> str:
    lines = ["Translation status:"]
    for doc in report.documents:
        cells = [f"{code}:{_MARKERS[state] if markers else state}" for code, state in doc.languages]
        lines.append("  ".join([doc.path, *cells]))
    total = len(report.documents)
    for code, counts in report.summary().items():
        line = f"{code}: {counts[PRESENT]}/{total} present"
        if counts[STUB]:
            line += f" ({counts[STUB]} stub)"
        lines.append(line)
    return "\n".join(lines)


def status_payload(ctx: RunContext, report: StatusReport) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "i18nctl",
        "kind": "i18n-status",
        "status": "ok",
        "run_id": ctx.run_id,
        "canonical": ctx.config.canonical,
        "targets": list(report.targets),
        "documents": [{"path": doc.path, "languages": dict(doc.languages)} for doc in report.documents],
        "summary": report.summary(),
        "untranslated": report.untranslated(),
    }


def run_status(ctx: RunContext, detect_stubs: bool = False) -> StatusReport:
    report = collect_status(ctx.config, detect_stubs)
    log_event(
        ctx,
        "info",
        "status",
        "collected",
        documents=len(report.documents),
        targets=",".join(report.targets),
        detect_stubs=detect_stubs,
    )
    return report
