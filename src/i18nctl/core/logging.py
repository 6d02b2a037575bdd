from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import RunContext

_QUIET_LEVELS = {"error"}
_DEFAULT_LEVELS = {"warn", "error"}


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _enabled(ctx: RunContext, level: str) -> bool:
    if ctx.quiet:
        return level in _QUIET_LEVELS
    if ctx.verbose:
        return True
    return level in _DEFAULT_LEVELS


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    if not _enabled(ctx, level):
        return
    payload = {
        "ts": utc_now_iso(),
        "level": level,
        "run_id": ctx.run_id,
        "component": component,
        "action": action,
        **fields,
    }
    if ctx.log_json:
        sys.stderr.write(json.dumps(payload, sort_keys=True, ensure_ascii=False, default=str) + "\n")
        return
    core = f"ts={payload['ts']} level={level} run_id={ctx.run_id} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")
