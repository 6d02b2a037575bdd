"""CLI payload output helpers."""

from __future__ import annotations

from pathlib import Path

from ..core.serialize import dumps_json


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def resolve_output_format(*, cli_json: bool, cli_format: str | None, ci_present: bool) -> str:
    if cli_json:
        return "json"
    if cli_format:
        return cli_format
    return "json" if ci_present else "text"


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error", run_id: str = "") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_version": 1,
                "tool": "i18nctl",
                "status": "error",
                "run_id": run_id,
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            pretty=False,
        )
    return message


def display_path(path: Path, base: Path | None = None) -> str:
    anchor = (base or Path.cwd()).resolve()
    try:
        return path.resolve().relative_to(anchor).as_posix()
    except ValueError:
        return str(path)
