from __future__ import annotations

import argparse
import sys
from typing import Any

from .. import __version__
from ..core.config import load_config
from ..core.context import RunContext
from ..core.env import getenv
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_FAIL, ERR_INTERNAL, ERR_USAGE, ERR_WRITE, OK
from ..core.logging import log_event
from ..scaffold import scaffold_payload, scaffold_structure
from ..status import render_status_text, run_status, status_payload
from ..sync import sync_payload, sync_stubs
from .output import display_path, emit, render_error, resolve_output_format


def _version_string() -> str:
    return f"i18nctl {__version__}"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="i18nctl", description="documentation translation coverage tooling")
    p.add_argument("--version", action="version", version=_version_string())
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier attached to logs and payloads")
    p.add_argument("--config", help="path to an i18n.yaml config file")
    p.add_argument("--root", help="documentation root directory")
    p.add_argument("--canonical", help="canonical language code")
    p.add_argument("--target", action="append", dest="targets", help="target language code (repeatable)")
    p.add_argument("--category", action="append", dest="categories", help="category subdirectory (repeatable)")
    p.add_argument("--extension", help="document file extension, e.g. .md")
    p.add_argument("--placeholder", help="single placeholder line written into stub files")
    p.add_argument("--log-json", action="store_true", help="emit structured logs as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    check_p = sub.add_parser("check", help="report translation presence for every canonical document")
    check_p.add_argument("--detect-stubs", action="store_true", help="report untouched placeholder files as `stub`")
    check_p.add_argument("--markers", action="store_true", help="render states as emoji markers in text output")
    check_p.add_argument(
        "--fail-on-untranslated",
        action="store_true",
        help="exit non-zero when a document has no translation at all",
    )

    sync_p = sub.add_parser("sync", help="create placeholder files for missing translations")
    sync_p.add_argument("--dry-run", action="store_true", help="list files that would be created and exit")

    sub.add_parser("init", help="create language/category directories and per-language README files")

    sub.add_parser("version", help="print version")
    return p


def _overrides(ns: argparse.Namespace) -> dict[str, Any]:
    return {
        "root": ns.root,
        "canonical": ns.canonical,
        "targets": ns.targets,
        "categories": ns.categories,
        "extension": ns.extension,
        "placeholder": ns.placeholder,
    }


def _run_check(ctx: RunContext, ns: argparse.Namespace) -> int:
    report = run_status(ctx, detect_stubs=ns.detect_stubs)
    failing = ns.fail_on_untranslated and bool(report.untranslated())
    if ctx.as_json:
        payload = status_payload(ctx, report)
        if failing:
            payload["status"] = "fail"
        emit(payload, True)
    else:
        print(render_status_text(report, markers=ns.markers))
    if failing:
        log_event(ctx, "warn", "status", "untranslated", count=len(report.untranslated()))
        return ERR_FAIL
    return OK


def _run_sync(ctx: RunContext, ns: argparse.Namespace) -> int:
    result = sync_stubs(ctx, dry_run=ns.dry_run)
    if ctx.as_json:
        emit(sync_payload(ctx, result, dry_run=ns.dry_run), True)
    else:
        verb = "would create" if ns.dry_run else "created"
        for path in result.created:
            print(f"{verb}: {display_path(path)}")
        print(f"created={len(result.created)} skipped={len(result.skipped)} failed={len(result.failed)}")
    for failure in result.failed:
        print(f"failed: {display_path(failure.path)}: {failure.reason}", file=sys.stderr)
    return OK if result.ok else ERR_WRITE


def _run_init(ctx: RunContext) -> int:
    result = scaffold_structure(ctx)
    if ctx.as_json:
        emit(scaffold_payload(ctx, result), True)
    else:
        for path in result.created:
            print(f"created: {display_path(path)}")
        print(f"structure ready for languages: {' '.join(ctx.config.all_languages)}")
    for failure in result.failed:
        print(f"failed: {display_path(failure.path)}: {failure.reason}", file=sys.stderr)
    return OK if result.ok else ERR_WRITE


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    fmt = resolve_output_format(cli_json=ns.json, cli_format=ns.format, ci_present=bool(getenv("CI")))
    as_json = fmt == "json"
    if ns.cmd == "version":
        if as_json:
            emit({"schema_version": 1, "tool": "i18nctl", "status": "ok", "version": __version__}, True)
        else:
            print(_version_string())
        return OK

    ctx: RunContext | None = None
    try:
        cfg = load_config(ns.config, _overrides(ns))
        ctx = RunContext.from_args(ns.run_id, cfg, fmt, ns.verbose, ns.quiet, ns.log_json)  # type: ignore[arg-type]
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=fmt, root=cfg.root)
        if ns.cmd == "check":
            return _run_check(ctx, ns)
        if ns.cmd == "sync":
            return _run_sync(ctx, ns)
        if ns.cmd == "init":
            return _run_init(ctx)
        return ERR_USAGE
    except ScriptError as exc:
        print(
            render_error(
                as_json=as_json,
                message=str(exc),
                code=exc.code,
                kind=exc.kind,
                run_id=(ctx.run_id if ctx else ""),
            ),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(
                as_json=as_json,
                message=f"internal error: {exc}",
                code=ERR_INTERNAL,
                kind="internal_error",
                run_id=(ctx.run_id if ctx else ""),
            ),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
