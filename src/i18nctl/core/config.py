"""Configuration loading for i18nctl.

Values are layered: built-in defaults, then an optional YAML file, then CLI
overrides. The merged mapping is validated against the packaged JSON schema
before it becomes an `I18nConfig`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .env import getenv
from .errors import ScriptError
from .exit_codes import ERR_CONFIG

CONFIG_ENV = "I18NCTL_CONFIG"
DEFAULT_CONFIG_NAME = "i18n.yaml"
SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "i18n-config.schema.json"

DEFAULT_PLACEHOLDER = "# TODO: Translate from English"
DEFAULT_LANGUAGES: dict[str, str] = {"en": "English", "fr": "Français", "ja": "日本語"}
DEFAULT_CATEGORIES = ("architecture", "development", "infrastructure")


@dataclass(frozen=True)
class I18nConfig:
    root: Path = Path("docs")
    canonical: str = "en"
    targets: tuple[str, ...] = ("fr", "ja")
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    extension: str = ".md"
    placeholder: str = DEFAULT_PLACEHOLDER
    languages: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LANGUAGES))

    @property
    def canonical_root(self) -> Path:
        return self.language_root(self.canonical)

    @property
    def all_languages(self) -> tuple[str, ...]:
        return (self.canonical, *self.targets)

    def language_root(self, code: str) -> Path:
        return self.root / code

    def to_payload(self) -> dict[str, object]:
        return {
            "root": str(self.root),
            "canonical": self.canonical,
            "targets": list(self.targets),
            "categories": list(self.categories),
            "extension": self.extension,
            "placeholder": self.placeholder,
            "languages": dict(self.languages),
        }


def _config_error(message: str) -> ScriptError:
    return ScriptError(message, ERR_CONFIG, kind="config_error")


def load_schema() -> dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_config_mapping(data: dict[str, Any], source: str) -> None:
    validator = jsonschema.Draft202012Validator(load_schema())
    errors = sorted(validator.iter_errors(data), key=lambda err: list(err.absolute_path))
    if errors:
        lines = []
        for err in errors:
            where = "/".join(str(part) for part in err.absolute_path) or "<root>"
            lines.append(f"{source}: {where}: {err.message}")
        raise _config_error("invalid configuration\n" + "\n".join(lines))


def read_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise _config_error(f"config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise _config_error(f"{path}: invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise _config_error(f"{path}: root must be a mapping")
    validate_config_mapping(data, str(path))
    return data


def resolve_config_path(explicit: str | None, cwd: Path) -> Path | None:
    if explicit:
        path = Path(explicit)
        return path if path.is_absolute() else cwd / path
    from_env = getenv(CONFIG_ENV)
    if from_env:
        path = Path(from_env)
        return path if path.is_absolute() else cwd / path
    candidate = cwd / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None


def _check_membership(cfg: I18nConfig) -> None:
    known = cfg.languages
    if cfg.canonical not in known:
        raise _config_error(f"canonical language `{cfg.canonical}` is not a configured language")
    unknown = [code for code in cfg.targets if code not in known]
    if unknown:
        raise _config_error(f"target languages not configured: {', '.join(unknown)}")
    if cfg.canonical in cfg.targets:
        raise _config_error(f"canonical language `{cfg.canonical}` cannot also be a target")
    if len(set(cfg.targets)) != len(cfg.targets):
        raise _config_error("duplicate target languages")
    if len(set(cfg.categories)) != len(cfg.categories):
        raise _config_error("duplicate categories")
    if not cfg.targets:
        raise _config_error("at least one target language is required")


def build_config(
    file_data: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
    *,
    file_dir: Path | None = None,
    cwd: Path | None = None,
) -> I18nConfig:
    """Merge defaults, file values and CLI overrides into an `I18nConfig`."""
    base = Path.cwd() if cwd is None else cwd
    merged: dict[str, Any] = I18nConfig().to_payload()
    root = base / "docs"

    if file_data:
        merged.update(file_data)
        if "root" in file_data:
            raw = Path(file_data["root"])
            root = raw if raw.is_absolute() else (file_dir or base) / raw

    cli = {key: value for key, value in (overrides or {}).items() if value not in (None, [], ())}
    if cli:
        validate_config_mapping(cli, "command line")
        merged.update(cli)
        if "root" in cli:
            raw = Path(cli["root"])
            root = raw if raw.is_absolute() else base / raw

    cfg = I18nConfig(
        root=root,
        canonical=str(merged["canonical"]),
        targets=tuple(merged["targets"]),
        categories=tuple(merged["categories"]),
        extension=str(merged["extension"]),
        placeholder=str(merged["placeholder"]),
        languages=dict(merged["languages"]),
    )
    _check_membership(cfg)
    return cfg


def load_config(
    config_path: str | None = None,
    overrides: dict[str, Any] | None = None,
    cwd: Path | None = None,
) -> I18nConfig:
    base = Path.cwd() if cwd is None else cwd
    path = resolve_config_path(config_path, base)
    if path is None:
        return build_config(None, overrides, cwd=base)
    return build_config(read_config_file(path), overrides, file_dir=path.parent, cwd=base)
