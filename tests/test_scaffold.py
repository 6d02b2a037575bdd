from __future__ import annotations

from pathlib import Path

from i18nctl.scaffold import render_readme, scaffold_payload, scaffold_structure
from tests.helpers import make_config, make_ctx


def test_structure_for_every_language_and_category(tmp_path: Path) -> None:
    root = tmp_path / "docs"
    cfg = make_config(root)
    result = scaffold_structure(make_ctx(cfg))
    assert result.ok
    for code in ("en", "fr", "ja"):
        for category in ("architecture", "development", "infrastructure"):
            assert (root / code / category).is_dir()
        assert (root / code / "README.md").is_file()
    assert sorted(p.relative_to(root).as_posix() for p in result.created) == [
        "en/README.md",
        "fr/README.md",
        "ja/README.md",
    ]


def test_readme_content() -> None:
    cfg = make_config(Path("/unused/docs"))
    assert render_readme(cfg, "fr").splitlines() == [
        "# Documentation (fr)",
        "",
        "> 🌍 [English](../en/README.md) | [Français](../fr/README.md) | [日本語](../ja/README.md)",
        "",
        "## Table of Contents",
        "",
        "<!-- Add your language-specific content here -->",
    ]


def test_existing_readme_is_preserved(tmp_path: Path) -> None:
    root = tmp_path / "docs"
    (root / "fr").mkdir(parents=True)
    (root / "fr/README.md").write_text("# Mon README\n", encoding="utf-8")
    ctx = make_ctx(make_config(root))
    result = scaffold_structure(ctx)
    assert (root / "fr/README.md").read_text(encoding="utf-8") == "# Mon README\n"
    assert [p.relative_to(root).as_posix() for p in result.skipped] == ["fr/README.md"]
    payload = scaffold_payload(ctx, result)
    assert payload["kind"] == "i18n-init"
    assert payload["languages"] == ["en", "fr", "ja"]


def test_rerun_is_a_noop(tmp_path: Path) -> None:
    ctx = make_ctx(make_config(tmp_path / "docs"))
    scaffold_structure(ctx)
    again = scaffold_structure(ctx)
    assert again.created == []
    assert again.directories == []
    assert len(again.skipped) == 3


def test_blocked_language_root_is_reported(tmp_path: Path) -> None:
    root = tmp_path / "docs"
    root.mkdir()
    (root / "ja").write_text("file in the way", encoding="utf-8")
    result = scaffold_structure(make_ctx(make_config(root)))
    assert [f.path for f in result.failed] == [root / "ja"]
    assert (root / "fr/README.md").is_file()


def test_blocked_category_directory_reports_that_directory(tmp_path: Path) -> None:
    root = tmp_path / "docs"
    (root / "fr").mkdir(parents=True)
    (root / "fr/development").write_text("file in the way", encoding="utf-8")
    result = scaffold_structure(make_ctx(make_config(root)))
    assert [f.path for f in result.failed] == [root / "fr/development"]
