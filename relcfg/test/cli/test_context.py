from __future__ import annotations

from pathlib import Path

import pytest
import typer

from relcfg.cli import context as context_mod
from relcfg.cli.context import build_context
from relcfg.core.config import Settings
from relcfg.core.errors import ErrorCode


def _pretend_work_tree(monkeypatch: pytest.MonkeyPatch, inside: bool) -> None:
    monkeypatch.setattr(context_mod.Repository, "is_work_tree", lambda self: inside)


def test_outside_git_repo_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _pretend_work_tree(monkeypatch, False)

    with pytest.raises(typer.Exit) as exc:
        build_context(tmp_path)

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)


def test_defaults_without_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _pretend_work_tree(monkeypatch, True)

    ctx = build_context(tmp_path)

    assert ctx.root == tmp_path.resolve()
    assert ctx.settings == Settings()


def test_reads_config_from_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _pretend_work_tree(monkeypatch, True)
    (tmp_path / "relcfg.toml").write_text(
        '[branches]\nmaintenance_prefix = "origin/release/"\n', encoding="utf-8"
    )

    ctx = build_context(tmp_path)

    assert ctx.settings.maintenance_prefix == "origin/release/"


def test_explicit_config_must_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _pretend_work_tree(monkeypatch, True)

    with pytest.raises(typer.Exit) as exc:
        build_context(tmp_path, tmp_path / "nope.toml")

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


def test_invalid_config_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _pretend_work_tree(monkeypatch, True)
    (tmp_path / "relcfg.toml").write_text("[version]\nkey = 1\n", encoding="utf-8")

    with pytest.raises(typer.Exit) as exc:
        build_context(tmp_path)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
