"""CLI parser and entrypoint tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from iconbuild import cli
from iconbuild.cli import _build_parser
from iconbuild.formatter import PassthroughFormatter
from iconbuild.orchestrator import Orchestrator


class _IdentityOptimizer:
    async def optimize(self, markup: str) -> str:
        return markup


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "build", "icons", "dist"])
    assert args.verbose is True
    assert args.command == "build"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["build", "icons", "dist", "--verbose"])
    assert args.verbose is True
    assert args.input_dir == "icons"
    assert args.output_dir == "dist"


def test_cli_typescript_flag_defaults_to_unset() -> None:
    parser = _build_parser()
    assert parser.parse_args(["build", "a", "b"]).typescript is None
    assert parser.parse_args(["build", "a", "b", "--typescript"]).typescript is True


def test_cli_rejects_unknown_naming_style() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["build", "a", "b", "--naming", "snake"])


def test_cli_build_generates_components(tmp_path: Path, monkeypatch, capsys) -> None:
    icons = tmp_path / "icons"
    icons.mkdir()
    (icons / "arrow-up.svg").write_text('<svg width="24"><path d="M0 0"/></svg>', encoding="utf-8")
    output = tmp_path / "dist"

    monkeypatch.setattr(
        cli,
        "Orchestrator",
        lambda: Orchestrator(optimizer=_IdentityOptimizer(), formatter=PassthroughFormatter()),
    )

    cli.main(
        [
            "build",
            str(icons),
            str(output),
            "--typescript",
            "--naming",
            "pascal",
            "--config",
            str(tmp_path),
        ]
    )

    assert (output / "components" / "ArrowUp.tsx").exists()
    assert (output / "index.ts").read_text(encoding="utf-8") == (
        "export {default as ArrowUp} from './components/ArrowUp';\n"
    )
    assert "Generated 1 icons" in capsys.readouterr().out


def test_cli_build_exits_with_error_for_missing_input(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        cli,
        "Orchestrator",
        lambda: Orchestrator(optimizer=_IdentityOptimizer(), formatter=PassthroughFormatter()),
    )

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["build", str(tmp_path / "missing"), str(tmp_path / "dist"), "--config", str(tmp_path)])

    assert excinfo.value.code == 1


def test_cli_build_exits_when_directories_missing(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["build", "--config", str(tmp_path)])

    assert excinfo.value.code == 1


def test_cli_accepts_quiet_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["build", "a", "b", "-q"])
    assert args.quiet is True
    assert args.verbose is False


def test_cli_rejects_verbose_with_quiet() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["build", "a", "b", "-v", "-q"])
