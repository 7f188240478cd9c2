"""Tests for the permstable CLI.

Covers:
- Parser construction and --help for every command
- sync, including check and dry-run modes and the bare invocation
- render, validate and dump output
- Error reporting on stdout with a non-zero exit code
"""

import argparse
from unittest.mock import patch

import pytest
import yaml

from permstable.cli import build_parser, main
from permstable.config import CONFIG_ENV, TARGET_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv(TARGET_ENV, raising=False)
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.chdir(tmp_path)


def _run(*argv):
    with patch("sys.argv", ["permstable", *argv]):
        return main()


# ── Parser construction ──────────────────────────────────────────


class TestParser:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["sync", "--help"],
        ["render", "--help"],
        ["validate", "--help"],
        ["dump", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(cmd)
        assert exc_info.value.code == 0

    def test_global_flags(self):
        args = build_parser().parse_args(["--target", "t.mdx", "sync", "--dry-run"])
        assert args.target == "t.mdx"
        assert args.dry_run


# ── sync ─────────────────────────────────────────────────────────


class TestSync:
    def test_sync_is_silent_on_success(self, host_document, capsys):
        rc = _run("--target", str(host_document), "sync")
        assert rc == 0
        assert capsys.readouterr().out == ""
        assert "- [Account](#account)" in host_document.read_text()

    def test_bare_invocation_syncs(self, host_document):
        rc = _run("--target", str(host_document))
        assert rc == 0
        assert "## Host catalog" in host_document.read_text()

    def test_target_from_env(self, host_document, monkeypatch):
        monkeypatch.setenv(TARGET_ENV, str(host_document))
        assert _run("sync") == 0
        assert "## Worker" in host_document.read_text()

    def test_verbose(self, host_document, capsys):
        _run("--target", str(host_document), "sync", "--verbose")
        out = capsys.readouterr().out
        assert "(from cli)" in out
        assert "updated" in out

    def test_dry_run(self, host_document, capsys):
        before = host_document.read_text()
        rc = _run("--target", str(host_document), "sync", "--dry-run")
        assert rc == 0
        assert host_document.read_text() == before
        assert "[DRY RUN]" in capsys.readouterr().out

    def test_check_out_of_date(self, host_document, capsys):
        before = host_document.read_text()
        rc = _run("--target", str(host_document), "sync", "--check")
        assert rc == 1
        assert host_document.read_text() == before
        assert "out of date" in capsys.readouterr().out

    def test_check_up_to_date(self, host_document):
        _run("--target", str(host_document), "sync")
        assert _run("--target", str(host_document), "sync", "--check") == 0

    def test_missing_file(self, tmp_path, capsys):
        rc = _run("--target", str(tmp_path / "missing.mdx"), "sync")
        assert rc == 1
        assert capsys.readouterr().out.startswith("ERROR: cannot read")

    def test_missing_marker(self, tmp_path, capsys):
        path = tmp_path / "doc.mdx"
        path.write_text("no table here\n")
        rc = _run("--target", str(path), "sync")
        assert rc == 1
        assert "BEGIN TABLE" in capsys.readouterr().out
        assert path.read_text() == "no table here\n"

    def test_bad_config(self, tmp_path, capsys):
        (tmp_path / "permstable.yaml").write_text("- not\n- a mapping\n")
        rc = _run("sync")
        assert rc == 1
        assert "ERROR:" in capsys.readouterr().out


# ── render / validate / dump ─────────────────────────────────────


class TestCatalogCommands:
    def test_render(self, capsys):
        assert _run("render") == 0
        out = capsys.readouterr().out
        assert out.startswith("- [Account](#account)\n")
        assert "| <code>/targets/&lt;id&gt;</code> |" in out

    def test_render_toc_only(self, capsys):
        assert _run("render", "--toc-only") == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 16
        assert lines[-1] == "- [Worker](#worker)"

    def test_validate(self, capsys):
        assert _run("validate") == 0
        assert "16 resources" in capsys.readouterr().out

    def test_dump(self, capsys):
        assert _run("dump") == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["resources"][0]["type"] == "Account"
        assert data["resources"][-1]["endpoints"][0]["path"] == "/workers"
