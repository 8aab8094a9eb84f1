import json

import argctx
from argctx import cli, const


# --- Argv ------------------------------------------------------------------- #


def test_argv():
    assert cli.argv(["--bool", "x"], {}) == [const.ARGV0, "--bool", "x"]


def test_argv_extra():
    environ = {const.EXTRA_ARGS_ENV: "--int  1"}
    assert cli.argv(["x"], environ) == [const.ARGV0, "--int", "1", "x"]


def test_argv_defaults(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "a", "b"])
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    assert cli.argv() == [const.ARGV0, "a", "b"]


# --- Main ------------------------------------------------------------------- #


def writeManifest(tmp_path) -> str:
    path = tmp_path / "flags.json"
    path.write_text(
        json.dumps(
            {
                "flags": [
                    {"name": "bool", "alias": ["b"]},
                    {"name": "int", "flagType": "int"},
                ]
            }
        )
    )
    return str(path)


def test_main(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    path = writeManifest(tmp_path)

    assert argctx.main(["--flags", path, "--", "cli", "-b", "--int", "7"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "args": ["cli"],
        "flags": {"bool": {"value": True}, "int": {"value": 7}},
    }


def test_main_without_separator(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    path = writeManifest(tmp_path)

    assert argctx.main(["cli", "-f", path, "--int", "x"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "args": ["cli"],
        "flags": {
            "int": {"error": "Invalid int value 'x' for flag '--int'", "kind": "invalid-value"}
        },
    }


def test_main_extra_args(tmp_path, capsys, monkeypatch):
    path = writeManifest(tmp_path)
    monkeypatch.setenv(const.EXTRA_ARGS_ENV, f"--flags {path}")

    assert argctx.main(["--", "--bool"]) == 0
    assert json.loads(capsys.readouterr().out)["flags"] == {"bool": {"value": True}}


def test_main_missing_manifest(capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)

    assert argctx.main(["--", "cli"]) == 1
    assert "No flag manifest given" in capsys.readouterr().err


def test_main_manifest_without_value(capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)

    assert argctx.main(["--flags"]) == 1
    assert "requires a value" in capsys.readouterr().err


def test_main_version(capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)

    assert argctx.main(["--version"]) == 0
    assert const.VERSION_STR in capsys.readouterr().out


def test_main_help(capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)

    assert argctx.main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "--flags, -f" in out
    assert "Usage:" in out


def test_main_verbose_before_resolve(monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    calls = []

    def setup(verbose: bool):
        calls.append(("setup", verbose))

    def context(args, flags=None):
        calls.append(("context", None))
        return argctx.context.Context(args, flags)

    monkeypatch.setattr(argctx.logger, "setup", staticmethod(setup))
    monkeypatch.setattr(argctx, "Context", context)

    assert argctx.main(["-v", "--version"]) == 0
    assert calls[:2] == [("setup", True), ("context", None)]


def test_main_non_finite_float(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    path = tmp_path / "flags.json"
    path.write_text(json.dumps({"flags": [{"name": "float", "flagType": "float"}]}))

    assert argctx.main(["-f", str(path), "--", "--float", "nan"]) == 0
    assert json.loads(capsys.readouterr().out)["flags"] == {"float": {"value": "nan"}}
