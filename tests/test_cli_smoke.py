import json
import subprocess
import sys

from salesboard import cli


def run_cli(args):
    return subprocess.run(
        [sys.executable, "-m", "salesboard.cli"] + args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def test_cli_help():
    result = run_cli(["--help"])
    assert result.returncode == 0


def test_cli_version():
    result = run_cli(["--version"])
    assert result.returncode == 0
    assert "salesboard" in result.stdout


def test_cli_once_prints_snapshot(monkeypatch, capsys, dashboard):
    monkeypatch.setattr(
        cli,
        "run_once",
        lambda config_path=None, with_advice=False: {
            "data": dashboard.to_dict(),
            "is_fallback": True,
            "advice": None,
        },
    )

    assert cli.main(["--once"]) == 0

    out = capsys.readouterr()
    assert json.loads(out.out)["periodProgress"]["target"] == 6500
    assert "fallback" in out.err


def test_cli_advice_error_exit_code(monkeypatch, capsys):
    from salesboard.narrative.errors import MissingCredentialError

    def fail(config_path=None, with_advice=False):
        raise MissingCredentialError("GEMINI_API_KEY is missing")

    monkeypatch.setattr(cli, "run_once", fail)

    assert cli.main(["--advice"]) == 2
    err = capsys.readouterr().err
    assert MissingCredentialError.user_message in err
    assert "GEMINI_API_KEY is missing" not in err
