"""Tests for the command line interface."""

import pytest

from bbh.presentation.cli import main as cli
from config.settings import E01_URI_TEMPLATE


def test_uri_command(capsys):
    """Test the uri command prints the substituted template."""
    code = cli.main(["uri", "--begin", "2001-07-09", "--end", "2001-07-10"])

    out = capsys.readouterr().out.strip()
    assert code == 0
    assert out == E01_URI_TEMPLATE.replace("[BEGIN]", "2001-07-09").replace("[END]", "2001-07-10")


def test_uri_command_bad_date():
    """Test the uri command fails on a bad date."""
    assert cli.main(["uri", "--begin", "09/07/2001", "--end", "2001-07-10"]) == 1


def test_fetch_requires_root():
    """Test fetch refuses to run without a data root."""
    assert cli.main(["fetch", "--name", "bbh", "--root", ""]) == 1


def test_fetch_saves_table(monkeypatch, service, tmp_path, capsys):
    """Test fetch writes the table under the data root."""
    monkeypatch.setattr(cli, "build_service", lambda root=None: service)

    code = cli.main(
        [
            "fetch",
            "--name",
            "E01",
            "--form",
            "daily",
            "--begin",
            "2020-01-01",
            "--end",
            "2020-01-02",
            "--root",
            str(tmp_path),
        ]
    )

    assert code == 0
    assert (tmp_path / "sst" / "e01_daily.csv").exists()
    assert "E01 (daily, 2 rows)" in capsys.readouterr().out


def test_fetch_unknown_dataset(monkeypatch, service, tmp_path):
    """Test an unknown dataset name exits with an error."""
    monkeypatch.setattr(cli, "build_service", lambda root=None: service)
    assert cli.main(["fetch", "--name", "xyz", "--root", str(tmp_path)]) == 1


def test_form_choices():
    """Test argparse rejects unknown forms."""
    with pytest.raises(SystemExit):
        cli.main(["fetch", "--form", "weekly", "--root", "x"])
