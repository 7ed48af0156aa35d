"""CLI tests driven through typer's CliRunner."""

import io
import re

from rich.console import Console
from typer.testing import CliRunner

import classwork.__main__ as cli
from classwork.__main__ import app

runner = CliRunner()


# --- fleet ---

def test_fleet_suv_three_days():
    result = runner.invoke(app, ["fleet"], input="2\n3\n")
    assert result.exit_code == 0
    assert "Welcome to Zetech Rental Information Management System (Zetech RIMS)." in result.output
    assert 'Type 2 for: "SUV"' in result.output
    assert "SUV Chosen!" in result.output
    assert "Total Rental Cost: KES630.00 for 3 days." in result.output


def test_fleet_rejects_unknown_selector_and_reprompts():
    result = runner.invoke(app, ["fleet"], input="99\n1\n2\n")
    assert result.exit_code == 0
    assert "99 not recognized. Please follow the instructions above." in result.output
    assert "Car Chosen!" in result.output
    assert "Total Rental Cost: KES160.00 for 2 days." in result.output


def test_fleet_options_skip_prompts():
    result = runner.invoke(app, ["fleet", "--vehicle", "3", "--days", "0"])
    assert result.exit_code == 0
    assert "Truck Chosen!" in result.output
    assert "Total Rental Cost: KES0.00 for 0 days." in result.output


def test_fleet_bad_preset_falls_back_to_prompt():
    result = runner.invoke(app, ["fleet", "--vehicle", "7", "--days", "1"], input="1\n")
    assert result.exit_code == 0
    assert "7 not recognized." in result.output
    assert "Total Rental Cost: KES80.00 for 1 days." in result.output


def test_fleet_currency_and_verbose():
    result = runner.invoke(app, ["fleet", "--vehicle", "1", "--days", "1", "--currency", "USD", "--verbose"])
    assert result.exit_code == 0
    assert "USD80.00" in result.output
    assert "Priced 2020 Toyota Corolla" in result.output


def test_vehicles_table():
    result = runner.invoke(app, ["vehicles"])
    assert result.exit_code == 0
    for text in ("Rental Fleet", "Corolla", "Pilot", "F-150", "KES50.00"):
        assert text in result.output


# --- exam ---

def test_exam_demo_with_prompted_score():
    result = runner.invoke(app, ["exam", "--seed", "7"], input="75\n")
    assert result.exit_code == 0
    assert "Exam ID: MC101" in result.output
    assert "Subject: Mathematics" in result.output
    assert "Duration: 60 minutes" in result.output
    match = re.search(r"Score: (\d+)/20 correct answers", result.output)
    assert match and 0 <= int(match.group(1)) <= 20
    assert "Exam ID: EE101" in result.output
    assert "Duration: 90 minutes" in result.output
    assert "Enter score for the Essay Exam (0-100)" in result.output
    assert "Score: 75/100" in result.output


def test_exam_demo_out_of_range_score_still_exits_zero():
    result = runner.invoke(app, ["exam", "--essay-score", "150"])
    assert result.exit_code == 0
    assert "Error: Grading process failed!" in result.output
    assert "Score: 150/100" not in result.output


def test_exam_demo_same_seed_same_score():
    first = runner.invoke(app, ["exam", "--seed", "3", "--essay-score", "10"])
    second = runner.invoke(app, ["exam", "--seed", "3", "--essay-score", "10"])
    assert first.output == second.output


def test_exam_unexpected_error(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "run_exam_demo", boom)
    result = runner.invoke(app, ["exam", "--essay-score", "50"])
    assert result.exit_code == 1
    assert "An error occurred: boom" in result.output


def test_exam_aborted_prompt_is_not_reported_as_error():
    result = runner.invoke(app, ["exam", "--seed", "1"], input="")
    assert result.exit_code == 1
    assert "Abort" in result.output
    assert "An error occurred" not in result.output


def test_exam_unexpected_error_goes_to_stderr(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("bad [state]")

    monkeypatch.setattr(cli, "run_exam_demo", boom)
    monkeypatch.setattr(cli, "console", Console(file=io.StringIO()))
    result = runner.invoke(app, ["exam", "--essay-score", "50"])
    assert result.exit_code == 1
    assert "An error occurred: bad [state]" in result.output
    assert cli.console.file.getvalue() == ""


def test_fleet_agency_options():
    result = runner.invoke(
        app,
        ["fleet", "--vehicle", "1", "--days", "1", "--agency-name", "Acme [Hire]", "--agency-short", "AH"],
    )
    assert result.exit_code == 0
    assert "Welcome to Acme [Hire] (AH)." in result.output
