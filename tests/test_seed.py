"""
Tests for the seed-all CLI command.
"""

from app.models import Candidate, CandidateProcess, Process


def test_seed_all_populates_tables(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-all"])

    assert result.exit_code == 0
    assert "All seeders completed" in result.output
    assert Process.query.count() == 3
    assert Candidate.query.count() == 4
    assert CandidateProcess.query.count() >= 3


def test_seed_all_is_idempotent_for_processes_and_candidates(app):
    runner = app.test_cli_runner()

    runner.invoke(args=["seed-all"])
    runner.invoke(args=["seed-all"])

    assert Process.query.count() == 3
    assert Candidate.query.count() == 4
