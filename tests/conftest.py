"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime
from typing import Dict

import pytest

from app import create_app
from app.extensions import db
from app.models import Candidate, CandidateProcess, Process
from config import TestConfig


@pytest.fixture
def app():
    """Flask app bound to an in-memory SQLite database."""
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app) -> Dict[str, int]:
    """
    Two processes and three candidates.

    The open process has two associations (one without a match score);
    the closed process has none.
    """
    open_process = Process(
        job_offer="Backend Developer",
        opened_at=datetime(2025, 3, 7, 10, 30),
        pre_filtered=True,
        status="in_progress",
    )
    empty_process = Process(
        job_offer="Data Analyst",
        opened_at=datetime(2025, 1, 15),
        closed_at=datetime(2025, 12, 1),
        pre_filtered=False,
    )
    john = Candidate(name="John Doe", phone="+56911112222", email="john@example.com", address="Santiago")
    jane = Candidate(name="Jane Smith", phone="+56933334444", email="jane@example.com", address="Valparaiso")
    maria = Candidate(name="Maria Tan", phone="+56955556666", email="maria@example.com", address=None)
    db.session.add_all([open_process, empty_process, john, jane, maria])
    db.session.commit()

    scored = CandidateProcess(candidate_id=john.id, process_id=open_process.id, match_percent=87.5)
    unscored = CandidateProcess(candidate_id=jane.id, process_id=open_process.id, match_percent=None)
    db.session.add_all([scored, unscored])
    db.session.commit()

    return {
        "open_process": open_process.id,
        "empty_process": empty_process.id,
        "john": john.id,
        "jane": jane.id,
        "maria": maria.id,
        "scored": scored.id,
        "unscored": unscored.id,
    }
