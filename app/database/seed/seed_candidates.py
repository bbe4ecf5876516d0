import logging

from app.extensions import db
from app.models import Candidate

logger = logging.getLogger(__name__)

def seed():
    logger.info("🌱 Seeding candidates...")

    candidates = [
        Candidate(name="John Doe", phone="+56911112222", email="john@example.com", address="Av. Providencia 1234, Santiago"),
        Candidate(name="Jane Smith", phone="+56933334444", email="jane@example.com", address="Calle Larga 55, Valparaiso"),
        Candidate(name="Maria Tan", phone="+56955556666", email="maria@example.com", address="Los Leones 870, Santiago"),
        Candidate(name="Rizky Firmansyah", phone="+56977778888", email="rizky@example.com", address=None),
    ]

    for candidate in candidates:
        existing = Candidate.query.filter_by(email=candidate.email).first()
        if not existing:
            db.session.add(candidate)

    db.session.commit()
    logger.info("✅ Candidates seeded successfully!")
