import logging
from datetime import datetime

from app.extensions import db
from app.models import Process

logger = logging.getLogger(__name__)

def seed():
    logger.info("🌱 Seeding processes...")

    processes = [
        Process(
            job_offer="Backend Developer (Python) - Fintech team",
            opened_at=datetime(2025, 3, 3),
            pre_filtered=True,
            status="in_progress",
        ),
        Process(
            job_offer="Data Analyst - Retail BI",
            opened_at=datetime(2025, 1, 15),
            closed_at=datetime(2025, 2, 28),
            pre_filtered=False,
            status="closed",
        ),
        Process(
            job_offer="QA Automation Engineer",
            opened_at=datetime(2025, 4, 1),
            pre_filtered=False,
        ),
    ]

    for process in processes:
        existing = Process.query.filter_by(job_offer=process.job_offer).first()
        if existing:
            logger.info(f"⚠️ Process '{process.job_offer}' already exists. Skipping insert.")
            continue
        db.session.add(process)

    db.session.commit()
    logger.info("✅ Processes seeded successfully!")
