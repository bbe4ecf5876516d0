import logging
import random

from app.extensions import db
from app.models import Candidate, CandidateProcess, Process

logger = logging.getLogger(__name__)

def seed():
    logger.info("🌱 Seeding candidate_process links...")

    processes = Process.query.all()
    candidates = Candidate.query.all()

    if not processes:
        logger.warning("⚠️ No processes found! Please seed processes first.")
        return
    if not candidates:
        logger.warning("⚠️ No candidates found! Please seed candidates first.")
        return

    created_links = 0
    for process in processes:
        # Randomly attach 1–3 candidates to each process
        selected = random.sample(candidates, random.randint(1, min(3, len(candidates))))

        for candidate in selected:
            existing = CandidateProcess.query.filter_by(
                candidate_id=candidate.id,
                process_id=process.id
            ).first()

            if not existing:
                db.session.add(CandidateProcess(
                    candidate_id=candidate.id,
                    process_id=process.id,
                    # leave some scores empty, they come from the matching service later
                    match_percent=round(random.uniform(50, 99), 2) if random.random() > 0.25 else None,
                ))
                created_links += 1

    db.session.commit()
    logger.info(f"✅ Created {created_links} candidate-process links successfully!")
