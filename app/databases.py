import logging

from sqlalchemy.orm import joinedload, selectinload

from app.extensions import db
from app.models import Process, Candidate, CandidateProcess

logger = logging.getLogger(__name__)

# metadata columns a client may revise on an association
EDITABLE_FIELDS = (
    "technical_skills",
    "soft_skills",
    "client_comments",
    "match_percent",
    "interview_questions",
)


class CandidateNotFoundError(Exception):
    """Raised when a candidate to attach to a process does not exist."""

    def __init__(self, candidate_id):
        self.candidate_id = candidate_id
        super().__init__(f"Candidate with ID {candidate_id} not found")


# ==================== PROCESS ====================

def get_process_with_candidates(process_id: int):
    """Fetch one process together with its associations and their candidates."""
    return (
        db.session.query(Process)
        .options(selectinload(Process.candidate_process).joinedload(CandidateProcess.candidates))
        .filter(Process.id == process_id)
        .first()
    )


def process_to_response(process: Process):
    """Shape a process into the GET payload: process fields plus candidates with their match."""
    return {
        "id": process.id,
        "name": process.job_offer,
        "startAt": format_date(process.opened_at) if process.opened_at else "",
        "endAt": format_date(process.closed_at) if process.closed_at else None,
        "preFiltered": 1 if process.pre_filtered else 0,
        "candidates": [
            {
                "id": cp.candidates.id if cp.candidates else None,
                "name": cp.candidates.name if cp.candidates else None,
                "phone": cp.candidates.phone if cp.candidates else None,
                "email": cp.candidates.email if cp.candidates else None,
                "address": cp.candidates.address if cp.candidates else None,
                "match": float(cp.match_percent) if cp.match_percent is not None else 0,
            }
            for cp in process.candidate_process
        ],
        "state": process.status or "pending",
    }


# ==================== CANDIDATE PROCESS ====================

def get_candidate_process(association_id: int):
    return db.session.get(CandidateProcess, association_id)


def get_candidate_processes_for_process(process_id: int):
    """All associations of a process, with candidate and process eagerly loaded."""
    associations = (
        CandidateProcess.query
        .options(joinedload(CandidateProcess.candidates), joinedload(CandidateProcess.process))
        .filter_by(process_id=process_id)
        .order_by(CandidateProcess.id)
        .all()
    )
    return [candidate_process_to_dict(cp, embed=True) for cp in associations]


def update_candidate_process(association_id: int, fields: dict, candidate_ids=None):
    """
    Update the metadata of one association and optionally attach new
    candidates to the same process.

    Only keys present in ``fields`` are written; missing keys keep their
    stored value. ``candidate_ids`` must already be validated ints.
    Every candidate id is checked before any association is
    created, and the update plus all new associations are committed
    together, so a missing candidate leaves the database untouched.

    Returns ``None`` when the association does not exist, otherwise a
    tuple ``(updated, added)`` where ``added`` is a list of new
    associations (empty when no candidate ids were given).
    Raises CandidateNotFoundError naming the first missing candidate.
    """
    association = get_candidate_process(association_id)
    if association is None:
        return None

    try:
        for field in EDITABLE_FIELDS:
            if field in fields:
                setattr(association, field, fields[field])

        added = []
        if candidate_ids:
            ids = list(candidate_ids)
            for candidate_id in ids:
                if db.session.get(Candidate, candidate_id) is None:
                    raise CandidateNotFoundError(candidate_id)

            for candidate_id in ids:
                new_link = CandidateProcess(
                    candidate_id=candidate_id,
                    process_id=association.process_id,
                )
                db.session.add(new_link)
                added.append(new_link)

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"✅ candidate_process {association_id} updated, {len(added)} candidate(s) added")
    return association, added


def delete_candidate_processes(process_id: int) -> int:
    """Delete every association of a process. Returns the number of rows removed."""
    try:
        deleted = (
            CandidateProcess.query
            .filter_by(process_id=process_id)
            .delete(synchronize_session=False)
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"🗑️ Deleted {deleted} candidate_process row(s) for process {process_id}")
    return deleted


# ==================== HELPER FUNCTIONS ====================

def format_date(value):
    """Render a date as M/D/YYYY, e.g. 3/7/2025."""
    return f"{value.month}/{value.day}/{value.year}"


def candidate_to_dict(c: Candidate):
    return {
        "id": c.id,
        "name": c.name,
        "phone": c.phone,
        "email": c.email,
        "address": c.address,
    }


def process_to_dict(p: Process):
    return {
        "id": p.id,
        "job_offer": p.job_offer,
        "opened_at": p.opened_at.isoformat() if p.opened_at else None,
        "closed_at": p.closed_at.isoformat() if p.closed_at else None,
        "pre_filtered": bool(p.pre_filtered),
        "status": p.status,
    }


def candidate_process_to_dict(cp: CandidateProcess, embed=False):
    data = {
        "id": cp.id,
        "candidate_id": cp.candidate_id,
        "process_id": cp.process_id,
        "match_percent": float(cp.match_percent) if cp.match_percent is not None else None,
        "technical_skills": cp.technical_skills,
        "soft_skills": cp.soft_skills,
        "client_comments": cp.client_comments,
        "interview_questions": cp.interview_questions,
    }
    if embed:
        data["candidates"] = candidate_to_dict(cp.candidates) if cp.candidates else None
        data["process"] = process_to_dict(cp.process) if cp.process else None
    return data
