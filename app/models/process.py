from app.extensions import db
from datetime import datetime

class Process(db.Model):
    __tablename__ = "process"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    job_offer = db.Column(db.Text)
    opened_at = db.Column(db.DateTime, default=datetime.utcnow)
    closed_at = db.Column(db.DateTime, nullable=True)
    pre_filtered = db.Column(db.Boolean, default=False)
    status = db.Column(db.String(50), nullable=True)

    candidate_process = db.relationship("CandidateProcess", back_populates="process", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Process {self.id}>"
