from app.extensions import db

class CandidateProcess(db.Model):
    __tablename__ = "candidate_process"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    candidate_id = db.Column(db.Integer, db.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    process_id = db.Column(db.Integer, db.ForeignKey("process.id", ondelete="CASCADE"), nullable=False)
    match_percent = db.Column(db.Numeric(5, 2), nullable=True)
    technical_skills = db.Column(db.Text, nullable=True)
    soft_skills = db.Column(db.Text, nullable=True)
    client_comments = db.Column(db.Text, nullable=True)
    interview_questions = db.Column(db.Text, nullable=True)

    candidates = db.relationship("Candidate", back_populates="candidate_process")
    process = db.relationship("Process", back_populates="candidate_process")
