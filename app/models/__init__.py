from .process import Process
from .candidate import Candidate
from .candidate_process import CandidateProcess

__all__ = [
    "Process",
    "Candidate",
    "CandidateProcess"
]
