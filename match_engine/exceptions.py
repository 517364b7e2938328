"""Engine error taxonomy"""


class MatchEngineError(Exception):
    """Base class for errors raised by the matching engine"""


class InputError(MatchEngineError, ValueError):
    """A record is missing an identifier the engine cannot do without"""


class ComputationError(MatchEngineError):
    """Unexpected fault while scoring a single candidate/job pair"""

    def __init__(self, message: str, candidate_id: str = None, job_id: str = None):
        super().__init__(message)
        self.candidate_id = candidate_id
        self.job_id = job_id
