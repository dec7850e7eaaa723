# gamma_mcp/features/generation/errors.py
from typing import Optional


class GammaError(Exception):
    """Base class for failures of one generation job."""


class _HttpStageError(GammaError):
    """Carries the HTTP status (None for transport failures) and response body."""
    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        detail = message
        if status_code is not None:
            detail = f"{message}: {status_code} {body}".rstrip()
        super().__init__(detail)


class InitiationError(_HttpStageError):
    """Submission failed at the HTTP layer, or a 2xx body carried no generation id."""


class PollError(_HttpStageError):
    """A status check failed at the HTTP layer or returned an unreadable body."""


class GenerationFailedError(GammaError):
    def __init__(self, generation_id: str, status: str):
        self.generation_id = generation_id
        self.status = status
        super().__init__(f"Gamma generation {generation_id} failed (status: {status})")


class GenerationTimeoutError(GammaError, TimeoutError):
    def __init__(self, generation_id: str, timeout: float, last_status: Optional[str] = None):
        self.generation_id = generation_id
        self.timeout = timeout
        self.last_status = last_status
        msg = f"Gamma generation {generation_id} timed out after {timeout:g}s while waiting for result"
        if last_status:
            msg += f" (last status: {last_status})"
        super().__init__(msg)
