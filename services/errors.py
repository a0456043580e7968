"""Errors raised by the LaTeX Lite client"""
from typing import Optional

from models.render_job import RenderJob


class LatexClientError(RuntimeError):
    """Base class for all client failures"""
    pass


class TransportError(LatexClientError):
    """Network or connection failure, including request timeouts"""
    pass


class DecodeError(LatexClientError):
    """Response body was not the expected JSON or base64"""
    pass


class APIError(LatexClientError):
    """The API answered with an envelope reporting failure"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DownloadError(LatexClientError):
    """Artifact endpoint answered with something other than HTTP 200"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class RenderTimeoutError(LatexClientError, TimeoutError):
    """Job did not reach a terminal state before the deadline.

    `job` holds the last state observed while polling.
    """

    def __init__(self, message: str, job: RenderJob):
        super().__init__(message)
        self.job = job


class JobFailedError(LatexClientError):
    """Job finished with status failed"""

    def __init__(self, message: str, job: RenderJob):
        super().__init__(message)
        self.job = job
