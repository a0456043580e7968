"""Service modules for the LaTeX Lite client"""
from .latex_client import LatexClient
from .errors import (
    LatexClientError,
    TransportError,
    DecodeError,
    APIError,
    DownloadError,
    RenderTimeoutError,
    JobFailedError
)

__all__ = [
    'LatexClient',
    'LatexClientError',
    'TransportError',
    'DecodeError',
    'APIError',
    'DownloadError',
    'RenderTimeoutError',
    'JobFailedError'
]
