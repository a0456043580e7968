"""Data models for the LaTeX Lite client"""
from .render_request import RenderRequest
from .render_job import RenderJob, JobStatus, JobError

__all__ = ['RenderRequest', 'RenderJob', 'JobStatus', 'JobError']
