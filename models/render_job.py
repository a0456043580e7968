"""Render job model as reported by the API"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any


class JobStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> 'JobStatus':
        """Map an API status string, keeping unrecognised values non-terminal"""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.SUCCEEDED, JobStatus.FAILED)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp, accepting a trailing Z"""
    if not value:
        return None
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    # fromisoformat rejects more than 6 fractional digits
    if '.' in value:
        head, _, tail = value.partition('.')
        digits = ''
        while tail and tail[0].isdigit():
            digits += tail[0]
            tail = tail[1:]
        value = f"{head}.{digits[:6].ljust(6, '0')}{tail}"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class JobError:
    """Error details attached to a failed job"""
    message: str = ""


@dataclass
class RenderJob:
    """Local copy of a server-side render job"""
    id: str
    status: JobStatus = JobStatus.PENDING
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    error: Optional[JobError] = None
    log: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def succeeded(self) -> bool:
        return self.status == JobStatus.SUCCEEDED

    def failure_message(self) -> str:
        """Error message for display, with the LaTeX log appended if present"""
        message = "unknown error"
        if self.error is not None and self.error.message:
            message = self.error.message
        if self.log:
            message += "\n\nLaTeX log:\n" + self.log
        return message

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RenderJob':
        """Create from the `data` object of an API envelope"""
        error = data.get('error')
        return cls(
            id=str(data.get('id', '')),
            status=JobStatus.parse(data.get('status')),
            created_at=parse_timestamp(data.get('created_at')),
            expires_at=parse_timestamp(data.get('expires_at')),
            error=JobError(message=error.get('message', '')) if isinstance(error, dict) else None,
            log=data.get('log') or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        result = {
            'id': self.id,
            'status': self.status.value,
            'created_at': format_timestamp(self.created_at),
            'expires_at': format_timestamp(self.expires_at),
        }
        if self.error is not None:
            result['error'] = {'message': self.error.message}
        if self.log:
            result['log'] = self.log
        return result

    def __str__(self) -> str:
        return f"RenderJob({self.id}, {self.status.value})"
