"""HTTP client for the LaTeX Lite render API"""
import base64
import binascii
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests

from config import (
    BASE_URL, API_KEY, RENDERS_PATH, RENDERS_SYNC_PATH,
    REQUEST_TIMEOUT, POLL_INTERVAL, WAIT_TIMEOUT,
    DOWNLOAD_CHUNK_SIZE, ERROR_BODY_PREVIEW_CHARS, preview_key
)
from models.render_job import RenderJob
from models.render_request import RenderRequest
from services.errors import (
    APIError, DecodeError, DownloadError, JobFailedError,
    RenderTimeoutError, TransportError
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _envelope_error_message(payload: Any) -> str:
    """Pull error.message out of an API envelope"""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
    return "unknown error"


def _write_chunks(response: requests.Response, destination: Path) -> int:
    """Stream a response body to destination, returning bytes written.

    The body goes to a temporary file beside destination, which replaces
    destination only once the stream is complete.
    """
    written = 0
    fd, tmp_path = tempfile.mkstemp(
        dir=destination.parent, prefix=f".{destination.name}.", suffix=".part"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
                    written += len(chunk)
        os.replace(tmp_path, destination)
    except requests.RequestException as e:
        os.unlink(tmp_path)
        raise TransportError(f"Connection lost while downloading to {destination}: {e}") from e
    except OSError:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    return written


class LatexClient:
    """Submits LaTeX templates to the render API and retrieves PDFs.

    Two workflows are supported: a single synchronous call that returns the
    PDF (raw or base64 in a JSON envelope), and an asynchronous job that is
    created, polled until it reaches a terminal status and then downloaded.

    Calls block; an instance may be reused for sequential calls but is not
    meant to be shared between threads.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        api_key: str = API_KEY,
        request_timeout: float = REQUEST_TIMEOUT,
        poll_interval: float = POLL_INTERVAL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.request_timeout = request_timeout
        self.poll_interval = poll_interval
        self.session = session or requests.Session()
        logger.debug(f"LatexClient for {self.base_url} (key {preview_key(api_key)}...)")

    def __enter__(self) -> "LatexClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.session.close()

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        headers.update(extra)
        return headers

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            return self.session.request(method, url, timeout=self.request_timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"Network error contacting {url}: {e}") from e

    def _job_from_envelope(self, response: requests.Response) -> RenderJob:
        """Decode a {success, data, error} envelope carrying a job"""
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"decode response (HTTP {response.status_code}): {e}") from e

        if not isinstance(payload, dict):
            raise DecodeError(f"decode response: expected JSON object, got {type(payload).__name__}")

        if not payload.get("success"):
            raise APIError(_envelope_error_message(payload), status_code=response.status_code)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise DecodeError("decode response: missing job data in successful envelope")
        return RenderJob.from_dict(data)

    @staticmethod
    def _read_error_message(response: requests.Response) -> str:
        """Best-effort message from a non-2xx response body"""
        status_line = f"{response.status_code} {response.reason or ''}".strip()
        body = response.content or b""
        if not body:
            return status_line
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            return payload["error"].get("message") or status_line
        text = body.decode("utf-8", errors="replace").strip()
        if len(text) > ERROR_BODY_PREVIEW_CHARS:
            text = text[:ERROR_BODY_PREVIEW_CHARS] + "…"
        return text or status_line

    # ------------------------------------------------------------------
    # Async job workflow
    # ------------------------------------------------------------------

    def create_render(self, template: str, data: Dict[str, Any]) -> RenderJob:
        """Create an asynchronous render job"""
        request = RenderRequest(template=template, data=data)
        request.validate()

        response = self._request(
            "POST", RENDERS_PATH,
            json=request.to_dict(),
            headers=self._headers(**{"Content-Type": "application/json"}),
        )
        job = self._job_from_envelope(response)
        logger.info(f"Job created: {job.id}")
        return job

    def get_render(self, job_id: str) -> RenderJob:
        """Fetch the current state of a job"""
        response = self._request("GET", f"{RENDERS_PATH}/{job_id}", headers=self._headers())
        job = self._job_from_envelope(response)
        logger.debug(f"Job {job_id} status: {job.status.value}")
        return job

    def wait_for_completion(self, job_id: str, timeout: float = WAIT_TIMEOUT) -> RenderJob:
        """Poll a job at a fixed interval until it succeeds or fails.

        Raises RenderTimeoutError carrying the last observed job when the
        deadline passes first.
        """
        logger.info(f"Waiting for job {job_id} to complete...")
        start_time = time.time()

        while True:
            job = self.get_render(job_id)
            if job.is_terminal:
                logger.info(f"Job {job_id} finished: {job.status.value}")
                return job

            if time.time() - start_time > timeout:
                logger.error(f"Timeout waiting for job {job_id} (last status {job.status.value})")
                raise RenderTimeoutError("timeout waiting for job completion", job)

            time.sleep(self.poll_interval)

    def download_pdf(self, job_id: str, destination: PathLike) -> Path:
        """Stream the PDF of a finished job to destination"""
        destination = Path(destination)
        response = self._request(
            "GET", f"{RENDERS_PATH}/{job_id}/pdf",
            headers=self._headers(), stream=True,
        )
        try:
            if response.status_code != 200:
                raise DownloadError(
                    f"failed to download PDF: {response.status_code} {response.reason or ''}".strip(),
                    status_code=response.status_code,
                )
            written = _write_chunks(response, destination)
        finally:
            response.close()

        logger.info(f"PDF downloaded: {destination} ({written} bytes)")
        return destination

    def create_and_wait(
        self,
        template: str,
        data: Dict[str, Any],
        destination: PathLike,
        timeout: float = WAIT_TIMEOUT,
    ) -> RenderJob:
        """Create a job, wait for it and download the PDF if it succeeded"""
        job = self.create_render(template, data)
        job = self.wait_for_completion(job.id, timeout)

        if not job.succeeded:
            raise JobFailedError(f"job failed: {job.failure_message()}", job)

        self.download_pdf(job.id, destination)
        return job

    # ------------------------------------------------------------------
    # Sync workflow
    # ------------------------------------------------------------------

    def render_sync_to_file(self, template: str, data: Dict[str, Any], destination: PathLike) -> Path:
        """Render in a single call and write the PDF to destination.

        The API is asked for application/pdf. A JSON envelope carrying
        `pdf_base64` is accepted as well.
        """
        request = RenderRequest(template=template, data=data)
        request.validate()
        destination = Path(destination)

        response = self._request(
            "POST", RENDERS_SYNC_PATH,
            json=request.to_dict(),
            headers=self._headers(**{
                "Content-Type": "application/json",
                "Accept": "application/pdf",
            }),
            stream=True,
        )
        try:
            # Non-2xx bodies are always JSON error envelopes
            if not 200 <= response.status_code < 300:
                raise APIError(self._read_error_message(response), status_code=response.status_code)

            content_type = response.headers.get("Content-Type", "")
            if content_type.startswith("application/pdf"):
                written = _write_chunks(response, destination)
                logger.info(f"PDF rendered: {destination} ({written} bytes)")
                return destination

            try:
                payload = response.json()
            except ValueError as e:
                raise DecodeError(
                    f"sync render: expected PDF but got {content_type!r} and JSON decode failed: {e}"
                ) from e
        finally:
            response.close()

        if not isinstance(payload, dict):
            raise DecodeError(f"sync render: expected JSON object, got {type(payload).__name__}")
        if not payload.get("success"):
            raise APIError(_envelope_error_message(payload), status_code=response.status_code)

        data_obj = payload.get("data")
        pdf_base64 = data_obj.get("pdf_base64") if isinstance(data_obj, dict) else None
        if not pdf_base64:
            raise DecodeError("sync render: missing pdf_base64 in response")

        try:
            pdf_bytes = base64.b64decode(pdf_base64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"sync render: decode pdf_base64: {e}") from e

        destination.write_bytes(pdf_bytes)
        logger.info(f"PDF rendered: {destination} ({len(pdf_bytes)} bytes)")
        return destination
