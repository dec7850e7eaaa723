# gamma_mcp/features/generation/jobs.py
from __future__ import annotations

import time
from typing import Callable, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from gamma_mcp.config import Config
from gamma_mcp.logger import get_logger

from .errors import GenerationFailedError, GenerationTimeoutError, InitiationError, PollError
from .extract import extract_file_url, extract_view_url
from .schemas import GenerationRequest, GenerationStatus, PollOutcome

log = get_logger(__name__)

SUCCESS_STATUSES = frozenset({"completed", "succeeded", "success"})
FAILURE_STATUSES = frozenset({"failed", "error"})


class GenerationJobs:
    """
    Drives one Gamma generation: submit, then poll until a terminal state.

    Every HTTP call goes through the injected session with headers taken from
    the explicit Config. No retries: the first failed call ends the job.
    """

    def __init__(
        self,
        config: Config,
        session: requests.Session,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.session = session
        self._sleep = sleep
        self._clock = clock
        self._headers = config.headers()

    def submit(self, request: GenerationRequest) -> str:
        payload = request.to_payload()
        log.debug(f"submitting generation: {sorted(payload)}")
        try:
            r = self.session.post(
                self.config.generations_url,
                json=payload,
                headers=self._headers,
                timeout=self.config.http_timeout,
            )
        except requests.RequestException as e:
            raise InitiationError(f"Gamma init request failed: {e}")

        if not 200 <= r.status_code < 300:
            raise InitiationError("Gamma init failed", status_code=r.status_code, body=r.text)

        try:
            data = r.json()
        except ValueError:
            raise InitiationError("Gamma init response is not JSON", status_code=r.status_code, body=r.text)

        generation_id = None
        if isinstance(data, dict):
            generation_id = data.get("generationId") or data.get("id")
        if not isinstance(generation_id, str) or not generation_id.strip():
            raise InitiationError("Gamma init response missing generation id")

        log.info(f"[{generation_id}] generation submitted")
        return generation_id.strip()

    def fetch_status(self, generation_id: str) -> GenerationStatus:
        url = f"{self.config.generations_url}/{quote(generation_id, safe='')}"
        try:
            r = self.session.get(url, headers=self._headers, timeout=self.config.http_timeout)
        except requests.RequestException as e:
            raise PollError(f"Gamma poll request failed: {e}")

        if not 200 <= r.status_code < 300:
            raise PollError("Gamma poll failed", status_code=r.status_code, body=r.text)

        try:
            return GenerationStatus.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            raise PollError(f"Gamma poll response is malformed: {e}", status_code=r.status_code, body=r.text)

    def poll(
        self,
        generation_id: str,
        *,
        interval: Optional[float] = None,
        timeout: Optional[float] = None,
        export_as: Optional[str] = None,
    ) -> PollOutcome:
        interval = self.config.poll_interval if interval is None else interval
        timeout = self.config.poll_timeout if timeout is None else timeout
        deadline = self._clock() + timeout
        last_status: Optional[str] = None

        while self._clock() < deadline:
            status = self.fetch_status(generation_id)
            last_status = status.normalized_status
            log.debug(f"[{generation_id}] status={last_status or '<none>'}")

            if last_status in SUCCESS_STATUSES:
                outcome = PollOutcome(
                    view_url=extract_view_url(status),
                    file_url=extract_file_url(status, export_as),
                )
                log.info(f"[{generation_id}] generation {last_status}")
                return outcome

            if last_status in FAILURE_STATUSES:
                raise GenerationFailedError(generation_id, status.status or last_status)

            self._sleep(interval)

        raise GenerationTimeoutError(generation_id, timeout, last_status)
