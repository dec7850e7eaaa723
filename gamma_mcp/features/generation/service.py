# gamma_mcp/features/generation/service.py
import time
from typing import Any, Callable, Mapping, Optional, Union

import requests

from gamma_mcp.config import Config
from gamma_mcp.logger import get_logger

from .artifacts import maybe_download
from .jobs import GenerationJobs
from .schemas import GenerationRequest, GenerationResult, PresentationParams

log = get_logger(__name__)


def generate_presentation(
    params: Union[PresentationParams, Mapping[str, Any]],
    *,
    config: Config,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> GenerationResult:
    """
    Submit a Gamma generation, wait for it, and fetch the export when asked.
    Never raises: any failure comes back as GenerationResult(error=...).
    """
    owns_session = session is None
    session = session or requests.Session()
    try:
        if not isinstance(params, PresentationParams):
            params = PresentationParams.model_validate(params)
        request = GenerationRequest.from_params(params)

        jobs = GenerationJobs(config, session, sleep=sleep, clock=clock)
        generation_id = jobs.submit(request)
        outcome = jobs.poll(generation_id, export_as=params.export_as)

        file_path = None
        if outcome.file_url and params.export_as:
            file_path = maybe_download(
                outcome.file_url,
                generation_id,
                params.export_as,
                out_dir=config.output_dir,
                session=session,
                timeout=config.http_timeout,
            )
        elif params.export_as:
            log.warning(f"[{generation_id}] export {params.export_as} requested but no file URL returned")

        return GenerationResult(
            generation_id=generation_id,
            view_url=outcome.view_url,
            file_url=outcome.file_url,
            file_path=file_path,
        )
    except Exception as e:
        log.exception(f"Error making Gamma API request: {e}")
        return GenerationResult.failed(str(e))
    finally:
        if owns_session:
            session.close()
