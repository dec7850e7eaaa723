# gamma_mcp/features/generation/artifacts.py
import os
from pathlib import Path
from typing import Optional

import requests

from gamma_mcp.lib.paths import artifact_filename, output_dir
from gamma_mcp.logger import get_logger

log = get_logger(__name__)


def maybe_download(
    file_url: Optional[str],
    generation_id: str,
    export_as: Optional[str],
    *,
    out_dir: os.PathLike,
    session: requests.Session,
    timeout: float = 30,
) -> Optional[str]:
    """
    Save the exported file for a finished generation and return its absolute path.

    Nothing is fetched unless both a file URL and an export format are known.
    A failed download only degrades the result: it is logged and None is returned.
    """
    if not file_url or not export_as:
        return None

    try:
        target = output_dir(out_dir) / artifact_filename(generation_id, file_url, export_as)
    except OSError as e:
        log.warning(f"[{generation_id}] cannot prepare output dir {out_dir}: {e}")
        return None

    # the export URL is pre-signed; no API headers
    try:
        r = session.get(file_url, timeout=timeout)
    except requests.RequestException as e:
        log.warning(f"[{generation_id}] failed to download {file_url}: {e}")
        return None

    if not 200 <= r.status_code < 300:
        log.warning(f"[{generation_id}] failed to download {file_url}: {r.status_code}")
        return None

    try:
        Path(target).write_bytes(r.content)
    except OSError as e:
        log.warning(f"[{generation_id}] failed to write {target}: {e}")
        return None

    log.info(f"[{generation_id}] saved exported file to {target}")
    return str(target)
