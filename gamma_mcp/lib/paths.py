# gamma_mcp/lib/paths.py
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse


def output_dir(base: str | os.PathLike) -> Path:
    """
    Folder for downloaded artifacts. Created on demand; safe to call repeatedly.
    """
    root = Path(base).expanduser().resolve()
    root.mkdir(parents=True, exist_ok=True)
    return root


def _safe_name(s: str) -> str:
    s = (s or "").strip()
    s = re.sub(r"[^A-Za-z0-9_.\-]+", "_", s)
    return s[:160] or "unknown"


def url_extension(url: str) -> Optional[str]:
    """'.pdf' for https://host/a/b.pdf?sig=..., None when the path has no extension."""
    path = unquote(urlparse(url).path or "")
    ext = os.path.splitext(os.path.basename(path))[1]
    if not ext or ext == "." or not re.fullmatch(r"\.[A-Za-z0-9]{1,10}", ext):
        return None
    return ext


def artifact_filename(generation_id: str, file_url: str, export_as: str) -> str:
    """
    generation-<id><ext>, where ext comes from the URL path or falls back to .<export_as>.
    """
    ext = url_extension(file_url) or f".{export_as.lstrip('.').lower()}"
    return f"generation-{_safe_name(generation_id)}{ext}"
