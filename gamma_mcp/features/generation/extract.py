# gamma_mcp/features/generation/extract.py
"""
Ordered URL extraction strategies for a completed generation.

The status payload has changed shape across Gamma API versions, so each
candidate location is a small strategy and the first non-empty answer wins.

View URL:  gammaUrl -> url -> shareUrl
File URL:  exportUrl -> <requested format>Url -> <other format>Url
           -> files[0] -> result.files[0]
"""
from typing import Callable, List, Optional, Sequence

from .schemas import FileEntry, GenerationStatus

ViewStrategy = Callable[[GenerationStatus], Optional[str]]
FileStrategy = Callable[[GenerationStatus, str], Optional[str]]

_FORMAT_FIELDS = {
    "pdf": "pdf_url",
    "pptx": "pptx_url",
}


def _clean(url: Optional[str]) -> Optional[str]:
    if isinstance(url, str) and url.strip():
        return url.strip()
    return None


def _first_file(files: Optional[List[FileEntry]]) -> Optional[str]:
    if not files:
        return None
    first = files[0]
    if isinstance(first, str):
        return _clean(first)
    return _clean(getattr(first, "url", None))


VIEW_URL_STRATEGIES: Sequence[ViewStrategy] = (
    lambda s: s.gamma_url,
    lambda s: s.url,
    lambda s: s.share_url,
)


def _export_url(s: GenerationStatus, export_as: str) -> Optional[str]:
    return s.export_url


def _requested_format_url(s: GenerationStatus, export_as: str) -> Optional[str]:
    field = _FORMAT_FIELDS.get(export_as)
    return getattr(s, field) if field else None


def _other_format_url(s: GenerationStatus, export_as: str) -> Optional[str]:
    for fmt, field in _FORMAT_FIELDS.items():
        if fmt != export_as:
            url = _clean(getattr(s, field))
            if url:
                return url
    return None


def _files(s: GenerationStatus, export_as: str) -> Optional[str]:
    return _first_file(s.files)


def _result_files(s: GenerationStatus, export_as: str) -> Optional[str]:
    return _first_file(s.result.files if s.result else None)


FILE_URL_STRATEGIES: Sequence[FileStrategy] = (
    _export_url,
    _requested_format_url,
    _other_format_url,
    _files,
    _result_files,
)


def extract_view_url(status: GenerationStatus) -> Optional[str]:
    for strategy in VIEW_URL_STRATEGIES:
        url = _clean(strategy(status))
        if url:
            return url
    return None


def extract_file_url(status: GenerationStatus, export_as: Optional[str]) -> Optional[str]:
    """Only consulted when an export was requested; returns None otherwise."""
    if not export_as:
        return None
    fmt = export_as.lower()
    for strategy in FILE_URL_STRATEGIES:
        url = _clean(strategy(status, fmt))
        if url:
            return url
    return None
