# gamma_mcp/lib/headers.py
from typing import Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict

API_KEY_HEADER = "X-API-KEY"
AUTHORIZATION_HEADER = "Authorization"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def merge_headers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Merge header mappings left to right; later layers win per header name,
    compared case-insensitively. The last spelling of a name is kept.
    """
    merged: CaseInsensitiveDict = CaseInsensitiveDict()
    for layer in layers:
        for name, value in (layer or {}).items():
            merged[name] = value
    return dict(merged.items())


def compose_headers(api_key: str, overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Effective headers, in increasing priority: defaults, the API key, explicit overrides.
    An Authorization override is mirrored into X-API-KEY unless X-API-KEY is overridden too.
    """
    overrides = CaseInsensitiveDict(overrides or {})
    key_layer = {API_KEY_HEADER: api_key} if api_key else {}

    mirrored = {}
    if AUTHORIZATION_HEADER in overrides and API_KEY_HEADER not in overrides:
        mirrored[API_KEY_HEADER] = overrides[AUTHORIZATION_HEADER]

    return merge_headers(DEFAULT_HEADERS, key_layer, dict(overrides.items()), mirrored)
