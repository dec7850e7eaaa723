# gamma_mcp/logger.py
import logging
import sys
from typing import Optional

_DEFAULT_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False

def configure_logging(level: Optional[str] = None, fmt: str = _DEFAULT_FMT, *, force: bool = False) -> None:
    """Configure logging once. Handlers write to stderr; stdout belongs to the MCP stdio transport."""
    global _configured
    if _configured and not force:
        return

    level_name = (level or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    # Root logger
    root = logging.getLogger()
    root.setLevel(level_value)

    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setLevel(level_value)
        h.setFormatter(logging.Formatter(fmt))
        root.addHandler(h)
    else:
        for h in root.handlers:
            h.setLevel(level_value)
            if not h.formatter:
                h.setFormatter(logging.Formatter(fmt))

    # SDK and HTTP loggers follow our level, except urllib3 which is noisy on DEBUG
    for name in ("mcp", "mcp.server", "asyncio"):
        logging.getLogger(name).setLevel(level_value)
    logging.getLogger("urllib3").setLevel(max(level_value, logging.INFO))

    _configured = True

def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()  # ensures configured on first use
    return logging.getLogger(name or __name__)
