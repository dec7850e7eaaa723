# gamma_mcp/__init__.py
from .config import Config, ConfigError, load_config
from .logger import get_logger
from .features.generation.errors import (
    GammaError,
    GenerationFailedError,
    GenerationTimeoutError,
    InitiationError,
    PollError,
)
from .features.generation.schemas import GenerationRequest, GenerationResult, PresentationParams
from .features.generation.service import generate_presentation
from .main import create_server


__all__ = ["Config",
           "ConfigError",
           "load_config",
           "get_logger",
           "GammaError",
           "InitiationError",
           "PollError",
           "GenerationFailedError",
           "GenerationTimeoutError",
           "GenerationRequest",
           "GenerationResult",
           "PresentationParams",
           "generate_presentation",
           "create_server",
           ]
