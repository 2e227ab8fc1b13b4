"""Build-time generator of assembly version info source files."""

__version__ = "0.1.0"

from .codegen import (  # noqa: E402
    AdditionalField,
    GenerationDriver,
    GenerationRequest,
    GenerationResult,
    generate,
    load_request,
)
from .keys import KeySource, PublicKeyInfo, StrongNameKeySource  # noqa: E402

__all__ = [
    "__version__",
    "AdditionalField",
    "GenerationDriver",
    "GenerationRequest",
    "GenerationResult",
    "generate",
    "load_request",
    "KeySource",
    "PublicKeyInfo",
    "StrongNameKeySource",
]
