"""
F# code generator module.

Generates assembly version attributes and the ThisAssembly type in F#.
"""

from .generator import DEFAULT_NAMESPACE, FSharpGenerator, create_fsharp_generator
from .naming import (
    FSHARP_RESERVED_WORDS,
    create_fsharp_sanitizer,
    fsharp_bool_literal,
    fsharp_string_literal,
)

__all__ = [
    "FSharpGenerator",
    "create_fsharp_generator",
    "DEFAULT_NAMESPACE",
    "FSHARP_RESERVED_WORDS",
    "create_fsharp_sanitizer",
    "fsharp_bool_literal",
    "fsharp_string_literal",
]
