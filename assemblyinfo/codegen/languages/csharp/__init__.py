"""
C# code generator module.

Generates assembly version attributes and the ThisAssembly class in C#.
"""

from .generator import CSharpGenerator, create_csharp_generator
from .naming import (
    CSHARP_RESERVED_WORDS,
    create_csharp_sanitizer,
    csharp_bool_literal,
    csharp_string_literal,
)

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "CSHARP_RESERVED_WORDS",
    "create_csharp_sanitizer",
    "csharp_bool_literal",
    "csharp_string_literal",
]
