"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .csharp import CSharpGenerator, create_csharp_generator
from .visualbasic import VisualBasicGenerator, create_vb_generator
from .fsharp import FSharpGenerator, create_fsharp_generator

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "VisualBasicGenerator",
    "create_vb_generator",
    "FSharpGenerator",
    "create_fsharp_generator",
]
