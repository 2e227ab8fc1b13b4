"""
Visual Basic code generator module.

Generates assembly version attributes and the ThisAssembly class in Visual Basic.
"""

from .generator import VisualBasicGenerator, create_vb_generator, vb_condition
from .naming import (
    VB_RESERVED_WORDS,
    create_vb_sanitizer,
    vb_bool_literal,
    vb_string_literal,
)

__all__ = [
    "VisualBasicGenerator",
    "create_vb_generator",
    "vb_condition",
    "VB_RESERVED_WORDS",
    "create_vb_sanitizer",
    "vb_bool_literal",
    "vb_string_literal",
]
