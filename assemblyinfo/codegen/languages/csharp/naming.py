"""
C#-specific naming and literal utilities.
"""

from ...core.naming import NameSanitizer

CSHARP_RESERVED_WORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator", "out",
    "override", "params", "private", "protected", "public", "readonly",
    "ref", "return", "sbyte", "sealed", "short", "sizeof", "stackalloc",
    "static", "string", "struct", "switch", "this", "throw", "true", "try",
    "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using",
    "virtual", "void", "volatile", "while",
}

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

# Line terminators are not allowed inside regular string literals
_LINE_SEPARATORS = {"\u0085", "\u2028", "\u2029"}


def create_csharp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for C# (``@`` verbatim identifiers)."""
    return NameSanitizer(CSHARP_RESERVED_WORDS, escape_format="@{name}")


def csharp_string_literal(value: str) -> str:
    """Render ``value`` as a regular C# string literal."""
    parts = []
    for ch in value:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ch in _LINE_SEPARATORS:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def csharp_bool_literal(value: bool) -> str:
    return "true" if value else "false"
