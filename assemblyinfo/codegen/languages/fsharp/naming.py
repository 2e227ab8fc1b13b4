"""
F#-specific naming and literal utilities.
"""

from ...core.naming import NameSanitizer

FSHARP_RESERVED_WORDS = {
    "abstract", "and", "as", "assert", "base", "begin", "class", "default",
    "delegate", "do", "done", "downcast", "downto", "elif", "else", "end",
    "exception", "extern", "false", "finally", "fixed", "for", "fun",
    "function", "global", "if", "in", "inherit", "inline", "interface",
    "internal", "lazy", "let", "match", "member", "module", "mutable",
    "namespace", "new", "not", "null", "of", "open", "or", "override",
    "private", "public", "rec", "return", "select", "sig", "static",
    "struct", "then", "to", "true", "try", "type", "upcast", "use", "val",
    "void", "when", "while", "with", "yield", "const",
    # Reserved for future use
    "break", "checked", "component", "constraint", "continue", "event",
    "external", "include", "mixin", "parallel", "process", "protected",
    "pure", "sealed", "tailcall", "trait", "virtual",
}

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def create_fsharp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for F# (double-backtick identifiers)."""
    return NameSanitizer(FSHARP_RESERVED_WORDS, escape_format="``{name}``")


def fsharp_string_literal(value: str) -> str:
    """Render ``value`` as an F# string literal."""
    parts = []
    for ch in value:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def fsharp_bool_literal(value: bool) -> str:
    return "true" if value else "false"
