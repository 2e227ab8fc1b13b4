"""
Visual Basic naming and literal utilities.

Visual Basic keywords are case-insensitive, so reserved word matching
ignores case. String literals have no escape sequences: quotes are
doubled and control characters are concatenated in with ``ChrW``.
"""

from ...core.naming import NameSanitizer

VB_RESERVED_WORDS = {
    "AddHandler", "AddressOf", "Alias", "And", "AndAlso", "As", "Boolean",
    "ByRef", "Byte", "ByVal", "Call", "Case", "Catch", "CBool", "CByte",
    "CChar", "CDate", "CDbl", "CDec", "Char", "CInt", "Class", "CLng",
    "CObj", "Const", "Continue", "CSByte", "CShort", "CSng", "CStr",
    "CType", "CUInt", "CULng", "CUShort", "Date", "Decimal", "Declare",
    "Default", "Delegate", "Dim", "DirectCast", "Do", "Double", "Each",
    "Else", "ElseIf", "End", "EndIf", "Enum", "Erase", "Error", "Event",
    "Exit", "False", "Finally", "For", "Friend", "Function", "Get",
    "GetType", "GetXMLNamespace", "Global", "GoSub", "GoTo", "Handles",
    "If", "Implements", "Imports", "In", "Inherits", "Integer", "Interface",
    "Is", "IsNot", "Let", "Lib", "Like", "Long", "Loop", "Me", "Mod",
    "Module", "MustInherit", "MustOverride", "MyBase", "MyClass",
    "Namespace", "Narrowing", "New", "Next", "Not", "Nothing",
    "NotInheritable", "NotOverridable", "Object", "Of", "On", "Operator",
    "Option", "Optional", "Or", "OrElse", "Overloads", "Overridable",
    "Overrides", "ParamArray", "Partial", "Private", "Property", "Protected",
    "Public", "RaiseEvent", "ReadOnly", "ReDim", "REM", "RemoveHandler",
    "Resume", "Return", "SByte", "Select", "Set", "Shadows", "Shared",
    "Short", "Single", "Static", "Step", "Stop", "String", "Structure",
    "Sub", "SyncLock", "Then", "Throw", "To", "True", "Try", "TryCast",
    "TypeOf", "UInteger", "ULong", "UShort", "Using", "Variant", "Wend",
    "When", "While", "Widening", "With", "WithEvents", "WriteOnly", "Xor",
}

# Characters that cannot appear inside a single-line string literal
_LINE_BREAKS = {"\u0085", "\u2028", "\u2029"}

# Typographic quotes also close VB strings and must be doubled too
_QUOTES = {'"', "\u201c", "\u201d"}


def create_vb_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Visual Basic (``[Name]`` escapes)."""
    return NameSanitizer(VB_RESERVED_WORDS, escape_format="[{name}]", case_sensitive=False)


def vb_string_literal(value: str) -> str:
    """Render ``value`` as a Visual Basic string expression."""
    parts = []
    current = []

    for ch in value:
        if ord(ch) < 0x20 or ch in _LINE_BREAKS:
            if current:
                parts.append('"' + "".join(current) + '"')
                current = []
            parts.append(f"ChrW({ord(ch)})")
        elif ch in _QUOTES:
            current.append(ch + ch)
        else:
            current.append(ch)

    if current or not parts:
        parts.append('"' + "".join(current) + '"')

    # Keep the expression typed as String even when it starts with ChrW
    if not parts[0].startswith('"'):
        parts.insert(0, '""')

    return " & ".join(parts)


def vb_bool_literal(value: bool) -> str:
    return "True" if value else "False"
