"""
Field model for the ThisAssembly class.

Turns a generation request into the ordered list of typed fields that
every generator emits, collecting per-field diagnostics along the way.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from ...keys import KeyResolutionError, KeySource
from ...logging_config import get_logger
from .config import AdditionalField, GenerationRequest

logger = get_logger(__name__)

# .NET DateTime ticks: 100ns intervals since 0001-01-01T00:00:00
TICKS_PER_SECOND = 10_000_000
TICKS_PER_MICROSECOND = 10
MAX_TICKS = 3_155_378_975_999_999_999
EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)

_TICKS_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class FieldType(Enum):
    """Kinds of value a ThisAssembly field can hold."""

    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Field:
    """A single named constant of the ThisAssembly class."""

    name: str
    type: FieldType
    value: Union[str, bool, int, None]
    emit_if_empty: bool = False

    def should_emit(self) -> bool:
        """Absent and empty strings are only emitted when ``emit_if_empty``."""
        if self.type == FieldType.STRING:
            return self.emit_if_empty or bool(self.value)
        return True

    def as_datetime(self) -> datetime:
        """Return the UTC datetime of a timestamp field."""
        if self.type != FieldType.TIMESTAMP:
            raise TypeError(f"Field {self.name} is not a timestamp")
        return ticks_to_datetime(self.value)


@dataclass(frozen=True)
class FieldError:
    """Non-fatal diagnostic about one field."""

    field_name: str
    message: str
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        return self.message


def ticks_to_datetime(ticks: int) -> datetime:
    """Convert a tick count to an aware UTC datetime."""
    return EPOCH + timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def datetime_to_ticks(value: datetime) -> int:
    """Convert a datetime to a tick count. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value.astimezone(timezone.utc) - EPOCH
    return (
        delta.days * 86_400 * TICKS_PER_SECOND
        + delta.seconds * TICKS_PER_SECOND
        + delta.microseconds * TICKS_PER_MICROSECOND
    )


def parse_ticks(text: Optional[str]) -> Optional[int]:
    """
    Parse a raw tick count.

    Returns:
        The tick count, or None when the text is not an integer in the
        representable DateTime range
    """
    if text is None or not _TICKS_PATTERN.match(text):
        return None
    ticks = int(text.strip())
    if ticks < 0 or ticks > MAX_TICKS:
        return None
    return ticks


def parse_bool(text: Optional[str]) -> Optional[bool]:
    """Parse ``true``/``false`` ignoring case and surrounding whitespace."""
    if text is None:
        return None
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_PATTERN.match(name))


def build_fields(
    request: GenerationRequest, key_source: Optional[KeySource] = None
) -> Tuple[List[Field], List[FieldError]]:
    """
    Build the ordered ThisAssembly field list for a request.

    Built-in fields come first and win name collisions. Additional fields
    that fail validation are dropped and reported. The result is sorted by
    ordinal name comparison and holds only fields that should be emitted.

    Args:
        request: Generation request
        key_source: Optional provider of the public key fields

    Returns:
        Tuple of (ordered fields, diagnostics)
    """
    fields: Dict[str, Field] = {}
    errors: List[FieldError] = []

    for builtin in _builtin_fields(request):
        fields[builtin.name] = builtin

    key_info = _resolve_key_info(request, key_source)
    if key_info is not None:
        fields["PublicKey"] = Field("PublicKey", FieldType.STRING, key_info.public_key)
        fields["PublicKeyToken"] = Field(
            "PublicKeyToken", FieldType.STRING, key_info.public_key_token
        )

    for name, raw_ticks in (
        ("GitCommitDate", request.git_commit_date_ticks),
        ("GitCommitAuthorDate", request.git_commit_author_date_ticks),
    ):
        ticks = parse_ticks(raw_ticks)
        if ticks is not None:
            fields[name] = Field(name, FieldType.TIMESTAMP, ticks, emit_if_empty=True)
        elif raw_ticks:
            logger.debug(f"Omitting {name}: unparseable ticks {raw_ticks!r}")

    for item in request.additional_fields:
        if item is None:
            continue
        parsed = _parse_additional_field(item, errors)
        if parsed is None:
            continue
        if parsed.name in fields:
            _record(
                errors,
                FieldError(
                    parsed.name,
                    f"Field name '{parsed.name}' in additional fields has already been defined.",
                ),
            )
            continue
        fields[parsed.name] = parsed

    ordered = sorted(
        (f for f in fields.values() if f.should_emit()), key=lambda f: f.name
    )
    return ordered, errors


def _builtin_fields(request: GenerationRequest) -> List[Field]:
    strings = [
        ("AssemblyVersion", request.assembly_version),
        ("AssemblyFileVersion", request.assembly_file_version),
        ("AssemblyInformationalVersion", request.assembly_informational_version),
        ("AssemblyName", request.assembly_name),
        ("AssemblyTitle", request.assembly_title),
        ("AssemblyProduct", request.assembly_product),
        ("AssemblyCopyright", request.assembly_copyright),
        ("AssemblyCompany", request.assembly_company),
        ("AssemblyConfiguration", request.assembly_configuration),
        ("GitCommitId", request.git_commit_id),
    ]
    result = [Field(name, FieldType.STRING, value) for name, value in strings]

    # Always defined, even when empty
    result.append(
        Field("RootNamespace", FieldType.STRING, request.root_namespace, emit_if_empty=True)
    )
    result.append(
        Field("IsPublicRelease", FieldType.BOOLEAN, bool(request.public_release), True)
    )
    result.append(
        Field("IsPrerelease", FieldType.BOOLEAN, bool(request.prerelease_version), True)
    )
    return result


def _resolve_key_info(request: GenerationRequest, key_source: Optional[KeySource]):
    if key_source is None:
        return None
    try:
        return key_source.resolve_public_key(
            request.assembly_originator_key_file,
            request.assembly_key_container_name,
        )
    except KeyResolutionError as e:
        logger.warning(f"Unable to emit public key fields: {e}")
        return None


def _parse_additional_field(
    item: AdditionalField, errors: List[FieldError]
) -> Optional[Field]:
    name = (item.name or "").strip()

    if not name or not is_identifier(name):
        _record(
            errors,
            FieldError(
                name,
                f"Field name '{name}' in additional fields is not a valid identifier.",
            ),
        )
        return None

    kinds = [kind for kind in ("String", "Boolean", "Ticks") if item.has(kind)]
    if not kinds:
        _record(
            errors,
            FieldError(
                name,
                f"Field '{name}' in additional fields has no value. "
                "Specify one of String, Boolean or Ticks.",
            ),
        )
        return None
    if len(kinds) > 1:
        _record(
            errors,
            FieldError(
                name,
                f"The metadata for item '{name}' in additional fields "
                "specifies more than one kind of value.",
            ),
        )
        return None

    kind = kinds[0]
    if kind == "Boolean":
        text = item.get("Boolean")
        value = parse_bool(text)
        if value is None:
            _record(
                errors,
                FieldError(
                    name,
                    f"The Boolean value '{text}' for item '{name}' in additional fields is not valid.",
                ),
            )
            return None
        return Field(name, FieldType.BOOLEAN, value, emit_if_empty=True)

    if kind == "Ticks":
        text = item.get("Ticks")
        ticks = parse_ticks(text)
        if ticks is None:
            _record(
                errors,
                FieldError(
                    name,
                    f"The Ticks value '{text}' for item '{name}' in additional fields is not valid.",
                ),
            )
            return None
        return Field(name, FieldType.TIMESTAMP, ticks, emit_if_empty=True)

    value = item.get("String")
    emit_if_empty = False
    if item.has("EmitIfEmpty"):
        emit_text = item.get("EmitIfEmpty")
        parsed_flag = parse_bool(emit_text)
        if parsed_flag is None:
            _record(
                errors,
                FieldError(
                    name,
                    f"The value '{emit_text}' for EmitIfEmpty metadata for item "
                    f"'{name}' in additional fields is not valid.",
                ),
            )
            return None
        emit_if_empty = parsed_flag

    if not value and not emit_if_empty:
        _record(
            errors,
            FieldError(
                name,
                f"Field '{name}' in additional fields has an empty value and will be ignored.",
                Severity.WARNING,
            ),
        )
        return None

    return Field(name, FieldType.STRING, value, emit_if_empty=emit_if_empty)


def _record(errors: List[FieldError], error: FieldError) -> None:
    if error.severity == Severity.WARNING:
        logger.warning(error.message)
    else:
        logger.error(error.message)
    errors.append(error)
