"""
Shared fixtures for the assemblyinfo test suite.
"""

import struct
from pathlib import Path

import pytest

from assemblyinfo.codegen.core.config import AdditionalField, GenerationRequest
from assemblyinfo.codegen.core.generator import FILE_HEADER_COMMENT
from assemblyinfo.codegen.driver import GenerationDriver

# 2021-01-01T00:00:00Z
NEW_YEAR_2021_TICKS = 637450560000000000

GENERATOR_VERSION = "1.0.0"


def header_lines(token: str) -> list:
    """The auto-generated banner as emitted with a comment token."""
    return [f"{token}{line}" for line in FILE_HEADER_COMMENT.splitlines()]


def make_request(**overrides) -> GenerationRequest:
    """Build a request with sensible defaults, overridden by keyword."""
    values = {
        "code_language": "c#",
        "assembly_version": "1.2",
        "assembly_file_version": "1.2.3.0",
        "assembly_informational_version": "1.2.3+abc",
        "root_namespace": "Contoso",
        "public_release": True,
        "git_commit_id": "abc",
        "git_commit_date_ticks": str(NEW_YEAR_2021_TICKS),
    }
    values.update(overrides)
    return GenerationRequest(**values)


def additional(name: str, **metadata) -> AdditionalField:
    return AdditionalField(name=name, metadata=metadata)


def make_private_key_blob(bit_length: int = 1024, exponent: int = 65537) -> bytes:
    """Build a syntactically valid RSA private key blob (contents are dummy)."""
    modulus = bytes(range(256)) * (bit_length // 2048 + 1)
    modulus = modulus[: bit_length // 8]
    header = struct.pack("<BBHI", 0x07, 0x02, 0, 0x2400)
    rsa = struct.pack("<III", 0x32415352, bit_length, exponent)
    # Private parts are never read; fill with zeros
    private_parts = bytes(bit_length // 16 * 5 + bit_length // 8)
    return header + rsa + modulus + private_parts


@pytest.fixture()
def request_factory():
    """Factory for generation requests."""
    return make_request


@pytest.fixture()
def driver() -> GenerationDriver:
    """Driver with a fixed generator version for stable output."""
    return GenerationDriver(generator_version=GENERATOR_VERSION)


@pytest.fixture()
def snk_file(tmp_path: Path) -> Path:
    """A strong name key file holding a private key blob."""
    path = tmp_path / "key.snk"
    path.write_bytes(make_private_key_blob())
    return path
