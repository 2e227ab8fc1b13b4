"""Public key information for strong-name signed assemblies.

Reads ``.snk`` key files and derives the public key and public key token
that end up in the ``PublicKey``/``PublicKeyToken`` ThisAssembly fields.
"""

import hashlib
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)

CALG_RSA_SIGN = 0x00002400
CALG_SHA1 = 0x00008004

PRIVATE_KEY_BLOB = 0x07
PUBLIC_KEY_BLOB = 0x06
CUR_BLOB_VERSION = 0x02

RSA1_MAGIC = 0x31415352  # "RSA1"
RSA2_MAGIC = 0x32415352  # "RSA2"

# SigAlgId, HashAlgId, cbPublicKey
_SN_HEADER = struct.Struct("<III")
# bType, bVersion, reserved, aiKeyAlg
_BLOB_HEADER = struct.Struct("<BBHI")
# magic, bitlen, pubexp
_RSA_PUB_KEY = struct.Struct("<III")


class KeyResolutionError(Exception):
    """Raised when a key file exists but cannot be interpreted."""

    pass


@dataclass(frozen=True)
class PublicKeyInfo:
    """Lowercase hex public key and public key token."""

    public_key: str
    public_key_token: str


class KeySource(ABC):
    """Supplies public key information for the ThisAssembly class."""

    @abstractmethod
    def resolve_public_key(
        self, key_file: str | None, container_name: str | None
    ) -> PublicKeyInfo | None:
        """
        Resolve the signing public key.

        Args:
            key_file: Path to a key file
            container_name: Name of a key container

        Returns:
            Key information, or None when no key is available

        Raises:
            KeyResolutionError: If a key was found but is malformed
        """
        pass


class StrongNameKeySource(KeySource):
    """Reads public key information from ``.snk`` files."""

    def resolve_public_key(
        self, key_file: str | None, container_name: str | None
    ) -> PublicKeyInfo | None:
        if key_file:
            path = Path(key_file)
            if not path.is_file():
                logger.debug(f"Key file not found: {path}")
                return None
            if path.suffix.lower() != ".snk":
                logger.debug(f"Unsupported key file type: {path}")
                return None
            try:
                key_bytes = path.read_bytes()
            except OSError as e:
                raise KeyResolutionError(f"Unable to read key file {path}: {e}") from e
            return public_key_info_from_snk(key_bytes)

        if container_name:
            logger.debug(f"Key containers are not supported: {container_name}")
        return None


def public_key_info_from_snk(key_bytes: bytes) -> PublicKeyInfo | None:
    """Derive public key information from the contents of an ``.snk`` file."""
    if not key_bytes:
        return None

    if key_bytes[0] == PRIVATE_KEY_BLOB:
        public_key = public_key_from_private_key_blob(key_bytes)
    else:
        public_key = bytes(key_bytes)
        if len(public_key) < _SN_HEADER.size:
            raise KeyResolutionError("Public key blob is too short")

    return PublicKeyInfo(
        public_key=public_key.hex(),
        public_key_token=public_key_token(public_key).hex(),
    )


def public_key_from_private_key_blob(blob: bytes) -> bytes:
    """
    Build a strong-name public key from an RSA private key blob.

    Raises:
        KeyResolutionError: If the blob is not an RSA private key blob
    """
    header_end = _BLOB_HEADER.size + _RSA_PUB_KEY.size
    if len(blob) < header_end:
        raise KeyResolutionError("Private key blob is too short")

    blob_type, version, _, _ = _BLOB_HEADER.unpack_from(blob, 0)
    if blob_type != PRIVATE_KEY_BLOB or version != CUR_BLOB_VERSION:
        raise KeyResolutionError("Not a version 2 private key blob")

    magic, bit_length, public_exponent = _RSA_PUB_KEY.unpack_from(blob, _BLOB_HEADER.size)
    if magic != RSA2_MAGIC:
        raise KeyResolutionError("Private key blob is not an RSA key")

    modulus_length = bit_length // 8
    modulus = blob[header_end:header_end + modulus_length]
    if len(modulus) != modulus_length:
        raise KeyResolutionError("Private key blob is truncated")

    public_blob = (
        _BLOB_HEADER.pack(PUBLIC_KEY_BLOB, CUR_BLOB_VERSION, 0, CALG_RSA_SIGN)
        + _RSA_PUB_KEY.pack(RSA1_MAGIC, bit_length, public_exponent)
        + modulus
    )
    return _SN_HEADER.pack(CALG_RSA_SIGN, CALG_SHA1, len(public_blob)) + public_blob


def public_key_token(public_key: bytes) -> bytes:
    """The last eight bytes of the SHA-1 of the public key, reversed."""
    digest = hashlib.sha1(public_key).digest()
    return digest[-8:][::-1]
