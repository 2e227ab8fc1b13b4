"""
Tests for strong name key handling: public key extraction and tokens.
"""

import hashlib
import struct
from pathlib import Path

import pytest

from assemblyinfo.keys import (
    KeyResolutionError,
    StrongNameKeySource,
    public_key_from_private_key_blob,
    public_key_info_from_snk,
    public_key_token,
)

from conftest import make_private_key_blob

# The ECMA standard public key and its well-known token
ECMA_KEY = bytes.fromhex("00000000000000000400000000000000")
ECMA_TOKEN = "b77a5c561934e089"

PUBLIC_KEY_PREFIX = (
    "00240000"  # CALG_RSA_SIGN
    "04800000"  # CALG_SHA1
    "94000000"  # blob length (148)
    "0602000000240000"  # PUBLICKEYBLOB, version 2, CALG_RSA_SIGN
    "52534131"  # RSA1
    "00040000"  # 1024 bits
    "01000100"  # exponent 65537
)


class TestPublicKeyToken:
    def test_ecma_key(self):
        assert public_key_token(ECMA_KEY).hex() == ECMA_TOKEN

    def test_is_reversed_sha1_tail(self):
        key = b"\x01\x02\x03"
        digest = hashlib.sha1(key).digest()
        assert public_key_token(key) == bytes(reversed(digest[-8:]))


class TestPrivateKeyBlob:
    def test_public_key_layout(self):
        public_key = public_key_from_private_key_blob(make_private_key_blob())
        assert len(public_key) == 12 + 8 + 12 + 128
        assert public_key.hex().startswith(PUBLIC_KEY_PREFIX)

    def test_modulus_is_copied(self):
        blob = make_private_key_blob()
        public_key = public_key_from_private_key_blob(blob)
        assert public_key[-128:] == blob[20:148]

    def test_too_short(self):
        with pytest.raises(KeyResolutionError):
            public_key_from_private_key_blob(b"\x07\x02")

    def test_truncated_modulus(self):
        with pytest.raises(KeyResolutionError, match="truncated"):
            public_key_from_private_key_blob(make_private_key_blob()[:60])

    def test_wrong_magic(self):
        blob = bytearray(make_private_key_blob())
        struct.pack_into("<I", blob, 8, 0x31415352)
        with pytest.raises(KeyResolutionError, match="not an RSA key"):
            public_key_from_private_key_blob(bytes(blob))

    def test_wrong_version(self):
        blob = bytearray(make_private_key_blob())
        blob[1] = 0x01
        with pytest.raises(KeyResolutionError):
            public_key_from_private_key_blob(bytes(blob))


class TestSnkContents:
    def test_public_key_file(self):
        info = public_key_info_from_snk(ECMA_KEY)
        assert info.public_key == ECMA_KEY.hex()
        assert info.public_key_token == ECMA_TOKEN

    def test_private_key_file(self):
        info = public_key_info_from_snk(make_private_key_blob())
        assert info.public_key.startswith(PUBLIC_KEY_PREFIX)
        expected = public_key_token(bytes.fromhex(info.public_key)).hex()
        assert info.public_key_token == expected
        assert len(info.public_key_token) == 16

    def test_empty(self):
        assert public_key_info_from_snk(b"") is None

    def test_short_public_key(self):
        with pytest.raises(KeyResolutionError):
            public_key_info_from_snk(b"\x00\x24")


class TestStrongNameKeySource:
    def test_reads_snk(self, snk_file: Path):
        info = StrongNameKeySource().resolve_public_key(str(snk_file), None)
        assert info is not None
        assert info.public_key.startswith(PUBLIC_KEY_PREFIX)

    def test_missing_file(self, tmp_path: Path):
        source = StrongNameKeySource()
        assert source.resolve_public_key(str(tmp_path / "nope.snk"), None) is None

    def test_other_extension(self, tmp_path: Path):
        path = tmp_path / "key.pfx"
        path.write_bytes(ECMA_KEY)
        assert StrongNameKeySource().resolve_public_key(str(path), None) is None

    def test_container_only(self):
        assert StrongNameKeySource().resolve_public_key(None, "MyContainer") is None

    def test_nothing_configured(self):
        assert StrongNameKeySource().resolve_public_key(None, None) is None
