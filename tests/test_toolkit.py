"""Tests for the cryptographic and network toolkit."""

from __future__ import annotations

import base64
import uuid

import pytest
from cryptography.hazmat.primitives import serialization

from vault.core.errors import (
    CryptoOperationFailed,
    InvalidFormat,
    InvalidInput,
    NoKeyAvailable,
    VaultError,
)
from vault.toolkit import cidr, encoding, hashing, randomness
from vault.toolkit.signing import Signer
from vault.toolkit.symmetric import NONCE_SIZE, SymmetricCipher


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------


class TestHashing:
    def test_sha256_known_vector(self):
        assert hashing.digest("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_sha1_known_vector(self):
        assert hashing.digest("abc", "SHA-1") == "a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_algorithm_name_is_case_insensitive(self):
        assert hashing.digest("abc", "sha-256") == hashing.digest("abc", "SHA-256")

    @pytest.mark.parametrize("algorithm, length", [("SHA-384", 96), ("SHA-512", 128)])
    def test_digest_lengths(self, algorithm, length):
        assert len(hashing.digest("hello", algorithm)) == length

    def test_empty_text_gives_empty_digest(self):
        assert hashing.digest("", "SHA-256") == ""
        assert hashing.digest("", "MD5") == ""

    def test_md5_uses_legacy_hash(self):
        assert hashing.digest("a", "MD5") == "0" * 30 + "61_simplified"
        assert hashing.digest("ab", "MD5") == "0" * 29 + "c21_simplified"

    def test_legacy_hash_of_empty_text(self):
        assert hashing.legacy_hash("") == "0" * 32

    def test_legacy_hash_wraps_to_32_bits(self):
        value = hashing.legacy_hash("a considerably longer input string")
        hex_part = value.removesuffix("_simplified")
        assert len(hex_part) == 32
        assert int(hex_part, 16) <= 2**31

    def test_unsupported_algorithm(self):
        with pytest.raises(InvalidInput, match="Unsupported hash algorithm"):
            hashing.digest("abc", "SHA-3")


# ---------------------------------------------------------------------------
# Symmetric encryption
# ---------------------------------------------------------------------------


@pytest.fixture
def cipher() -> SymmetricCipher:
    return SymmetricCipher(iterations=1_000)


class TestSymmetricCipher:
    def test_round_trip(self, cipher):
        blob = cipher.encrypt("attack at dawn", "hunter2")
        assert cipher.decrypt(blob, "hunter2") == "attack at dawn"

    def test_round_trip_unicode(self, cipher):
        blob = cipher.encrypt("pâté 🔐", "clé")
        assert cipher.decrypt(blob, "clé") == "pâté 🔐"

    def test_blob_layout(self, cipher):
        raw = base64.b64decode(cipher.encrypt("attack at dawn", "hunter2"))
        assert len(raw) == NONCE_SIZE + len("attack at dawn") + 16

    def test_nonce_is_fresh_per_call(self, cipher):
        assert cipher.encrypt("same", "pw") != cipher.encrypt("same", "pw")

    def test_key_derivation_is_deterministic(self, cipher):
        assert cipher.derive_key("pw") == cipher.derive_key("pw")
        assert len(cipher.derive_key("pw")) == 32
        assert cipher.derive_key("pw") != SymmetricCipher(salt="other", iterations=1_000).derive_key("pw")

    def test_wrong_password(self, cipher):
        blob = cipher.encrypt("attack at dawn", "hunter2")
        with pytest.raises(CryptoOperationFailed):
            cipher.decrypt(blob, "hunter3")

    def test_tampered_ciphertext(self, cipher):
        raw = bytearray(base64.b64decode(cipher.encrypt("attack at dawn", "hunter2")))
        raw[-1] ^= 0x01
        with pytest.raises(CryptoOperationFailed):
            cipher.decrypt(base64.b64encode(bytes(raw)).decode(), "hunter2")

    def test_invalid_base64(self, cipher):
        with pytest.raises(InvalidFormat):
            cipher.decrypt("not base64!", "hunter2")

    def test_blob_too_short(self, cipher):
        with pytest.raises(InvalidFormat, match="too short"):
            cipher.decrypt(base64.b64encode(b"short").decode(), "hunter2")

    @pytest.mark.parametrize("plaintext, password", [("", "pw"), ("text", "")])
    def test_encrypt_requires_both_values(self, cipher, plaintext, password):
        with pytest.raises(InvalidInput):
            cipher.encrypt(plaintext, password)

    def test_decrypt_requires_both_values(self, cipher):
        with pytest.raises(InvalidInput):
            cipher.decrypt("", "pw")

    def test_rejects_non_positive_iterations(self):
        with pytest.raises(InvalidInput):
            SymmetricCipher(iterations=0)


# ---------------------------------------------------------------------------
# Signatures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def signer() -> Signer:
    s = Signer()
    s.generate_key_pair()
    return s


class TestSigner:
    def test_sign_without_key(self):
        fresh = Signer()
        assert fresh.has_key is False
        with pytest.raises(NoKeyAvailable, match="Generate keys first"):
            fresh.sign("hello")

    def test_verify_without_key(self):
        with pytest.raises(NoKeyAvailable):
            Signer().verify("hello", "AAAA")

    def test_key_pair_export(self):
        keys = Signer().generate_key_pair()

        public = serialization.load_der_public_key(base64.b64decode(keys.public_key))
        private = serialization.load_der_private_key(
            base64.b64decode(keys.private_key), password=None
        )
        assert keys.key_size == 2048
        assert public.key_size == 2048
        assert private.key_size == 2048

    def test_sign_and_verify(self, signer):
        signature = signer.sign("hello")
        assert signer.verify("hello", signature) is True

    def test_signatures_are_randomised(self, signer):
        assert signer.sign("hello") != signer.sign("hello")

    def test_tampered_message_fails(self, signer):
        signature = signer.sign("hello")
        assert signer.verify("hellO", signature) is False

    def test_signature_from_another_key_fails(self, signer):
        other = Signer()
        other.generate_key_pair()
        assert signer.verify("hello", other.sign("hello")) is False

    def test_malformed_signature(self, signer):
        with pytest.raises(InvalidFormat):
            signer.verify("hello", "%%% not base64 %%%")

    def test_new_key_pair_replaces_old(self):
        s = Signer()
        s.generate_key_pair()
        signature = s.sign("hello")
        s.generate_key_pair()
        assert s.verify("hello", signature) is False


# ---------------------------------------------------------------------------
# Random values
# ---------------------------------------------------------------------------


class TestRandomness:
    def test_password_length_and_charset(self):
        value = randomness.random_password(40)
        assert len(value) == 40
        assert set(value) <= set(randomness.build_charset())

    def test_similar_characters_excluded_by_default(self):
        value = randomness.random_password(500)
        assert not set(value) & set(randomness.SIMILAR_CHARACTERS)

    def test_similar_characters_can_be_included(self):
        charset = randomness.build_charset(exclude_similar=False)
        assert set(randomness.SIMILAR_CHARACTERS) <= set(charset)

    def test_symbols_only(self):
        value = randomness.random_password(
            50, lowercase=False, uppercase=False, numbers=False
        )
        assert set(value) <= set(randomness.SYMBOLS)

    def test_no_character_class(self):
        with pytest.raises(InvalidInput):
            randomness.random_password(
                10, lowercase=False, uppercase=False, numbers=False, symbols=False
            )

    def test_invalid_length(self):
        with pytest.raises(InvalidInput):
            randomness.random_password(0)

    def test_hex(self):
        value = randomness.random_hex(16)
        assert len(value) == 32
        int(value, 16)

    def test_hex_invalid_size(self):
        with pytest.raises(InvalidInput):
            randomness.random_hex(0)

    def test_uuid_is_version_4(self):
        assert uuid.UUID(randomness.random_uuid()).version == 4

    def test_key(self):
        assert len(randomness.random_key()) == 32
        assert len(randomness.random_key(64)) == 64


# ---------------------------------------------------------------------------
# Base64
# ---------------------------------------------------------------------------


class TestEncoding:
    def test_encode(self):
        assert encoding.encode_base64("hello") == "aGVsbG8="

    def test_round_trip_unicode(self):
        assert encoding.decode_base64(encoding.encode_base64("héllo wörld")) == "héllo wörld"

    def test_decode_ignores_surrounding_whitespace(self):
        assert encoding.decode_base64("  aGVsbG8=\n") == "hello"

    @pytest.mark.parametrize("data", ["not base64!", "aGVsbG8", "/w=="])
    def test_decode_invalid(self, data):
        with pytest.raises(InvalidFormat, match="Base64 decoding failed"):
            encoding.decode_base64(data)


# ---------------------------------------------------------------------------
# CIDR
# ---------------------------------------------------------------------------


class TestCidr:
    def test_class_c_network(self):
        info = cidr.calculate("192.168.1.0/24")

        assert info.prefix == 24
        assert info.network_address == "192.168.1.0"
        assert info.broadcast_address == "192.168.1.255"
        assert info.subnet_mask == "255.255.255.0"
        assert info.host_count == 254
        assert info.usable_range == "192.168.1.1 - 192.168.1.254"

    def test_host_bits_are_masked(self):
        info = cidr.calculate("10.1.2.3/8")

        assert info.cidr == "10.1.2.3/8"
        assert info.network_address == "10.0.0.0"
        assert info.broadcast_address == "10.255.255.255"
        assert info.host_count == 16_777_214

    def test_single_host(self):
        info = cidr.calculate("192.168.1.77/32")

        assert info.network_address == "192.168.1.77"
        assert info.broadcast_address == "192.168.1.77"
        assert info.subnet_mask == "255.255.255.255"
        assert info.host_count == 0
        assert info.usable_range == "None"

    def test_point_to_point(self):
        info = cidr.calculate("10.0.0.0/31")
        assert info.host_count == 0
        assert info.usable_range == "None"

    def test_whole_address_space(self):
        info = cidr.calculate("0.0.0.0/0")

        assert info.subnet_mask == "0.0.0.0"
        assert info.broadcast_address == "255.255.255.255"
        assert info.host_count == 2**32 - 2

    @pytest.mark.parametrize(
        "notation",
        [
            "192.168.1.0",
            "192.168.1.0/33",
            "192.168.1.0/-1",
            "192.168.1.0/",
            "192.168.1.0/x",
            "192.168.1/24",
            "192.168.1.0.5/24",
            "192.168.1.256/24",
            "a.b.c.d/24",
        ],
    )
    def test_invalid_notation(self, notation):
        with pytest.raises(InvalidFormat):
            cidr.calculate(notation)


def test_every_toolkit_error_is_a_vault_error():
    for exc in (InvalidInput, InvalidFormat, CryptoOperationFailed, NoKeyAvailable):
        assert issubclass(exc, VaultError)


# ---------------------------------------------------------------------------
# Lone surrogates
# ---------------------------------------------------------------------------


class TestLoneSurrogates:
    def test_utf8_bytes_replaces_lone_surrogate(self):
        assert encoding.utf8_bytes("a\ud800b") == "a\ufffdb".encode("utf-8")

    def test_utf8_bytes_joins_surrogate_pair(self):
        assert encoding.utf8_bytes("\ud83d\ude00") == "\U0001f600".encode("utf-8")

    def test_sha_digest(self):
        assert hashing.digest("\ud800") == hashing.digest("\ufffd")

    def test_legacy_hash_reads_code_unit(self):
        assert hashing.digest("\ud800", "MD5") == format(0xD800, "032x") + "_simplified"

    def test_encode_base64(self):
        assert encoding.encode_base64("\ud800") == "77+9"

    def test_decode_base64_non_ascii(self):
        with pytest.raises(InvalidFormat):
            encoding.decode_base64("\udcff")

    def test_symmetric_round_trip(self, cipher):
        blob = cipher.encrypt("note\ud800", "pw\udcff")
        assert cipher.decrypt(blob, "pw\ufffd") == "note\ufffd"

    def test_sign_and_verify(self, signer):
        signature = signer.sign("\udcff")
        assert signer.verify("\ufffd", signature) is True
