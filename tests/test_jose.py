"""Tests for the JWS signer and JWE encrypter building blocks."""

from __future__ import annotations

import json

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from jose import jwe
from jose.exceptions import JWEError
from jwt.utils import base64url_decode

from pyeqlaunch._crypto.jwe import Encrypter
from pyeqlaunch._crypto.jws import Signer
from pyeqlaunch.exceptions import LaunchCryptoError


def _pem(key: rsa.RSAPrivateKey) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


class TestSigner:
    def test_sign_produces_verifiable_jws(self, signing_private_key: rsa.RSAPrivateKey) -> None:
        token = Signer(signing_private_key).sign({"user_id": "u1", "exp": 9999999999})
        assert token.count(".") == 2

        claims = jwt.decode(token, signing_private_key.public_key(), algorithms=["RS256"])
        assert claims["user_id"] == "u1"

    def test_headers(self, signing_private_key: rsa.RSAPrivateKey) -> None:
        token = Signer(signing_private_key).sign({"user_id": "u1"})
        assert jwt.get_unverified_header(token) == {"alg": "RS256", "kid": "EDCRRM", "typ": "JWT"}

    def test_custom_key_id(self, signing_private_key: rsa.RSAPrivateKey) -> None:
        token = Signer(signing_private_key, key_id="other").sign({})
        assert jwt.get_unverified_header(token)["kid"] == "other"

    def test_rejects_non_rsa_key(self, ec_private_key: ec.EllipticCurvePrivateKey) -> None:
        with pytest.raises(LaunchCryptoError, match="RSA private key"):
            Signer(ec_private_key)  # type: ignore[arg-type]

    def test_rejects_unknown_algorithm(self, signing_private_key: rsa.RSAPrivateKey) -> None:
        with pytest.raises(LaunchCryptoError, match="Unsupported signing algorithm"):
            Signer(signing_private_key, algorithm="RS999")

    def test_unserialisable_claims_raise_crypto_error(self, signing_private_key: rsa.RSAPrivateKey) -> None:
        with pytest.raises(LaunchCryptoError, match="JWS signing failed"):
            Signer(signing_private_key).sign({"bad": object()})


class TestEncrypter:
    def test_encrypt_decrypts_with_private_key(self, encryption_private_key: rsa.RSAPrivateKey) -> None:
        token = Encrypter(encryption_private_key.public_key()).encrypt("inner.jwt.value")
        assert token.count(".") == 4
        assert jwe.decrypt(token, _pem(encryption_private_key)) == b"inner.jwt.value"

    def test_headers(self, encryption_private_key: rsa.RSAPrivateKey) -> None:
        token = Encrypter(encryption_private_key.public_key()).encrypt(b"payload")
        header = jwe.get_unverified_header(token)
        assert header == {"alg": "RSA-OAEP", "enc": "A256GCM", "typ": "JWT", "cty": "JWT"}

    def test_header_can_omit_types(self, encryption_private_key: rsa.RSAPrivateKey) -> None:
        encrypter = Encrypter(encryption_private_key.public_key(), content_type=None, token_type=None)
        assert encrypter.header == {"alg": "RSA-OAEP", "enc": "A256GCM"}

    def test_fresh_key_and_iv_per_call(self, encryption_private_key: rsa.RSAPrivateKey) -> None:
        encrypter = Encrypter(encryption_private_key.public_key())
        first = encrypter.encrypt("same").split(".")
        second = encrypter.encrypt("same").split(".")
        assert first[0] == second[0]
        assert first[1] != second[1]
        assert first[2] != second[2]

    def test_tampered_ciphertext_fails_to_decrypt(self, encryption_private_key: rsa.RSAPrivateKey) -> None:
        parts = Encrypter(encryption_private_key.public_key()).encrypt("payload " * 8).split(".")
        parts[3] = parts[3][::-1]
        with pytest.raises(JWEError):
            jwe.decrypt(".".join(parts), _pem(encryption_private_key))

    def test_protected_header_is_compact_json(self, encryption_private_key: rsa.RSAPrivateKey) -> None:
        token = Encrypter(encryption_private_key.public_key()).encrypt("payload")
        raw = base64url_decode(token.split(".")[0])
        assert json.loads(raw) == {"alg": "RSA-OAEP", "cty": "JWT", "enc": "A256GCM", "typ": "JWT"}
        assert b" " not in raw

    def test_rejects_private_key(self, encryption_private_key: rsa.RSAPrivateKey) -> None:
        with pytest.raises(LaunchCryptoError, match="RSA public key"):
            Encrypter(encryption_private_key)  # type: ignore[arg-type]
