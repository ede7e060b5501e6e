"""Compact JWE encryption with RSA-OAEP key wrapping and AES-256-GCM.

Implements the RFC 7516 compact serialization for a single recipient:

    BASE64URL(header) . BASE64URL(encrypted CEK) . BASE64URL(IV)
        . BASE64URL(ciphertext) . BASE64URL(tag)

The protected header is sent as the GCM additional authenticated data.
"""

from __future__ import annotations

import json
import secrets

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from jwt.utils import base64url_encode

from pyeqlaunch._constants import CONTENT_ENCRYPTION_ALGORITHM, KEY_ENCRYPTION_ALGORITHM, TOKEN_TYPE
from pyeqlaunch.exceptions import LaunchCryptoError

_CEK_BYTES = 32  # A256GCM
_IV_BYTES = 12  # 96-bit GCM nonce
_TAG_BYTES = 16

# RSA-OAEP in JOSE means OAEP with SHA-1 and MGF1-SHA-1 (RFC 7518 4.3).
_OAEP = padding.OAEP(mgf=padding.MGF1(algorithm=hashes.SHA1()), algorithm=hashes.SHA1(), label=None)


def _b64(data: bytes) -> str:
    return base64url_encode(data).decode("ascii")


class Encrypter:
    """Encrypt payloads into compact JWE strings for one RSA recipient.

    Parameters
    ----------
    key : RSAPublicKey
        Recipient key used to wrap the content encryption key.
    content_type : str or None
        ``cty`` header. ``"JWT"`` marks a nested (signed) JWT payload.
    token_type : str or None
        ``typ`` header.
    """

    def __init__(
        self,
        key: rsa.RSAPublicKey,
        *,
        content_type: str | None = TOKEN_TYPE,
        token_type: str | None = TOKEN_TYPE,
    ) -> None:
        if not isinstance(key, rsa.RSAPublicKey):
            raise LaunchCryptoError(f"Encryption key must be an RSA public key, got {type(key).__name__}")
        self._key = key

        header = {"alg": KEY_ENCRYPTION_ALGORITHM, "enc": CONTENT_ENCRYPTION_ALGORITHM}
        if content_type:
            header["cty"] = content_type
        if token_type:
            header["typ"] = token_type
        self.header = header
        self._protected = _b64(json.dumps(header, separators=(",", ":"), sort_keys=True).encode("utf-8"))

    def encrypt(self, plaintext: str | bytes) -> str:
        """Encrypt *plaintext* and return the compact serialization.

        A fresh content encryption key and IV are generated per call.

        Raises
        ------
        LaunchCryptoError
            If key wrapping or content encryption fails.
        """
        plain_bytes = plaintext.encode("utf-8") if isinstance(plaintext, str) else plaintext
        cek = secrets.token_bytes(_CEK_BYTES)
        iv = secrets.token_bytes(_IV_BYTES)
        try:
            encrypted_key = self._key.encrypt(cek, _OAEP)
            sealed = AESGCM(cek).encrypt(iv, plain_bytes, self._protected.encode("ascii"))
        except Exception as exc:
            raise LaunchCryptoError(f"JWE encryption failed: {exc}") from exc

        ciphertext, tag = sealed[:-_TAG_BYTES], sealed[-_TAG_BYTES:]
        return ".".join((self._protected, _b64(encrypted_key), _b64(iv), _b64(ciphertext), _b64(tag)))
