"""RS256 compact JWS signing."""

from __future__ import annotations

from typing import Any

import jwt
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import get_default_algorithms

from pyeqlaunch._constants import SIGNING_ALGORITHM, SIGNING_KEY_ID, TOKEN_TYPE
from pyeqlaunch.exceptions import LaunchCryptoError


class Signer:
    """Sign claim sets into compact JWS strings.

    Parameters
    ----------
    key : RSAPrivateKey
        Signing key.
    algorithm : str
        JWS ``alg``. Only RSA algorithms are meaningful here.
    key_id : str
        Value of the ``kid`` header.
    """

    def __init__(
        self,
        key: rsa.RSAPrivateKey,
        *,
        algorithm: str = SIGNING_ALGORITHM,
        key_id: str = SIGNING_KEY_ID,
    ) -> None:
        alg = get_default_algorithms().get(algorithm)
        if alg is None:
            raise LaunchCryptoError(f"Unsupported signing algorithm: {algorithm}")
        if not isinstance(key, rsa.RSAPrivateKey):
            raise LaunchCryptoError(f"Signing key must be an RSA private key, got {type(key).__name__}")
        try:
            self._key = alg.prepare_key(key)
        except Exception as exc:
            raise LaunchCryptoError(f"Signing key rejected for {algorithm}: {exc}") from exc
        self._algorithm = algorithm
        self.headers: dict[str, str] = {"typ": TOKEN_TYPE, "kid": key_id}

    def sign(self, claims: dict[str, Any]) -> str:
        """Return *claims* as a compact JWS (``header.payload.signature``).

        Raises
        ------
        LaunchCryptoError
            If signing fails.
        """
        try:
            return jwt.encode(claims, self._key, algorithm=self._algorithm, headers=self.headers)
        except Exception as exc:
            raise LaunchCryptoError(f"JWS signing failed: {exc}") from exc
