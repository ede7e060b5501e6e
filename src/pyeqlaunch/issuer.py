"""Convert submitted launch forms into signed and encrypted JWTs.

The token is a JWS (RS256) nested inside a JWE (RSA-OAEP / A256GCM):

    load keys -> build signer -> build encrypter -> sign -> encrypt

Any failing stage raises :class:`TokenError` immediately. Keys are read
from disk on every call so nothing is shared between concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pyeqlaunch._crypto.jwe import Encrypter
from pyeqlaunch._crypto.jws import Signer
from pyeqlaunch._crypto.keys import load_encryption_key, load_signing_key
from pyeqlaunch._redact import redact_token
from pyeqlaunch.claims import generate_claims
from pyeqlaunch.config import LaunchConfig
from pyeqlaunch.exceptions import KeyLoadError, LaunchCryptoError, TokenError
from pyeqlaunch.models.claims import EqClaims

_logger = logging.getLogger(__name__)


def issue_token(claims: EqClaims, config: LaunchConfig) -> str:
    """Sign and encrypt *claims*, returning the compact JWE string.

    Raises
    ------
    TokenError
        If a key cannot be loaded, the signer or encrypter cannot be
        built, or signing/encryption fails. The underlying error is
        available as ``from_`` and ``__cause__``.
    """
    try:
        signing_key = load_signing_key(config.signing_key_path)
    except KeyLoadError as exc:
        raise TokenError("Error loading signing key", from_=exc) from exc

    try:
        encryption_key = load_encryption_key(config.encryption_key_path)
    except KeyLoadError as exc:
        raise TokenError("Error loading encryption key", from_=exc) from exc

    try:
        signer = Signer(signing_key)
    except LaunchCryptoError as exc:
        raise TokenError("Error creating JWT signer", from_=exc) from exc

    try:
        encrypter = Encrypter(encryption_key)
    except LaunchCryptoError as exc:
        raise TokenError("Error creating JWT encrypter", from_=exc) from exc

    try:
        token = encrypter.encrypt(signer.sign(claims.to_payload()))
    except LaunchCryptoError as exc:
        raise TokenError("Error signing and encrypting JWT", from_=exc) from exc

    _logger.debug("Created signed/encrypted JWT: %s", redact_token(token) if config.redact_logs else token)
    return token


def convert_post_to_token(form: Mapping[str, Any], config: LaunchConfig | None = None) -> str:
    """Convert a set of submitted launch form values into a JWT.

    Parameters
    ----------
    form : Mapping
        Parsed form fields (``schema``, ``user_id``, ``ru_ref``, ...).
        Missing fields produce empty claims rather than errors.
    config : LaunchConfig or None
        Key locations. Defaults to :meth:`LaunchConfig.from_env`.

    Returns
    -------
    str
        Five-segment compact JWE whose payload is the signed JWT.

    Raises
    ------
    TokenError
        See :func:`issue_token`.
    """
    if config is None:
        config = LaunchConfig.from_env()
    claims = generate_claims(form, redact_logs=config.redact_logs)
    return issue_token(claims, config)
