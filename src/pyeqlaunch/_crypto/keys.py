"""PEM key loading for the signing and encryption steps.

Keys are read from disk on every call; nothing is cached.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from pyeqlaunch.exceptions import KeyLoadError

_logger = logging.getLogger(__name__)

_PKIX_PEM_HEADER = b"-----BEGIN PUBLIC KEY-----"


def _read_key_file(path: str | Path, kind: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise KeyLoadError("read", f"Failed to read {kind} key from file: {path}") from exc


def load_signing_key(path: str | Path) -> rsa.RSAPrivateKey:
    """Load the RSA private key used to sign launch tokens.

    Parameters
    ----------
    path : str or Path
        PEM file containing a PKCS#1 ``RSA PRIVATE KEY`` block.

    Returns
    -------
    RSAPrivateKey
        The parsed key.

    Raises
    ------
    KeyLoadError
        ``op="read"`` if the file cannot be read, ``op="parse"`` if it
        does not hold an unencrypted RSA private key.
    """
    key_data = _read_key_file(path, "signing")
    _logger.debug("Loading signing key from %s", path)
    try:
        private_key = serialization.load_pem_private_key(key_data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyLoadError("parse", f"Failed to parse signing key from PEM: {path}") from exc

    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise KeyLoadError("parse", f"Failed to parse signing key from PEM: {path} is not an RSA private key")
    return private_key


def load_encryption_key(path: str | Path) -> rsa.RSAPublicKey:
    """Load the RSA public key used to encrypt launch tokens.

    Parameters
    ----------
    path : str or Path
        PEM file containing a PKIX ``PUBLIC KEY`` block.

    Returns
    -------
    RSAPublicKey
        The parsed key.

    Raises
    ------
    KeyLoadError
        ``op="read"`` if the file cannot be read, ``op="parse"`` if it does
        not hold a PKIX public key (PKCS#1 ``RSA PUBLIC KEY`` blocks are
        rejected), ``op="cast"`` if the key is not RSA.
    """
    key_data = _read_key_file(path, "encryption")
    _logger.debug("Loading encryption key from %s", path)
    if _PKIX_PEM_HEADER not in key_data:
        raise KeyLoadError("parse", f"Failed to parse encryption key PEM: {path} has no PUBLIC KEY block")
    try:
        public_key = serialization.load_pem_public_key(key_data)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise KeyLoadError("parse", f"Failed to parse encryption key PEM: {path}") from exc

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise KeyLoadError("cast", f"Failed to cast key to RSA public key: {path} holds {type(public_key).__name__}")
    return public_key
