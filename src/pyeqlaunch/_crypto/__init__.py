"""Key loading, signing and encryption for launch tokens."""

from __future__ import annotations

from pyeqlaunch._crypto.jwe import Encrypter
from pyeqlaunch._crypto.jws import Signer
from pyeqlaunch._crypto.keys import load_encryption_key, load_signing_key

__all__ = [
    "Encrypter",
    "Signer",
    "load_encryption_key",
    "load_signing_key",
]
