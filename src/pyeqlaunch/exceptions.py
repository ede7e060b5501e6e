"""Custom exception hierarchy for pyeqlaunch."""

from __future__ import annotations


class LaunchError(Exception):
    """Base exception for all pyeqlaunch errors."""


class LaunchConfigError(LaunchError):
    """Invalid or missing configuration."""


class LaunchCryptoError(LaunchError):
    """Signing or encryption failure."""


class KeyLoadError(LaunchError):
    """A signing or encryption key could not be loaded.

    ``op`` names the failing step: ``"read"`` when the key file could not
    be read, ``"parse"`` when its PEM/DER content is not a key of the
    expected structure, and ``"cast"`` when a public key parsed fine but
    uses an algorithm other than RSA.
    """

    def __init__(self, op: str, err: str) -> None:
        self.op = op
        self.err = err
        super().__init__(f"{op}: {err}")


class TokenError(LaunchError):
    """Token generation failed.

    ``from_`` is the lower-level error that caused this one, if any. It is
    also set as ``__cause__`` when raised with ``raise ... from``.
    """

    def __init__(self, desc: str, *, from_: BaseException | None = None) -> None:
        self.desc = desc
        self.from_ = from_
        message = desc if from_ is None else f"{desc} ({from_})"
        super().__init__(message)
