"""Launcher configuration for pyeqlaunch."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyeqlaunch.exceptions import LaunchConfigError

DEFAULT_SIGNING_KEY_PATH = "jwt-test-keys/sdc-user-authentication-signing-rrm-private-key.pem"
DEFAULT_ENCRYPTION_KEY_PATH = "jwt-test-keys/sdc-user-authentication-encryption-sr-public-key.pem"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class LaunchConfig:
    """Token issuer configuration.

    Parameters
    ----------
    signing_key_path : str
        Path to the PEM file holding the RSA private key used to sign
        the claims (PKCS#1 ``RSA PRIVATE KEY`` block).
    encryption_key_path : str
        Path to the PEM file holding the RSA public key used to encrypt
        the signed token (PKIX ``PUBLIC KEY`` block).
    redact_logs : bool
        Mask the submitted form values and the finished token in DEBUG
        logs.  Off by default, in which case both are logged in full.
    """

    signing_key_path: str = DEFAULT_SIGNING_KEY_PATH
    encryption_key_path: str = DEFAULT_ENCRYPTION_KEY_PATH
    redact_logs: bool = False

    def __post_init__(self) -> None:
        if not self.signing_key_path:
            raise LaunchConfigError("signing_key_path must not be empty")
        if not self.encryption_key_path:
            raise LaunchConfigError("encryption_key_path must not be empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> LaunchConfig:
        """Create configuration from environment variables.

        Reads ``JWT_SIGNING_KEY_PATH``, ``JWT_ENCRYPTION_KEY_PATH`` and
        ``JWT_REDACT_LOGS``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        LaunchConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "JWT_SIGNING_KEY_PATH": "signing_key_path",
            "JWT_ENCRYPTION_KEY_PATH": "encryption_key_path",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "redact_logs" not in overrides:
            config_kwargs["redact_logs"] = _env_bool(env.get("JWT_REDACT_LOGS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
