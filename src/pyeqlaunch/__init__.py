"""pyeqlaunch - Issue signed and encrypted eQ survey launch tokens."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyeqlaunch")
except PackageNotFoundError:
    __version__ = "0+local"
from pyeqlaunch.claims import extract_eq_id_form_type, generate_claims
from pyeqlaunch.config import LaunchConfig
from pyeqlaunch.exceptions import (
    KeyLoadError,
    LaunchConfigError,
    LaunchCryptoError,
    LaunchError,
    TokenError,
)
from pyeqlaunch.issuer import convert_post_to_token, issue_token
from pyeqlaunch.models import EqClaims, VariantFlags

__all__ = [
    "__version__",
    "EqClaims",
    "KeyLoadError",
    "LaunchConfig",
    "LaunchConfigError",
    "LaunchCryptoError",
    "LaunchError",
    "TokenError",
    "VariantFlags",
    "convert_post_to_token",
    "extract_eq_id_form_type",
    "generate_claims",
    "issue_token",
]
