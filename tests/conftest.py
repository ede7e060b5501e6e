"""Shared fixtures: throwaway key pairs written as PEM files."""

from __future__ import annotations

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from pyeqlaunch.config import LaunchConfig


def _private_pem(key: rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


def _public_pem(key: rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey) -> bytes:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture(scope="session")
def signing_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def encryption_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def key_dir(
    tmp_path_factory: pytest.TempPathFactory,
    signing_private_key: rsa.RSAPrivateKey,
    encryption_private_key: rsa.RSAPrivateKey,
    ec_private_key: ec.EllipticCurvePrivateKey,
) -> Path:
    directory = tmp_path_factory.mktemp("jwt-test-keys")
    (directory / "signing-private.pem").write_bytes(_private_pem(signing_private_key))
    (directory / "signing-public.pem").write_bytes(_public_pem(signing_private_key))
    (directory / "encryption-private.pem").write_bytes(_private_pem(encryption_private_key))
    (directory / "encryption-public.pem").write_bytes(_public_pem(encryption_private_key))
    (directory / "encryption-public-pkcs1.pem").write_bytes(
        encryption_private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.PKCS1,
        )
    )
    (directory / "ec-private.pem").write_bytes(_private_pem(ec_private_key))
    (directory / "ec-public.pem").write_bytes(_public_pem(ec_private_key))
    (directory / "garbage.pem").write_bytes(b"-----BEGIN PUBLIC KEY-----\nbm90IGEga2V5\n-----END PUBLIC KEY-----\n")
    (directory / "not-pem.txt").write_bytes(b"hello")
    return directory


@pytest.fixture
def launch_config(key_dir: Path) -> LaunchConfig:
    return LaunchConfig(
        signing_key_path=str(key_dir / "signing-private.pem"),
        encryption_key_path=str(key_dir / "encryption-public.pem"),
    )
