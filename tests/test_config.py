# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la configuración del trustee desde el entorno.
# --------------------------------------------------------------

import logging

import pytest

from trustee.config import (
    DEFAULT_SCHEME,
    CryptoScheme,
    TrusteeConfig,
    configure_logging,
    load_config,
    load_scheme,
)
from trustee.errors import ConfigError


def test_default_scheme():
    """Comprueba los parámetros fijos del esquema por defecto.

    Returns:
        None: Las aserciones validan resúmenes, clave AES e IV.
    """
    assert DEFAULT_SCHEME.file_hash == "SHA-512"
    assert DEFAULT_SCHEME.signature_hash == "SHA-256"
    assert DEFAULT_SCHEME.aes_key_bytes == 16
    assert DEFAULT_SCHEME.iv == bytes(16)
    assert DEFAULT_SCHEME.random_iv is False


def test_load_config_defaults():
    """Verifica los valores por defecto sin variables de entorno.

    Returns:
        None: Las aserciones comprueban cada campo.
    """
    config = load_config()
    assert config.max_workers >= 1
    assert config.shuffle_rounds == 40
    assert config.log_level == "INFO"
    assert load_scheme() == DEFAULT_SCHEME


def test_load_config_from_env(monkeypatch):
    """Comprueba que las variables TRUSTEE_* se apliquen.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para fijar el entorno.

    Returns:
        None: Las aserciones validan los valores leídos.
    """
    monkeypatch.setenv("TRUSTEE_MAX_WORKERS", "3")
    monkeypatch.setenv("TRUSTEE_SHUFFLE_ROUNDS", "16")
    monkeypatch.setenv("TRUSTEE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TRUSTEE_AES_RANDOM_IV", "yes")
    config = load_config()
    assert config.max_workers == 3
    assert config.shuffle_rounds == 16
    assert config.log_level == "DEBUG"
    assert load_scheme().random_iv is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("TRUSTEE_MAX_WORKERS", "muchos"),
        ("TRUSTEE_MAX_WORKERS", "0"),
        ("TRUSTEE_SHUFFLE_ROUNDS", "-1"),
        ("TRUSTEE_LOG_LEVEL", "RUIDOSO"),
    ],
)
def test_load_config_rejects_invalid(monkeypatch, name, value):
    """Verifica que un valor no válido produzca ConfigError.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para fijar el entorno.
        name (str): Variable de entorno.
        value (str): Valor no válido.

    Returns:
        None: Se espera ConfigError.
    """
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        load_config()


def test_load_scheme_rejects_invalid_flag(monkeypatch):
    """Comprueba que TRUSTEE_AES_RANDOM_IV solo admita valores booleanos.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para fijar el entorno.

    Returns:
        None: Se espera ConfigError.
    """
    monkeypatch.setenv("TRUSTEE_AES_RANDOM_IV", "quizas")
    with pytest.raises(ConfigError):
        load_scheme()


def test_scheme_rejects_unknown_hash():
    """Verifica que solo se acepten algoritmos de resumen conocidos.

    Returns:
        None: Se espera un error de validación con MD5.
    """
    with pytest.raises(ValueError):
        CryptoScheme(file_hash="MD5")


def test_config_is_immutable():
    """Comprueba que TrusteeConfig no admita modificaciones.

    Returns:
        None: Se espera un error de validación al asignar.
    """
    config = TrusteeConfig()
    with pytest.raises(ValueError):
        config.max_workers = 2


def test_configure_logging_installs_single_handler():
    """Verifica que reconfigurar el registro no duplique handlers.

    Returns:
        None: Las aserciones comprueban handler y nivel.
    """
    configure_logging("DEBUG")
    configure_logging("WARNING")
    logger = logging.getLogger("roles")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
