# --------------------------------------------------------------
# File: config.py
# Description: Configuración inmutable del esquema y del nodo trustee.
# --------------------------------------------------------------
"""Carga la configuración del trustee desde el entorno (y `.env`).

La configuración del esquema se construye una sola vez y se pasa de forma
explícita a cada operación; no hay estado global mutable.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Type

from cryptography.hazmat.primitives import hashes
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trustee.errors import ConfigError

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAMES = ("trustee", "roles", "nmix")

HASH_ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
}


class CryptoScheme(BaseModel):
    """Parámetros fijos compartidos por firmante/verificador y cifrador/descifrador.

    Attributes:
        file_hash (str): Algoritmo del resumen de ficheros y textos.
        signature_hash (str): Algoritmo de resumen usado en las firmas RSA.
        aes_key_bits (int): Longitud de la clave AES.
        block_size (int): Tamaño de bloque para el relleno PKCS.
        iv (bytes): Vector de inicialización fijo del modo CBC.
        random_iv (bool): Si es True se genera un IV por mensaje y se antepone.

    """

    model_config = ConfigDict(frozen=True)

    file_hash: str = "SHA-512"
    signature_hash: str = "SHA-256"
    aes_key_bits: int = 128
    block_size: int = 16
    iv: bytes = bytes(16)
    random_iv: bool = False

    @field_validator("file_hash", "signature_hash")
    @classmethod
    def _known_hash(cls, value: str) -> str:
        if value not in HASH_ALGORITHMS:
            raise ValueError(f"algoritmo de resumen no soportado: {value}")
        return value

    @field_validator("aes_key_bits")
    @classmethod
    def _aes_128(cls, value: int) -> int:
        if value != 128:
            raise ValueError("solo se admite AES de 128 bits")
        return value

    @field_validator("iv")
    @classmethod
    def _iv_length(cls, value: bytes) -> bytes:
        if len(value) != 16:
            raise ValueError("el IV debe tener 16 bytes")
        return value

    @property
    def aes_key_bytes(self) -> int:
        return self.aes_key_bits // 8

    def file_hash_algorithm(self) -> hashes.HashAlgorithm:
        return HASH_ALGORITHMS[self.file_hash]()

    def signature_hash_algorithm(self) -> hashes.HashAlgorithm:
        return HASH_ALGORITHMS[self.signature_hash]()


DEFAULT_SCHEME = CryptoScheme()


class TrusteeConfig(BaseModel):
    """Configuración del nodo: paralelismo, registro y rondas de prueba."""

    model_config = ConfigDict(frozen=True)

    max_workers: int = Field(default_factory=lambda: os.cpu_count() or 1, ge=1)
    log_level: str = "INFO"
    shuffle_rounds: int = Field(default=40, ge=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"nivel de log desconocido: {value}")
        return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} no es un booleano válido: {raw!r}")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} no es un entero válido: {raw!r}") from exc


def load_scheme() -> CryptoScheme:
    """Construye el esquema criptográfico a partir del entorno.

    Returns:
        CryptoScheme: Esquema por defecto con `random_iv` según
        `TRUSTEE_AES_RANDOM_IV`.

    """

    try:
        return CryptoScheme(random_iv=_env_bool("TRUSTEE_AES_RANDOM_IV", False))
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config() -> TrusteeConfig:
    """Construye la configuración del nodo a partir del entorno.

    Returns:
        TrusteeConfig: Configuración validada e inmutable.

    Raises:
        ConfigError: Si alguna variable tiene un valor no válido.

    """

    values = {}
    workers = _env_int("TRUSTEE_MAX_WORKERS")
    if workers is not None:
        values["max_workers"] = workers
    rounds = _env_int("TRUSTEE_SHUFFLE_ROUNDS")
    if rounds is not None:
        values["shuffle_rounds"] = rounds
    level = os.getenv("TRUSTEE_LOG_LEVEL")
    if level:
        values["log_level"] = level
    try:
        return TrusteeConfig(**values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def configure_logging(level: str = "INFO") -> None:
    """Instala un único handler de consola en los loggers del proyecto."""

    formatter = logging.Formatter(LOG_FORMAT)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = []
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
