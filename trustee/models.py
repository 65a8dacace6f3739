# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan el material de clave del trustee."""

from __future__ import annotations

import base64
import binascii

from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel, ConfigDict, Field, field_validator

from trustee.errors import KeyFormatError

AES_KEY_BYTES = 16


class AESKey(BaseModel):
    """Clave AES de 128 bits, opaca y solo utilizable con el esquema fijo.

    Attributes:
        material (bytes): Los 16 bytes de la clave.

    """

    model_config = ConfigDict(frozen=True)

    material: bytes = Field(repr=False)

    @field_validator("material")
    @classmethod
    def _check_length(cls, value: bytes) -> bytes:
        if len(value) != AES_KEY_BYTES:
            raise ValueError(f"la clave AES debe tener {AES_KEY_BYTES} bytes")
        return value

    def to_string(self) -> str:
        """Codificación en texto usada en los ficheros de clave (base64)."""

        return base64.b64encode(self.material).decode("ascii")

    @classmethod
    def from_string(cls, value: str) -> "AESKey":
        """Reconstruye la clave desde su codificación en texto.

        Args:
            value (str): Clave codificada en base64.

        Returns:
            AESKey: Clave reconstruida.

        Raises:
            KeyFormatError: Si el texto no es base64 o no mide 128 bits.

        """

        try:
            material = base64.b64decode(value.strip(), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise KeyFormatError("la clave AES no es base64 válido") from exc
        if len(material) != AES_KEY_BYTES:
            raise KeyFormatError(
                f"la clave AES mide {len(material) * 8} bits, se esperaban 128"
            )
        return cls(material=material)


class RSAKeyPair(BaseModel):
    """Par de claves RSA cargado desde PEM.

    El módulo de la clave privada y el de la pública coinciden siempre;
    `trustee.keys.load_key_pair` lo comprueba al construirlo.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    private_key: rsa.RSAPrivateKey = Field(repr=False)
    public_key: rsa.RSAPublicKey

    @property
    def modulus(self) -> int:
        return self.public_key.public_numbers().n

    @property
    def public_exponent(self) -> int:
        return self.public_key.public_numbers().e

    @property
    def private_exponent(self) -> int:
        return self.private_key.private_numbers().d
