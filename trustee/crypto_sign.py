# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Firmas RSA con codificación canónica compartida.
# --------------------------------------------------------------
"""Firma y verificación RSA del trustee.

Firmante y verificador deben usar exactamente la misma canonicalización:
texto en UTF-8, resumen `signature_hash` del esquema (SHA-256) y la firma
como entero big-endian con la longitud del módulo.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from trustee.config import DEFAULT_SCHEME, CryptoScheme
from trustee.errors import ParseError

Content = Union[bytes, str]


def _canonical(content: Content) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def _signature_bytes(signature: Union[bytes, str], modulus_len: int) -> bytes:
    """Normaliza la firma a la longitud del módulo o lanza ParseError."""

    if isinstance(signature, str):
        try:
            signature = base64.b64decode(signature, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ParseError("la firma no es base64 válido") from exc
    if not signature:
        raise ParseError("firma vacía")
    if len(signature) > modulus_len:
        raise ParseError(
            f"la firma mide {len(signature)} bytes y el módulo {modulus_len}"
        )
    # Entero big-endian: los ceros a la izquierda no cambian su valor.
    return signature.rjust(modulus_len, b"\x00")


def sign(
    content: Content,
    private_key: rsa.RSAPrivateKey,
    scheme: Optional[CryptoScheme] = None,
) -> bytes:
    """Firma un contenido con la clave privada RSA.

    Args:
        content (Content): Bytes o texto (se codifica en UTF-8).
        private_key (rsa.RSAPrivateKey): Clave privada del trustee.
        scheme (Optional[CryptoScheme]): Esquema con el algoritmo de resumen.

    Returns:
        bytes: Firma como entero big-endian de la longitud del módulo.

    """

    scheme = scheme or DEFAULT_SCHEME
    return private_key.sign(
        _canonical(content), padding.PKCS1v15(), scheme.signature_hash_algorithm()
    )


def sign_text(
    content: Content,
    private_key: rsa.RSAPrivateKey,
    scheme: Optional[CryptoScheme] = None,
) -> str:
    """Firma y devuelve la firma codificada en base64."""

    return base64.b64encode(sign(content, private_key, scheme)).decode("ascii")


def verify(
    content: Content,
    signature: Union[bytes, str],
    public_key: rsa.RSAPublicKey,
    scheme: Optional[CryptoScheme] = None,
) -> bool:
    """Comprueba una firma RSA sobre el contenido.

    Args:
        content (Content): Bytes o texto firmado.
        signature (Union[bytes, str]): Firma en bytes o en base64.
        public_key (rsa.RSAPublicKey): Clave pública del firmante.
        scheme (Optional[CryptoScheme]): Esquema con el algoritmo de resumen.

    Returns:
        bool: True solo si la firma es válida para ese contenido y esa clave.

    Raises:
        ParseError: Si la firma no se puede interpretar estructuralmente.

    """

    scheme = scheme or DEFAULT_SCHEME
    modulus_len = (public_key.key_size + 7) // 8
    raw = _signature_bytes(signature, modulus_len)
    try:
        public_key.verify(
            raw, _canonical(content), padding.PKCS1v15(), scheme.signature_hash_algorithm()
        )
    except InvalidSignature:
        return False
    return True
