# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado AES-128-CBC del material privado del trustee.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para proteger las participaciones privadas.

El esquema es AES-128 en modo CBC con relleno PKCS#7 a 16 bytes y un IV
fijo, de modo que el cifrado es determinista. Con `random_iv=True` en el
esquema se genera un IV por mensaje y se antepone al criptograma.
"""

from __future__ import annotations

import base64
import binascii
import os
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from trustee.config import DEFAULT_SCHEME, CryptoScheme
from trustee.errors import PaddingError, ParseError
from trustee.models import AESKey


def pad(data: bytes, block_size: int = 16) -> bytes:
    """Aplica relleno PKCS#7 hasta un múltiplo de `block_size`."""

    padder = padding.PKCS7(block_size * 8).padder()
    return padder.update(data) + padder.finalize()


def unpad(data: bytes, block_size: int = 16) -> bytes:
    """Retira el relleno PKCS#7.

    Raises:
        PaddingError: Si el relleno no es estructuralmente válido (clave
            incorrecta o criptograma corrupto).

    """

    if not data or len(data) % block_size:
        raise PaddingError("longitud de bloque inválida")
    unpadder = padding.PKCS7(block_size * 8).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as exc:
        raise PaddingError("relleno inválido") from exc


def _cipher(key: AESKey, iv: bytes) -> Cipher:
    return Cipher(algorithms.AES(key.material), modes.CBC(iv))


def encrypt(content: bytes, key: AESKey, scheme: Optional[CryptoScheme] = None) -> bytes:
    """Cifra bytes con AES-128-CBC.

    Args:
        content (bytes): Datos en claro.
        key (AESKey): Clave de 128 bits.
        scheme (Optional[CryptoScheme]): Parámetros de bloque e IV.

    Returns:
        bytes: Criptograma (precedido del IV si el esquema usa IV aleatorio).

    """

    scheme = scheme or DEFAULT_SCHEME
    iv = os.urandom(scheme.block_size) if scheme.random_iv else scheme.iv
    encryptor = _cipher(key, iv).encryptor()
    ciphertext = encryptor.update(pad(content, scheme.block_size)) + encryptor.finalize()
    if scheme.random_iv:
        return iv + ciphertext
    return ciphertext


def decrypt(ciphertext: bytes, key: AESKey, scheme: Optional[CryptoScheme] = None) -> bytes:
    """Descifra un criptograma producido por `encrypt` con el mismo esquema.

    Raises:
        PaddingError: Si la longitud o el relleno no son válidos.

    """

    scheme = scheme or DEFAULT_SCHEME
    iv = scheme.iv
    if scheme.random_iv:
        iv, ciphertext = ciphertext[: scheme.block_size], ciphertext[scheme.block_size :]
    if not ciphertext or len(ciphertext) % scheme.block_size:
        raise PaddingError("el criptograma no es múltiplo del tamaño de bloque")
    decryptor = _cipher(key, iv).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    return unpad(padded, scheme.block_size)


def encrypt_string(content: str, key: AESKey, scheme: Optional[CryptoScheme] = None) -> str:
    """Cifra un texto UTF-8 y devuelve el criptograma en base64."""

    ciphertext = encrypt(content.encode("utf-8"), key, scheme)
    return base64.b64encode(ciphertext).decode("ascii")


def decrypt_string(content: str, key: AESKey, scheme: Optional[CryptoScheme] = None) -> str:
    """Descifra un criptograma base64 y devuelve el texto UTF-8."""

    try:
        ciphertext = base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ParseError("el criptograma no es base64 válido") from exc
    plaintext = decrypt(ciphertext, key, scheme)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PaddingError("el texto descifrado no es UTF-8") from exc


def random_key() -> AESKey:
    """Genera una clave AES de 128 bits con una fuente aleatoria segura."""

    return AESKey(material=os.urandom(DEFAULT_SCHEME.aes_key_bytes))


def random_key_string() -> str:
    return random_key().to_string()
