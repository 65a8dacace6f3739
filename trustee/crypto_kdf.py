# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves AES a partir de una passphrase con Argon2id.
# --------------------------------------------------------------
"""Derivación de la clave que protege en reposo la participación privada."""

import os

from argon2.low_level import Type, hash_secret_raw

from trustee.models import AES_KEY_BYTES, AESKey

SALT_BYTES = 16


def new_salt() -> bytes:
    return os.urandom(SALT_BYTES)


def derive_aes_key(
    passphrase: str,
    salt: bytes,
    *,
    t: int = 3,
    m: int = 64 * 1024,
    p: int = 1,
) -> AESKey:
    """Deriva una clave AES de 128 bits usando Argon2id.

    Args:
        passphrase (str): Passphrase del operador del trustee.
        salt (bytes): Salt aleatoria asociada a la passphrase.
        t (int): Coste temporal en iteraciones Argon2id.
        m (int): Memoria en KiB consumida durante la derivación.
        p (int): Paralelismo configurado para Argon2id.

    Returns:
        AESKey: Clave utilizable con `trustee.crypto_sym`.

    """

    material = hash_secret_raw(
        passphrase.encode("utf-8"),
        salt,
        time_cost=t,
        memory_cost=m,
        parallelism=p,
        hash_len=AES_KEY_BYTES,
        type=Type.ID,
    )
    return AESKey(material=material)
