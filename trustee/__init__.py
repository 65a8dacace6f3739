# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las operaciones criptográficas del trustee.
# --------------------------------------------------------------
"""Inicializa el paquete `trustee` y documenta sus módulos principales."""

__all__ = [
    "batch",
    "config",
    "crypto_hash",
    "crypto_kdf",
    "crypto_sign",
    "crypto_sym",
    "errors",
    "group",
    "keys",
    "models",
]
