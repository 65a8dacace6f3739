# --------------------------------------------------------------
# File: __init__.py
# Description: Capacidades ElGamal de referencia (generación, descifrado, mezcla).
# --------------------------------------------------------------
"""Implementación de referencia de las capacidades criptográficas externas.

El trustee las consume como cajas negras a través de los protocolos de
`roles.capabilities`; cualquier otra implementación con la misma firma
puede inyectarse en su lugar.
"""

from nmix.elgamal import (
    MixError,
    combine_public_keys,
    decrypt_with_factors,
    encrypt,
    reencrypt,
)
from nmix.keymaker import ElGamalKeyGeneration, verify_key_share, verify_partial_decryption
from nmix.mixer import ElGamalShuffle, verify_shuffle
from nmix.models import (
    EncryptionKeyShareDTO,
    PartialDecryptionDTO,
    ShadowOpeningDTO,
    ShuffleProofDTO,
    ShuffleResultDTO,
    SigmaProofDTO,
)
from nmix.node import build_node

__all__ = [
    "ElGamalKeyGeneration",
    "ElGamalShuffle",
    "EncryptionKeyShareDTO",
    "MixError",
    "PartialDecryptionDTO",
    "ShadowOpeningDTO",
    "ShuffleProofDTO",
    "ShuffleResultDTO",
    "SigmaProofDTO",
    "build_node",
    "combine_public_keys",
    "decrypt_with_factors",
    "encrypt",
    "reencrypt",
    "verify_key_share",
    "verify_partial_decryption",
    "verify_shuffle",
]
