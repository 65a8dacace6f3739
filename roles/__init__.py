# --------------------------------------------------------------
# File: __init__.py
# Description: Coordinadores del trustee sobre las capacidades inyectadas.
# --------------------------------------------------------------
"""Inicializa el paquete `roles` con los coordinadores del trustee."""

from roles.capabilities import KeyGeneration, Shuffle
from roles.keymaker import KeyShareCoordinator, PartialDecryptor
from roles.mixer import ShuffleCoordinator
from roles.node import TrusteeNode

__all__ = [
    "KeyGeneration",
    "KeyShareCoordinator",
    "PartialDecryptor",
    "Shuffle",
    "ShuffleCoordinator",
    "TrusteeNode",
]
