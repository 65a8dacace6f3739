# --------------------------------------------------------------
# File: node.py
# Description: Nodo trustee compuesto por las capacidades inyectadas.
# --------------------------------------------------------------
"""Composición de los coordinadores sobre una configuración común."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from trustee.config import TrusteeConfig
from trustee.group import GroupSettings

from roles.capabilities import KeyGeneration, Shuffle
from roles.keymaker import KeyShareCoordinator, PartialDecryptor
from roles.mixer import ShuffleCoordinator


class TrusteeNode:
    """Trustee con una capacidad de generación de claves y otra de mezcla.

    No guarda estado entre llamadas: cada operación es independiente y el
    `id` de sesión se pasa sin interpretar.
    """

    def __init__(
        self,
        key_generation: KeyGeneration,
        shuffler: Shuffle,
        config: Optional[TrusteeConfig] = None,
    ):
        self.config = config or TrusteeConfig()
        workers = self.config.max_workers
        self.key_shares = KeyShareCoordinator(key_generation)
        self.decryptor = PartialDecryptor(key_generation, workers)
        self.mixer = ShuffleCoordinator(shuffler, workers)

    def create_key_share(self, id: str, settings: GroupSettings) -> Tuple[Any, str]:
        return self.key_shares.create_key_share(id, settings)

    def partial_decrypt(
        self, id: str, ciphertexts: Sequence[str], private_share: str, settings: GroupSettings
    ) -> Any:
        return self.decryptor.partial_decrypt(id, ciphertexts, private_share, settings)

    def shuffle(
        self, ciphertexts: Sequence[str], public_key: str, id: str, settings: GroupSettings
    ) -> Any:
        return self.mixer.shuffle(ciphertexts, public_key, id, settings)
