# --------------------------------------------------------------
# File: mixer.py
# Description: Mezcla de votos cifrados por el trustee mezclador.
# --------------------------------------------------------------
"""Coordinador del trustee mezclador."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from trustee.batch import parse_ciphertexts
from trustee.group import GroupSettings, parse_public_key

from roles.capabilities import Shuffle, delegate

logger = logging.getLogger(__name__)


class ShuffleCoordinator:
    """Convierte el lote y la clave pública y delega la mezcla."""

    def __init__(self, shuffler: Shuffle, max_workers: Optional[int] = None):
        self.shuffler = shuffler
        self.max_workers = max_workers

    def shuffle(
        self,
        ciphertexts: Sequence[str],
        public_key: str,
        id: str,
        settings: GroupSettings,
    ) -> Any:
        """Mezcla los criptogramas.

        La salida tiene la misma longitud que la entrada pero otro orden y
        otros bytes; su corrección la certifica la prueba del ShuffleResultDTO.

        Raises:
            ParseError: Si la clave pública o cualquier criptograma no es válido.
            CryptoLibraryError: Si la capacidad rechaza la entrada.

        """

        logger.info("mezcla de %d votos para %s", len(ciphertexts), id)
        key = parse_public_key(public_key, settings)
        parsed = parse_ciphertexts(ciphertexts, settings, self.max_workers)

        result = delegate("shuffle", self.shuffler.shuffle, parsed, key, settings, id)
        logger.info("mezcla completada para %s", id)
        return result
