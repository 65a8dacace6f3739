# --------------------------------------------------------------
# File: keymaker.py
# Description: Creación de participaciones de clave y descifrado parcial.
# --------------------------------------------------------------
"""Coordinadores del trustee generador de claves.

Preparan las entradas serializadas y hacen una única llamada a la
capacidad `KeyGeneration`; el resultado con prueba se devuelve sin tocar.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple

from trustee.batch import parse_ciphertexts
from trustee.group import GroupSettings, parse_scalar

from roles.capabilities import KeyGeneration, delegate

logger = logging.getLogger(__name__)


class KeyShareCoordinator:
    """Crea la participación de clave del trustee."""

    def __init__(self, key_generation: KeyGeneration):
        self.key_generation = key_generation

    def create_key_share(self, id: str, settings: GroupSettings) -> Tuple[Any, str]:
        """Crea una participación de clave.

        Args:
            id (str): Identificador opaco de la sesión y del trustee.
            settings (GroupSettings): Grupo de la elección.

        Returns:
            Tuple[Any, str]: EncryptionKeyShareDTO con la prueba de conocimiento
            y el secreto en codificación canónica. Guardar el secreto (por
            ejemplo con `trustee.crypto_sym.encrypt_string`) es responsabilidad
            del llamante.

        Raises:
            CryptoLibraryError: Si la capacidad rechaza los parámetros.

        """

        logger.info("creando participación de clave para %s", id)
        share_dto, secret = delegate(
            "create_share", self.key_generation.create_share, id, settings
        )
        return share_dto, secret


class PartialDecryptor:
    """Descifra parcialmente un lote con la participación privada."""

    def __init__(self, key_generation: KeyGeneration, max_workers: Optional[int] = None):
        self.key_generation = key_generation
        self.max_workers = max_workers

    def partial_decrypt(
        self,
        id: str,
        ciphertexts: Sequence[str],
        private_share: str,
        settings: GroupSettings,
    ) -> Any:
        """Descifra parcialmente todos los criptogramas del lote.

        Args:
            id (str): Identificador opaco de la sesión y del trustee.
            ciphertexts (Sequence[str]): Criptogramas serializados, en orden.
            private_share (str): Secreto devuelto por `create_key_share`.
            settings (GroupSettings): Grupo con el que se serializaron.

        Returns:
            Any: PartialDecryptionDTO de la capacidad.

        Raises:
            ParseError: Si falla cualquier criptograma o el secreto; en ese
                caso no se llega a descifrar nada.
            CryptoLibraryError: Si la capacidad rechaza el lote.

        """

        logger.debug("convirtiendo %d criptogramas", len(ciphertexts))
        parsed = parse_ciphertexts(ciphertexts, settings, self.max_workers)
        secret = parse_scalar(private_share, settings)

        logger.info("descifrado parcial de %d criptogramas para %s", len(parsed), id)
        result = delegate(
            "partial_decrypt", self.key_generation.partial_decrypt, parsed, secret, id, settings
        )
        logger.info("descifrado parcial completado para %s", id)
        return result
