# --------------------------------------------------------------
# File: capabilities.py
# Description: Contratos de las capacidades criptográficas externas.
# --------------------------------------------------------------
"""Protocolos que debe cumplir cualquier capacidad inyectada en el trustee."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, Tuple, TypeVar

from trustee.errors import CryptoLibraryError, TrusteeError
from trustee.group import Ciphertext, GroupSettings

R = TypeVar("R")


class KeyGeneration(Protocol):
    """Generación de participaciones y descifrado parcial con prueba."""

    def create_share(self, id: str, settings: GroupSettings) -> Tuple[Any, str]:
        ...

    def partial_decrypt(
        self,
        ciphertexts: Sequence[Ciphertext],
        secret: int,
        id: str,
        settings: GroupSettings,
    ) -> Any:
        ...


class Shuffle(Protocol):
    """Mezcla verificable de un lote de criptogramas."""

    def shuffle(
        self,
        ciphertexts: Sequence[Ciphertext],
        public_key: int,
        settings: GroupSettings,
        id: str,
    ) -> Any:
        ...


def delegate(operation: str, call: Callable[..., R], *args: Any) -> R:
    """Ejecuta la llamada delegada una sola vez, sin reintentos.

    Los rechazos de la capacidad (ValueError o ArithmeticError) se traducen a
    CryptoLibraryError conservando la causa; los errores propios del trustee
    se propagan tal cual.
    """

    try:
        return call(*args)
    except TrusteeError:
        raise
    except (ValueError, ArithmeticError) as exc:
        raise CryptoLibraryError(f"{operation} rechazado por la capacidad: {exc}") from exc
