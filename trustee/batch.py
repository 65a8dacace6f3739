# --------------------------------------------------------------
# File: batch.py
# Description: Conversión paralela y ordenada de lotes de criptogramas.
# --------------------------------------------------------------
"""Map paralelo indexado que conserva el orden de entrada.

Las pruebas de descifrado parcial y de mezcla son posicionales: el
resultado i debe corresponder siempre a la entrada i, con independencia
del orden en que terminen las tareas.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar

from trustee.errors import ParseError
from trustee.group import Ciphertext, GroupSettings, parse_ciphertext

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def ordered_map(
    fn: Callable[[T], R], items: Sequence[T], max_workers: Optional[int] = None
) -> List[R]:
    """Aplica `fn` a cada elemento en paralelo y devuelve los resultados en orden.

    Cada tarea escribe en su posición de una lista predimensionada. Si alguna
    falla se espera al resto y se relanza el error de menor índice, de modo que
    nunca se devuelve un resultado parcial.

    Args:
        fn (Callable[[T], R]): Función independiente por elemento.
        items (Sequence[T]): Entradas ordenadas.
        max_workers (Optional[int]): Hilos máximos; 1 ejecuta en serie.

    Returns:
        List[R]: Resultados en el mismo orden que `items`.

    """

    if not items:
        return []
    if max_workers == 1 or len(items) == 1:
        return [fn(item) for item in items]

    results: List[Optional[R]] = [None] * len(items)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(fn, item) for item in items]
        errors = []
        for index, future in enumerate(futures):
            exc = future.exception()
            if exc is not None:
                errors.append((index, exc))
            else:
                results[index] = future.result()
    if errors:
        index, exc = errors[0]
        logger.debug("fallo en la posición %d de %d", index, len(items))
        raise exc
    return results  # type: ignore[return-value]


def parse_ciphertexts(
    values: Sequence[str], settings: GroupSettings, max_workers: Optional[int] = None
) -> List[Ciphertext]:
    """Convierte un lote de cadenas en criptogramas, todo o nada.

    Raises:
        ParseError: Si alguna cadena no es válida; indica su posición.

    """

    def _parse(item):
        index, value = item
        try:
            return parse_ciphertext(value, settings)
        except ParseError as exc:
            raise ParseError(f"criptograma {index}: {exc}") from exc

    return ordered_map(_parse, list(enumerate(values)), max_workers)
