# --------------------------------------------------------------
# File: test_batch.py
# Description: Pruebas del map paralelo ordenado y del parseo de lotes.
# --------------------------------------------------------------

import time

import pytest

from trustee.batch import ordered_map, parse_ciphertexts
from trustee.errors import ParseError
from trustee.group import Ciphertext, encode_ciphertext


def _slow_identity(value):
    # Los primeros elementos terminan los últimos.
    time.sleep(0.01 * (10 - value))
    return value


def test_ordered_map_preserves_input_order():
    """Comprueba que el resultado siga el orden de entrada y no el de finalización.

    Returns:
        None: La aserción compara con la lista original.
    """
    items = list(range(10))
    assert ordered_map(_slow_identity, items, max_workers=10) == items


def test_ordered_map_serial_and_empty():
    """Verifica el caso serie y el lote vacío.

    Returns:
        None: Las aserciones comparan los resultados esperados.
    """
    assert ordered_map(lambda x: x * 2, [], max_workers=4) == []
    assert ordered_map(lambda x: x * 2, [1, 2, 3], max_workers=1) == [2, 4, 6]


def test_ordered_map_raises_lowest_index_error():
    """Garantiza que se propague el error de menor índice aunque termine el último.

    Returns:
        None: Se espera el ValueError del elemento 1.
    """

    def _fail_on_odd(value):
        time.sleep(0.01 * (10 - value))
        if value % 2:
            raise ValueError(f"fallo {value}")
        return value

    with pytest.raises(ValueError, match="fallo 1"):
        ordered_map(_fail_on_odd, list(range(10)), max_workers=10)


def _batch(settings, size):
    """Genera un lote de criptogramas válidos.

    Args:
        settings (GroupSettings): Grupo de trabajo.
        size (int): Número de criptogramas.

    Returns:
        list[str]: Criptogramas en codificación canónica.
    """
    return [
        encode_ciphertext(
            Ciphertext(pow(settings.g, i + 1, settings.p), pow(settings.g, i + 2, settings.p))
        )
        for i in range(size)
    ]


def test_parse_ciphertexts_in_order(settings):
    """Comprueba que la conversión en paralelo conserve el orden del lote.

    Args:
        settings (GroupSettings): Grupo de trabajo.

    Returns:
        None: La aserción compara con el lote de entrada.
    """
    batch = _batch(settings, 12)
    parsed = parse_ciphertexts(batch, settings, max_workers=4)
    assert [encode_ciphertext(c) for c in parsed] == batch


@pytest.mark.parametrize("bad", ["1|no-es-un-numero", "1|" + "3" * 5000])
def test_parse_ciphertexts_all_or_nothing(settings, bad):
    """Verifica que un único criptograma inválido haga fallar todo el lote.

    Args:
        settings (GroupSettings): Grupo de trabajo.
        bad (str): Criptograma no válido colocado en la posición 3.

    Returns:
        None: Se espera ParseError con la posición del criptograma.
    """
    batch = _batch(settings, 5)
    batch[3] = bad
    with pytest.raises(ParseError, match="criptograma 3"):
        parse_ciphertexts(batch, settings, max_workers=4)
