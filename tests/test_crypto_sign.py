# --------------------------------------------------------------
# File: test_crypto_sign.py
# Description: Pruebas para las firmas RSA del trustee.
# --------------------------------------------------------------

import base64

import pytest

from trustee.crypto_sign import sign, sign_text, verify
from trustee.errors import ParseError

CONTENT = "nvotes-test"


def _flip_bit(data: bytes, bit: int) -> bytes:
    """Devuelve una copia de `data` con el bit indicado invertido.

    Args:
        data (bytes): Datos originales.
        bit (int): Índice del bit a invertir.

    Returns:
        bytes: Datos alterados.
    """
    out = bytearray(data)
    out[bit // 8] ^= 1 << (bit % 8)
    return bytes(out)


def test_sign_verify_ok_4096(key_pair):
    """Comprueba la firma de "nvotes-test" con la clave de 4096 bits del fixture.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.

    Returns:
        None: Las aserciones validan longitud y verificación.
    """
    sig = sign(CONTENT, key_pair.private_key)
    assert len(sig) == 512
    assert verify(CONTENT, sig, key_pair.public_key) is True


def test_verify_fails_with_other_key(key_pair, other_public_key):
    """Verifica que otra clave pública no valide la firma.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.
        other_public_key (RSAPublicKey): Clave pública ajena.

    Returns:
        None: La verificación debe devolver False.
    """
    sig = sign(CONTENT, key_pair.private_key)
    assert verify(CONTENT, sig, other_public_key) is False


def test_text_and_utf8_bytes_are_equivalent(key_pair):
    """Comprueba que el texto se firme y verifique como sus bytes UTF-8.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.

    Returns:
        None: Solo la codificación UTF-8 valida la firma.
    """
    text = "voto válido ✓"
    sig = sign(text, key_pair.private_key)
    assert verify(text.encode("utf-8"), sig, key_pair.public_key) is True
    assert verify(text.encode("latin-1", errors="replace"), sig, key_pair.public_key) is False


def test_sign_is_deterministic(key_pair):
    """Verifica que PKCS#1 v1.5 produzca siempre la misma firma.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.

    Returns:
        None: La aserción compara dos firmas del mismo contenido.
    """
    assert sign(b"abc", key_pair.private_key) == sign(b"abc", key_pair.private_key)


@pytest.mark.parametrize("bit", [0, 7, 40, 87])
def test_verify_fails_if_content_bit_flipped(key_pair, bit):
    """Comprueba que alterar un bit del mensaje invalide la firma.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.
        bit (int): Bit del mensaje a invertir.

    Returns:
        None: La verificación debe devolver False.
    """
    data = CONTENT.encode("utf-8")
    sig = sign(data, key_pair.private_key)
    assert verify(_flip_bit(data, bit), sig, key_pair.public_key) is False


def test_verify_fails_if_any_signature_byte_flipped(key_pair):
    """Invierte un bit en cada byte de la firma sin que valide ni lance errores.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.

    Returns:
        None: Cada verificación debe devolver False.
    """
    sig = sign(CONTENT, key_pair.private_key)
    for index in range(len(sig)):
        for bit in (index * 8, index * 8 + 7):
            assert verify(CONTENT, _flip_bit(sig, bit), key_pair.public_key) is False


def test_verify_truncated_signature_returns_false(key_pair):
    """Verifica que una firma truncada no valide.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.

    Returns:
        None: Ambas verificaciones deben devolver False.
    """
    sig = sign(CONTENT, key_pair.private_key)
    assert verify(CONTENT, sig[:-1], key_pair.public_key) is False
    assert verify(CONTENT, sig[:10], key_pair.public_key) is False


def test_verify_base64_signature(key_pair):
    """Comprueba que la firma en texto sea la firma binaria en base64.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.

    Returns:
        None: Las aserciones decodifican y verifican la firma.
    """
    sig_text = sign_text(CONTENT, key_pair.private_key)
    assert base64.b64decode(sig_text) == sign(CONTENT, key_pair.private_key)
    assert verify(CONTENT, sig_text, key_pair.public_key) is True


@pytest.mark.parametrize("signature", [b"", b"\x01" * 513, "no es base64!"])
def test_verify_unparseable_signature_raises(key_pair, signature):
    """Garantiza que solo una firma ininterpretable produzca ParseError.

    Args:
        key_pair (RSAKeyPair): Par de claves del fixture.
        signature (Union[bytes, str]): Firma vacía, demasiado larga o no base64.

    Returns:
        None: Se espera ParseError.
    """
    with pytest.raises(ParseError):
        verify(CONTENT, signature, key_pair.public_key)
