# --------------------------------------------------------------
# File: elgamal.py
# Description: Aritmética ElGamal sobre el subgrupo de orden q de Z_p^*.
# --------------------------------------------------------------
"""ElGamal multiplicativo: cifrado, re-cifrado y combinación de factores.

Cifrado: (alpha, beta) = (g^r, m * y^r) con r aleatorio en Z_q.
Descifrado umbral: m = beta / prod(alpha^x_j) sobre todos los trustees.
"""

from __future__ import annotations

from secrets import randbelow
from typing import Iterable, List, Optional, Sequence

from trustee.group import Ciphertext, GroupSettings, parse_element, parse_public_key
from trustee.errors import ParseError


class MixError(ValueError):
    """La capacidad rechaza una entrada que no es válida en el grupo."""


def random_scalar(settings: GroupSettings) -> int:
    return randbelow(settings.q)


def check_public_key(public_key: int, settings: GroupSettings) -> None:
    if not settings.is_member(public_key) or public_key == 1:
        raise MixError("la clave pública no es un elemento válido del grupo")


def check_secret(secret: int, settings: GroupSettings) -> None:
    if not 0 < secret < settings.q:
        raise MixError("el secreto no pertenece a Z_q^*")


def encrypt(
    public_key: int,
    message: int,
    settings: GroupSettings,
    randomness: Optional[int] = None,
) -> Ciphertext:
    """Cifra un elemento del grupo con la clave pública conjunta.

    Args:
        public_key (int): Clave pública y = g^x.
        message (int): Mensaje, que debe pertenecer al subgrupo.
        settings (GroupSettings): Parámetros del grupo.
        randomness (Optional[int]): r fijo; si se omite se genera.

    Returns:
        Ciphertext: Par (alpha, beta).

    """

    if not settings.is_member(message):
        raise MixError("el mensaje no pertenece al grupo")
    r = random_scalar(settings) if randomness is None else randomness
    return Ciphertext(
        pow(settings.g, r, settings.p),
        message * pow(public_key, r, settings.p) % settings.p,
    )


def reencrypt(
    ciphertext: Ciphertext, randomness: int, public_key: int, settings: GroupSettings
) -> Ciphertext:
    """Multiplica el criptograma por un cifrado de 1 con aleatoriedad `randomness`."""

    p = settings.p
    return Ciphertext(
        ciphertext.alpha * pow(settings.g, randomness, p) % p,
        ciphertext.beta * pow(public_key, randomness, p) % p,
    )


def combine_public_keys(shares: Iterable[str], settings: GroupSettings) -> int:
    """Clave pública conjunta: producto de las contribuciones de los trustees."""

    result = 1
    for share in shares:
        try:
            result = result * parse_public_key(share, settings) % settings.p
        except ParseError as exc:
            raise MixError(str(exc)) from exc
    return result


def decrypt_with_factors(
    ciphertexts: Sequence[Ciphertext],
    factor_lists: Sequence[Sequence[str]],
    settings: GroupSettings,
) -> List[int]:
    """Completa el descifrado con los factores parciales de todos los trustees.

    Args:
        ciphertexts (Sequence[Ciphertext]): Criptogramas en orden.
        factor_lists (Sequence[Sequence[str]]): `partial_decryptions` de cada trustee.
        settings (GroupSettings): Parámetros del grupo.

    Returns:
        List[int]: Elementos en claro en el mismo orden.

    """

    p = settings.p
    plaintexts = []
    for index, ciphertext in enumerate(ciphertexts):
        combined = 1
        for factors in factor_lists:
            if len(factors) != len(ciphertexts):
                raise MixError("número de factores distinto al de criptogramas")
            try:
                factor = parse_element(factors[index], settings, "factor")
            except ParseError as exc:
                raise MixError(str(exc)) from exc
            combined = combined * factor % p
        plaintexts.append(ciphertext.beta * pow(combined, -1, p) % p)
    return plaintexts
