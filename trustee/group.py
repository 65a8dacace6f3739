# --------------------------------------------------------------
# File: group.py
# Description: Parámetros del grupo ElGamal y codificación canónica de valores.
# --------------------------------------------------------------
"""GroupSettings y codificación en texto de elementos, escalares y criptogramas.

Los elementos viven en el subgrupo de orden q de Z_p^*, con p = 2q + 1
primo seguro. Toda cadena que cruza la frontera de esta capa usa la
codificación canónica de este módulo:

- elemento o escalar: entero decimal sin signo ni ceros a la izquierda;
- criptograma: "alpha|beta".

Solo se garantiza `parse(encode(x)) == x`; una cadena arbitraria puede
ser rechazada aunque represente el mismo número.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, model_validator

from trustee.errors import ParseError

_CANONICAL_INT = re.compile(r"(0|[1-9][0-9]*)")
CIPHERTEXT_SEPARATOR = "|"

# RFC 3526, grupo MODP de 1536 bits.
RFC3526_1536_P = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
    "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
    "670C354E4ABC9804F1746C08CA237327FFFFFFFFFFFFFFFF",
    16,
)


class GroupSettings(BaseModel):
    """Descripción inmutable del grupo usado en las operaciones ElGamal.

    Attributes:
        p (int): Primo seguro que define Z_p^*.
        q (int): Orden del subgrupo, (p - 1) / 2.
        g (int): Generador del subgrupo de orden q.

    """

    model_config = ConfigDict(frozen=True)

    p: int
    q: int
    g: int

    @model_validator(mode="after")
    def _check_group(self) -> "GroupSettings":
        if self.p != 2 * self.q + 1:
            raise ValueError("p debe ser 2q + 1")
        if not 1 < self.g < self.p or pow(self.g, self.q, self.p) != 1:
            raise ValueError("g no genera el subgrupo de orden q")
        return self

    @classmethod
    def from_safe_prime(cls, p: int) -> "GroupSettings":
        """Usa g = 4, un residuo cuadrático y por tanto de orden q."""

        return cls(p=p, q=(p - 1) // 2, g=4)

    def is_member(self, value: int) -> bool:
        return 0 < value < self.p and pow(value, self.q, self.p) == 1


DEFAULT_GROUP = GroupSettings.from_safe_prime(RFC3526_1536_P)


class Ciphertext(NamedTuple):
    """Par ElGamal (alpha, beta) = (g^r, m * y^r)."""

    alpha: int
    beta: int


def _parse_int(value: Any, settings: GroupSettings, what: str) -> int:
    if not isinstance(value, str) or not _CANONICAL_INT.fullmatch(value):
        raise ParseError(f"{what} no tiene codificación canónica: {value!r:.40}")
    # Ningún valor válido tiene más cifras que p.
    if len(value) > len(str(settings.p)):
        raise ParseError(f"{what} excede el tamaño del grupo ({len(value)} cifras)")
    return int(value)


def encode_element(value: int) -> str:
    return str(value)


def encode_scalar(value: int) -> str:
    return str(value)


def encode_ciphertext(ciphertext: Ciphertext) -> str:
    return f"{ciphertext.alpha}{CIPHERTEXT_SEPARATOR}{ciphertext.beta}"


def parse_element(value: str, settings: GroupSettings, what: str = "elemento") -> int:
    """Interpreta un elemento del subgrupo de orden q.

    Raises:
        ParseError: Si la cadena no es canónica o el valor no pertenece al grupo.

    """

    element = _parse_int(value, settings, what)
    if not settings.is_member(element):
        raise ParseError(f"{what} no pertenece al grupo")
    return element


def parse_public_key(value: str, settings: GroupSettings) -> int:
    return parse_element(value, settings, "clave pública")


def parse_scalar(value: str, settings: GroupSettings) -> int:
    """Interpreta un escalar de Z_q (por ejemplo una participación privada)."""

    scalar = _parse_int(value, settings, "escalar")
    if scalar >= settings.q:
        raise ParseError("escalar fuera de Z_q")
    return scalar


def parse_ciphertext(value: str, settings: GroupSettings) -> Ciphertext:
    """Interpreta un criptograma "alpha|beta".

    Raises:
        ParseError: Si falta el separador o algún componente no es válido.

    """

    if not isinstance(value, str):
        raise ParseError("el criptograma debe ser una cadena")
    parts = value.split(CIPHERTEXT_SEPARATOR)
    if len(parts) != 2:
        raise ParseError(f"criptograma mal formado: {value!r:.40}")
    alpha = parse_element(parts[0], settings, "alpha")
    beta = parse_element(parts[1], settings, "beta")
    return Ciphertext(alpha, beta)
