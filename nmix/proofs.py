# --------------------------------------------------------------
# File: proofs.py
# Description: Retos Fiat-Shamir y pruebas Σ de logaritmo discreto.
# --------------------------------------------------------------
"""Pruebas Σ no interactivas usadas por la generación de claves y el descifrado."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from cryptography.hazmat.primitives import hashes

from trustee.group import GroupSettings, encode_scalar, parse_element, parse_scalar
from trustee.errors import ParseError

from nmix.elgamal import random_scalar
from nmix.models import SigmaProofDTO


def _flatten(parts: Iterable[object]) -> Iterable[str]:
    for part in parts:
        if isinstance(part, (list, tuple)):
            yield from _flatten(part)
        else:
            yield str(part)


def _digest(algorithm: hashes.HashAlgorithm, parts: Iterable[object]) -> bytes:
    digest = hashes.Hash(algorithm)
    for item in _flatten(parts):
        data = item.encode("utf-8")
        digest.update(len(data).to_bytes(4, "big") + data)
    return digest.finalize()


def challenge(settings: GroupSettings, *parts: object) -> int:
    """Reto en Z_q derivado de la declaración completa (SHA-512)."""

    seed = _digest(hashes.SHA512(), (settings.p, settings.g, parts))
    return int.from_bytes(seed, "big") % settings.q


def challenge_bits(count: int, settings: GroupSettings, *parts: object) -> List[int]:
    """`count` bits de reto derivados por contador a partir de la declaración."""

    seed = _digest(hashes.SHA256(), (settings.p, settings.g, parts))
    bits: List[int] = []
    block = 0
    while len(bits) < count:
        data = _digest(hashes.SHA256(), (seed.hex(), block))
        for byte in data:
            bits.extend((byte >> shift) & 1 for shift in range(8))
        block += 1
    return bits[:count]


def prove_equal_logs(
    secret: int,
    bases: Sequence[int],
    settings: GroupSettings,
    *statement: object,
) -> Tuple[SigmaProofDTO, List[int]]:
    """Prueba que todas las potencias base_i^secret comparten exponente.

    Con una sola base g es una prueba de Schnorr; con g y los alpha de un lote
    es una prueba de Chaum-Pedersen agregada.

    Returns:
        Tuple[SigmaProofDTO, List[int]]: Prueba y compromisos calculados.

    """

    p = settings.p
    w = random_scalar(settings)
    commitments = [pow(base, w, p) for base in bases]
    c = challenge(settings, statement, commitments)
    s = (w + c * secret) % settings.q
    proof = SigmaProofDTO(
        commitments=[str(t) for t in commitments],
        challenge=encode_scalar(c),
        response=encode_scalar(s),
    )
    return proof, commitments


def verify_equal_logs(
    proof: SigmaProofDTO,
    bases: Sequence[int],
    powers: Sequence[int],
    settings: GroupSettings,
    *statement: object,
) -> bool:
    """Comprueba base_i^s == t_i * power_i^c para cada i y el reto recalculado."""

    p = settings.p
    if len(proof.commitments) != len(bases) or len(bases) != len(powers):
        return False
    try:
        c = parse_scalar(proof.challenge, settings)
        s = parse_scalar(proof.response, settings)
        commitments = [parse_element(t, settings, "compromiso") for t in proof.commitments]
    except ParseError:
        return False
    if c != challenge(settings, statement, commitments):
        return False
    return all(
        pow(base, s, p) == t * pow(power, c, p) % p
        for base, power, t in zip(bases, powers, commitments)
    )
