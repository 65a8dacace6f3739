# --------------------------------------------------------------
# File: mixer.py
# Description: Mezcla verificable de criptogramas ElGamal.
# --------------------------------------------------------------
"""Capacidad de mezcla: permutación secreta, re-cifrado y prueba de mezcla.

La prueba sigue el esquema de cortar y elegir: por cada ronda el mezclador
publica una mezcla sombra de la entrada; el reto Fiat-Shamir decide si la
sombra se abre frente a la entrada o frente a la salida. Cada apertura por
separado no revela la permutación real, y un mezclador tramposo solo puede
responder a uno de los dos retos de cada ronda.
"""

from __future__ import annotations

import logging
from secrets import SystemRandom
from typing import List, Sequence

from trustee.errors import ParseError
from trustee.group import (
    Ciphertext,
    GroupSettings,
    encode_ciphertext,
    encode_scalar,
    parse_ciphertext,
    parse_scalar,
)

from nmix.elgamal import check_public_key, random_scalar, reencrypt
from nmix.models import ShadowOpeningDTO, ShuffleProofDTO, ShuffleResultDTO
from nmix.proofs import challenge_bits

logger = logging.getLogger(__name__)

SHUFFLE_LABEL = "shuffle"


def _random_permutation(size: int) -> List[int]:
    permutation = list(range(size))
    SystemRandom().shuffle(permutation)
    return permutation


def _statement(
    id: str,
    public_key: int,
    inputs: Sequence[str],
    outputs: Sequence[str],
    shadows: Sequence[Sequence[str]],
):
    return (SHUFFLE_LABEL, id, public_key, list(inputs), list(outputs), [list(s) for s in shadows])


class ElGamalShuffle:
    """Mezclador con prueba de `rounds` rondas (solidez 2^-rounds)."""

    def __init__(self, rounds: int = 40):
        if rounds < 1:
            raise ValueError("rounds debe ser positivo")
        self.rounds = rounds

    def _permute(self, ciphertexts, permutation, randomness, public_key, settings):
        return [
            reencrypt(ciphertexts[source], r, public_key, settings)
            for source, r in zip(permutation, randomness)
        ]

    def shuffle(
        self,
        ciphertexts: Sequence[Ciphertext],
        public_key: int,
        settings: GroupSettings,
        id: str,
    ) -> ShuffleResultDTO:
        """Permuta y re-cifra el lote y construye la prueba de mezcla.

        La salida i es el re-cifrado de la entrada permutation[i].
        """

        check_public_key(public_key, settings)
        size = len(ciphertexts)
        permutation = _random_permutation(size)
        randomness = [random_scalar(settings) for _ in range(size)]
        outputs = self._permute(ciphertexts, permutation, randomness, public_key, settings)

        inverse = [0] * size
        for position, source in enumerate(permutation):
            inverse[source] = position

        rounds = []
        for _ in range(self.rounds):
            shadow_permutation = _random_permutation(size)
            shadow_randomness = [random_scalar(settings) for _ in range(size)]
            shadow = self._permute(
                ciphertexts, shadow_permutation, shadow_randomness, public_key, settings
            )
            rounds.append((shadow_permutation, shadow_randomness, shadow))

        input_strings = [encode_ciphertext(c) for c in ciphertexts]
        output_strings = [encode_ciphertext(c) for c in outputs]
        shadow_strings = [[encode_ciphertext(c) for c in shadow] for _, _, shadow in rounds]
        bits = challenge_bits(
            self.rounds,
            settings,
            _statement(id, public_key, input_strings, output_strings, shadow_strings),
        )

        openings = []
        for bit, (shadow_permutation, shadow_randomness, _) in zip(bits, rounds):
            if bit == 0:
                opening = ShadowOpeningDTO(
                    permutation=shadow_permutation,
                    randomness=[encode_scalar(r) for r in shadow_randomness],
                )
            else:
                # sombra[i] = recifrado(salida[tau[i]], s_i - r_tau[i])
                tau = [inverse[source] for source in shadow_permutation]
                opening = ShadowOpeningDTO(
                    permutation=tau,
                    randomness=[
                        encode_scalar((s - randomness[t]) % settings.q)
                        for s, t in zip(shadow_randomness, tau)
                    ],
                )
            openings.append(opening)

        logger.debug("mezcla de %d criptogramas con %d rondas", size, self.rounds)
        return ShuffleResultDTO(
            votes=output_strings,
            proof=ShuffleProofDTO(shadows=shadow_strings, openings=openings),
        )


def verify_shuffle(
    inputs: Sequence[str],
    result: ShuffleResultDTO,
    public_key: int,
    id: str,
    settings: GroupSettings,
) -> bool:
    """Verifica una mezcla a partir de la entrada, la salida, la clave y la prueba.

    Args:
        inputs (Sequence[str]): Criptogramas de entrada serializados.
        result (ShuffleResultDTO): Salida y prueba del mezclador.
        public_key (int): Clave pública usada en el re-cifrado.
        id (str): Identificador al que está ligada la prueba.
        settings (GroupSettings): Parámetros del grupo.

    Returns:
        bool: True si todas las rondas se abren correctamente.

    """

    proof = result.proof
    size = len(inputs)
    if len(result.votes) != size or len(proof.shadows) != len(proof.openings):
        return False
    if not proof.shadows:
        return False
    try:
        sources = [
            [parse_ciphertext(c, settings) for c in inputs],
            [parse_ciphertext(c, settings) for c in result.votes],
        ]
        shadows = [[parse_ciphertext(c, settings) for c in shadow] for shadow in proof.shadows]
    except ParseError:
        return False

    bits = challenge_bits(
        len(proof.shadows),
        settings,
        _statement(id, public_key, inputs, result.votes, proof.shadows),
    )
    for bit, shadow, opening in zip(bits, shadows, proof.openings):
        if len(shadow) != size or sorted(opening.permutation) != list(range(size)):
            return False
        if len(opening.randomness) != size:
            return False
        try:
            randomness = [parse_scalar(r, settings) for r in opening.randomness]
        except ParseError:
            return False
        source = sources[bit]
        for position, (index, r) in enumerate(zip(opening.permutation, randomness)):
            if reencrypt(source[index], r, public_key, settings) != shadow[position]:
                return False
    return True
