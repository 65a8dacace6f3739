# --------------------------------------------------------------
# File: keymaker.py
# Description: Generación de participaciones de clave y descifrado parcial con prueba.
# --------------------------------------------------------------
"""Capacidad de generación de claves ElGamal distribuida."""

from __future__ import annotations

from typing import Sequence, Tuple

from trustee.errors import ParseError
from trustee.group import (
    Ciphertext,
    GroupSettings,
    encode_element,
    encode_scalar,
    parse_element,
    parse_public_key,
)

from nmix.elgamal import check_secret, random_scalar
from nmix.models import EncryptionKeyShareDTO, PartialDecryptionDTO
from nmix.proofs import prove_equal_logs, verify_equal_logs

KEY_SHARE_LABEL = "key-share"
PARTIAL_DECRYPTION_LABEL = "partial-decryption"


class ElGamalKeyGeneration:
    """Crea participaciones de clave y factores de descifrado parcial."""

    def create_share(
        self, id: str, settings: GroupSettings
    ) -> Tuple[EncryptionKeyShareDTO, str]:
        """Genera x en Z_q^*, y = g^x y una prueba de Schnorr ligada a `id`.

        Returns:
            Tuple[EncryptionKeyShareDTO, str]: Contribución pública con prueba y
            el secreto x en su codificación canónica.

        """

        secret = 0
        while secret == 0:
            secret = random_scalar(settings)
        share = pow(settings.g, secret, settings.p)
        proof, _ = prove_equal_logs(
            secret, [settings.g], settings, KEY_SHARE_LABEL, id, share
        )
        dto = EncryptionKeyShareDTO(key_share=encode_element(share), proof=proof)
        return dto, encode_scalar(secret)

    def partial_decrypt(
        self,
        ciphertexts: Sequence[Ciphertext],
        secret: int,
        id: str,
        settings: GroupSettings,
    ) -> PartialDecryptionDTO:
        """Calcula alpha_i^x para cada criptograma con una prueba agregada.

        La prueba demuestra que todos los factores usan el mismo exponente que
        la contribución pública g^x. Un lote vacío produce una lista vacía con
        una prueba válida sobre g^x.
        """

        check_secret(secret, settings)
        p = settings.p
        share = pow(settings.g, secret, p)
        alphas = [ciphertext.alpha for ciphertext in ciphertexts]
        factors = [pow(alpha, secret, p) for alpha in alphas]
        proof, _ = prove_equal_logs(
            secret,
            [settings.g] + alphas,
            settings,
            PARTIAL_DECRYPTION_LABEL,
            id,
            share,
            alphas,
            factors,
        )
        return PartialDecryptionDTO(
            partial_decryptions=[encode_element(f) for f in factors], proof=proof
        )


def verify_key_share(dto: EncryptionKeyShareDTO, id: str, settings: GroupSettings) -> bool:
    """Comprueba la prueba de conocimiento del secreto de una contribución."""

    try:
        share = parse_public_key(dto.key_share, settings)
    except ParseError:
        return False
    return verify_equal_logs(
        dto.proof, [settings.g], [share], settings, KEY_SHARE_LABEL, id, share
    )


def verify_partial_decryption(
    dto: PartialDecryptionDTO,
    ciphertexts: Sequence[Ciphertext],
    key_share: str,
    id: str,
    settings: GroupSettings,
) -> bool:
    """Comprueba que los factores corresponden a la contribución `key_share`."""

    if len(dto.partial_decryptions) != len(ciphertexts):
        return False
    try:
        share = parse_public_key(key_share, settings)
        factors = [parse_element(f, settings, "factor") for f in dto.partial_decryptions]
    except ParseError:
        return False
    alphas = [ciphertext.alpha for ciphertext in ciphertexts]
    return verify_equal_logs(
        dto.proof,
        [settings.g] + alphas,
        [share] + factors,
        settings,
        PARTIAL_DECRYPTION_LABEL,
        id,
        share,
        alphas,
        factors,
    )
