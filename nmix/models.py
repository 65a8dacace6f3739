# --------------------------------------------------------------
# File: models.py
# Description: DTOs con pruebas que devuelven las capacidades ElGamal.
# --------------------------------------------------------------
"""Modelos Pydantic de los resultados con prueba de las capacidades.

Todos los valores de grupo viajan como cadenas en la codificación canónica
de `trustee.group`. La capa del trustee los devuelve sin modificar.
"""

from typing import List

from pydantic import BaseModel, ConfigDict


class SigmaProofDTO(BaseModel):
    """Prueba Σ no interactiva (Fiat-Shamir).

    Attributes:
        commitments (List[str]): Compromisos del probador.
        challenge (str): Reto derivado del resumen de la declaración.
        response (str): Respuesta en Z_q.

    """

    model_config = ConfigDict(frozen=True)

    commitments: List[str]
    challenge: str
    response: str


class EncryptionKeyShareDTO(BaseModel):
    """Contribución pública y prueba de conocimiento del secreto."""

    model_config = ConfigDict(frozen=True)

    key_share: str
    proof: SigmaProofDTO


class PartialDecryptionDTO(BaseModel):
    """Un factor de descifrado por criptograma y una prueba agregada."""

    model_config = ConfigDict(frozen=True)

    partial_decryptions: List[str]
    proof: SigmaProofDTO


class ShadowOpeningDTO(BaseModel):
    """Apertura de una mezcla sombra frente a la entrada o a la salida."""

    model_config = ConfigDict(frozen=True)

    permutation: List[int]
    randomness: List[str]


class ShuffleProofDTO(BaseModel):
    """Prueba de mezcla por cortar y elegir con reto Fiat-Shamir."""

    model_config = ConfigDict(frozen=True)

    shadows: List[List[str]]
    openings: List[ShadowOpeningDTO]


class ShuffleResultDTO(BaseModel):
    """Criptogramas permutados y re-cifrados junto a su prueba."""

    model_config = ConfigDict(frozen=True)

    votes: List[str]
    proof: ShuffleProofDTO
