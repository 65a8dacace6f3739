# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: entorno aislado, claves PEM y grupo de pruebas.
# --------------------------------------------------------------

import json
from pathlib import Path
from typing import Iterator

import pytest

from nmix import ElGamalKeyGeneration, ElGamalShuffle
from trustee.group import DEFAULT_GROUP, GroupSettings
from trustee.keys import load_key_pair, parse_public_key

FIXTURES = Path(__file__).parent / "fixtures"
TEST_SHUFFLE_ROUNDS = 8


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables TRUSTEE_* del entorno para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in (
        "TRUSTEE_AES_RANDOM_IV",
        "TRUSTEE_MAX_WORKERS",
        "TRUSTEE_SHUFFLE_ROUNDS",
        "TRUSTEE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def fixtures_dir() -> Path:
    """Carpeta con las claves PEM de prueba.

    Returns:
        Path: Ruta de tests/fixtures.
    """
    return FIXTURES


@pytest.fixture
def private_pem() -> str:
    """Lee la clave privada RSA de 4096 bits en PKCS#8.

    Returns:
        str: Texto PEM de la clave privada.
    """
    return (FIXTURES / "trustee_key.pem").read_text(encoding="utf-8")


@pytest.fixture
def public_pem() -> str:
    """Lee la clave pública RSA asociada a `private_pem`.

    Returns:
        str: Texto PEM de la clave pública.
    """
    return (FIXTURES / "trustee_key.pub.pem").read_text(encoding="utf-8")


@pytest.fixture
def key_pair(private_pem, public_pem):
    """Carga el par de claves del trustee.

    Args:
        private_pem (str): PEM de la clave privada.
        public_pem (str): PEM de la clave pública.

    Returns:
        RSAKeyPair: Par con módulos coincidentes.
    """
    return load_key_pair(private_pem, public_pem)


@pytest.fixture
def other_public_key():
    """Carga una clave pública que no corresponde al trustee.

    Returns:
        RSAPublicKey: Clave pública ajena.
    """
    return parse_public_key((FIXTURES / "other_key.pub.pem").read_text(encoding="utf-8"))


@pytest.fixture
def expected_numbers() -> dict:
    """Módulo y exponentes registrados al generar la clave de prueba.

    Returns:
        dict: Módulo y exponente privado en hexadecimal, exponente público entero.
    """
    return json.loads((FIXTURES / "trustee_key.json").read_text(encoding="utf-8"))


@pytest.fixture
def settings() -> GroupSettings:
    """Grupo MODP de 1536 bits usado en las pruebas ElGamal.

    Returns:
        GroupSettings: Grupo por defecto.
    """
    return DEFAULT_GROUP


@pytest.fixture
def key_generation() -> ElGamalKeyGeneration:
    """Capacidad de generación de claves de referencia.

    Returns:
        ElGamalKeyGeneration: Nueva instancia sin estado.
    """
    return ElGamalKeyGeneration()


@pytest.fixture
def shuffler() -> ElGamalShuffle:
    """Mezclador de referencia con pocas rondas de prueba.

    Returns:
        ElGamalShuffle: Mezclador de `TEST_SHUFFLE_ROUNDS` rondas.
    """
    return ElGamalShuffle(rounds=TEST_SHUFFLE_ROUNDS)
