# --------------------------------------------------------------
# File: node.py
# Description: Construcción de un nodo trustee con las capacidades ElGamal.
# --------------------------------------------------------------
"""Arranque de un TrusteeNode a partir de la configuración del entorno."""

from __future__ import annotations

import logging
from typing import Optional

from trustee.config import TrusteeConfig, configure_logging, load_config
from roles.node import TrusteeNode

from nmix.keymaker import ElGamalKeyGeneration
from nmix.mixer import ElGamalShuffle

logger = logging.getLogger(__name__)


def build_node(config: Optional[TrusteeConfig] = None) -> TrusteeNode:
    """Crea un nodo con generación de claves y mezcla ElGamal.

    Args:
        config (Optional[TrusteeConfig]): Configuración del nodo. Si no se
            indica se carga del entorno con `load_config`.

    Returns:
        TrusteeNode: Nodo con los registros configurados al nivel pedido y una
        mezcla de `config.shuffle_rounds` rondas de prueba.

    Raises:
        ConfigError: Si la configuración del entorno no es válida.

    """

    config = config or load_config()
    configure_logging(config.log_level)
    logger.info(
        "Nodo trustee: %d hilos de análisis, %d rondas de prueba de mezcla",
        config.max_workers,
        config.shuffle_rounds,
    )
    return TrusteeNode(ElGamalKeyGeneration(), ElGamalShuffle(config.shuffle_rounds), config)
