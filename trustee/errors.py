# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones tipadas de la capa del trustee.
# --------------------------------------------------------------
"""Errores terminales que devuelve la capa criptográfica del trustee.

Jerarquía:

- TrusteeError: base común.
  - SourceIOError: el origen de datos o de claves no se puede leer.
  - KeyFormatError: PEM, base64 o estructura de clave mal formados.
  - ParseError: cadena serializada que no decodifica con los GroupSettings.
  - PaddingError: relleno inválido tras un descifrado simétrico.
  - CryptoLibraryError: la capacidad delegada rechaza una entrada válida.
  - ConfigError: valor de entorno no válido.

Ninguno se reintenta internamente. Solo `SourceIOError` tiene sentido
reintentarlo desde el llamante.
"""

from __future__ import annotations


class TrusteeError(Exception):
    """Base de todos los errores del trustee."""


class SourceIOError(TrusteeError, OSError):
    """El origen (fichero o stream) no se pudo leer por completo."""


class KeyFormatError(TrusteeError, ValueError):
    """El material de clave no tiene el formato esperado."""


class ParseError(TrusteeError, ValueError):
    """Una cadena serializada no se puede interpretar."""


class PaddingError(TrusteeError, ValueError):
    """El relleno del bloque descifrado es estructuralmente inválido."""


class CryptoLibraryError(TrusteeError):
    """La capacidad criptográfica delegada rechazó la operación."""


class ConfigError(TrusteeError, ValueError):
    """Configuración de entorno inválida."""
