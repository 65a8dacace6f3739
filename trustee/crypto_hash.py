# --------------------------------------------------------------
# File: crypto_hash.py
# Description: Resúmenes criptográficos en streaming de ficheros y textos.
# --------------------------------------------------------------
"""Cálculo del resumen (SHA-512 por defecto) de bytes, textos, streams y ficheros."""

from __future__ import annotations

import io
import os
from typing import BinaryIO, Optional, TextIO, Union

from cryptography.hazmat.primitives import hashes

from trustee.config import DEFAULT_SCHEME, CryptoScheme
from trustee.errors import SourceIOError

CHUNK_SIZE = 32768

HashInput = Union[bytes, bytearray, str, BinaryIO, TextIO]


def hash_stream(stream: Union[BinaryIO, TextIO], scheme: Optional[CryptoScheme] = None) -> str:
    """Resume un stream leyéndolo hasta agotarlo.

    Los streams de texto se resumen con sus caracteres codificados en UTF-8,
    igual que `hash_text`.

    Args:
        stream (Union[BinaryIO, TextIO]): Origen de datos binario o de texto.
        scheme (Optional[CryptoScheme]): Esquema con el algoritmo de resumen.

    Returns:
        str: Resumen en hexadecimal (mayúsculas).

    Raises:
        SourceIOError: Si el origen no se puede leer por completo.

    """

    scheme = scheme or DEFAULT_SCHEME
    digest = hashes.Hash(scheme.file_hash_algorithm())
    try:
        while True:
            chunk = stream.read(CHUNK_SIZE)
            if chunk is None:
                raise SourceIOError("el origen no tiene datos disponibles (stream no bloqueante)")
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            digest.update(chunk)
    except SourceIOError:
        raise
    except OSError as exc:
        raise SourceIOError(f"no se pudo leer el origen: {exc}") from exc
    return digest.finalize().hex().upper()


def hash_bytes(data: bytes, scheme: Optional[CryptoScheme] = None) -> str:
    return hash_stream(io.BytesIO(data), scheme)


def hash_text(text: str, scheme: Optional[CryptoScheme] = None) -> str:
    """Resume un texto codificado en UTF-8."""

    return hash_bytes(text.encode("utf-8"), scheme)


def hash_file(path: Union[str, os.PathLike], scheme: Optional[CryptoScheme] = None) -> str:
    """Resume el contenido completo de un fichero."""

    try:
        handler = open(path, "rb")
    except OSError as exc:
        raise SourceIOError(f"no se pudo abrir {path}: {exc}") from exc
    with handler:
        return hash_stream(handler, scheme)


def hash_input(value: HashInput, scheme: Optional[CryptoScheme] = None) -> str:
    """Resume bytes, texto o un stream (binario o de texto) según el tipo recibido."""

    if isinstance(value, (bytes, bytearray)):
        return hash_bytes(bytes(value), scheme)
    if isinstance(value, str):
        return hash_text(value, scheme)
    return hash_stream(value, scheme)
