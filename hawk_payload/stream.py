"""Hash payloads that arrive in pieces: chunk iterables and binary readers."""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterable

from hawk_payload.config import PayloadConfig
from hawk_payload.core.algorithm import AlgorithmLike
from hawk_payload.core.hasher import BytesLike, PayloadHasher

logger = logging.getLogger(__name__)


def hash_chunks(
    content_type: BytesLike,
    algorithm: AlgorithmLike,
    chunks: Iterable[BytesLike],
) -> bytes:
    hasher = PayloadHasher(content_type, algorithm)
    count = 0
    for chunk in chunks:
        hasher.update(chunk)
        count += 1
    logger.debug("hashed payload from %d chunks", count)
    return hasher.finish()


def hash_reader(
    content_type: BytesLike,
    reader: BinaryIO,
    config: PayloadConfig | None = None,
) -> bytes:
    """
    Hash a binary file-like object incrementally by reading in chunks
    until EOF. Errors raised by the reader propagate unchanged.
    """
    config = config or PayloadConfig()
    config.validate()

    hasher = PayloadHasher(content_type, config.algorithm)
    total = 0
    while True:
        chunk = reader.read(config.chunk_size)
        if not chunk:
            break
        hasher.update(chunk)
        total += len(chunk)
    logger.debug("hashed %d payload bytes from reader", total)
    return hasher.finish()
