"""Incremental Hawk payload hashing.

The payload hash binds the content type and the body bytes under a fixed
protocol tag. The exact byte stream fed to the digest is::

    hawk.1.payload\\n<content-type>\\n<payload>\\n

The raw digest is returned; base64-encoding it for the ``hash`` attribute of
a Hawk header is left to the caller.
"""

from __future__ import annotations

import logging

from hawk_payload.core.algorithm import Algorithm, AlgorithmLike, resolve_algorithm
from hawk_payload.core.errors import DigestLengthError, HasherFinalizedError

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview | str

PAYLOAD_HEADER = b"hawk.1.payload\n"


def _as_bytes(data: BytesLike) -> bytes | bytearray | memoryview:
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


class PayloadHasher:
    """Feed an entity body to this, then pass the ``finish()`` result to a
    request or response.

    ``content_type`` must already be lower-case and stripped of parameters
    such as ``charset``; it is hashed verbatim. The algorithm should be the
    one used by the credentials signing the request.

    A hasher is single-use: after ``finish()`` any further ``update()`` or
    ``finish()`` raises HasherFinalizedError.
    """

    def __init__(self, content_type: BytesLike, algorithm: AlgorithmLike) -> None:
        self._algorithm: Algorithm = resolve_algorithm(algorithm)
        self._context = self._algorithm.new_context()
        self.update(PAYLOAD_HEADER)
        self.update(content_type)
        self.update(b"\n")

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def finished(self) -> bool:
        return self._context is None

    @staticmethod
    def hash(
        content_type: BytesLike, algorithm: AlgorithmLike, payload: BytesLike
    ) -> bytes:
        """Hash a single payload value and return the digest."""
        hasher = PayloadHasher(content_type, algorithm)
        hasher.update(payload)
        return hasher.finish()

    def update(self, data: BytesLike) -> None:
        if self._context is None:
            raise HasherFinalizedError("update() called on a finished PayloadHasher")
        self._context.update(_as_bytes(data))

    def finish(self) -> bytes:
        """Finish hashing and return the digest.

        A newline is appended to the payload first, as the JavaScript Hawk
        implementation does.
        """
        if self._context is None:
            raise HasherFinalizedError("finish() called twice on a PayloadHasher")
        self.update(b"\n")
        context, self._context = self._context, None
        digest = bytes(context.digest())
        if len(digest) != self._algorithm.output_len:
            raise DigestLengthError(
                f"{self._algorithm.name} produced {len(digest)} bytes, "
                f"expected {self._algorithm.output_len}"
            )
        logger.debug("payload hash finished: algorithm=%s", self._algorithm.name)
        return digest


def hash_payload(
    content_type: BytesLike, algorithm: AlgorithmLike, payload: BytesLike
) -> bytes:
    return PayloadHasher.hash(content_type, algorithm, payload)
