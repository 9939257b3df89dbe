"""Digest algorithm descriptors for payload hashing."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Protocol

from hawk_payload.core.errors import UnsupportedAlgorithmError


class DigestContext(Protocol):
    def update(self, data: bytes) -> None: ...

    def digest(self) -> bytes: ...


class Algorithm(Protocol):
    name: str
    output_len: int

    def new_context(self) -> DigestContext: ...


@dataclass(frozen=True)
class HashlibAlgorithm:
    """Default implementation: a named hashlib constructor.

    ``output_len`` is taken from hashlib's ``digest_size`` so it always
    matches what the context produces.
    """

    name: str
    output_len: int = field(init=False)

    def __post_init__(self) -> None:
        try:
            digest_size = hashlib.new(self.name).digest_size
        except ValueError:
            raise UnsupportedAlgorithmError(
                f"hashlib does not provide {self.name!r}"
            ) from None
        object.__setattr__(self, "output_len", digest_size)

    def new_context(self) -> DigestContext:
        return hashlib.new(self.name)


SHA256 = HashlibAlgorithm("sha256")
SHA384 = HashlibAlgorithm("sha384")
SHA512 = HashlibAlgorithm("sha512")

ALGORITHMS: Mapping[str, Algorithm] = MappingProxyType(
    {alg.name: alg for alg in (SHA256, SHA384, SHA512)}
)

AlgorithmLike = Algorithm | str


def get_algorithm(name: str) -> Algorithm:
    """Look up a registered algorithm by its Hawk name, e.g. ``"sha256"``."""
    try:
        return ALGORITHMS[name.lower()]
    except KeyError:
        supported = ", ".join(sorted(ALGORITHMS))
        raise UnsupportedAlgorithmError(
            f"Unsupported algorithm {name!r} (supported: {supported})"
        ) from None


def resolve_algorithm(algorithm: AlgorithmLike) -> Algorithm:
    if isinstance(algorithm, str):
        return get_algorithm(algorithm)
    return algorithm
