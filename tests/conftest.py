"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hawk_payload.config import PayloadConfig


@pytest.fixture
def interop_digest():
    # "pàyload" hashed as text/plain with SHA-256, as computed by other
    # Hawk implementations.
    return bytes(
        [
            228, 238, 241, 224, 235, 114, 158, 112, 211, 254, 118, 89, 25, 236,
            87, 176, 181, 54, 61, 135, 42, 223, 188, 103, 194, 59, 83, 36, 136,
            31, 198, 50,
        ]
    )


@pytest.fixture
def payload_text():
    return "pàyload"


@pytest.fixture
def payload_bytes():
    # "pàyload" as utf-8 bytes
    return bytes([112, 195, 160, 121, 108, 111, 97, 100])


@pytest.fixture
def small_chunk_config():
    return PayloadConfig(chunk_size=3)
