"""Runtime configuration models."""

from __future__ import annotations

from dataclasses import dataclass

from hawk_payload.core.errors import ConfigError


@dataclass
class PayloadConfig:
    algorithm: str = "sha256"
    chunk_size: int = 8192

    def validate(self) -> None:
        if self.chunk_size < 1:
            raise ConfigError(f"chunk_size must be positive, got {self.chunk_size}")
