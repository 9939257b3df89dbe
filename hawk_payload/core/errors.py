"""Exception hierarchy for Hawk payload hashing."""


class HawkPayloadError(Exception):
    """Library base exception."""


class HasherFinalizedError(HawkPayloadError):
    """PayloadHasher used after finish() consumed it."""


class UnsupportedAlgorithmError(HawkPayloadError):
    """Algorithm name is not one of the registered digest algorithms."""


class ConfigError(HawkPayloadError):
    """PayloadConfig holds an invalid value."""


class DigestLengthError(HawkPayloadError):
    """Digest context output does not match the algorithm's output_len."""
