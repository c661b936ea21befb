"""
secretkit.random_source
Cryptographically secure uniform integers and bytes using Python's secrets module.
"""

import secrets
from typing import Sequence, TypeVar

from .errors import ConfigError

T = TypeVar("T")


def random_int(min_value: int, max_value: int) -> int:
    """
    Return an integer uniformly distributed in [min_value, max_value).

    secrets.randbelow rejection-samples the OS CSPRNG, so there is no modulo bias.
    """
    if max_value <= min_value:
        raise ConfigError(f"empty range [{min_value}, {max_value})")
    return min_value + secrets.randbelow(max_value - min_value)


def random_bytes(n: int) -> bytes:
    return secrets.token_bytes(n)


def choice(seq: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    return seq[random_int(0, len(seq))]
