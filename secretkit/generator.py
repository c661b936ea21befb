"""
secretkit.generator
Secret generators: pool-based passwords, pronounceable passwords,
custom-pool strings, numeric strings, OTPs and hex API keys.
"""

import dataclasses
from typing import List, Optional

from .errors import ConfigError
from .log import get_logger
from .pool import CharacterPool, GenerationOptions, build_pool, DIGITS
from .random_source import choice, random_bytes, random_int

logger = get_logger("generator")

VOWELS = "aeiouAEIOU"
CONSONANTS = "bcdfghjklmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ"

# int-to-str conversion of larger values hits the interpreter digit limit
MAX_NUMBER_DIGITS = 4000
_NUMBER_LIMIT = 10 ** MAX_NUMBER_DIGITS


def _resolve_options(options: Optional[GenerationOptions], overrides) -> GenerationOptions:
    if options is None:
        return GenerationOptions(**overrides)
    if overrides:
        return dataclasses.replace(options, **overrides)
    return options


def _generate_from_pool(pool: CharacterPool, length: int, strict: bool) -> str:
    chars = [choice(pool.characters) for _ in range(length)]

    # One random slot per class; slots may collide, last write wins.
    if strict and chars:
        for alphabet in pool.classes:
            chars[random_int(0, len(chars))] = choice(alphabet)
        logger.debug("strict mode patched %d positions", len(pool.classes))

    return "".join(chars)


def generate(options: Optional[GenerationOptions] = None, **overrides) -> str:
    """
    Generate one secret.

    Either pass a GenerationOptions, keyword overrides (length=16, numbers=True, ...),
    or both; overrides win.
    """
    opts = _resolve_options(options, overrides)
    pool = build_pool(opts)
    return _generate_from_pool(pool, opts.length, opts.strict)


def generate_multiple(count: int, options: Optional[GenerationOptions] = None, **overrides) -> List[str]:
    """Generate `count` independent secrets sharing the same options."""
    if count <= 0:
        raise ConfigError("count must be greater than 0")
    opts = _resolve_options(options, overrides)
    pool = build_pool(opts)
    return [_generate_from_pool(pool, opts.length, opts.strict) for _ in range(count)]


def generate_with_custom_pool(length: int, custom_pool: str) -> str:
    """Draw `length` characters uniformly from `custom_pool` as given (duplicates weight the draw)."""
    if not custom_pool:
        raise ConfigError("Custom character pool must not be empty")
    if length < 0:
        raise ConfigError("length must be >= 0")
    return "".join(choice(custom_pool) for _ in range(length))


def generate_random_number(min_value: int = 0, max_value: int = 1000, length: int = 4) -> str:
    """
    Draw an integer in [min_value, max_value] (inclusive), zero-pad it on the
    left to `length` digits, then keep the first `length` characters.

    Values with more than `length` digits keep their leading digits,
    e.g. 12345 with length 4 gives "1234". Bounds are limited to
    MAX_NUMBER_DIGITS digits.
    """
    if min_value >= max_value:
        raise ConfigError("min must be less than max")
    if length < 0:
        raise ConfigError("length must be >= 0")
    if max(abs(min_value), abs(max_value)) >= _NUMBER_LIMIT:
        raise ConfigError(f"min and max must have at most {MAX_NUMBER_DIGITS} digits")
    value = random_int(min_value, max_value + 1)
    return str(value).rjust(length, "0")[:length]


def generate_otp(length: int = 6) -> str:
    """
    Numeric one-time password of exactly `length` digits, never with a leading zero.

    Built digit by digit, which is uniform over [10**(length-1), 10**length).
    """
    if length < 1:
        raise ConfigError("OTP length must be at least 1")
    return choice(DIGITS[1:]) + "".join(choice(DIGITS) for _ in range(length - 1))


def generate_api_key(byte_length: int = 32) -> str:
    """Lowercase hex encoding of `byte_length` random bytes."""
    if byte_length < 0:
        raise ConfigError("byte_length must be >= 0")
    return random_bytes(byte_length).hex()


def generate_pronounceable_password(length: int = 10) -> str:
    """
    Alternate vowels and consonants, starting with a vowel.

    Interior positions (not the first two or last two) are swapped for a
    random digit with probability 1/5.
    """
    chars = []
    use_vowel = True
    for i in range(length):
        c = choice(VOWELS) if use_vowel else choice(CONSONANTS)
        if 1 < i < length - 2 and random_int(0, 5) == 0:
            c = choice(DIGITS)
        chars.append(c)
        use_vowel = not use_vowel
    return "".join(chars)
