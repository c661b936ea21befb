"""
secretkit.pool
Character pool construction from composable generation options.
"""

import string
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import ConfigError
from .log import get_logger

logger = get_logger("pool")

DIGITS = string.digits
DEFAULT_SYMBOLS = "!@#$%^&*()_+[]{}|;:,.<>?"
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase

# characters that are easy to confuse when read back
SIMILAR_CHARACTERS = frozenset("ilLI|oO0")


@dataclass(frozen=True)
class GenerationOptions:
    """
    Options for one generate() call.

    symbols may be a bool (use DEFAULT_SYMBOLS) or a string used verbatim
    as the symbol alphabet.
    """

    length: int = 10
    numbers: bool = False
    symbols: Union[bool, str] = False
    lowercase: bool = True
    uppercase: bool = True
    exclude_similar_characters: bool = False
    exclude: str = ""
    strict: bool = False

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ConfigError("length must be an integer")
        if self.length < 0:
            raise ConfigError("length must be >= 0")
        for name in ("numbers", "lowercase", "uppercase", "exclude_similar_characters", "strict"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean")
        if not isinstance(self.symbols, (bool, str)):
            raise ConfigError("symbols must be a boolean or a string")
        if not isinstance(self.exclude, str):
            raise ConfigError("exclude must be a string")

    @property
    def symbol_chars(self) -> str:
        return self.symbols if isinstance(self.symbols, str) else DEFAULT_SYMBOLS


@dataclass(frozen=True)
class CharacterPool:
    characters: str
    classes: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.characters)


def _apply_exclusions(chars: str, options: GenerationOptions) -> str:
    if options.exclude_similar_characters:
        chars = "".join(c for c in chars if c not in SIMILAR_CHARACTERS)
    if options.exclude:
        excluded = set(options.exclude)
        chars = "".join(c for c in chars if c not in excluded)
    return chars


def build_pool(options: GenerationOptions) -> CharacterPool:
    """
    Assemble the pool in fixed order: digits, symbols, lowercase, uppercase.

    Exclusions are applied to the combined pool and to each class alphabet,
    so strict-mode patching can never reintroduce an excluded character.
    """
    if not (options.numbers or options.symbols or options.lowercase or options.uppercase):
        raise ConfigError("At least one of numbers, symbols, lowercase, or uppercase must be enabled")

    enabled = []
    if options.numbers:
        enabled.append(DIGITS)
    if options.symbols:
        enabled.append(options.symbol_chars)
    if options.lowercase:
        enabled.append(LOWERCASE)
    if options.uppercase:
        enabled.append(UPPERCASE)

    characters = _apply_exclusions("".join(enabled), options)
    if not characters:
        raise ConfigError("Character pool is empty; check the exclusion options")

    classes = tuple(c for c in (_apply_exclusions(a, options) for a in enabled) if c)
    logger.debug("built pool of %d characters from %d classes", len(characters), len(classes))
    return CharacterPool(characters=characters, classes=classes)
