"""
secretkit - generate, check and encrypt short secrets (passwords, OTPs, API keys).
"""

__version__ = "1.0.0"

from secretkit.errors import ConfigError, DecryptionError

from secretkit.pool import (
    GenerationOptions,
    CharacterPool,
    build_pool,
    DEFAULT_SYMBOLS,
    SIMILAR_CHARACTERS,
)

from secretkit.generator import (
    generate,
    generate_multiple,
    generate_with_custom_pool,
    generate_random_number,
    generate_otp,
    generate_api_key,
    generate_pronounceable_password,
)

from secretkit.strength import check_password_strength

from secretkit.encryption import SecretCipher, encrypt, decrypt

__all__ = [
    "__version__",
    # Errors
    "ConfigError",
    "DecryptionError",
    # Pool
    "GenerationOptions",
    "CharacterPool",
    "build_pool",
    "DEFAULT_SYMBOLS",
    "SIMILAR_CHARACTERS",
    # Generators
    "generate",
    "generate_multiple",
    "generate_with_custom_pool",
    "generate_random_number",
    "generate_otp",
    "generate_api_key",
    "generate_pronounceable_password",
    # Strength
    "check_password_strength",
    # Encryption
    "SecretCipher",
    "encrypt",
    "decrypt",
]
