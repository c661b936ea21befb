"""
secretkit.errors
Exception types raised by the generators and the encryption helper.
"""


class ConfigError(ValueError):
    """Invalid generation options or arguments (raised before any output is produced)."""


class DecryptionError(ValueError):
    """Ciphertext could not be decrypted: wrong key, tampered data or malformed hex."""
