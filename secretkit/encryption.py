"""
secretkit.encryption
AES-256-GCM encryption of short secrets behind an explicit key context.

Keys are never persisted: a SecretCipher either generates an ephemeral
random key or derives one from a passphrase with Argon2id.
"""

import os
from typing import Dict, Optional

from argon2 import low_level
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import ConfigError, DecryptionError
from .log import get_logger

logger = get_logger("encryption")

KEY_BYTES = 32
IV_BYTES = 12
SALT_BYTES = 16

# Default KDF params (tunable). Balance security/performance.
DEFAULT_KDF_PARAMS = {
    "time_cost": 3,        # iterations
    "memory_cost_kb": 65536,  # 64 MB
    "parallelism": 2,
}


def derive_key(passphrase: str, salt: bytes, params: Optional[Dict[str, int]] = None) -> bytes:
    """
    Derive a raw 256-bit key using Argon2id low-level API.
    """
    params = params or DEFAULT_KDF_PARAMS
    return low_level.hash_secret_raw(
        secret=passphrase.encode("utf-8"),
        salt=salt,
        time_cost=int(params.get("time_cost", DEFAULT_KDF_PARAMS["time_cost"])),
        memory_cost=int(params.get("memory_cost_kb", DEFAULT_KDF_PARAMS["memory_cost_kb"])),
        parallelism=int(params.get("parallelism", DEFAULT_KDF_PARAMS["parallelism"])),
        hash_len=KEY_BYTES,
        type=low_level.Type.ID,
    )


class SecretCipher:
    """
    Key context for encrypting and decrypting secrets.

    Every encrypt() call uses a fresh random IV, returned with the ciphertext.
    legacy_fixed_iv=True reuses one IV for the lifetime of the context. It only
    reproduces the historic fixed-IV behaviour and cannot read data from the
    old AES-CBC format; reusing a GCM nonce leaks plaintext relations and the
    authentication key, so never use it for real secrets.
    """

    def __init__(self, key: Optional[bytes] = None, *, legacy_fixed_iv: bool = False):
        if key is None:
            key = AESGCM.generate_key(bit_length=KEY_BYTES * 8)
        if len(key) != KEY_BYTES:
            raise ConfigError(f"key must be {KEY_BYTES} bytes, got {len(key)}")
        self._aesgcm = AESGCM(key)
        self.salt: Optional[bytes] = None
        self.kdf_params: Optional[Dict[str, int]] = None
        self._fixed_iv: Optional[bytes] = None
        if legacy_fixed_iv:
            logger.warning("legacy fixed-IV mode enabled: every encryption reuses the same IV")
            self._fixed_iv = os.urandom(IV_BYTES)

    @classmethod
    def from_passphrase(
        cls,
        passphrase: str,
        salt: Optional[bytes] = None,
        kdf_params: Optional[Dict[str, int]] = None,
    ) -> "SecretCipher":
        """Build a context whose key is derived from `passphrase`; a random salt is used if none given."""
        if not passphrase:
            raise ConfigError("passphrase must not be empty")
        salt = salt if salt is not None else os.urandom(SALT_BYTES)
        params = kdf_params or DEFAULT_KDF_PARAMS.copy()
        cipher = cls(derive_key(passphrase, salt, params))
        cipher.salt = salt
        cipher.kdf_params = params
        logger.debug("derived key with argon2id (time_cost=%s)", params.get("time_cost"))
        return cipher

    @property
    def legacy_fixed_iv(self) -> bool:
        return self._fixed_iv is not None

    def encrypt(self, secret: str) -> Dict[str, str]:
        """Encrypt `secret`; returns {"ciphertext": hex, "iv": hex}."""
        iv = self._fixed_iv or os.urandom(IV_BYTES)
        ciphertext = self._aesgcm.encrypt(iv, secret.encode("utf-8"), None)
        return {"ciphertext": ciphertext.hex(), "iv": iv.hex()}

    def decrypt(self, ciphertext_hex: str, iv_hex: str) -> str:
        """
        Decrypt a value produced by encrypt().
        Raises DecryptionError on wrong key, tampered ciphertext or malformed input.
        """
        try:
            ciphertext = bytes.fromhex(ciphertext_hex)
            iv = bytes.fromhex(iv_hex)
        except (ValueError, TypeError) as e:
            raise DecryptionError("ciphertext and iv must be hex strings") from e
        if len(iv) != IV_BYTES:
            raise DecryptionError(f"iv must be {IV_BYTES} bytes")
        try:
            plaintext = self._aesgcm.decrypt(iv, ciphertext, None)
        except InvalidTag as e:
            raise DecryptionError("Wrong key or corrupted ciphertext") from e
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError("decrypted data is not valid UTF-8") from e


def encrypt(secret: str, cipher: SecretCipher) -> Dict[str, str]:
    return cipher.encrypt(secret)


def decrypt(ciphertext_hex: str, iv_hex: str, cipher: SecretCipher) -> str:
    return cipher.decrypt(ciphertext_hex, iv_hex)
