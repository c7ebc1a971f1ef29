"""Argon2 password hasher implementation using pwdlib.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher interface)
defines WHAT we need (turn a plaintext into a PasswordHash), while this
implementation defines HOW we do it (Argon2 via pwdlib).

Dependency flow:
    CreateUserUseCase (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)

pwdlib is only imported here (external library isolated to infrastructure).
"""

from pwdlib import PasswordHash as PwdlibPasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher

from user_identity.domain.services.password_hasher import IPasswordHasher
from user_identity.domain.value_objects import PasswordHash


class Argon2PasswordHasher(IPasswordHasher):
    """
    Production password hasher using Argon2id algorithm via pwdlib.

    Configuration (pwdlib's defaults):
    - Algorithm: Argon2id
    - Memory cost: 65536 KB (64 MB)
    - Time cost: 3 iterations
    - Parallelism: 4 threads

    Usage:
        hasher = Argon2PasswordHasher()
        hashed = hasher.hash_password("SecureP@ss123")
        # hashed.value: "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"
    """

    def __init__(self):
        self._password_hash = PwdlibPasswordHash((Argon2Hasher(),))

    def hash_password(self, plain_password: str) -> PasswordHash:
        """
        Hash a plain text password using Argon2id.

        Each call generates a unique salt, so hashing the same password
        twice produces different hashes.

        Args:
            plain_password: The plain text password to hash

        Returns:
            PasswordHash wrapping the self-contained Argon2 hash string
        """
        return PasswordHash.from_raw(self._password_hash.hash(plain_password))
