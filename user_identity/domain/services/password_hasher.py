"""Password hashing interface - domain service abstraction.

This interface defines the contract for turning an accepted plaintext
password into a PasswordHash value object.

The domain cares that passwords are hashed before storage and that the
plaintext never ends up inside a User.

The domain does NOT care:
- Which algorithm is used (Argon2, bcrypt, scrypt)
- Which library implements it (pwdlib, passlib, bcrypt)
- Implementation details (salt generation, iteration counts)

Dependency flow:
    CreateUserUseCase (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)
"""

from abc import ABC, abstractmethod

from user_identity.domain.value_objects import PasswordHash


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    Implementations must be cryptographically secure and use appropriate
    salt generation and iteration counts. Hashing may be slow by design;
    use cases call it only after every cheaper check has passed.
    """

    @abstractmethod
    def hash_password(self, plain_password: str) -> PasswordHash:
        """
        Hash a plain text password.

        The implementation must:
        1. Generate a unique salt
        2. Use a cryptographically secure algorithm
        3. Return a hash that embeds the salt and parameters

        Args:
            plain_password: The plain text password to hash

        Returns:
            PasswordHash wrapping the encoded hash

        Example:
            hashed = hasher.hash_password("SecureP@ss123")
            # hashed.value might be: "$argon2id$v=19$m=65536,t=3,p=4$..."
        """
        pass
