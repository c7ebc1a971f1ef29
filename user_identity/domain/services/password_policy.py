"""Password policy - domain rules a plaintext password must satisfy.

The policy only inspects the plaintext; it never stores it. Turning an
accepted password into a PasswordHash is the job of IPasswordHasher.
"""

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;':\",./<>?"


class PasswordPolicyService:
    """
    Stateless domain service validating raw passwords.

    Rules are checked in a fixed order and the first violated rule
    determines the error message:

    1. not empty
    2. no whitespace
    3. at least MIN_PASSWORD_LENGTH characters
    4. at most MAX_PASSWORD_LENGTH characters
    5. at least one lowercase letter
    6. at least one uppercase letter
    7. at least one digit
    8. at least one character from SPECIAL_CHARACTERS
    """

    def is_valid(self, raw_password: str) -> bool:
        """
        Check a plaintext password against the policy.

        Args:
            raw_password: The plaintext password

        Returns:
            True if every rule passes

        Raises:
            ValueError: Describing the first rule that failed

        Example:
            >>> PasswordPolicyService().is_valid("SecureP@ss123")
            True
            >>> PasswordPolicyService().is_valid("")
            Traceback (most recent call last):
            ValueError: Password must not be empty
        """
        if not raw_password:
            raise ValueError("Password must not be empty")

        if any(char.isspace() for char in raw_password):
            raise ValueError("Password must not contain spaces")

        if len(raw_password) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if len(raw_password) > MAX_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at most {MAX_PASSWORD_LENGTH} characters"
            )

        if not any(char.islower() for char in raw_password):
            raise ValueError("Password must contain at least one lowercase letter")

        if not any(char.isupper() for char in raw_password):
            raise ValueError("Password must contain at least one uppercase letter")

        if not any(char.isdecimal() for char in raw_password):
            raise ValueError("Password must contain at least one digit")

        if not any(char in SPECIAL_CHARACTERS for char in raw_password):
            raise ValueError("Password must contain at least one special character")

        return True
