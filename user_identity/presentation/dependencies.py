"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

In Clean Architecture, the composition root:
1. Lives in the outermost layer (presentation/infrastructure)
2. Creates concrete implementations
3. Injects them into abstractions
4. Never imported by inner layers

This is where we decide:
- Use Argon2PasswordHasher (not bcrypt or scrypt)
- Use the SQLAlchemy UserRepository (not MongoDB or Redis)
- Use Settings from environment (not hardcoded config)

The use cases only know the IUserRepository and IPasswordHasher ports.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncEngine

from user_identity.application.ports import (
    ICreateUserUseCase,
    IGetUserUseCase,
    IUpdateUserUseCase,
)
from user_identity.application.use_cases import (
    CreateUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from user_identity.domain.repositories import IUserRepository
from user_identity.domain.services.password_hasher import IPasswordHasher
from user_identity.domain.services.password_policy import PasswordPolicyService
from user_identity.infrastructure.config.settings import Settings, get_settings
from user_identity.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from user_identity.infrastructure.repositories import UserRepository
from user_identity.infrastructure.security.argon2_password_hasher import (
    Argon2PasswordHasher,
)


# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None
_password_hasher: IPasswordHasher | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create database engine singleton.

    Args:
        settings: Application settings (injected)

    Returns:
        AsyncEngine instance
    """
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create session factory singleton."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


def get_user_repository(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> IUserRepository:
    """
    Dependency that provides the user store.

    Dependency chain:
        get_settings() → get_database_engine() → get_session_factory() → get_user_repository()
    """
    return UserRepository(session_factory)


def get_password_hasher() -> IPasswordHasher:
    """
    Dependency that provides password hasher.

    This is a SINGLETON - we create one instance and reuse it.
    Password hashers are stateless and thread-safe, so this is safe.

    Note:
        In tests, this dependency can be overridden with FakePasswordHasher:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = Argon2PasswordHasher()
    return _password_hasher


def get_password_policy() -> PasswordPolicyService:
    return PasswordPolicyService()


def get_create_user_use_case(
    user_repository: IUserRepository = Depends(get_user_repository),
    password_policy: PasswordPolicyService = Depends(get_password_policy),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> ICreateUserUseCase:
    """
    Dependency that provides the create user use case.

    Dependency Graph:
        FastAPI endpoint
            → get_create_user_use_case()
                → get_user_repository() → get_session_factory() → Settings
                → get_password_policy() → PasswordPolicyService
                → get_password_hasher() → Argon2PasswordHasher
    """
    return CreateUserUseCase(
        user_repository=user_repository,
        password_policy=password_policy,
        password_hasher=password_hasher,
    )


def get_get_user_use_case(
    user_repository: IUserRepository = Depends(get_user_repository),
) -> IGetUserUseCase:
    return GetUserUseCase(user_repository=user_repository)


def get_update_user_use_case(
    user_repository: IUserRepository = Depends(get_user_repository),
    password_policy: PasswordPolicyService = Depends(get_password_policy),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> IUpdateUserUseCase:
    """Dependency that provides the update user use case."""
    return UpdateUserUseCase(
        user_repository=user_repository,
        password_policy=password_policy,
        password_hasher=password_hasher,
    )
