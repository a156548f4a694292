"""Application service (use case) for registration and login."""

import logging

from blog.application.interfaces import CredentialService, TokenPair, UserRepository
from blog.application.schemas import LoginRequest, UserCreate
from blog.domain.entities import User
from blog.domain.exceptions import EntityNotFoundError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user accounts. Depends on the repository and credential ports (DI)."""

    def __init__(self, repository: UserRepository, credentials: CredentialService):
        self._repository = repository
        self._credentials = credentials

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def list_users(self) -> list[User]:
        return await self._repository.get_all()

    async def email_taken(self, email: object) -> bool:
        """Lookup used by the registration form's uniqueness rule."""
        if not isinstance(email, str) or not email.strip():
            return False
        return await self._repository.get_by_email(email.strip()) is not None

    async def register(self, data: UserCreate) -> User:
        user = User(
            first_name=data.first_name.strip(),
            last_name=data.last_name.strip(),
            email=data.email.strip().lower(),
            password_hash=self._credentials.hash_password(data.password),
            avatar=data.avatar or None,
        )
        created = await self._repository.create(user)
        logger.info("Registered user %s", created.id)
        return created

    async def authenticate(self, data: LoginRequest) -> tuple[User, TokenPair]:
        """Check a login form and issue tokens.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password.
        """
        user = await self._repository.get_by_email(data.email.strip())
        if user is None:
            logger.info("Login rejected: unknown email")
            raise InvalidCredentialsError("User with this email is not registered")
        if not self._credentials.verify_password(data.password, user.password_hash):
            logger.info("Login rejected: wrong password for user %s", user.id)
            raise InvalidCredentialsError("Wrong password")
        return user, self._credentials.issue_tokens(user.id)
