"""Credential store - user accounts and password verification. Returns DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dtos import EmailAlreadyRegisteredError, SessionDTO
from src.auth.security import hash_password, verify_password
from src.config.database import async_session_manager
from src.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore(ABC):
    @abstractmethod
    async def create_user(self, email: str, password: str) -> SessionDTO:
        """Register a new account. Raises EmailAlreadyRegisteredError on a taken email."""
        raise NotImplementedError

    @abstractmethod
    async def verify(self, email: str, password: str) -> SessionDTO | None:
        """Return the account identity when the password matches, else None."""
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_email(self, email: str) -> SessionDTO | None:
        raise NotImplementedError


class SqlCredentialStore(CredentialStore):
    """SQL implementation of the credential store."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_user(self, email: str, password: str) -> SessionDTO:
        email = email.strip().lower()
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            if await self._get_user(session, email) is not None:
                raise EmailAlreadyRegisteredError(email)

            user = User(email=email, hashed_password=hash_password(password), is_active=True)
            session.add(user)
            try:
                await session.flush()
            except IntegrityError as e:
                raise EmailAlreadyRegisteredError(email) from e

            logger.info("Registered user %s", user.uuid)
            return SessionDTO(user_id=user.uuid, email=user.email)

    async def verify(self, email: str, password: str) -> SessionDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            user = await self._get_user(session, email.strip().lower())
            if user is None or not user.is_active:
                return None
            if not verify_password(password, user.hashed_password):
                return None
            return SessionDTO(user_id=user.uuid, email=user.email)

    async def get_user_by_email(self, email: str) -> SessionDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            user = await self._get_user(session, email.strip().lower())
            if user is None:
                return None
            return SessionDTO(user_id=user.uuid, email=user.email)

    async def _get_user(self, session, email: str) -> User | None:
        result = await session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
