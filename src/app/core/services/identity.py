"""Resolution of the caller identity to a tenant-scoped user record."""
import logging

from src.app.core.domain.models import User
from src.app.infrastructure.user_repository import UserRepository
from src.shared.exceptions import AuthenticationRequired, UnknownIdentity

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Maps an identity provider subject to the user it belongs to."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def resolve(self, subject: str | None) -> User:
        """
        Resolve the caller.

        Args:
            subject: Subject claim forwarded by the identity provider

        Returns:
            The caller's user record; its enterprise_id scopes every search

        Raises:
            AuthenticationRequired: If no subject was provided
            UnknownIdentity: If the subject is not linked to any user
        """
        if subject is None or not subject.strip():
            logger.warning("Search request without caller identity")
            raise AuthenticationRequired()

        user = await self.user_repository.get_by_auth_subject(subject.strip())
        if user is None:
            logger.warning("No user record for identity subject '%s'", subject)
            raise UnknownIdentity(subject)
        return user
