"""Request-scoped dependencies shared by the API routes."""
from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Header, HTTPException, status

from src.app.containers import Container
from src.app.core.domain.models import User
from src.app.core.services.identity import IdentityResolver
from src.app.logging import get_logger
from src.shared.exceptions import AuthenticationRequired, StoreReadTimeout, UnknownIdentity

logger = get_logger(__name__)

AUTH_SUBJECT_HEADER = "X-Auth-Subject"


@inject
async def get_current_user(
    x_auth_subject: Annotated[str | None, Header(alias=AUTH_SUBJECT_HEADER)] = None,
    resolver: IdentityResolver = Depends(Provide[Container.identity_resolver]),
) -> User:
    """
    Resolve the caller from the identity header.

    The returned user's enterprise_id is the tenant every search is scoped to.
    """
    try:
        return await resolver.resolve(x_auth_subject)
    except (AuthenticationRequired, UnknownIdentity) as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except StoreReadTimeout as e:
        logger.error("Identity lookup timed out: %s", e)
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e))


CurrentUser = Annotated[User, Depends(get_current_user)]
