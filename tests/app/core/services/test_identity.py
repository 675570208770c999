"""Tests for caller identity resolution."""
import pytest

from src.app.core.services.identity import IdentityResolver
from src.shared.exceptions import AuthenticationRequired, UnknownIdentity
from tests.builders import ENTERPRISE_A


@pytest.fixture
def resolver(user_repository):
    return IdentityResolver(user_repository)


@pytest.mark.asyncio
async def test_resolves_known_subject(resolver):
    user = await resolver.resolve("auth|alice")

    assert user.enterprise_id == ENTERPRISE_A
    assert user.first_name == "Alice"


@pytest.mark.asyncio
@pytest.mark.parametrize("subject", [None, "", "   "])
async def test_missing_subject(resolver, subject):
    with pytest.raises(AuthenticationRequired, match="Authentication required"):
        await resolver.resolve(subject)


@pytest.mark.asyncio
async def test_unknown_subject(resolver):
    with pytest.raises(UnknownIdentity, match="User not found") as exc_info:
        await resolver.resolve("auth|nobody")

    assert exc_info.value.subject == "auth|nobody"
