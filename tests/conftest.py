"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from stories.domain.model import User
from stories.domain.value import UserId

# Keep telemetry local; the app modules expect Logfire to be configured first
logfire.configure(send_to_logfire=False, console=False)


def make_user(name: str = "Alice Martin", **overrides) -> User:
    """Build a user with sensible defaults for tests."""
    fields = {
        "id": UserId(uuid4()),
        "name": name,
        "email": f"{name.split()[0].lower()}-{uuid4().hex[:6]}@example.org",
        "avatar_url": None,
        "promotion": "2019",
        "verified": True,
        "created_at": datetime.now(),
        "updated_at": datetime.now(),
    }
    fields.update(overrides)
    return User(**fields)
