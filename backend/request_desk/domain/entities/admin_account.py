"""Domain entities for the single admin account and a client's login state."""

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

_LOGGED_IN_KEY = "loggedIn"
_USERNAME_KEY = "username"


@dataclass
class AdminAccount:
    """The administrative account. Only a salted hash of the password is kept."""

    username: str
    password_hash: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class AdminSession:
    """Authentication state of one client session."""

    logged_in: bool = False
    username: str = ""

    @classmethod
    def anonymous(cls) -> "AdminSession":
        return cls()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AdminSession":
        """Read the session state out of a cookie-session mapping."""
        logged_in = data.get(_LOGGED_IN_KEY) is True
        return cls(
            logged_in=logged_in,
            username=str(data.get(_USERNAME_KEY) or "") if logged_in else "",
        )

    def write_to(self, data: MutableMapping[str, Any]) -> None:
        """Store the session state into a cookie-session mapping."""
        data[_LOGGED_IN_KEY] = self.logged_in
        data[_USERNAME_KEY] = self.username
