"""Domain models for rooms."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Union

from rendezvous.constants import Visibility

if TYPE_CHECKING:
    from rendezvous.session import ConnectionSession


@dataclass(eq=False)
class Room:
    code: str
    name: str
    visibility: Visibility
    host: "ConnectionSession"
    access_secret: Optional[str] = None
    guest: Optional["ConnectionSession"] = None

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC

    @property
    def has_secret(self) -> bool:
        return bool(self.access_secret)

    @property
    def is_full(self) -> bool:
        return self.guest is not None

    @property
    def is_joinable(self) -> bool:
        return self.is_public and not self.is_full

    def check_secret(self, supplied: Optional[str]) -> bool:
        if not self.has_secret:
            return True
        return supplied == self.access_secret

    def is_member(self, session: "ConnectionSession") -> bool:
        return session is self.host or session is self.guest

    def counterpart(self, session: "ConnectionSession") -> Optional["ConnectionSession"]:
        """Return the other member of the room, or None if there is none yet."""
        if session is self.host:
            return self.guest
        if session is self.guest:
            return self.host
        return None

    def to_summary(self) -> Dict[str, Union[str, bool]]:
        return {"code": self.code, "name": self.name, "hasPassword": self.has_secret}
