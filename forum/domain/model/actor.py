"""Actor and author entities.

An actor is the signed-in user performing an action, as supplied by the
identity provider. An author is the snapshot of an actor embedded in the
content they wrote.
"""

from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId

ANONYMOUS_NAME = "Anonymous"


class Actor(DomainModel):
    """The current user, as supplied by the identity provider."""

    id: UserId
    name: str = Field(min_length=1)
    points: int = Field(default=0, ge=0)
    avatar_url: Optional[str] = None


class Author(DomainModel):
    """Author snapshot embedded in threads, comments and replies."""

    id: UserId
    name: str
    points: int = Field(default=0, ge=0)
    avatar_url: Optional[str] = None

    @classmethod
    def from_actor(cls, actor: Actor, anonymous: bool = False) -> "Author":
        """Build an author snapshot from the acting user.

        Anonymous authors keep their id (for ownership checks) but hide
        their name, points and avatar.
        """
        if anonymous:
            return cls(id=actor.id, name=ANONYMOUS_NAME, points=0)
        return cls(
            id=actor.id,
            name=actor.name,
            points=actor.points,
            avatar_url=actor.avatar_url,
        )
