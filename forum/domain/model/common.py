"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable; state changes produce copies via ``model_copy``.
    Stored payloads use camelCase keys (``forumId``, ``commentCount``),
    while Python code uses the snake_case field names.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow task handles on deletion records
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict:
        """JSON-safe payload in the stored (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True)
