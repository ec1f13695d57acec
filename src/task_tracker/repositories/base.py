"""Base repository implementation over beanie documents."""

from __future__ import annotations

from typing import Generic, TypeVar

from beanie import Document, PydanticObjectId
from bson.errors import InvalidId

DocumentType = TypeVar("DocumentType", bound=Document)


def parse_object_id(value: str | PydanticObjectId | None) -> PydanticObjectId | None:
    """Coerce ``value`` to an ObjectId, returning ``None`` when it is not one."""
    if value is None:
        return None
    if isinstance(value, PydanticObjectId):
        return value
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        return None


class BaseRepository(Generic[DocumentType]):
    """Provide shared persistence helpers for repositories."""

    def __init__(self, document_type: type[DocumentType]) -> None:
        self._document_type = document_type

    async def get(self, entity_id: str | PydanticObjectId | None) -> DocumentType | None:
        """Retrieve a document by its identifier; malformed identifiers match nothing."""
        object_id = parse_object_id(entity_id)
        if object_id is None:
            return None
        return await self._document_type.get(object_id)

    async def add(self, instance: DocumentType) -> DocumentType:
        """Insert a new document."""
        await instance.insert()
        return instance

    async def save(self, instance: DocumentType) -> DocumentType:
        """Persist every field of an existing document."""
        await instance.save()
        return instance

    async def delete(self, instance: DocumentType) -> None:
        await instance.delete()
