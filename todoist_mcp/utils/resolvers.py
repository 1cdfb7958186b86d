"""Resolve an entity ID from an explicit ID or a human-readable name."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Generic, TypeVar

from todoist_mcp.errors import EntityNotFoundError, InvalidRequestError

EntityT = TypeVar("EntityT")


class EntityResolver(Generic[EntityT]):
    """
    ID-or-name resolution against one snapshot of a remote collection.

    The collection is fetched lazily, at most once per resolver, the first
    time a name lookup is needed. Concurrent lookups share the same fetch.
    Create one resolver per tool call so reads never outlive the call.
    """

    def __init__(
        self,
        kind: str,
        fetch: Callable[[], Awaitable[Sequence[EntityT]]],
        name_of: Callable[[EntityT], str],
        exact: bool = False,
    ):
        """
        Args:
            kind: Entity kind used in messages ("task", "project", "label")
            fetch: Coroutine function returning the whole collection
            name_of: Display name of an entity
            exact: Match whole names instead of substrings (both case-insensitive)
        """
        self.kind = kind
        self._fetch = fetch
        self._name_of = name_of
        self._exact = exact
        self._snapshot: asyncio.Future[Sequence[EntityT]] | None = None

    async def entities(self) -> Sequence[EntityT]:
        if self._snapshot is None:
            self._snapshot = asyncio.ensure_future(self._fetch())
        return await self._snapshot

    def _matches(self, entity: EntityT, needle: str) -> bool:
        name = self._name_of(entity).lower()
        return name == needle if self._exact else needle in name

    async def find(self, name: str) -> EntityT:
        """
        Return the first entity (in API order) whose name matches ``name``.

        Raises:
            EntityNotFoundError: If nothing matches
        """
        needle = name.lower()
        for entity in await self.entities():
            if self._matches(entity, needle):
                return entity
        raise EntityNotFoundError(self.kind, name)

    async def resolve(self, entity_id: str | None, name: str | None) -> str:
        """
        Return ``entity_id`` unchanged, or the ID of the entity matching ``name``.

        No existence check is made for explicit IDs; the API reports unknown ones.

        Raises:
            EntityNotFoundError: If the name matches nothing
            InvalidRequestError: If neither an ID nor a name is given
        """
        if entity_id:
            return entity_id
        if name:
            entity = await self.find(name)
            return entity.id
        raise InvalidRequestError(f"Either {self.kind}_id or {self.kind}_name must be provided")
