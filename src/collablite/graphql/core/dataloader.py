"""Base dataloader class all dataloaders should inherit from"""
import logging
from typing import Any, Hashable, Iterable, List, Optional, Sequence

import aiodataloader

from collablite.db.session import Database

logger = logging.getLogger(__name__)


def canonical_key(key: Hashable) -> str:
    """Keys are compared and cached by their string form."""
    return str(key)


class DataLoader(aiodataloader.DataLoader):
    """
    Request scoped loader. A new instance is created with every request
    context, so the cache lives exactly as long as one GraphQL operation.

    Every `load` made during one turn of the event loop is collected into a
    single batch, which is fetched with one `IN (...)` query in its own
    session. Results are mapped back to the requested keys by `order_key`;
    keys with no record resolve to `missing_value()`.

    The cache is never invalidated: once a key is loaded, later loads in the
    same request return the same object even if the row has changed.
    """

    order_key = "id"

    def __init__(
        self,
        database: Database,
        *,
        batch: bool = True,
        max_batch_size: Optional[int] = None,
    ):
        self.database = database
        super().__init__(
            batch=batch,
            max_batch_size=max_batch_size,
            get_cache_key=canonical_key,
        )

    def load(self, key):
        if key is None:
            raise TypeError(f"{type(self).__name__}.load() must be called with a key")
        return super().load(canonical_key(key))

    async def load_many(self, keys: Iterable[Any]) -> List[Any]:
        """Results come back in the same order, and length, as `keys`."""
        return list(await super().load_many(list(keys)))

    async def batch_load_fn(self, keys: Sequence[str]) -> List[Any]:
        if not keys:
            return []
        distinct = list(dict.fromkeys(keys))
        logger.debug("%s fetching %d key(s)", type(self).__name__, len(distinct))
        async with self.database.session() as session:
            records = await self.fetch(session, distinct)
        key_result_map = {
            self.get_serializable_key_for_result(record): self.shape(record)
            for record in records
        }
        return [
            key_result_map[key] if key in key_result_map else self.missing_value()
            for key in keys
        ]

    async def fetch(self, session, keys: List[str]) -> Sequence[Any]:
        """Return the records whose `order_key` is in `keys`, in any order."""
        raise NotImplementedError

    def shape(self, record: Any) -> Any:
        """What a key resolves to, given its fetched record."""
        return record

    def missing_value(self) -> Any:
        return None

    def get_serializable_key_for_result(self, result) -> str:
        return canonical_key(getattr(result, self.order_key))
