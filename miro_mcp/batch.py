"""Sequential bulk execution against the Miro client.

A batch is capped at :data:`MAX_BATCH_SIZE` elements and is rejected whole,
before any request, when it is larger. Elements run one at a time in input
order; a failing element is logged and recorded in the report while the rest
of the batch carries on. Nothing is retried or rolled back.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, TypeVar

import httpx

from .client import MiroClient
from .errors import BatchSizeError, MiroError
from .models import ConnectorSpec, ItemSpec, ItemUpdate

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 20

T = TypeVar("T")


@dataclass
class BatchOutcome:
    """Result of a single batch element."""

    index: int
    key: str
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    """Aggregate result of one batch call, one outcome per input element."""

    kind: str
    requested: int
    outcomes: List[BatchOutcome] = field(default_factory=list)

    @property
    def results(self) -> List[Dict[str, Any]]:
        """Payloads of the successful elements, in input order."""
        return [o.result for o in self.outcomes if o.ok and o.result is not None]

    @property
    def failures(self) -> List[BatchOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return self.failed == 0


class BatchExecutor:
    """Runs create, update, delete and connector batches for one board."""

    def __init__(self, client: MiroClient, max_batch_size: int = MAX_BATCH_SIZE):
        self._client = client
        self._max_batch_size = max_batch_size

    async def create_items(self, board_id: str, items: Sequence[ItemSpec]) -> BatchReport:
        self._check_size(items, "Cannot create more than {limit} items in a single bulk operation")
        return await self._run(
            "create",
            items,
            lambda item: self._client.create_item(board_id, item),
        )

    async def update_items(self, board_id: str, updates: Sequence[ItemUpdate]) -> BatchReport:
        self._check_size(updates, "Cannot update more than {limit} items in a single bulk operation")
        return await self._run(
            "update",
            updates,
            lambda update: self._client.update_item(board_id, update.id, update.data),
        )

    async def delete_items(self, board_id: str, item_ids: Sequence[str]) -> BatchReport:
        self._check_size(item_ids, "Cannot delete more than {limit} items in a single bulk operation")

        # Successful deletes contribute nothing to ``results``.
        async def delete(item_id: str) -> None:
            await self._client.delete_item(board_id, item_id)

        return await self._run("delete", item_ids, delete, key=lambda item_id: item_id)

    async def create_connectors(
        self, board_id: str, connectors: Sequence[ConnectorSpec]
    ) -> BatchReport:
        self._check_size(connectors, "Cannot create more than {limit} connectors at once")
        return await self._run(
            "connector",
            connectors,
            lambda connector: self._client.create_connector(board_id, connector),
        )

    def _check_size(self, elements: Sequence[Any], message: str) -> None:
        if len(elements) > self._max_batch_size:
            raise BatchSizeError(message.format(limit=self._max_batch_size))

    async def _run(
        self,
        kind: str,
        elements: Sequence[T],
        call: Callable[[T], Awaitable[Optional[Dict[str, Any]]]],
        key: Optional[Callable[[T], str]] = None,
    ) -> BatchReport:
        report = BatchReport(kind=kind, requested=len(elements))
        for index, element in enumerate(elements):
            element_key = key(element) if key else element.key  # type: ignore[attr-defined]
            try:
                result = await call(element)
            except (MiroError, httpx.HTTPError) as e:
                logger.warning(
                    "Bulk %s failed for element %d (%s): %s", kind, index, element_key, e
                )
                report.outcomes.append(
                    BatchOutcome(index=index, key=element_key, error=str(e) or type(e).__name__)
                )
                continue
            report.outcomes.append(BatchOutcome(index=index, key=element_key, result=result))
        logger.info(
            "Bulk %s finished: %d of %d succeeded", kind, report.succeeded, report.requested
        )
        return report
