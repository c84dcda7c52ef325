"""Unit of work interface."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

import logfire

AfterCommit = Callable[[], Awaitable[None]]


class UnitOfWork(ABC):
    """Transaction boundary of one request.

    Side effects that must only happen once the writes are durable (such as
    realtime notifications) are registered with ``after_commit``. They run in
    registration order after a successful commit and are dropped on rollback.
    """

    def __init__(self) -> None:
        self._after_commit: list[AfterCommit] = []

    def after_commit(self, callback: AfterCommit) -> None:
        """Run ``callback`` once the transaction has committed."""
        self._after_commit.append(callback)

    @property
    def pending(self) -> int:
        return len(self._after_commit)

    async def commit(self) -> None:
        """Commit the transaction, then run the after-commit callbacks.

        A failing callback is logged; the writes are already durable.
        """
        await self._commit()
        callbacks, self._after_commit = self._after_commit, []
        for callback in callbacks:
            try:
                await callback()
            except Exception as e:
                logfire.error("After-commit callback failed", error=str(e))

    def discard(self) -> None:
        """Forget the after-commit callbacks (the transaction rolled back)."""
        if self._after_commit:
            logfire.info("Discarding after-commit callbacks", count=self.pending)
        self._after_commit = []

    @abstractmethod
    async def _commit(self) -> None:
        """Make the request's writes durable."""
        pass
