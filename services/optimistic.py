"""Optimistic list updates with rollback.

A change is applied to the local list first so the screen can show it
immediately. The commit then runs and reports success or failure as a
Result; on failure the list is restored from the snapshot taken before the
change.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, TypeVar, Union

from logger import get_logger

logger = get_logger()

T = TypeVar("T")


@dataclass
class Ok:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass
class Err:
    error: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok, Err]


class OptimisticList(Generic[T]):
    """A list whose changes are committed optimistically."""

    def __init__(self, items: List[T]):
        self.items: List[T] = list(items)

    def transact(
        self,
        patch: Callable[[List[T]], List[T]],
        commit: Callable[[List[T]], Result],
    ) -> Result:
        """Apply ``patch`` locally, then run ``commit`` on the patched list.

        Args:
            patch: Returns the tentative new list; must not mutate its input.
            commit: Persists the tentative list and returns Ok or Err.

        Returns:
            The commit's result. On Err the items are rolled back.
        """
        snapshot = self.items
        self.items = patch(list(snapshot))
        result = commit(self.items)
        if not result.ok:
            logger.warning(f"Rolling back optimistic update: {result.error}")
            self.items = snapshot
        return result
