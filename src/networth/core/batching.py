"""Bounded-concurrency execution of independent, fallible operations.

Tasks are split into consecutive groups of ``batch_size``. Tasks inside a group run
concurrently; the next group starts only after every task of the current group has
settled. A failing task never cancels its siblings: each outcome is recorded on its
own and returned in submission order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TaskOutcome(Generic[T]):
    """Settled result of one task: either a value or the exception it raised."""

    index: int
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def chunk(items: Sequence[T], size: int) -> list[Sequence[T]]:
    """Split a sequence into consecutive slices of at most ``size`` items."""
    if size < 1:
        raise ValueError(f"batch size must be positive, got {size}")
    return [items[i:i + size] for i in range(0, len(items), size)]


def run_in_batches(
    tasks: Sequence[Callable[[], T]],
    batch_size: int,
    label: Optional[str] = None,
) -> list[TaskOutcome[T]]:
    """
    Run zero-argument callables with at most ``batch_size`` in flight.

    Args:
        tasks: Independent operations; each touches its own row.
        batch_size: Maximum number of concurrently running tasks.
        label: Optional progress label for log output.

    Returns:
        One TaskOutcome per task, in task order.
    """
    groups = chunk(tasks, batch_size)
    outcomes: list[TaskOutcome[T]] = []
    if not tasks:
        return outcomes

    done = 0
    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        for group in groups:
            futures = [executor.submit(task) for task in group]
            wait(futures)

            for future in futures:
                index = len(outcomes)
                error = future.exception()
                if error is None:
                    outcomes.append(TaskOutcome(index=index, value=future.result()))
                elif isinstance(error, Exception):
                    outcomes.append(TaskOutcome(index=index, error=error))
                else:
                    raise error

            done += len(group)
            if label:
                logger.info("%s %d/%d", label, done, len(tasks))

    return outcomes
