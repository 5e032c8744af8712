"""
Deferred task scheduling for the computer's delayed reply.

A task is scheduled with a CancellationToken. Cancelling the token before
the delay expires turns the task into a no-op.
"""

from dataclasses import dataclass
from typing import Callable, List


class CancellationToken:
    """Shared flag between the scheduler and whoever owns the task."""

    def __init__(self):
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass
class ScheduledTask:
    delay_ms: int
    callback: Callable[[], None]
    token: CancellationToken

    def run(self) -> bool:
        """
        Run the callback unless cancelled.

        Returns:
            True if the callback ran.
        """
        if self.token.cancelled:
            return False
        self.callback()
        return True


class Scheduler:
    """Interface: run callback after delay_ms unless token is cancelled."""

    def schedule(
        self,
        delay_ms: int,
        callback: Callable[[], None],
        token: CancellationToken
    ) -> ScheduledTask:
        raise NotImplementedError


class QueueScheduler(Scheduler):
    """
    Holds tasks until run_pending() is called.

    Used by the console front end (which sleeps for the delay itself)
    and by tests that need to control when a deferred move fires.
    """

    def __init__(self):
        self.pending: List[ScheduledTask] = []

    def schedule(self, delay_ms, callback, token):
        task = ScheduledTask(delay_ms=delay_ms, callback=callback, token=token)
        self.pending.append(task)
        return task

    @property
    def next_delay_ms(self) -> int:
        """Longest delay among queued tasks, 0 if none."""
        return max((task.delay_ms for task in self.pending), default=0)

    def run_pending(self) -> int:
        """
        Run every queued task in order.

        Tasks scheduled while running are kept for the next call.

        Returns:
            How many callbacks actually ran.
        """
        tasks, self.pending = self.pending, []
        return sum(1 for task in tasks if task.run())


class TkScheduler(Scheduler):
    """Schedules tasks on a Tkinter widget's event loop with after()."""

    def __init__(self, widget):
        self.widget = widget

    def schedule(self, delay_ms, callback, token):
        task = ScheduledTask(delay_ms=delay_ms, callback=callback, token=token)
        self.widget.after(delay_ms, task.run)
        return task
