from __future__ import annotations
from datetime import datetime
from todo.ports.clock import Clock
from todo.adapters.system.clock_system import SystemClock


class Task:
    """
    Domain model of a single to-do item.

    `description` and `created_at` are fixed at construction; the only state that
    ever changes is `completed_at`, and only through `complete()`.

    :param description: Free text, not validated (empty is allowed).
    :param clock: Time source; `SystemClock` when omitted.
    """

    def __init__(self, description: str, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._description = description
        self._created_at = self._clock.now()
        self._completed_at: datetime | None = None

    @property
    def description(self) -> str:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def completed_at(self) -> datetime | None:
        return self._completed_at

    def complete(self) -> None:
        """
            Marks the task as completed.

            - Sets `completed_at` to the clock's current time.
            - Completing an already completed task just moves the timestamp forward;
            there is no way back to incomplete.
        """
        self._completed_at = self._clock.now()

    def is_complete(self) -> bool:
        return self._completed_at is not None

    def is_incomplete(self) -> bool:
        return not self.is_complete()

    def __repr__(self) -> str:
        return (
            f"Task(description={self._description!r}, created_at={self._created_at!r}, "
            f"completed_at={self._completed_at!r})"
        )



### COMMENTS
# ======================================
# 1. One mutable field
# ======================================
# A Task has exactly one mutable piece of state: completed_at.
# description and created_at are read-only properties over private attributes;
# complete() is the only writer of completed_at.
#
#   task.description = "x"   -> AttributeError (no setter)
#   task.complete()          -> ok
#
# Equality is identity: two tasks with the same text are still two tasks.

# ======================================
# 2. Ask, don't inspect
# ======================================
# Callers ask "are you complete?" (is_complete / is_incomplete) instead of
# checking `completed_at is None` themselves. What "complete" means stays
# inside Task.

# ======================================
# 3. created_at and the clock
# ======================================
# Time comes from an injected Clock (port), not from datetime.now() inside the
# model. Tests pass a fake clock; everything else gets SystemClock.
