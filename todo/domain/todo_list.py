from __future__ import annotations
import logging
from typing import Callable
from todo.ports.clock import Clock
from todo.adapters.system.clock_system import SystemClock
from todo.domain.task import Task
from todo.domain.errors import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

Predicate = Callable[[Task], bool]


### COMMENTS
# ==========================================================
# Todo list aggregate (domain/todo_list.py).
# ==========================================================
# Role:
# - Owns every Task it creates; callers only ever see a tuple snapshot.
# - Task ids are 1-based positions at call time. They shift after prepend/remove.
#
# Rules:
# - complete() and remove() share one bounds check: id outside [1, len] ->
#   TaskNotFoundError, non-int id -> TaskValidationError. Nothing is mutated
#   when either is raised. Python's negative indexing never applies.
# - Every query goes through sublist(predicate) and is recomputed on each call.
# - Sorting uses sorted(), which is stable: ties keep list order.


class TodoList:
    """
    Ordered, in-memory list of tasks.

    :param clock: Time source handed to every Task the list creates.
    """
    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._tasks: list[Task] = []

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Read-only snapshot of the tasks, in list order."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def append(self, description: str) -> Task:
        """
            Adds a new task with the given description at the end of the list.

            :param description: Task text (not validated).
            :return: The created `Task`.
        """
        task = Task(description, clock=self._clock)
        self._tasks.append(task)
        logger.debug("Appended task %d: %r", len(self._tasks), description)
        return task

    add = append

    def prepend(self, description: str) -> Task:
        """
            Adds a new task with the given description at the start of the list.

            - Every existing task id moves up by one.

            :param description: Task text (not validated).
            :return: The created `Task`.
        """
        task = Task(description, clock=self._clock)
        self._tasks.insert(0, task)
        logger.debug("Prepended task: %r", description)
        return task

    def remove(self, task_id: int) -> Task:
        """
            Removes the task at the 1-based position `task_id`.

            - Every task after it moves down by one.

            :param task_id: 1-based position in the list.
            :raises TaskValidationError: If `task_id` is not an int.
            :raises TaskNotFoundError: If `task_id` is outside [1, len(tasks)].
            :return: The removed `Task`.
        """
        index = self._index_of(task_id)
        task = self._tasks.pop(index)
        logger.debug("Removed task %d: %r", task_id, task.description)
        return task

    def complete(self, task_id: int) -> Task:
        """
            Marks the task at the 1-based position `task_id` as completed.

            - Completing an already completed task moves its `completed_at` forward.

            :param task_id: 1-based position in the list.
            :raises TaskValidationError: If `task_id` is not an int.
            :raises TaskNotFoundError: If `task_id` is outside [1, len(tasks)].
            :return: The completed `Task`.
        """
        task = self._tasks[self._index_of(task_id)]
        task.complete()
        logger.debug("Completed task %d: %r", task_id, task.description)
        return task

    def sublist(self, predicate: Predicate) -> list[Task]:
        """
        Returns the tasks for which `predicate(task)` is true, in list order.

        `predicate` is any callable taking a Task and returning a bool, e.g.
        `Task.is_complete` or `lambda t: "milk" in t.description`.
        """
        return [task for task in self._tasks if predicate(task)]

    def complete_tasks(self) -> list[Task]:
        """Completed tasks, oldest completion first."""
        return sorted(self.sublist(Task.is_complete), key=lambda t: t.completed_at)

    def incomplete_tasks(self) -> list[Task]:
        """Incomplete tasks, oldest first."""
        return sorted(self.sublist(Task.is_incomplete), key=lambda t: t.created_at)

    def _index_of(self, task_id: int) -> int:
        # bool is an int subclass; True must not mean task 1
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            logger.warning("Rejected task id %r: not an integer", task_id)
            raise TaskValidationError("task_id", f"expected an integer, got {task_id!r}")
        if not 1 <= task_id <= len(self._tasks):
            logger.warning("Rejected task id %d: list has %d task(s)", task_id, len(self._tasks))
            raise TaskNotFoundError(task_id, len(self._tasks))
        return task_id - 1
