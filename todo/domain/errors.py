### COMMENTS
# ============================================
# Domain error conventions
# ============================================
# - TodoList:
#     * a 1-based task_id outside [1, len(tasks)] -> TaskNotFoundError
#     * a task_id that is not an int -> TaskValidationError
#     * the list is left untouched when either is raised
#
# - UI (CLI):
#     * catches DomainError (or a concrete subclass) and prints a friendly panel
#     * everything else is a technical error and propagates


class DomainError(Exception):
    """Base class for domain errors.
    Common parent for every business exception in the package, so callers can tell
    domain failures (bad task id, bad input) apart from technical ones.
    Not meant to be raised directly, use a subclass.
    """

class TaskNotFoundError(DomainError):
    """Raised when a positional task id does not point at a task in the list.

    Ids are 1-based and only valid for the list as it is at call time, so
    `size` records how many tasks the list held when the lookup failed.
    Raised by `TodoList.complete()` and `TodoList.remove()`.
    """
    def __init__(self, task_id: int, size: int):
        self.task_id = task_id
        self.size = size
        super().__init__(self.__str__())
    def __str__(self):
        if self.size == 0:
            return f"Task {self.task_id} does not exist, the list is empty."
        return f"Task {self.task_id} does not exist (valid ids: 1-{self.size})."

class TaskValidationError(DomainError):
    """Raised when input to a list operation is malformed.
    Example: a task id given as text or as a bool.
    Carries the offending `field` so the UI can point at it.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"Invalid '{self.field}': {self.message}"
