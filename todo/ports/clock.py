from typing import Protocol
from datetime import datetime

class Clock(Protocol):
    """Time source abstraction. Returns the current time in UTC (aware)."""
    def now(self) -> datetime:
        pass
