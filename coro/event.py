from dataclasses import dataclass
from dataclasses import field
from datetime import UTC
from datetime import datetime


@dataclass(eq=False, kw_only=True)
class Event:
    id: str
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(tz=UTC), repr=False
    )

    def __repr__(self):
        return f"<{type(self).__name__} {self.id}>"
