"""
Record for representing one tracked employee.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Record:
    """
    Represents one employee stored in the tracker.

    Attributes:
        id: Unique employee id. This is the ordering and search key.
        name: Employee name, silently cut to NAME_MAX_LENGTH characters.
        score: Performance score, stored as a float. No range is enforced.
    """

    NAME_MAX_LENGTH: ClassVar[int] = 99

    id: int
    name: str
    score: float

    def __post_init__(self) -> None:
        """Normalize fields. The dataclass is frozen, so assign through object."""
        object.__setattr__(self, "id", int(self.id))
        object.__setattr__(self, "name", self.name[: self.NAME_MAX_LENGTH])
        object.__setattr__(self, "score", float(self.score))

    @classmethod
    def create(cls, id: int, name: str, score: float) -> "Record":
        return cls(id=id, name=name, score=score)
