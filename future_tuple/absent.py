from enum import Enum


class AbsentType(Enum):
    """
    Marks an empty slot of a result tuple.

    Distinct from every value an operation can produce,
    including ``None`` and other falsy values.
    """

    Absent = 0

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False


Absent = AbsentType.Absent
