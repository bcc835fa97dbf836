from future_tuple.absent import Absent, AbsentType
from future_tuple.result import Failure, Outcome, Success, as_tuple, capture
from future_tuple.translator import translate, tupled

__all__ = [
    "Absent",
    "AbsentType",
    "Failure",
    "Outcome",
    "Success",
    "as_tuple",
    "capture",
    "translate",
    "tupled",
]
