from enum import Enum

from .errors import InvalidResult


class ReviewResult(str, Enum):
    CORRECT = "CORRECT"
    HOLD = "HOLD"
    WRONG = "WRONG"

    @classmethod
    def parse(cls, value):
        """Accept the wire form ("correct", "hold", "wrong") in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidResult(value)

    @property
    def wire(self) -> str:
        return self.value.lower()


RESET_RESULTS = (ReviewResult.HOLD, ReviewResult.WRONG)

RESULT_CHOICES = [(r.value, r.value) for r in ReviewResult]
