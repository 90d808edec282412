"""
Compensated running sums for the per-region accumulators.
"""


class RunningSum:
    """
    Running sum with Neumaier compensation.

    Keeps the rounding error of every addition in a separate term so the total
    stays accurate over millions of readings, in constant memory.
    """

    __slots__ = ("_total", "_compensation")

    def __init__(self, initial: float = 0.0):
        self._total = 0.0
        self._compensation = 0.0
        if initial:
            self.add(initial)

    def add(self, value: float) -> None:
        """
        Add a value to the sum.

        Args:
            value (float): The value to add.
        """
        total = self._total + value
        if abs(self._total) >= abs(value):
            self._compensation += (self._total - total) + value
        else:
            self._compensation += (value - total) + self._total
        self._total = total

    @property
    def value(self) -> float:
        """Current total, compensation included."""
        return self._total + self._compensation

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"RunningSum({self.value!r})"
