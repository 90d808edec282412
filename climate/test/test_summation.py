"""
Test cases for the summation.py classes.
"""

import math
import unittest

from climate.summation import RunningSum


class TestRunningSum(unittest.TestCase):
    """Test cases for the RunningSum class."""

    def test_empty_and_initial(self):
        """A new sum is zero, or its initial value."""
        self.assertEqual(RunningSum().value, 0.0)
        self.assertEqual(float(RunningSum(2.5)), 2.5)

    def test_compensation(self):
        """Small terms are not lost next to a large one."""
        values = [1e16, 1.0, -1e16] + [0.1] * 1000
        total = RunningSum()
        for value in values:
            total.add(value)

        self.assertAlmostEqual(total.value, math.fsum(values), places=9)
        self.assertNotAlmostEqual(sum(values), math.fsum(values), places=9)


if __name__ == "__main__":
    unittest.main()
