import unittest

from ksc_coach.models import Interval
from ksc_coach.services import partition, interval_count


def _pairs(intervals):
    return [interval.to_list() for interval in intervals]


class PartitionTests(unittest.TestCase):
    def test_even_split(self) -> None:
        intervals = partition(60, 15)
        self.assertEqual(_pairs(intervals), [[0, 15], [15, 30], [30, 45], [45, 60]])

    def test_remainder_interval_is_shorter(self) -> None:
        intervals = partition(65, 30)
        self.assertEqual(_pairs(intervals), [[0, 30], [30, 60], [60, 65]])
        self.assertEqual(intervals[-1].length, 5)

    def test_interval_longer_than_game_gives_single_window(self) -> None:
        self.assertEqual(_pairs(partition(20, 30)), [[0, 20]])
        self.assertEqual(_pairs(partition(30, 30)), [[0, 30]])

    def test_unconfigured_inputs_yield_no_intervals(self) -> None:
        self.assertEqual(partition(0, 15), ())
        self.assertEqual(partition(60, 0), ())
        self.assertEqual(partition(None, 15), ())
        self.assertEqual(partition(60, None), ())
        self.assertEqual(partition("abc", 15), ())
        self.assertEqual(partition(60, ""), ())
        self.assertEqual(partition(-60, 15), ())

    def test_digit_strings_are_accepted(self) -> None:
        self.assertEqual(partition("60", "15"), partition(60, 15))

    def test_invariants_hold_across_inputs(self) -> None:
        for total in range(1, 95):
            for length in (1, 7, 10, 12, 15, 30, 45, 90, 120):
                intervals = partition(total, length)
                with self.subTest(total=total, length=length):
                    self.assertEqual(intervals[0].start, 0)
                    self.assertEqual(intervals[-1].end, total)
                    self.assertEqual(len(intervals), interval_count(total, length))
                    for current, following in zip(intervals, intervals[1:]):
                        self.assertEqual(current.end, following.start)
                    self.assertTrue(all(0 < i.length <= length for i in intervals))

    def test_repeated_calls_return_equal_results(self) -> None:
        self.assertEqual(partition(70, 10), partition(70, 10))
        self.assertIs(partition(70, 10), partition(70, 10))

    def test_interval_label(self) -> None:
        self.assertEqual(Interval(15, 30).label, "15-30")


class IntervalCountTests(unittest.TestCase):
    def test_counts(self) -> None:
        self.assertEqual(interval_count(60, 15), 4)
        self.assertEqual(interval_count(65, 30), 3)
        self.assertEqual(interval_count(0, 15), 0)
        self.assertEqual(interval_count(60, "x"), 0)


if __name__ == "__main__":
    unittest.main()
