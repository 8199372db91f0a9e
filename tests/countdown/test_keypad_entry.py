import unittest

from countdown.duration import Duration
from countdown.keypad import delete_digit, enter_digit


def _type_digits(*digits: int) -> Duration:
    duration = Duration(0)
    for digit in digits:
        edited = enter_digit(duration, digit)
        if edited is not None:
            duration = edited
    return duration


class DurationTests(unittest.TestCase):
    def test_decomposes_into_minutes_and_seconds(self) -> None:
        duration = Duration(125)
        self.assertEqual(2, duration.minutes)
        self.assertEqual(5, duration.seconds)
        self.assertEqual("02:05", duration.format())
        self.assertEqual("02:05", str(duration))

    def test_zero_formats_as_zero_padded_clock(self) -> None:
        self.assertEqual("00:00", Duration().format())

    def test_negative_duration_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Duration(-1)

    def test_duration_is_immutable_value(self) -> None:
        self.assertEqual(Duration(5), Duration(5))
        with self.assertRaises(AttributeError):
            Duration(5).value = 6  # type: ignore[misc]


class KeypadEntryTests(unittest.TestCase):
    def test_digits_shift_in_at_seconds_ones_place(self) -> None:
        self.assertEqual(Duration(5), enter_digit(Duration(0), 5))
        self.assertEqual(Duration(53), enter_digit(Duration(5), 3))
        self.assertEqual(Duration(5 * 60 + 30), enter_digit(Duration(53), 0))

    def test_four_digit_entry_builds_minutes_and_seconds(self) -> None:
        self.assertEqual("05:30", _type_digits(0, 5, 3, 0).format())
        self.assertEqual("12:34", _type_digits(1, 2, 3, 4).format())
        self.assertEqual("10:00", _type_digits(1, 0, 0, 0).format())
        self.assertEqual(12 * 60 + 34, _type_digits(1, 2, 3, 4).value)

    def test_fifth_digit_is_ignored_once_minutes_pass_nine(self) -> None:
        duration = _type_digits(1, 2, 3, 4)
        self.assertIsNone(enter_digit(duration, 7))
        self.assertEqual("12:34", _type_digits(1, 2, 3, 4, 7).format())

    def test_digits_still_shift_while_minutes_are_at_most_nine(self) -> None:
        self.assertEqual("10:00", enter_digit(Duration(60), 0).format())
        self.assertEqual("96:39", enter_digit(Duration(9 * 60 + 59), 9).format())

    def test_entry_is_refused_once_minutes_exceed_nine(self) -> None:
        for seconds in (10 * 60, 12 * 60 + 34, 99 * 60 + 59):
            for digit in (0, 9):
                with self.subTest(seconds=seconds, digit=digit):
                    self.assertIsNone(enter_digit(Duration(seconds), digit))

    def test_seconds_above_fifty_nine_carry_into_minutes(self) -> None:
        # "0:09" followed by "5" reads as 0:95, which is 1:35.
        self.assertEqual("01:35", enter_digit(Duration(9), 5).format())

    def test_invalid_digit_raises(self) -> None:
        with self.assertRaises(ValueError):
            enter_digit(Duration(0), 10)
        with self.assertRaises(ValueError):
            enter_digit(Duration(0), -1)

    def test_delete_shifts_digits_right(self) -> None:
        self.assertEqual(Duration(53), delete_digit(Duration(5 * 60 + 30)))
        self.assertEqual(Duration(5), delete_digit(Duration(53)))
        self.assertEqual(Duration(0), delete_digit(Duration(5)))

    def test_delete_is_idempotent_at_zero(self) -> None:
        self.assertEqual(Duration(0), delete_digit(Duration(0)))

    def test_enter_then_delete_restores_duration(self) -> None:
        for start in (Duration(0), Duration(5), Duration(53), Duration(50), Duration(330)):
            for digit in range(10):
                edited = enter_digit(start, digit)
                if edited is None:
                    continue
                with self.subTest(start=start.value, digit=digit):
                    self.assertEqual(start, delete_digit(edited))


if __name__ == "__main__":
    unittest.main()
