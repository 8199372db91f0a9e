import json
import unittest

from countdown import TimerState, render_timer_view


class TimerViewTests(unittest.TestCase):
    def test_stopped_zero_disables_start_and_shows_keypad(self) -> None:
        view = render_timer_view(TimerState.stopped(0))

        self.assertEqual("00:00", view.display)
        self.assertEqual(["start"], [control.name for control in view.controls])
        self.assertFalse(view.controls[0].enabled)
        self.assertTrue(view.keypad_visible)
        self.assertEqual(("0", "del"), view.keypad[-1])

    def test_stopped_with_duration_enables_start(self) -> None:
        view = render_timer_view(TimerState.stopped(65))

        self.assertEqual("01:05", view.display)
        self.assertEqual(1, view.minutes)
        self.assertEqual(5, view.seconds)
        start = view.control("start")
        self.assertIsNotNone(start)
        if start is None:
            self.fail("Expected a start control")
        self.assertTrue(start.enabled)
        self.assertEqual("start", start.label)

    def test_running_shows_only_pause_and_hides_keypad(self) -> None:
        view = render_timer_view(TimerState.running(120))

        self.assertEqual("02:00", view.display)
        self.assertEqual(["pause"], [control.name for control in view.controls])
        self.assertFalse(view.keypad_visible)
        self.assertEqual((), view.keypad)

    def test_paused_shows_resume_and_stop(self) -> None:
        view = render_timer_view(TimerState.paused(120))

        self.assertEqual(["resume", "stop"], [control.name for control in view.controls])
        self.assertTrue(all(control.enabled for control in view.controls))
        self.assertFalse(view.keypad_visible)
        self.assertIsNone(view.control("start"))

    def test_payload_is_json_serializable(self) -> None:
        payload = render_timer_view(TimerState.stopped(330)).to_payload()
        decoded = json.loads(json.dumps(payload))

        self.assertEqual("stopped", decoded["phase"])
        self.assertEqual("05:30", decoded["display"])
        self.assertEqual(330, decoded["duration_seconds"])
        self.assertEqual(
            [{"name": "start", "label": "start", "enabled": True}],
            decoded["controls"],
        )
        self.assertEqual(["1", "2", "3"], decoded["keypad"][0])


if __name__ == "__main__":
    unittest.main()
