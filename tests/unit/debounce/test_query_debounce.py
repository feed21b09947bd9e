"""Tests for latest-value-wins query debouncing."""

from __future__ import annotations

import unittest

from sidenav.debounce import QueryDebouncer


class QueryDebouncerTests(unittest.TestCase):
    def test_commits_after_quiet_window(self) -> None:
        debouncer = QueryDebouncer(0.2)
        debouncer.push("pay", now=10.0)

        self.assertIsNone(debouncer.poll(now=10.1))
        self.assertEqual(debouncer.poll(now=10.5), "pay")
        self.assertEqual(debouncer.committed, "pay")
        self.assertIsNone(debouncer.poll(now=11.0))

    def test_newer_push_supersedes_pending_value(self) -> None:
        debouncer = QueryDebouncer(0.2)
        first = debouncer.push("p", now=0.0)
        second = debouncer.push("pa", now=0.15)

        self.assertNotEqual(first, second)
        self.assertIsNone(debouncer.poll(now=0.25))
        self.assertEqual(debouncer.poll(now=0.5), "pa")

    def test_cancel_drops_pending_value(self) -> None:
        debouncer = QueryDebouncer(0.2)
        debouncer.push("x", now=0.0)
        debouncer.cancel()
        self.assertIsNone(debouncer.poll(now=5.0))
        self.assertEqual(debouncer.committed, "")

    def test_flush_commits_immediately(self) -> None:
        debouncer = QueryDebouncer(0.2)
        debouncer.push("emp", now=0.0)
        self.assertEqual(debouncer.flush(), "emp")
        self.assertIsNone(debouncer.pending)
        self.assertIsNone(debouncer.flush())

    def test_uses_injected_clock_when_now_is_omitted(self) -> None:
        clock = [100.0]
        debouncer = QueryDebouncer(0.2, monotonic=lambda: clock[0])
        debouncer.push("d")
        self.assertAlmostEqual(debouncer.seconds_until_due(), 0.2)
        clock[0] = 101.0
        self.assertEqual(debouncer.seconds_until_due(), 0.0)
        self.assertEqual(debouncer.poll(), "d")
        self.assertIsNone(debouncer.seconds_until_due())

    def test_negative_delay_is_clamped(self) -> None:
        debouncer = QueryDebouncer(-1)
        debouncer.push("a", now=3.0)
        self.assertEqual(debouncer.poll(now=3.0), "a")


if __name__ == "__main__":
    unittest.main()
