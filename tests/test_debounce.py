"""Tests for session_browser/pipeline/debounce.py."""

import asyncio

from session_browser.pipeline import Debouncer


class TestDebouncer:

    def test_rapid_pushes_commit_only_last_value(self):
        """Keystrokes closer together than the delay commit once, with the final text."""
        commits = []

        async def run():
            debouncer = Debouncer(commits.append, delay=0.05)
            for text in ("a", "ab", "abc"):
                debouncer.push(text)
                await asyncio.sleep(0.01)
            await asyncio.sleep(0.15)

        asyncio.run(run())
        assert commits == ["abc"]

    def test_separated_pushes_commit_each(self):
        commits = []

        async def run():
            debouncer = Debouncer(commits.append, delay=0.02)
            debouncer.push("a")
            await asyncio.sleep(0.08)
            debouncer.push("ab")
            await asyncio.sleep(0.08)

        asyncio.run(run())
        assert commits == ["a", "ab"]

    def test_nothing_committed_before_quiet_period(self):
        commits = []

        async def run():
            debouncer = Debouncer(commits.append, delay=0.2)
            debouncer.push("a")
            await asyncio.sleep(0.01)
            pending = debouncer.is_pending, debouncer.pending_value
            debouncer.cancel()
            return pending

        assert asyncio.run(run()) == (True, "a")
        assert commits == []

    def test_cancel_drops_pending_value(self):
        commits = []

        async def run():
            debouncer = Debouncer(commits.append, delay=0.02)
            debouncer.push("a")
            debouncer.cancel()
            await asyncio.sleep(0.08)
            return debouncer.is_pending

        assert asyncio.run(run()) is False
        assert commits == []

    def test_flush_commits_immediately(self):
        commits = []

        async def run():
            debouncer = Debouncer(commits.append, delay=10)
            debouncer.push("abc")
            debouncer.flush()
            return debouncer.is_pending

        assert asyncio.run(run()) is False
        assert commits == ["abc"]
