"""
Load Controller Tests

Phase transitions, retry, fail-flag reloads, and overlapping requests.
"""

import asyncio

from session_browser.models import LoadPhase
from session_browser.services import FETCH_FAILURE_MESSAGE, LoadController, RecordStore


def make_controller(source, **kwargs):
    store = RecordStore()
    return LoadController(source, store, **kwargs), store


class TestLoadLifecycle:

    def test_starts_idle(self, scripted_source):
        controller, store = make_controller(scripted_source)
        assert controller.phase is LoadPhase.IDLE
        assert controller.error is None

    def test_successful_load_populates_store(self, scripted_source):
        controller, store = make_controller(scripted_source)
        phase = asyncio.run(controller.load(False))

        assert phase is LoadPhase.SUCCESS
        assert [r.id for r in store.get_all()] == [1, 2, 3]
        assert all(not r.completed for r in store.get_all())

    def test_failure_captures_message(self, scripted_source):
        controller, store = make_controller(scripted_source)
        phase = asyncio.run(controller.load(True))

        assert phase is LoadPhase.ERROR
        assert controller.error == FETCH_FAILURE_MESSAGE
        assert len(store) == 0

    def test_loading_phase_while_in_flight(self, make_source):
        controller, _ = make_controller(make_source([0.05]))
        seen = []

        async def run():
            task = asyncio.get_running_loop().create_task(controller.load(False))
            await asyncio.sleep(0.01)
            seen.append((controller.phase, controller.error))
            await task

        asyncio.run(run())
        assert seen == [(LoadPhase.LOADING, None)]
        assert controller.phase is LoadPhase.SUCCESS

    def test_failure_after_success_keeps_stale_records(self, scripted_source):
        """A failed reload leaves the previous records in the store (hidden behind the error)."""
        controller, store = make_controller(scripted_source)

        async def run():
            await controller.load(False)
            await controller.load(True)

        asyncio.run(run())
        assert controller.phase is LoadPhase.ERROR
        assert len(store) == 3

    def test_retry_after_failure_round_trip(self, scripted_source):
        controller, store = make_controller(scripted_source)

        async def run():
            await controller.load(True)
            assert controller.phase is LoadPhase.ERROR
            controller.simulate_failure = False
            return await controller.retry()

        assert asyncio.run(run()) is LoadPhase.SUCCESS
        assert controller.error is None
        assert len(store) == 3

    def test_retry_reuses_current_flag(self, scripted_source):
        controller, _ = make_controller(scripted_source, simulate_failure=True)

        async def run():
            await controller.retry()
            await controller.retry()

        asyncio.run(run())
        assert scripted_source.calls == [True, True]
        assert controller.phase is LoadPhase.ERROR

    def test_successful_reload_resets_completion(self, scripted_source):
        controller, store = make_controller(scripted_source)

        async def run():
            await controller.load(False)
            store.toggle_completed(1)
            assert store.get(1).completed is True
            await controller.load(False)

        asyncio.run(run())
        assert store.get(1).completed is False

    def test_unexpected_error_becomes_failure(self, broken_source):
        controller, _ = make_controller(broken_source)
        assert asyncio.run(controller.load(False)) is LoadPhase.ERROR
        assert controller.error == "backend exploded"

    def test_on_change_called_for_start_and_settle(self, scripted_source):
        phases = []
        controller, _ = make_controller(scripted_source)
        controller._on_change = lambda: phases.append(controller.phase)

        asyncio.run(controller.load(False))
        assert phases == [LoadPhase.LOADING, LoadPhase.SUCCESS]


class TestSimulateFailureFlag:

    def test_changing_flag_reloads(self, scripted_source):
        controller, _ = make_controller(scripted_source)

        async def run():
            await controller.load(False)
            task = controller.set_simulate_failure(True)
            # Flag flips before the reload runs
            assert controller.simulate_failure is True
            return await task

        assert asyncio.run(run()) is LoadPhase.ERROR
        assert scripted_source.calls == [False, True]
        assert controller.simulate_failure is True

    def test_unchanged_flag_does_not_reload(self, scripted_source):
        controller, _ = make_controller(scripted_source)
        assert controller.set_simulate_failure(False) is None
        assert scripted_source.calls == []

    def test_repeated_flag_starts_one_reload(self, scripted_source):
        controller, _ = make_controller(scripted_source)

        async def run():
            first = controller.set_simulate_failure(True)
            second = controller.set_simulate_failure(True)
            await first
            return second

        assert asyncio.run(run()) is None
        assert scripted_source.calls == [True]
        assert controller.phase is LoadPhase.ERROR


class TestOverlappingLoads:

    def test_stale_success_does_not_override_newer_failure(self, make_source):
        """Slow older success settles after a fast newer failure and is dropped."""
        source = make_source([0.08, 0.0])
        controller, store = make_controller(source)

        async def run():
            slow = controller.spawn(controller.load(False))
            await asyncio.sleep(0.01)
            await controller.load(True)
            assert controller.phase is LoadPhase.ERROR
            await slow

        asyncio.run(run())
        assert controller.phase is LoadPhase.ERROR
        assert controller.error == FETCH_FAILURE_MESSAGE
        assert len(store) == 0

    def test_stale_failure_does_not_override_newer_success(self, make_source):
        source = make_source([0.08, 0.0])
        controller, store = make_controller(source)

        async def run():
            slow = controller.spawn(controller.load(True))
            await asyncio.sleep(0.01)
            await controller.load(False)
            await slow

        asyncio.run(run())
        assert controller.phase is LoadPhase.SUCCESS
        assert controller.error is None
        assert len(store) == 3

    def test_phase_stays_loading_until_latest_settles(self, make_source):
        source = make_source([0.0, 0.08])
        controller, _ = make_controller(source)
        seen = []

        async def run():
            older = controller.spawn(controller.load(False))
            newer = controller.spawn(controller.load(False))
            await older
            seen.append(controller.phase)
            await newer

        asyncio.run(run())
        assert seen == [LoadPhase.LOADING]
        assert controller.phase is LoadPhase.SUCCESS

    def test_aclose_cancels_in_flight_loads(self, make_source):
        controller, store = make_controller(make_source([1.0]))

        async def run():
            task = controller.spawn(controller.load(False))
            await asyncio.sleep(0.01)
            await controller.aclose()
            return task.cancelled()

        assert asyncio.run(run()) is True
        assert len(store) == 0
