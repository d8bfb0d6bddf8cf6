"""ConnectivityMonitor transitions and its wiring into the sync queue."""
import asyncio

from clinic_client.connectivity import ConnectivityMonitor

PROBE_URL = "http://clinic.test/"


def test_listeners_are_notified_on_transitions_only(server):
    seen = []

    async def scenario():
        monitor = ConnectivityMonitor(PROBE_URL, transport=server.transport)
        monitor.add_listener(seen.append)
        await monitor.check_now()
        await monitor.check_now()
        server.reachable = False
        await monitor.check_now()
        await monitor.check_now()
        server.reachable = True
        await monitor.check_now()
        return monitor

    monitor = asyncio.run(scenario())

    assert seen == [True, False, True]
    assert monitor.is_online is True


def test_error_status_still_counts_as_online(server):
    server.route("GET", "/", status=503, json={"message": "mantenimiento"})

    async def scenario():
        monitor = ConnectivityMonitor(PROBE_URL, transport=server.transport)
        return await monitor.check_now()

    assert asyncio.run(scenario()) is True


def test_failing_listener_does_not_stop_others(server):
    seen = []

    def broken(online):
        raise RuntimeError("listener bug")

    async def scenario():
        monitor = ConnectivityMonitor(PROBE_URL, transport=server.transport)
        monitor.add_listener(broken)
        monitor.add_listener(seen.append)
        await monitor.check_now()

    asyncio.run(scenario())

    assert seen == [True]


def test_background_loop_probes_until_stopped(server):
    seen = []

    async def scenario():
        monitor = ConnectivityMonitor(PROBE_URL, interval=0.1, transport=server.transport)
        monitor.add_listener(seen.append)
        monitor.start()
        await asyncio.sleep(0.05)
        await monitor.stop()
        probes = len(server.requests)
        await asyncio.sleep(0.15)
        return probes

    probes = asyncio.run(scenario())

    assert seen == [True]
    assert probes >= 1
    assert len(server.requests) == probes


def test_every_check_listeners_see_repeated_states(server):
    transitions = []
    checks = []

    async def scenario():
        monitor = ConnectivityMonitor(PROBE_URL, transport=server.transport)
        monitor.add_listener(transitions.append)
        monitor.add_listener(checks.append, every_check=True)
        await monitor.check_now()
        await monitor.check_now()
        server.reachable = False
        await monitor.check_now()
        monitor.remove_listener(checks.append)
        server.reachable = True
        await monitor.check_now()

    asyncio.run(scenario())

    assert transitions == [True, False, True]
    assert checks == [True, True, False]
