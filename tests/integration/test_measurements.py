# tests/integration/test_measurements.py
"""
Real-clock measurements with sleeps. Sleeps only guarantee a lower bound, so
upper bounds get a generous tolerance for loaded CI machines.
"""
import time

from fine_grained import NS_PER_MS, Stopwatch, ns_to_ms

TOLERANCE_MS = 40


def test_single_measurement():
    sleep_in_ms = 500
    stopwatch = Stopwatch.start_new()

    time.sleep(sleep_in_ms / 1000)
    measurement = stopwatch.lap()

    assert ns_to_ms(measurement) >= sleep_in_ms


def test_independent_measurements():
    foo_ms, bar_ms, foobar_ms = 40, 70, 100
    running = Stopwatch.start_new()

    time.sleep(foo_ms / 1000)
    foo = running.lap()
    time.sleep(bar_ms / 1000)
    bar = running.lap()
    time.sleep(foobar_ms / 1000)
    foobar = running.lap()
    stopwatch = running.stop()

    assert stopwatch.laps() == (foo, bar, foobar)
    assert stopwatch.number_of_laps() == 3
    assert stopwatch.total_time() == foo + bar + foobar
    for measured, expected in ((foo, foo_ms), (bar, bar_ms), (foobar, foobar_ms)):
        assert expected <= ns_to_ms(measured) <= expected + TOLERANCE_MS

    expected_total = foo_ms + bar_ms + foobar_ms
    assert expected_total <= ns_to_ms(stopwatch.total_time()) <= expected_total + TOLERANCE_MS


def test_repetitive_measurements():
    sleep_in_ms = 50
    number_of_rounds = 10
    running = Stopwatch.start_new()

    for _ in range(number_of_rounds):
        time.sleep(sleep_in_ms / 1000)
        running.lap()
    stopwatch = running.stop()

    measured_total = 0
    for lap in stopwatch.laps():
        assert ns_to_ms(lap) >= sleep_in_ms
        measured_total += lap

    assert stopwatch.number_of_laps() == number_of_rounds
    assert stopwatch.total_time() == measured_total
    assert ns_to_ms(stopwatch.total_time()) >= sleep_in_ms * number_of_rounds


def test_pause_time_is_not_counted():
    run_ms, pause_ms = 30, 200
    running = Stopwatch.start_new()

    time.sleep(run_ms / 1000)
    paused = running.pause()
    time.sleep(pause_ms / 1000)
    running = paused.resume()
    time.sleep(run_ms / 1000)
    lap, stopwatch = running.lap_and_stop()

    assert lap == stopwatch.total_time()
    assert 2 * run_ms <= ns_to_ms(lap) < 2 * run_ms + pause_ms


def test_total_time_never_decreases_while_running():
    running = Stopwatch.start_new()
    readings = [running.total_time() for _ in range(1_000)]
    assert readings == sorted(readings)
    assert readings[-1] < 10_000 * NS_PER_MS
