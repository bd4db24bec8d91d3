from unittest.mock import patch

import pytest

from hpcmat.timer import CalcTime


def test_context_manager_records_milliseconds():
    timer = CalcTime()
    with patch("time.perf_counter", side_effect=[1.0, 1.25]):
        with timer:
            pass
    assert timer.last_time() == pytest.approx(250.0)
    assert len(timer.times) == 1


def test_start_end_records_each_measurement():
    timer = CalcTime()
    for _ in range(3):
        timer.start()
        timer.end()
    assert len(timer.times) == 3
    assert all(t >= 0 for t in timer.times)


def test_avg_drops_first_and_clears():
    timer = CalcTime()
    timer.times = [9.0, 4.0, 4.0]
    assert timer.avg_time() == 4.0
    assert timer.times == []


def test_avg_keeps_all_when_asked():
    timer = CalcTime()
    timer.times = [4.0, 4.0]
    assert timer.avg_time(drop_first=False, clear=False) == 4.0
    assert timer.times == [4.0, 4.0]


def test_avg_single_sample_without_drop():
    timer = CalcTime()
    timer.times = [3.0]
    assert timer.avg_time(drop_first=False) == 3.0


def test_avg_single_sample_with_drop_raises():
    timer = CalcTime()
    timer.times = [3.0]
    with pytest.raises(ValueError):
        timer.avg_time()
    assert timer.times == [3.0]


def test_avg_empty_raises():
    with pytest.raises(ValueError):
        CalcTime().avg_time(drop_first=False)


def test_last_time_empty_raises():
    with pytest.raises(ValueError):
        CalcTime().last_time()


def test_last_time_returns_latest():
    timer = CalcTime()
    timer.times = [1.0, 7.0]
    assert timer.last_time() == 7.0


def test_end_without_start_raises():
    with pytest.raises(RuntimeError):
        CalcTime().end()


def test_clear_discards_measurements():
    timer = CalcTime()
    timer.times = [1.0, 2.0]
    timer.clear()
    assert timer.times == []


def test_exception_in_block_still_records():
    timer = CalcTime()
    with pytest.raises(KeyError):
        with timer:
            raise KeyError("boom")
    assert len(timer.times) == 1