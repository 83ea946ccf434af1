import pytest

from cookbook.coroutine import CoroutineTask


def test_runs_in_slices():
    task = CoroutineTask()
    for _ in range(100):
        task.run(10)
    assert len(task.result) == 10 * 100
    task.result = ""
    for _ in range(10):
        task.run(300)
    assert len(task.result) == 10 * 300
    assert set(task.result) == {"o"}


@pytest.mark.parametrize("ticks", [1, 2, 3, 7, 50])
def test_each_run_does_exactly_ticks(ticks):
    task = CoroutineTask()
    for round_number in range(1, 6):
        assert len(task.run(ticks)) == ticks * round_number


def test_negative_ticks_rejected():
    with pytest.raises(ValueError):
        CoroutineTask().run(-1)