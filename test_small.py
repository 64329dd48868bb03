import pytest

from simulator import ALGORITHMS, VirtualMemorySimulator

SMALL_TRACE = """\
0041f7a0 R
13f5e2c0 R
05e78900 R
004758a0 R
31348900 W
004758a0 R
0041f7a0 W
not a trace line
13f5e2c0 W
05e78900 R
0041f7a0 R
"""


def counts(stats):
    return stats.events, stats.disk_reads, stats.disk_writes


@pytest.fixture
def trace_file(tmp_path):
    path = tmp_path / 'test.txt'
    path.write_text(SMALL_TRACE)
    return path


@pytest.mark.parametrize('algorithm', ALGORITHMS)
def test_small(trace_file, algorithm):
    simulator = VirtualMemorySimulator(num_frames=4, algorithm=algorithm, random_seed=1)
    stats = simulator.run_simulation(trace_file)

    assert stats.events == 10
    assert stats.num_frames == 4
    # five distinct pages, four frames: at least five reads, at most one per event
    assert 5 <= stats.disk_reads <= stats.events
    assert stats.disk_writes <= stats.disk_reads - 4
    assert simulator.closed


@pytest.mark.parametrize('algorithm', ['lru', 'fifo', 'vms'])
def test_small_is_deterministic(trace_file, algorithm):
    first = VirtualMemorySimulator(num_frames=3, algorithm=algorithm).run_simulation(trace_file)
    second = VirtualMemorySimulator(num_frames=3, algorithm=algorithm).run_simulation(trace_file)
    assert counts(first) == counts(second)


def test_small_with_enough_frames_never_evicts(trace_file):
    for algorithm in ALGORITHMS:
        stats = VirtualMemorySimulator(num_frames=16, algorithm=algorithm).run_simulation(trace_file)
        assert stats.disk_reads == 5
        assert stats.disk_writes == 0
