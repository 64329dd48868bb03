import matplotlib

matplotlib.use('Agg')

from generate_graphs import collect_results, main, plot_results  # noqa: E402


def write_trace(tmp_path):
    path = tmp_path / 'trace.txt'
    path.write_text("".join(f"{0x1000 * (i % 7):08x} {'W' if i % 3 == 0 else 'R'}\n" for i in range(40)))
    return path


def test_collect_results(tmp_path):
    results = collect_results(write_trace(tmp_path), frame_counts=[2, 8])

    assert set(results) == {'rdm', 'lru', 'fifo', 'vms'}
    for series in results.values():
        assert len(series['disk_reads']) == 2
        # seven distinct pages fit in eight frames
        assert series['disk_reads'][1] == 7
        assert series['disk_writes'][1] == 0
        assert series['disk_reads'][0] >= series['disk_reads'][1]


def test_plot_results_writes_png(tmp_path):
    results = collect_results(write_trace(tmp_path), frame_counts=[2, 4])
    output = tmp_path / 'chart.png'
    plot_results(results, 'trace.txt', frame_counts=[2, 4], output=str(output))
    assert output.exists()
    assert output.stat().st_size > 0


def test_main_requires_trace(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err
