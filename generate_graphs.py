import sys

import matplotlib.pyplot as plt

from simulator import ALGORITHMS, VirtualMemorySimulator

FRAME_COUNTS = [2, 4, 8, 16, 32, 64, 128]
RANDOM_SEED = 571


def collect_results(trace_file, frame_counts=FRAME_COUNTS, algorithms=ALGORITHMS):
    results = {}
    for algorithm in algorithms:
        results[algorithm] = {'disk_reads': [], 'disk_writes': []}
        for num_frames in frame_counts:
            simulator = VirtualMemorySimulator(num_frames=num_frames, algorithm=algorithm,
                                               random_seed=RANDOM_SEED)
            stats = simulator.run_simulation(trace_file)
            results[algorithm]['disk_reads'].append(stats.disk_reads)
            results[algorithm]['disk_writes'].append(stats.disk_writes)
    return results


def plot_results(results, trace_file, frame_counts=FRAME_COUNTS, output='algorithm_comparison.png', show=False):
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle(f'Page Replacement Algorithm Comparison ({trace_file})', fontsize=14, fontweight='bold')

    metrics = ['disk_reads', 'disk_writes']
    titles = ['Disk Reads', 'Disk Writes']

    for ax, metric, title in zip(axes, metrics, titles):
        for algorithm, series in results.items():
            ax.plot(frame_counts, series[metric], marker='o', label=algorithm.upper())
        ax.set_title(title)
        ax.set_xlabel('Frames')
        ax.set_xscale('log', base=2)
        ax.grid(alpha=0.3)

    handles, labels = axes[0].get_legend_handles_labels()
    fig.legend(handles, labels, loc='lower center', ncol=len(labels), frameon=True)

    plt.tight_layout()
    plt.subplots_adjust(bottom=0.18)
    plt.savefig(output, dpi=300, bbox_inches='tight')
    print(f"\nGraph saved as '{output}'")
    if show:
        plt.show()
    plt.close(fig)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print("Usage: python generate_graphs.py <tracefile> [output.png]", file=sys.stderr)
        return 1

    trace_file = argv[0]
    output = argv[1] if len(argv) > 1 else 'algorithm_comparison.png'

    print("Running simulations...")
    results = collect_results(trace_file)

    print(f"{'Algorithm':<10} {'Frames':<8} {'Reads':<10} {'Writes':<10}")
    print("-" * 40)
    for algorithm, series in results.items():
        for num_frames, reads, writes in zip(FRAME_COUNTS, series['disk_reads'], series['disk_writes']):
            print(f"{algorithm:<10} {num_frames:<8} {reads:<10} {writes:<10}")

    plot_results(results, trace_file, output=output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
