from contextlib import closing
import argparse
import random
import sys
import time

from eviction import EvictionList, FifoCursor, SegmentedQueues
from memory_manager import Statistics
from page_table import PageTable
from trace_reader import get_page_num, is_process_a, read_trace

ALGORITHMS = ('rdm', 'lru', 'fifo', 'vms')
DEBUG_INTERVAL = 10  # events between page-table dumps in debug mode


class VirtualMemorySimulator:
    """
    Replays an address trace against a fixed number of frames.

    One instance is one simulation run: it owns the page table, the eviction
    structures of its policy and the run counters. Use it as a context manager
    (or call ``close()``) to tear the structures down when the run ends.
    """

    def __init__(self, num_frames=32, algorithm='lru', random_seed=None):
        if algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm: {algorithm}")

        self.algorithm = algorithm
        self.page_table = PageTable(num_frames)
        self.stats = Statistics(num_frames)
        self.closed = False

        # Only the policy's own tracker is built
        self.recency = None
        self.cursor = None
        self.queues = None

        if algorithm == 'rdm':
            if random_seed is None:
                random.seed(int(time.time() * 1000000) % (2**31))
            else:
                random.seed(random_seed)
        elif algorithm == 'lru':
            self.recency = EvictionList('recency')
        elif algorithm == 'fifo':
            self.cursor = FifoCursor(num_frames)
        elif algorithm == 'vms':
            self.queues = SegmentedQueues(num_frames)

    @property
    def num_frames(self):
        return self.page_table.num_frames

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        if self.closed:
            return
        self.page_table.release()
        if self.recency is not None:
            self.recency.clear()
        if self.queues is not None:
            self.queues.clear()
        self.closed = True

    def handle_memory_reference(self, address, operation):
        if self.closed:
            raise RuntimeError("simulation run is already closed")

        self.stats.record_event()
        page_num = get_page_num(address)
        is_write = operation == 'W'

        if self.algorithm == 'rdm':
            self._reference_rdm(page_num, is_write)
        elif self.algorithm == 'lru':
            self._reference_lru(page_num, is_write)
        elif self.algorithm == 'fifo':
            self._reference_fifo(page_num, is_write)
        else:
            self._reference_vms(page_num, is_write, is_process_a(address))

    def replace_page(self, slot, page_num, is_write):
        is_dirty = self.page_table.reuse(slot, page_num, dirty=is_write)
        self.stats.record_page_fault(is_dirty_replacement=is_dirty)

    def admit_page(self, page_num, is_write):
        slot = self.page_table.admit(page_num, dirty=is_write)
        self.stats.record_page_fault()
        return slot

    # --------------------------------------------------------
    # Replacement policies
    # --------------------------------------------------------

    def _reference_rdm(self, page_num, is_write):
        slot = self.page_table.find(page_num)
        if slot is not None:
            if is_write:
                self.page_table.mark_dirty(slot)
            return

        if not self.page_table.is_full:
            self.admit_page(page_num, is_write)
            return

        # Any frame may go, including the one just brought in
        victim = random.randint(0, self.num_frames - 1)
        self.replace_page(victim, page_num, is_write)

    def _reference_lru(self, page_num, is_write):
        slot = self.page_table.find(page_num)
        if slot is not None:
            if is_write:
                self.page_table.mark_dirty(slot)
            self.recency.move_to_front(slot)
            return

        if not self.page_table.is_full:
            slot = self.admit_page(page_num, is_write)
            self.recency.push_front(slot)
            return

        victim = self.recency.least_recent()
        self.replace_page(victim, page_num, is_write)
        self.recency.move_to_front(victim)

    def _reference_fifo(self, page_num, is_write):
        slot = self.page_table.find(page_num)
        if slot is not None:
            if is_write:
                self.page_table.mark_dirty(slot)
            return

        if not self.page_table.is_full:
            self.admit_page(page_num, is_write)
            return

        self.replace_page(self.cursor.next_victim, page_num, is_write)
        self.cursor.advance()

    def _reference_vms(self, page_num, is_write, owner_is_a):
        queues = self.queues

        slot = self.page_table.find(page_num)
        if slot is not None:
            if is_write:
                self.page_table.mark_dirty(slot)
            # Found again while parked in a pool: back into the owner's window
            queues.reclaim(slot)
            if slot not in queues.window(owner_is_a):
                queues.enter_window(slot, owner_is_a, self.page_table)
            return

        if not self.page_table.is_full:
            slot = self.admit_page(page_num, is_write)
            queues.enter_window(slot, owner_is_a, self.page_table)
            return

        victim = queues.select_victim(owner_is_a)
        self.replace_page(victim, page_num, is_write)
        queues.enter_window(victim, owner_is_a, self.page_table)

    # --------------------------------------------------------
    # Running a trace
    # --------------------------------------------------------

    def run(self, events, debug=False, prompt=input):
        """
        Process ``events`` in order and return the run's Statistics.

        In debug mode each event is echoed and every DEBUG_INTERVAL events the
        page table is dumped and ``prompt`` is asked whether to continue;
        answering ``x`` stops the run early.
        """
        for event in events:
            if debug:
                print(f"Address: 0x{event.address:08x} RW: {event.operation} "
                      f"PageNum: 0x{get_page_num(event.address):08x}")

            self.handle_memory_reference(event.address, event.operation)

            if debug and self.stats.events % DEBUG_INTERVAL == 0:
                print(self.format_debug_info())
                try:
                    answer = prompt("Enter x to exit. ")
                except EOFError:
                    answer = ''
                if answer.strip().lower() == 'x':
                    break

        return self.stats

    def run_simulation(self, filename, debug=False, prompt=input):
        events = read_trace(filename)
        with self, closing(events):
            return self.run(events, debug=debug, prompt=prompt)

    def format_debug_info(self):
        table = self.page_table
        lines = [
            f"NumReads: {self.stats.disk_reads:<8d} NumWrites: {self.stats.disk_writes:<8d}",
            "",
            "PAGE TABLE",
            f"numEntries: {table.num_entries:<6d} isFull: {int(table.is_full)}",
            "=" * 28,
            "Entry: PageNumber: Dirty:",
        ]
        for slot, entry in enumerate(table.entries):
            page = f"0x{entry.page_num:08x}" if entry.is_valid() else "-" * 10
            lines.append(f"{slot:<6d} {page}  {int(entry.dirty)}")

        if self.recency is not None:
            lines.append(f"recency (head -> tail): {list(self.recency)}")
        if self.cursor is not None:
            lines.append(f"next victim: {self.cursor.next_victim}")
        if self.queues is not None:
            lines.append(f"rss: {self.queues.rss}")
            for queue in self.queues.lists:
                lines.append(f"{queue.name} (head -> tail): {list(queue)}")
        return "\n".join(lines)


# ============================================================
# Command line
# ============================================================

def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid frame count: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"frame count must be positive, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog='memsim',
        description='Replay a memory trace and count disk reads and writes for a page-replacement policy.')
    parser.add_argument('tracefile', help='trace file of "<hex-address> <R|W>" lines')
    parser.add_argument('numframes', type=positive_int, help='number of physical frames')
    parser.add_argument('policy', choices=ALGORITHMS, help='replacement policy')
    parser.add_argument('mode', choices=('debug', 'quiet'), help='debug pauses every %d events' % DEBUG_INTERVAL)
    parser.add_argument('--seed', type=int, default=None, help='random seed for the rdm policy')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    simulator = VirtualMemorySimulator(num_frames=args.numframes, algorithm=args.policy,
                                       random_seed=args.seed)
    try:
        stats = simulator.run_simulation(args.tracefile, debug=args.mode == 'debug')
    except OSError as e:
        print(f"Failed to open {args.tracefile}: {e.strerror}", file=sys.stderr)
        return 1

    print(stats)
    return 0


def cli():
    sys.exit(main())


if __name__ == '__main__':
    cli()
