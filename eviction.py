from collections import OrderedDict


class EvictionList:
    """
    Ordered list of page-table slots, most recent at the head.

    The tail is the next eviction candidate. An OrderedDict gives O(1) push,
    move-to-head, removal of an arbitrary slot and tail extraction; its last
    position is the head of the list.
    """

    def __init__(self, name=''):
        self.name = name
        self._nodes = OrderedDict()

    def push_front(self, slot):
        assert slot not in self._nodes, f"slot {slot} already in {self.name}"
        self._nodes[slot] = None

    def move_to_front(self, slot):
        self._nodes.move_to_end(slot)

    def remove(self, slot):
        if slot in self._nodes:
            del self._nodes[slot]
            return True
        return False

    def least_recent(self):
        return next(iter(self._nodes), None)

    def pop_least_recent(self):
        slot, _ = self._nodes.popitem(last=False)
        return slot

    def clear(self):
        self._nodes.clear()

    def __contains__(self, slot):
        return slot in self._nodes

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        # head (most recent) to tail
        return reversed(self._nodes)

    def __repr__(self):
        return f"EvictionList({self.name!r}, {list(self)})"


class FifoCursor:
    """Rotating victim pointer; slots fill in order so the cursor visits them in arrival order."""

    def __init__(self, num_frames):
        self.num_frames = num_frames
        self.next_victim = 0

    def advance(self):
        self.next_victim = (self.next_victim + 1) % self.num_frames


class SegmentedQueues:
    """
    Eviction state for the VMS policy.

    Each process owns a FIFO window of at most ``rss`` resident pages. A page
    pushed out of its window is parked in the shared ``clean`` or ``dirty``
    pool, still resident, until either its owner touches it again (reclaim)
    or a fault takes its frame. A slot is a member of at most one list.
    """

    def __init__(self, num_frames):
        self.rss = num_frames // 2
        self.a_fifo = EvictionList('aFifo')
        self.b_fifo = EvictionList('bFifo')
        self.clean = EvictionList('clean')
        self.dirty = EvictionList('dirty')

    @property
    def lists(self):
        return (self.a_fifo, self.b_fifo, self.clean, self.dirty)

    def window(self, is_process_a):
        return self.a_fifo if is_process_a else self.b_fifo

    def reclaim(self, slot):
        return self.clean.remove(slot) or self.dirty.remove(slot)

    def enter_window(self, slot, is_process_a, page_table):
        """Push ``slot`` into its owner's window, spilling the window's tail into a pool."""
        window = self.window(is_process_a)
        window.push_front(slot)
        if len(window) <= self.rss:
            return None

        overflow = window.pop_least_recent()
        if page_table.get_entry(overflow).dirty:
            self.dirty.push_front(overflow)
        else:
            self.clean.push_front(overflow)
        return overflow

    def select_victim(self, is_process_a):
        for queue in (self.clean, self.dirty, self.window(is_process_a)):
            if queue:
                return queue.pop_least_recent()
        raise RuntimeError("VMS fault on a full table with no resident page to reclaim")

    def locate(self, slot):
        return [queue.name for queue in self.lists if slot in queue]

    def clear(self):
        for queue in self.lists:
            queue.clear()
