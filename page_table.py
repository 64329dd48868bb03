class PageTableEntry:
    def __init__(self):
        self.page_num = None  # None means the slot is unused
        self.dirty = False

    def is_valid(self):
        return self.page_num is not None

    def __repr__(self):
        return f"PageTableEntry(page_num={self.page_num!r}, dirty={self.dirty})"


class PageTable:
    """
    Fixed-capacity table of resident pages.

    Slots are handed out in order while the table fills up and are never
    freed afterwards, only reused in place. A slot index is therefore a stable
    handle for the lifetime of the table, which is what the eviction
    structures hold on to.
    """

    def __init__(self, num_frames):
        if num_frames < 1:
            raise ValueError(f"num_frames must be positive, got {num_frames}")
        self.num_frames = num_frames
        self.entries = [PageTableEntry() for _ in range(num_frames)]
        self.num_entries = 0
        self.is_full = False
        self._index = {}  # page_num -> slot

    def find(self, page_num):
        return self._index.get(page_num)

    def get_entry(self, slot):
        return self.entries[slot]

    def admit(self, page_num, dirty=False):
        assert not self.is_full, "admit() called on a full page table"

        slot = self.num_entries
        entry = self.entries[slot]
        entry.page_num = page_num
        entry.dirty = dirty
        self._index[page_num] = slot

        self.num_entries += 1
        if self.num_entries == self.num_frames:
            self.is_full = True
        return slot

    def reuse(self, slot, page_num, dirty=False):
        """Replace the page held in ``slot``; returns whether the old page was dirty."""
        entry = self.entries[slot]
        assert entry.is_valid(), f"reuse() called on empty slot {slot}"

        was_dirty = entry.dirty
        del self._index[entry.page_num]
        entry.page_num = page_num
        entry.dirty = dirty
        self._index[page_num] = slot
        return was_dirty

    def mark_dirty(self, slot):
        self.entries[slot].dirty = True

    def resident_pages(self):
        return [entry.page_num for entry in self.entries if entry.is_valid()]

    def release(self):
        for entry in self.entries:
            entry.page_num = None
            entry.dirty = False
        self._index.clear()
