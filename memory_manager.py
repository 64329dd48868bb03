class Statistics:
    def __init__(self, num_frames):
        self.num_frames = num_frames
        self.events = 0
        self.disk_reads = 0
        self.disk_writes = 0

    @property
    def page_faults(self):
        # every fault reads exactly one page from the backing store
        return self.disk_reads

    def record_event(self):
        self.events += 1

    def record_page_fault(self, is_dirty_replacement=False):
        if is_dirty_replacement:
            # Dirty page: write back + read new page
            self.disk_writes += 1
        self.disk_reads += 1

    def __str__(self):
        return (f"total memory frames:  {self.num_frames}\n"
                f"events in trace:      {self.events}\n"
                f"total disk reads:     {self.disk_reads}\n"
                f"total disk writes:    {self.disk_writes}")
