from collections import namedtuple
import re

PAGE_OFFSET_BITS = 12            # 4 KB pages, top 20 bits are the page number
ADDRESS_MASK = 0xFFFFFFFF
PROCESS_TAG_SHIFT = 28           # top 4 bits select the owning process
PROCESS_B_TAG = 0x3

OPERATIONS = ('R', 'W')
HEX_ADDRESS = re.compile(r'(0[xX])?[0-9a-fA-F]+')


class AddressEvent(namedtuple('AddressEvent', ['address', 'operation'])):
    __slots__ = ()

    @property
    def is_write(self):
        return self.operation == 'W'


def get_page_num(address):
    return (address & ADDRESS_MASK) >> PAGE_OFFSET_BITS


def is_process_a(address):
    """Every top nibble except the reserved Process-B tag belongs to process A."""
    return ((address & ADDRESS_MASK) >> PROCESS_TAG_SHIFT) != PROCESS_B_TAG


def parse_line(line):
    """Parse one ``<hex-address> <R|W>`` line, or return None if it is malformed."""
    parts = line.split()
    if len(parts) < 2:
        return None

    addr_str, rw = parts[0], parts[1].upper()
    if rw not in OPERATIONS:
        return None

    # plain hex digits only: int() would also take signs and underscores
    if HEX_ADDRESS.fullmatch(addr_str) is None:
        return None

    address = int(addr_str, 16)
    if address > ADDRESS_MASK:
        return None

    return AddressEvent(address, rw)


def parse_trace(lines):
    for line in lines:
        event = parse_line(line)
        if event is not None:
            yield event


def read_trace(filename):
    # The file stays open only while the generator is alive; closing the
    # generator early (an aborted debug run) closes it too.
    with open(filename, 'r') as f:
        yield from parse_trace(f)
