import pytest

from page_table import PageTable


def test_rejects_non_positive_frame_count():
    with pytest.raises(ValueError):
        PageTable(0)


def test_admit_fills_slots_in_order():
    table = PageTable(3)
    assert table.admit(0x10) == 0
    assert table.admit(0x20, dirty=True) == 1
    assert not table.is_full
    assert table.admit(0x30) == 2
    assert table.is_full
    assert table.num_entries == 3
    assert table.resident_pages() == [0x10, 0x20, 0x30]
    assert table.get_entry(1).dirty


def test_admit_on_full_table_is_a_programming_error():
    table = PageTable(1)
    table.admit(0x10)
    with pytest.raises(AssertionError):
        table.admit(0x20)


def test_find():
    table = PageTable(4)
    table.admit(0x10)
    table.admit(0x20)
    assert table.find(0x20) == 1
    assert table.find(0x30) is None


def test_reuse_keeps_slot_and_reports_dirty_victim():
    table = PageTable(2)
    table.admit(0x10, dirty=True)
    table.admit(0x20)

    assert table.reuse(0, 0x30) is True
    assert table.find(0x10) is None
    assert table.find(0x30) == 0
    assert not table.get_entry(0).dirty

    assert table.reuse(1, 0x40, dirty=True) is False
    assert table.get_entry(1).dirty
    assert table.is_full


def test_mark_dirty_and_release():
    table = PageTable(2)
    slot = table.admit(0x10)
    table.mark_dirty(slot)
    assert table.get_entry(slot).dirty

    table.release()
    assert table.resident_pages() == []
    assert table.find(0x10) is None
    assert not table.get_entry(slot).dirty
