import logging
import os
import struct
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pyvector import (
    BufferMemory,
    InvalidArgumentType,
    MemoryReaderNotConfigured,
    Settings,
    get_default_reader,
    set_default_reader,
)
from pyvector import memory
from pyvector.types import StrictVector2, StrictVector3, Vector2, Vector3, Vector4

BASE = 0x7FF6_1000


class FakeReader:
    """Serves values from dicts and records every address asked for."""

    def __init__(self, floats=None, ints=None):
        self.floats = floats or {}
        self.ints = ints or {}
        self.calls = []

    def read_float(self, address):
        self.calls.append(("float", address))
        return self.floats.get(address)

    def read_int32(self, address):
        self.calls.append(("int32", address))
        return self.ints.get(address)


@pytest.fixture(autouse=True)
def no_default_reader():
    set_default_reader(None)
    yield
    set_default_reader(None)


def test_from_floats_substitutes_zero_for_failed_reads():
    reader = FakeReader(floats={BASE: 2.0, BASE + 4: -3.0, BASE + 8: 1.0})
    v = Vector4.from_floats(BASE, reader)
    assert v == Vector4(2.0, -3.0, 1.0, 0.0)


def test_reads_once_per_component_in_increasing_order():
    reader = FakeReader()
    Vector3.from_floats(BASE, reader)
    assert reader.calls == [("float", BASE), ("float", BASE + 4), ("float", BASE + 8)]

    reader = FakeReader()
    Vector2.from_ints(BASE, reader=reader)
    assert reader.calls == [("int32", BASE), ("int32", BASE + 4)]


def test_from_ints_yields_float_components():
    reader = FakeReader(ints={BASE: 7, BASE + 4: -2})
    v = Vector3.from_ints(BASE, reader)
    assert v == Vector3(7.0, -2.0, 0.0)
    assert all(type(c) is float for c in v)


def test_reader_errors_degrade_to_zero():
    class FlakyReader(FakeReader):
        def read_float(self, address):
            if address == BASE:
                raise OSError("page not mapped")
            return 5.0

    assert Vector2.from_floats(BASE, FlakyReader()) == Vector2(0.0, 5.0)


def test_failed_reads_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="pyvector.memory")
    Vector2.from_floats(BASE, FakeReader(floats={BASE: 1.0}))
    assert "failed" in caplog.text
    assert str(BASE + 4) in caplog.text


def test_layout_is_four_byte_stride_with_zero_for_failures():
    assert memory.COMPONENT_STRIDE == 4
    assert memory.READ_FAILURE_DEFAULT == 0.0
    assert not hasattr(Settings, "COMPONENT_STRIDE")
    assert not hasattr(Settings, "READ_FAILURE_DEFAULT")
    reader = FakeReader()
    v = Vector4.from_ints(BASE, reader)
    assert v == Vector4.ZERO
    assert [address for _, address in reader.calls] == [BASE + 4 * i for i in range(4)]


def test_default_reader_is_used_when_none_passed():
    reader = FakeReader(floats={BASE: 1.5, BASE + 4: 2.5})
    set_default_reader(reader)
    assert get_default_reader() is reader
    assert Vector2.from_floats(BASE) == Vector2(1.5, 2.5)


def test_missing_reader_is_a_configuration_error():
    assert get_default_reader() is None
    with pytest.raises(MemoryReaderNotConfigured):
        Vector2.from_floats(BASE)
    with pytest.raises(MemoryReaderNotConfigured):
        memory.read_ints(BASE, 2)


def test_strict_factories_check_address_before_reading():
    reader = FakeReader()
    with pytest.raises(InvalidArgumentType) as exc_info:
        StrictVector3.from_floats("0x1000", reader)
    assert exc_info.value.parameter == "address"
    with pytest.raises(InvalidArgumentType):
        StrictVector2.from_ints(None, reader)
    assert reader.calls == []


def test_strict_factories_return_strict_vectors():
    reader = FakeReader(floats={BASE: 2.0, BASE + 4: -3.0}, ints={BASE + 8: 9})
    v = StrictVector3.from_floats(BASE, reader)
    assert type(v) is StrictVector3
    assert v == StrictVector3(2.0, -3.0, 0.0)
    assert StrictVector2.from_ints(BASE + 4, reader) == StrictVector2(0.0, 9.0)


def test_buffer_memory_reads_little_endian_snapshot():
    snapshot = BufferMemory(struct.pack("<fff", 2.0, -3.0, 1.0), base_address=BASE)
    assert Vector4.from_floats(BASE, snapshot) == Vector4(2.0, -3.0, 1.0, 0.0)
    assert snapshot.read_float(BASE - 4) is None
    assert snapshot.read_float(BASE + 10) is None


def test_buffer_memory_int32():
    snapshot = BufferMemory(struct.pack("<iii", 100, -200, 300))
    assert Vector3.from_ints(0, snapshot) == Vector3(100.0, -200.0, 300.0)
    assert Vector2.from_ints(8, snapshot) == Vector2(300.0, 0.0)
