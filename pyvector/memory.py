"""
Reads vector components out of an external process' address space.

The process accessor itself lives in the host application. It is handed to
this module either per call (``reader=``) or once at start-up through
:func:`set_default_reader`. Any object with ``read_float(address)`` and
``read_int32(address)`` methods that return ``None`` on failure will do.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Union

from pyvector.exceptions import MemoryReaderNotConfigured
from pyvector.utils.helpers import bytes_to_float, bytes_to_int32

logger = logging.getLogger(__name__)

COMPONENT_STRIDE = 0x04
"""Bytes between consecutive components: component i lives at address + 4 * i."""

READ_FAILURE_DEFAULT = 0.0
"""Component value used in place of a failed read."""


class MemoryReader(Protocol):
    """The two read primitives the adapter consumes."""

    def read_float(self, address: int) -> Optional[float]: ...

    def read_int32(self, address: int) -> Optional[int]: ...


_default_reader: Optional[MemoryReader] = None


def set_default_reader(reader: Optional[MemoryReader]) -> None:
    """Installs the reader used when a factory is called without ``reader=``. Pass None to clear it."""
    global _default_reader
    _default_reader = reader
    if reader is None:
        logger.debug("Default memory reader cleared.")
    else:
        logger.debug(f"Default memory reader set to {type(reader).__name__}.")


def get_default_reader() -> Optional[MemoryReader]:
    return _default_reader


def _resolve_reader(reader: Optional[MemoryReader]) -> MemoryReader:
    if reader is not None:
        return reader
    if _default_reader is None:
        raise MemoryReaderNotConfigured(
            "No memory reader passed and no default installed; call set_default_reader() first."
        )
    return _default_reader


def _read_components(read: Callable[[int], Optional[Union[int, float]]], kind: str,
                     address: int, count: int) -> List[float]:
    values: List[float] = []
    for i in range(count):
        component_address = address + COMPONENT_STRIDE * i
        try:
            value = read(component_address)
        except OSError as e:
            logger.debug(f"Reading {kind} at {component_address} raised {e!r}.")
            value = None
        if value is None:
            logger.debug(f"Read of {kind} at {component_address} failed, using {READ_FAILURE_DEFAULT}.")
            values.append(READ_FAILURE_DEFAULT)
        else:
            values.append(float(value))
    return values


def read_floats(address: int, count: int, reader: Optional[MemoryReader] = None) -> List[float]:
    """
    Reads `count` consecutive 32-bit floats starting at `address`.

    Reads are issued once each, in increasing address order. A failed read
    becomes ``READ_FAILURE_DEFAULT`` (0.0); it is never retried or raised.
    """
    source = _resolve_reader(reader)
    return _read_components(source.read_float, "float", address, count)


def read_ints(address: int, count: int, reader: Optional[MemoryReader] = None) -> List[float]:
    """Same as :func:`read_floats` but for signed 32-bit integers. Values are returned as floats."""
    source = _resolve_reader(reader)
    return _read_components(source.read_int32, "int32", address, count)


class BufferMemory:
    """
    A MemoryReader over a bytes snapshot of an address range, e.g. a region
    dumped from a process. Values are little endian. Reads that would run
    past either end of the snapshot return None.
    """

    def __init__(self, data: bytes, base_address: int = 0):
        self.data = bytes(data)
        self.base_address = base_address

    def __repr__(self) -> str:
        return f"BufferMemory(base_address={self.base_address:#x}, size={len(self.data)})"

    def _offset(self, address: int, size: int) -> Optional[int]:
        offset = address - self.base_address
        if offset < 0 or offset + size > len(self.data):
            return None
        return offset

    def read_float(self, address: int) -> Optional[float]:
        offset = self._offset(address, 4)
        if offset is None:
            return None
        return bytes_to_float(self.data, offset)

    def read_int32(self, address: int) -> Optional[int]:
        offset = self._offset(address, 4)
        if offset is None:
            return None
        return bytes_to_int32(self.data, offset)
