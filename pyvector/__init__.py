# Basic package metadata.

__version__ = "0.1.0"

from .exceptions import (
    VectorError,
    InvalidArgumentType,
    InvalidOperand,
    DegenerateProjectionTarget,
    DegenerateAngleOperands,
    MemoryReaderNotConfigured,
)
from .settings import Settings
from .memory import BufferMemory, MemoryReader, set_default_reader, get_default_reader
from .types import (
    Vector2, Vector3, Vector4,
    StrictVector2, StrictVector3, StrictVector4,
)

__all__ = [
    "__version__",
    # Vector types
    "Vector2", "Vector3", "Vector4",
    "StrictVector2", "StrictVector3", "StrictVector4",
    # Errors
    "VectorError", "InvalidArgumentType", "InvalidOperand",
    "DegenerateProjectionTarget", "DegenerateAngleOperands", "MemoryReaderNotConfigured",
    # Configuration and memory access
    "Settings", "BufferMemory", "MemoryReader", "set_default_reader", "get_default_reader",
]
