"""
Fast vector types.

These perform no operand or domain checks: degenerate input produces IEEE
inf/NaN components and misuse fails with whatever builtin error Python
raises. See ``vector_strict`` for the validated counterparts.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Iterator, Optional, Tuple

from pyvector import memory
from pyvector.memory import MemoryReader
from pyvector.settings import Settings
from pyvector.types import kernel


class VectorOps:
    """Operations shared by every arity. Subclasses are slotted dataclasses."""
    __slots__ = ()

    COMPONENTS: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        # Store every component as a float; ints come in from the int32 reader.
        for name in self.COMPONENTS:
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def _from_components(cls, components):
        return cls(*components)

    def to_tuple(self) -> Tuple[float, ...]:
        """Returns the components in order (x, y[, z][, w])."""
        return tuple(getattr(self, name) for name in self.COMPONENTS)

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __str__(self) -> str:
        return format(self, f".{Settings.STR_PRECISION}f")

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        parts = ", ".join(format(c, spec) for c in self.to_tuple())
        return f"{type(self).__name__}({parts})"

    def __add__(self, other):
        return self._from_components(kernel.add(self.to_tuple(), other.to_tuple()))

    def __sub__(self, other):
        return self._from_components(kernel.sub(self.to_tuple(), other.to_tuple()))

    def __mul__(self, scalar):
        return self._from_components(kernel.scale(self.to_tuple(), scalar))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return self._from_components(kernel.divide(self.to_tuple(), scalar))

    def __neg__(self):
        return self._from_components(kernel.negate(self.to_tuple()))

    def magnitude_squared(self) -> float:
        """Returns the squared magnitude of the vector."""
        return kernel.magnitude_squared(self.to_tuple())

    def magnitude(self) -> float:
        """Returns the magnitude (length) of the vector."""
        return kernel.magnitude(self.to_tuple())

    def normalize(self):
        """Returns a new vector of length 1. A zero vector gives NaN components."""
        return self._from_components(kernel.normalize(self.to_tuple()))

    def dot(self, other) -> float:
        """Calculates the dot product with another vector."""
        return kernel.dot(self.to_tuple(), other.to_tuple())

    def distance_to(self, other) -> float:
        """Euclidean distance between the two points."""
        return kernel.distance(self.to_tuple(), other.to_tuple())

    def lerp(self, other, t: float):
        """
        Linear interpolation towards `other`. t=0 gives self, t=1 gives other;
        values outside [0, 1] extrapolate.
        """
        return self._from_components(kernel.lerp(self.to_tuple(), other.to_tuple(), t))

    @classmethod
    def from_floats(cls, address: int, reader: Optional[MemoryReader] = None):
        """
        Builds a vector from consecutive 32-bit floats in process memory,
        one every 4 bytes starting at `address`. Failed reads become 0.0.
        """
        return cls._from_components(memory.read_floats(address, len(cls.COMPONENTS), reader))

    @classmethod
    def from_ints(cls, address: int, reader: Optional[MemoryReader] = None):
        """Like from_floats, but reads signed 32-bit integers."""
        return cls._from_components(memory.read_ints(address, len(cls.COMPONENTS), reader))


class PlanarOps(VectorOps):
    """Projection and angle, available on 2 and 3 component vectors."""
    __slots__ = ()

    def project(self, other):
        """Projects this vector onto `other`. Projecting onto a zero vector gives NaN components."""
        return self._from_components(kernel.project(self.to_tuple(), other.to_tuple()))

    def angle_between(self, other) -> float:
        """Angle to `other` in radians, in [0, pi]. NaN if either vector has zero length."""
        return kernel.angle_between(self.to_tuple(), other.to_tuple())


class SpatialOps(PlanarOps):
    """Cross product and plane projection, 3 component vectors only."""
    __slots__ = ()

    def cross(self, other):
        """Calculates the right-handed cross product with another vector."""
        return self._from_components(kernel.cross(self.to_tuple(), other.to_tuple()))

    def project_on_plane(self, normal):
        """Removes the component along `normal`, leaving the part lying in the plane."""
        return self._from_components(kernel.project_on_plane(self.to_tuple(), normal.to_tuple()))


@dataclasses.dataclass(slots=True, frozen=True)
class Vector2(PlanarOps):
    """A 2D vector with x and y components."""
    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y")

    x: float = 0.0
    y: float = 0.0

Vector2.ZERO = Vector2(0.0, 0.0)


@dataclasses.dataclass(slots=True, frozen=True)
class Vector3(SpatialOps):
    """A 3D vector with x, y, and z components."""
    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

Vector3.ZERO = Vector3(0.0, 0.0, 0.0)


@dataclasses.dataclass(slots=True, frozen=True)
class Vector4(VectorOps):
    """A 4D vector with x, y, z, and w components."""
    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y", "z", "w")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

Vector4.ZERO = Vector4(0.0, 0.0, 0.0, 0.0)
