"""
Strict vector types.

Same math as the fast types in ``vector``, but every constructor, operator and
method validates its operands first and raises a named error from
``pyvector.exceptions`` on misuse. Geometric edge cases are handled as follows:

* ``normalize()`` of a zero vector returns the zero vector.
* ``project()`` / ``project_on_plane()`` onto a zero vector raise
  DegenerateProjectionTarget.
* ``angle_between()`` with a zero vector raises DegenerateAngleOperands.

Division by a zero scalar is not special-cased and yields inf/NaN, as in the
fast types.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar, Optional, Tuple

from pyvector.exceptions import (
    DegenerateAngleOperands,
    DegenerateProjectionTarget,
    InvalidArgumentType,
    InvalidOperand,
)
from pyvector.memory import MemoryReader
from pyvector.utils.helpers import is_number
from .vector import PlanarOps, SpatialOps, VectorOps

logger = logging.getLogger(__name__)


class StrictVectorOps(VectorOps):
    __slots__ = ()

    def __post_init__(self):
        for name in self.COMPONENTS:
            value = getattr(self, name)
            if not is_number(value):
                raise InvalidArgumentType(type(self).__name__, name, type(value))
        super().__post_init__()

    def _check_vector(self, other, operator: str) -> None:
        if type(other) is not type(self):
            raise InvalidOperand(type(self).__name__, operator, type(self).__name__)

    def _check_scalar(self, scalar, operator: str) -> None:
        if not is_number(scalar):
            raise InvalidOperand(type(self).__name__, operator, "a number")

    def __add__(self, other):
        self._check_vector(other, "+")
        return super().__add__(other)

    def __radd__(self, other):
        raise InvalidOperand(type(self).__name__, "+", type(self).__name__)

    def __sub__(self, other):
        self._check_vector(other, "-")
        return super().__sub__(other)

    def __rsub__(self, other):
        raise InvalidOperand(type(self).__name__, "-", type(self).__name__)

    def __mul__(self, scalar):
        self._check_scalar(scalar, "*")
        return super().__mul__(scalar)

    def __rmul__(self, scalar):
        self._check_scalar(scalar, "*")
        return super().__mul__(scalar)

    def __truediv__(self, scalar):
        self._check_scalar(scalar, "/")
        return super().__truediv__(scalar)

    def __rtruediv__(self, other):
        raise InvalidOperand(type(self).__name__, "/", f"{type(self).__name__} / number")

    def normalize(self):
        """Returns a new vector of length 1, or the zero vector if this one has zero length."""
        if self.magnitude() == 0:
            logger.debug(f"Normalizing a zero-length {type(self).__name__}; returning the zero vector.")
            return type(self)()
        return super().normalize()

    def dot(self, other) -> float:
        self._check_vector(other, "dot")
        return super().dot(other)

    def distance_to(self, other) -> float:
        self._check_vector(other, "distance_to")
        return super().distance_to(other)

    def lerp(self, other, t: float):
        self._check_vector(other, "lerp")
        if not is_number(t):
            raise InvalidArgumentType(f"{type(self).__name__}.lerp", "t", type(t))
        return super().lerp(other, t)

    @classmethod
    def _check_address(cls, address, where: str) -> None:
        if not is_number(address):
            raise InvalidArgumentType(f"{cls.__name__}.{where}", "address", type(address))

    @classmethod
    def from_floats(cls, address: int, reader: Optional[MemoryReader] = None):
        cls._check_address(address, "from_floats")
        return super().from_floats(address, reader)

    @classmethod
    def from_ints(cls, address: int, reader: Optional[MemoryReader] = None):
        cls._check_address(address, "from_ints")
        return super().from_ints(address, reader)


class StrictPlanarOps(StrictVectorOps, PlanarOps):
    __slots__ = ()

    def _check_projection_target(self, target, operator: str) -> None:
        self._check_vector(target, operator)
        if target.magnitude_squared() == 0:
            raise DegenerateProjectionTarget(
                f"{type(self).__name__}.{operator}: cannot project onto a zero-magnitude vector"
            )

    def project(self, other):
        self._check_projection_target(other, "project")
        return super().project(other)

    def angle_between(self, other) -> float:
        self._check_vector(other, "angle_between")
        if self.magnitude() * other.magnitude() == 0:
            raise DegenerateAngleOperands(
                f"{type(self).__name__}.angle_between: cannot compute angle with a zero-magnitude vector"
            )
        return super().angle_between(other)


class StrictSpatialOps(StrictPlanarOps, SpatialOps):
    __slots__ = ()

    def cross(self, other):
        self._check_vector(other, "cross")
        return super().cross(other)

    def project_on_plane(self, normal):
        self._check_projection_target(normal, "project_on_plane")
        return super().project_on_plane(normal)


@dataclasses.dataclass(slots=True, frozen=True)
class StrictVector2(StrictPlanarOps):
    """A validated 2D vector with x and y components."""
    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y")

    x: float = 0.0
    y: float = 0.0

StrictVector2.ZERO = StrictVector2(0.0, 0.0)


@dataclasses.dataclass(slots=True, frozen=True)
class StrictVector3(StrictSpatialOps):
    """A validated 3D vector with x, y, and z components."""
    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

StrictVector3.ZERO = StrictVector3(0.0, 0.0, 0.0)


@dataclasses.dataclass(slots=True, frozen=True)
class StrictVector4(StrictVectorOps):
    """A validated 4D vector with x, y, z, and w components."""
    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y", "z", "w")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

StrictVector4.ZERO = StrictVector4(0.0, 0.0, 0.0, 0.0)
