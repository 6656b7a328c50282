"""
Library-wide settings and constants.
"""


class Settings:
    """
    Tunables shared by every vector type. They are read at call time, so a
    host application may override them on the class, e.g.
    ``Settings.STR_PRECISION = 4``.

    The memory layout (4-byte stride, 0.0 for failed reads) is fixed and lives
    in ``pyvector.memory``; it is not configurable.
    """

    STR_PRECISION: int = 2
    """Number of decimal places used when a vector is converted with str()."""
