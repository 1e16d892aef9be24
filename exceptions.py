class GeometryError(Exception):
    """Base class for errors raised by the geometry core."""


class PointIndexError(GeometryError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Point index {index} is out of range for a collection of {size} points")


class ResourceExhaustedError(GeometryError, MemoryError):
    """Raised when a point collection cannot grow any further."""
