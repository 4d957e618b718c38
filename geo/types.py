"""Point and shape records for the geo package."""
from typing import NamedTuple

# ============================================================
# Points
# ============================================================
class Point2D(NamedTuple):
    x: float; y: float

class Point3D(NamedTuple):
    x: float; y: float; z: float

    @property
    def xy(self) -> Point2D:
        """Projection onto the XY plane."""
        return Point2D(self.x, self.y)

# ============================================================
# Shape Equality
# ============================================================
# Shape records compare and hash by (type, fields), so a Circle and a
# Square with the same fields stay distinct.
def _shape_eq(self, other) -> bool:
    return type(self) is type(other) and tuple.__eq__(self, other)

def _shape_ne(self, other) -> bool:
    return not _shape_eq(self, other)

def _shape_hash(self) -> int:
    return hash((type(self).__name__, tuple.__hash__(self)))

# ============================================================
# Planar Shapes
# ============================================================
class Circle(NamedTuple):
    center: Point2D
    radius: float
    __eq__ = _shape_eq; __ne__ = _shape_ne; __hash__ = _shape_hash

class Rectangle(NamedTuple):
    center: Point2D
    width: float; height: float
    __eq__ = _shape_eq; __ne__ = _shape_ne; __hash__ = _shape_hash

class Square(NamedTuple):
    center: Point2D
    side: float
    __eq__ = _shape_eq; __ne__ = _shape_ne; __hash__ = _shape_hash

# ============================================================
# Spatial Shapes
# ============================================================
class Sphere(NamedTuple):
    """Sphere holding its equatorial circle (built on center.xy)."""
    center: Point3D
    circle: Circle
    __eq__ = _shape_eq; __ne__ = _shape_ne; __hash__ = _shape_hash

    @property
    def radius(self) -> float:
        return self.circle.radius

class Cube(NamedTuple):
    """Cube holding one face square (built on center.xy)."""
    center: Point3D
    square: Square
    __eq__ = _shape_eq; __ne__ = _shape_ne; __hash__ = _shape_hash

    @property
    def edge(self) -> float:
        return self.square.side

Shape2D = Circle | Rectangle | Square
Shape3D = Sphere | Cube
Shape = Shape2D | Shape3D
