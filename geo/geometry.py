"""Shape construction, area/perimeter/volume formulas, and formatting."""
import math
from .types import (
    Point2D, Point3D,
    Circle, Rectangle, Square, Sphere, Cube,
    Shape, Shape2D, Shape3D,
)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Construction
# ============================================================
def _split_center(name: str, args: tuple, n_coords: int, n_dims: int):
    """Split (center, *dims) or (*coords, *dims) into a point and the dims.

    Raises TypeError unless args match one of the two forms exactly.
    """
    point_t = Point2D if n_coords == 2 else Point3D
    pts = [isinstance(a, (Point2D, Point3D)) for a in args]
    if len(args) == 1 + n_dims and isinstance(args[0], point_t) and not any(pts[1:]):
        return args[0], args[1:]
    if len(args) == n_coords + n_dims and not any(pts):
        return point_t(*args[:n_coords]), args[n_coords:]
    raise TypeError(
        f"{name}() takes a {point_t.__name__} or {n_coords} coordinates plus "
        f"{n_dims} dimension(s), got {len(args)} arguments")

def circle(*args: float | Point2D) -> Circle:
    """circle(center, radius) or circle(x, y, radius)."""
    c, (r,) = _split_center("circle", args, 2, 1)
    return Circle(c, r)

def rectangle(*args: float | Point2D) -> Rectangle:
    """rectangle(center, width, height) or rectangle(x, y, width, height)."""
    c, (w, h) = _split_center("rectangle", args, 2, 2)
    return Rectangle(c, w, h)

def square(*args: float | Point2D) -> Square:
    """square(center, side) or square(x, y, side)."""
    c, (s,) = _split_center("square", args, 2, 1)
    return Square(c, s)

def sphere(*args: float | Point3D) -> Sphere:
    """sphere(center, radius) or sphere(x, y, z, radius).

    The equatorial circle sits on the XY projection of the center.
    """
    c, (r,) = _split_center("sphere", args, 3, 1)
    return Sphere(c, Circle(c.xy, r))

def cube(*args: float | Point3D) -> Cube:
    """cube(center, edge) or cube(x, y, z, edge).

    The face square sits on the XY projection of the center.
    """
    c, (a,) = _split_center("cube", args, 3, 1)
    return Cube(c, Square(c.xy, a))

# ============================================================
# Formulas
# ============================================================
def area(shape: Shape) -> float:
    """Planar area, or surface area for spatial shapes."""
    if isinstance(shape, Circle):
        return math.pi * shape.radius * shape.radius
    if isinstance(shape, Rectangle):
        return shape.width * shape.height
    if isinstance(shape, Square):
        return shape.side * shape.side
    if isinstance(shape, Sphere):
        return 4 * math.pi * shape.radius * shape.radius
    if isinstance(shape, Cube):
        return area(shape.square) * 6
    raise TypeError(f"Not a shape: {type(shape).__name__}")

def perimeter(shape: Shape) -> float:
    """Length of the boundary of a planar shape.

    Spatial shapes have no perimeter and report 0, except the sphere,
    which reports the circumference of its equatorial circle. A cube's
    perimeter is ambiguous (edges only, or edges and face diagonals?)
    so it keeps the 0 default.
    """
    if isinstance(shape, Circle):
        return 2 * math.pi * shape.radius
    if isinstance(shape, Rectangle):
        return 2 * shape.width + 2 * shape.height
    if isinstance(shape, Square):
        return shape.side * 4
    if isinstance(shape, Sphere):
        return perimeter(shape.circle)
    if isinstance(shape, Cube):
        return 0.0
    raise TypeError(f"Not a shape: {type(shape).__name__}")

def volume(shape: Shape3D) -> float:
    """Enclosed volume of a spatial shape. Raises GeometryError for planar shapes."""
    if isinstance(shape, Sphere):
        r = shape.radius
        return 4.0/3.0 * math.pi * r * r * r
    if isinstance(shape, Cube):
        a = shape.edge
        return a * a * a
    if isinstance(shape, Shape2D):
        raise GeometryError(f"Planar shape has no volume: {type(shape).__name__}")
    raise TypeError(f"Not a shape: {type(shape).__name__}")

# ============================================================
# Dimensions
# ============================================================
def dims(shape: Shape) -> dict[str, float]:
    """Defining dimensions of a shape, in declaration order."""
    if isinstance(shape, (Circle, Sphere)):
        return {"radius": shape.radius}
    if isinstance(shape, Rectangle):
        return {"width": shape.width, "height": shape.height}
    if isinstance(shape, Square):
        return {"side": shape.side}
    if isinstance(shape, Cube):
        return {"edge": shape.edge}
    raise TypeError(f"Not a shape: {type(shape).__name__}")

def check_dims(shape: Shape) -> Shape:
    """Return shape unchanged if every dimension is positive.

    Constructors accept any number; call this to opt in to validation.
    Raises GeometryError naming the first bad dimension (NaN included).
    """
    for name, v in dims(shape).items():
        if not v > 0:
            raise GeometryError(f"{type(shape).__name__} {name} must be positive: {v}")
    return shape

# ============================================================
# Formatting Helpers
# ============================================================
def fmt_num(v: float) -> str:
    """Format a number with 6 significant digits, e.g. 38.4845, 9, 153.938."""
    return f"{v:g}"
