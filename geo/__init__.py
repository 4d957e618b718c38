"""Planar and spatial shape records with area, perimeter, and volume formulas."""

from .types import (
    Point2D, Point3D,
    Circle, Rectangle, Square, Sphere, Cube,
    Shape, Shape2D, Shape3D,
)
from .geometry import (
    GeometryError,
    circle, rectangle, square, sphere, cube,
    area, perimeter, volume,
    dims, check_dims, fmt_num,
)
from .report import describe, report
