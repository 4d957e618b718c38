"""Plain-text shape reports for the geoex demo."""
from .types import Circle, Sphere, Shape, Shape3D
from .geometry import area, perimeter, volume, dims, fmt_num


def describe(shape: Shape) -> list[str]:
    """Report lines for one shape: dimensions, area, perimeter, volume (3D only).

    e.g. ["A circle with radius 3.5", " Circle's area is 38.4845",
          " Circle's circumference is 21.9911"]
    """
    name = type(shape).__name__
    spatial = isinstance(shape, Shape3D)
    d = " and ".join(f"{k} {fmt_num(v)}" for k, v in dims(shape).items())
    area_lbl = "surface area" if spatial else "area"
    per_lbl = "circumference" if isinstance(shape, (Circle, Sphere)) else "perimeter"

    lines = [
        f"A {name.lower()} with {d}",
        f" {name}'s {area_lbl} is {fmt_num(area(shape))}",
        f" {name}'s {per_lbl} is {fmt_num(perimeter(shape))}",
    ]
    if spatial:
        lines.append(f" {name}'s volume is {fmt_num(volume(shape))}")
    return lines


def report(shapes: list[Shape]) -> list[str]:
    """Concatenated describe() lines for several shapes, in order."""
    return [line for s in shapes for line in describe(s)]
