"""Demo: build a circle, square, sphere and cube at the origin and print their measures.

Output matches the original geoex program line for line, e.g.

    A circle with radius 3.5
     Circle's area is 38.4845
     Circle's circumference is 21.9911
"""
from geo.types import Point2D, Point3D
from geo.geometry import circle, square, sphere, cube
from geo.report import report
from geo.constants import DEMO_RADIUS, DEMO_SIDE, DEMO_EDGE


def build_shapes() -> list:
    """Circle, square, sphere, cube (in print order), centered at the origin."""
    p2d0 = Point2D(0, 0)
    p3d0 = Point3D(0, 0, 0)
    return [
        circle(p2d0, DEMO_RADIUS),
        square(p2d0, DEMO_SIDE),
        sphere(p3d0, DEMO_RADIUS),
        cube(p3d0, DEMO_EDGE),
    ]


def main():
    for line in report(build_shapes()):
        print(line)


if __name__ == "__main__":
    main()
