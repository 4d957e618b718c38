"""Shared test fixtures for geo shape tests."""
import pytest
from geo.types import Point2D, Point3D
from geo.geometry import circle, square, sphere, cube
from geo.constants import DEMO_RADIUS, DEMO_SIDE, DEMO_EDGE


@pytest.fixture(scope="session")
def p2d0():
    """Planar origin."""
    return Point2D(0, 0)


@pytest.fixture(scope="session")
def p3d0():
    """Spatial origin."""
    return Point3D(0, 0, 0)


@pytest.fixture(scope="session")
def demo_circle(p2d0):
    return circle(p2d0, DEMO_RADIUS)


@pytest.fixture(scope="session")
def demo_square(p2d0):
    return square(p2d0, DEMO_SIDE)


@pytest.fixture(scope="session")
def demo_sphere(p3d0):
    return sphere(p3d0, DEMO_RADIUS)


@pytest.fixture(scope="session")
def demo_cube(p3d0):
    return cube(p3d0, DEMO_EDGE)
