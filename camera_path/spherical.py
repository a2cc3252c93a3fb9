"""
Spherical Interpolation - Great-circle blending of directions
Math helpers for the path animator
"""

import numpy as np

# Shorter vectors normalize to zero
NORMALIZE_EPSILON = 1e-5


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of v

    Returns the zero vector when v is (almost) zero-length.
    """
    v = np.asarray(v, dtype=np.float64)
    norm = np.linalg.norm(v)
    if norm > NORMALIZE_EPSILON:
        return v / norm
    return np.zeros(3)


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Linear interpolation of two vectors, t clamped to [0, 1]"""
    t = float(np.clip(t, 0.0, 1.0))
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return a + (b - a) * t


def lerp_scalar(a: float, b: float, t: float) -> float:
    """Linear interpolation of two scalars, t clamped to [0, 1]"""
    t = float(np.clip(t, 0.0, 1.0))
    return a + (b - a) * t


def slerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """
    Spherical interpolation between two unit directions

    Args:
        a: Start direction (unit length)
        b: End direction (unit length)
        t: Interpolation factor in [0, 1]

    Returns:
        np.ndarray: Direction on the great-circle arc from a to b

    For antipodal inputs the orthogonal component has no direction and
    normalizes to zero, so the result is a * cos(pi * t): it shrinks to
    (almost) zero length at t = 0.5 and flips to b at t = 1.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    dot = float(np.clip(np.dot(a, b), -1.0, 1.0))
    theta = np.arccos(dot) * t

    # Component of b orthogonal to a
    relative = normalize(b - a * dot)

    return a * np.cos(theta) + relative * np.sin(theta)


def interpolate_on_sphere(start: np.ndarray, end: np.ndarray,
                          center: np.ndarray, t: float) -> np.ndarray:
    """
    Interpolate a point around a sphere center

    Direction is slerped, distance from the center is lerped.

    Args:
        start: Start position (world space)
        end: End position (world space)
        center: Sphere center
        t: Interpolation factor in [0, 1]

    Returns:
        np.ndarray: Interpolated world position
    """
    center = np.asarray(center, dtype=np.float64)
    start_rel = np.asarray(start, dtype=np.float64) - center
    end_rel = np.asarray(end, dtype=np.float64) - center

    direction = slerp(normalize(start_rel), normalize(end_rel), t)
    magnitude = lerp_scalar(np.linalg.norm(start_rel), np.linalg.norm(end_rel), t)

    return center + direction * magnitude


if __name__ == "__main__":
    # Testing
    a = np.array([1.0, 0.0, 0.0])
    b = np.array([0.0, 1.0, 0.0])
    print(f"slerp(a, b, 0.5) = {slerp(a, b, 0.5)}")
    print(f"On sphere: {interpolate_on_sphere([10, 0, 0], [0, 10, 0], [0, 0, 0], 0.5)}")
