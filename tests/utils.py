import numpy as np


def get_point(pixels, center, r, theta):
    """Helper to get the RGBA pixel at given polar coordinates (theta in radians)."""
    x = int(center + r * np.cos(theta))
    y = int(center + r * np.sin(theta))
    return pixels[y, x]
