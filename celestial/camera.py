import numpy as np

from . import constants as C


class Camera:
    """Turn held arrow keys into a per-frame translation of the system."""

    def __init__(self, speed=C.CAMERA_SPEED):
        self.speed = float(speed)

    def offset(self, left, right, up, down, dt):
        """Return the shift to apply to every body this frame.

        Moving the view left shifts the bodies right, and so on.
        """
        direction = np.array(
            [float(left) - float(right), float(up) - float(down)], dtype=float
        )
        return direction * self.speed * dt
