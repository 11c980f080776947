import math


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def velocity_from_angle(speed: float, angle: float, direction: int):
    """Split a speed into (vx, vy).

    `angle` is measured from the horizontal, `direction` is -1 (left) or
    +1 (right) and only affects the horizontal component.
    """
    return direction * speed * math.cos(angle), speed * math.sin(angle)
