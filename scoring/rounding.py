import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, so 62.5 becomes 63."""
    return int(math.floor(value + 0.5))
