"""Small integer helpers."""


def min_int(x: int, y: int) -> int:
    """Return the smaller of two integers."""
    return y if x > y else x


def max_int(x: int, y: int) -> int:
    """Return the larger of two integers."""
    return y if x < y else x


def abs_int(x: int) -> int:
    """Return the absolute value of an integer."""
    return x if x > 0 else -x