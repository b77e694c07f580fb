class ShapeError(ValueError):
    """A vector length disagrees with the width a layer, loss or network declares."""


def expect_len(values, expected, what="vector"):
    n = len(values)
    if n != expected:
        raise ShapeError(f"{what} has length {n}, expected {expected}")
    return values
