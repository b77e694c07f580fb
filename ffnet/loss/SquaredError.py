from .LossFunction import DifferentiableLossFunction


class SquaredError(DifferentiableLossFunction):
    """e = (y - t)^2, with derivative de/dy = 2 * (y - t)."""

    def loss1(self, pred, target):
        return (pred - target) * (pred - target)

    def deriv1(self, pred, target):
        return 2.0 * (pred - target)
