from .LossFunction import LossFunction, DifferentiableLossFunction
from .SquaredError import SquaredError

__all__ = ["LossFunction", "DifferentiableLossFunction", "SquaredError"]
