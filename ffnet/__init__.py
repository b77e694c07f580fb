"""
ffnet - a small feedforward neural network built on numpy.

A network is a chain of layers; SGDTrainer adjusts the dense layers' weights
and biases from labelled examples by back-propagating the loss derivative.
"""
from .errors import ShapeError
from .layers import (
    Layer,
    DenseLayer,
    HyperbolicLayer,
    SigmoidLayer,
    RectifiedLayer,
    LayerOut,
    LayerUpdates,
    LAYER_TYPES,
)
from .loss import LossFunction, DifferentiableLossFunction, SquaredError
from .Network import Network
from .optimizer import SupervisedTrainer, SGDTrainer
from .helpers.Backend import backend
from .helpers.logger import RunLogger

__version__ = "0.1.0"
