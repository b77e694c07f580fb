from .Layer import Layer, ActivationLayer
from .DenseLayer import DenseLayer
from .HyperbolicLayer import HyperbolicLayer
from .SigmoidLayer import SigmoidLayer
from .RectifiedLayer import RectifiedLayer
from .LayerOut import LayerOut
from .LayerUpdates import LayerUpdates

# closed list of layer variants
LAYER_TYPES = {
    "dense": DenseLayer,
    "hyperbolic": HyperbolicLayer,
    "sigmoid": SigmoidLayer,
    "rectified": RectifiedLayer,
}

__all__ = [
    "Layer",
    "ActivationLayer",
    "DenseLayer",
    "HyperbolicLayer",
    "SigmoidLayer",
    "RectifiedLayer",
    "LayerOut",
    "LayerUpdates",
    "LAYER_TYPES",
]
