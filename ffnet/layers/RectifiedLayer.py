from .Layer import ActivationLayer
from ..helpers.Backend import backend, sigmoid


class RectifiedLayer(ActivationLayer):
    def output(self, inputs):
        x = self._check_inputs(backend.vector(inputs))
        return backend.maximum(x, 0.0)

    def delta_from_inputs(self, delta, inputs):
        # smoothed: the sigmoid of the input stands in for the step function
        x = self._check_inputs(backend.vector(inputs))
        d = self._check_delta(backend.vector(delta))
        return d * sigmoid(x)
