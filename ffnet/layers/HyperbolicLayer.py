from .Layer import ActivationLayer
from ..helpers.Backend import backend


class HyperbolicLayer(ActivationLayer):
    def output(self, inputs):
        x = self._check_inputs(backend.vector(inputs))
        return backend.tanh(x)

    def delta_from_outputs(self, delta, outputs):
        # y = tanh(x) and dy/dx = 1 - y^2
        y = self._check_outputs(backend.vector(outputs))
        d = self._check_delta(backend.vector(delta))
        return d * (1.0 - y * y)
