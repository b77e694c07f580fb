from .Layer import ActivationLayer
from ..helpers.Backend import backend, sigmoid


class SigmoidLayer(ActivationLayer):
    def output(self, inputs):
        x = self._check_inputs(backend.vector(inputs))
        return sigmoid(x)

    def delta_from_outputs(self, delta, outputs):
        # dy/dx = y (1 - y)
        y = self._check_outputs(backend.vector(outputs))
        d = self._check_delta(backend.vector(delta))
        return d * (y * (1.0 - y))
