from .Layer import Layer
from ..errors import expect_len
from ..helpers.Backend import backend, normal_vector


class DenseLayer(Layer):
    def __init__(self, weights, bias, shape):
        # shape: (inputs per neuron, number of neurons)
        # weights: flat, one contiguous row of `inputs` values per neuron
        # bias: (neurons,)
        self.shape = (int(shape[0]), int(shape[1]))
        inputs, neurons = self.shape
        self.weights = backend.vector(weights).copy()
        self.bias = backend.vector(bias).copy()
        expect_len(self.weights, inputs * neurons, "DenseLayer weights")
        expect_len(self.bias, neurons, "DenseLayer bias")

    @classmethod
    def uniform(cls, val, inputs, neurons):
        return cls(
            backend.full(inputs * neurons, val),
            backend.full(neurons, val),
            (inputs, neurons),
        )

    @classmethod
    def random(cls, inputs, neurons):
        return cls(normal_vector(inputs * neurons), normal_vector(neurons), (inputs, neurons))

    def input_count(self):
        return self.shape[0]

    def output_count(self):
        return self.shape[1]

    def _rows(self):
        # (neurons, inputs) view on the flat weight buffer
        return backend.reshape(self.weights, (self.shape[1], self.shape[0]))

    def output(self, inputs):
        # Output is a vector of weight row and input dot products plus bias
        x = self._check_inputs(backend.vector(inputs))
        return backend.matmul(self._rows(), x) + self.bias

    def delta_from_inputs(self, delta, inputs):
        self._check_inputs(inputs)
        d = self._check_delta(backend.vector(delta))
        # transpose-matrix-vector product, summed over neurons
        return backend.matmul(d, self._rows())

    def derivw(self, inputs):
        """
        Derivative with respect to the weights: the input vector repeated once per
        neuron, laid out like the weight buffer.
        """
        x = self._check_inputs(backend.vector(inputs))
        return backend.tile(x, self.shape[1])

    def weight_count(self):
        return len(self.weights)

    def neuron_count(self):
        return self.output_count()

    def weights_mut(self):
        return self.weights

    def bias_mut(self):
        return self.bias

    def __repr__(self):
        return f"DenseLayer(inputs={self.shape[0]}, neurons={self.shape[1]})"
