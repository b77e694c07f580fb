from ..errors import expect_len
from ..helpers.Backend import add_mut


class Layer:
    # Subclasses override as needed
    def input_count(self):
        raise NotImplementedError

    def output_count(self):
        raise NotImplementedError

    def output(self, inputs):
        # Forward pass for a single example of length input_count()
        raise NotImplementedError

    def delta_from_outputs(self, delta, outputs):
        """
        Propagate the delta signal (length output_count()) through this layer using
        the layer's own output. Suitable when the derivative is easily expressed in
        terms of the output. Returns a vector of length input_count(), or None when
        the layer does not implement this form.
        """
        return None

    def delta_from_inputs(self, delta, inputs):
        """
        Same as delta_from_outputs, but computed from the layer's input.
        """
        return None

    def delta(self, delta, inputs, outputs):
        """
        Derivative of the layer with respect to its inputs, used for chain
        differentiation. The outputs form wins when both are implemented.
        """
        result = self.delta_from_outputs(delta, outputs)
        if result is None:
            result = self.delta_from_inputs(delta, inputs)
        if result is None:
            raise NotImplementedError(
                f"{self.__class__.__name__} implements no backward derivative"
            )
        return result

    def derivw(self, inputs):
        # Derivative of the outputs with respect to the weights, None if no weights
        return None

    # ----- trainable parameters -----
    def weight_count(self):
        return 0

    def neuron_count(self):
        return 0

    def weights_mut(self):
        return None

    def bias_mut(self):
        return None

    def update(self, weight_updates, bias_updates):
        """Add the given deltas into the weights and biases in place."""
        weights = self.weights_mut()
        biases = self.bias_mut()
        # check both before touching either buffer
        if weights is not None:
            expect_len(weight_updates, len(weights), f"{self.__class__.__name__} weight update")
        if biases is not None:
            expect_len(bias_updates, len(biases), f"{self.__class__.__name__} bias update")
        if weights is not None:
            add_mut(weights, weight_updates)
        if biases is not None:
            add_mut(biases, bias_updates)

    def params(self):
        # Return list of parameter arrays (e.g., [W, b])
        return [p for p in (self.weights_mut(), self.bias_mut()) if p is not None]

    # ----- shape checks -----
    def _check_inputs(self, inputs):
        return expect_len(inputs, self.input_count(), f"{self.__class__.__name__} input")

    def _check_outputs(self, outputs):
        return expect_len(outputs, self.output_count(), f"{self.__class__.__name__} output")

    def _check_delta(self, delta):
        return expect_len(delta, self.output_count(), f"{self.__class__.__name__} delta")

    def __repr__(self):
        return f"{self.__class__.__name__}({self.input_count()} -> {self.output_count()})"


class ActivationLayer(Layer):
    """Elementwise activation: same width in and out, no trainable parameters."""
    def __init__(self, size):
        self.size = int(size)

    def input_count(self):
        return self.size

    def output_count(self):
        return self.size

    def __repr__(self):
        return f"{self.__class__.__name__}(size={self.size})"
