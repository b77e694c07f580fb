import numpy as np

from .errors import ShapeError
from .layers import LayerOut
from .loss import SquaredError
from .helpers.Backend import backend


class Network:
    """An ordered chain of layers, each feeding its output to the next."""

    def __init__(self, layers=None):
        self.layers = []
        for layer in layers or []:
            self.add(layer)

    def add(self, layer):
        # chain must line up: previous output width == new input width
        if self.layers and self.layers[-1].output_count() != layer.input_count():
            raise ShapeError(
                f"{layer!r} takes {layer.input_count()} inputs but "
                f"{self.layers[-1]!r} produces {self.layers[-1].output_count()}"
            )
        self.layers.append(layer)
        return self

    def __iter__(self):
        return iter(self.layers)

    def __len__(self):
        return len(self.layers)

    def __getitem__(self, i):
        return self.layers[i]

    def __repr__(self):
        return "Network([" + ", ".join(repr(L) for L in self.layers) + "])"

    def input_count(self):
        return self.layers[0].input_count() if self.layers else 0

    def output_count(self):
        return self.layers[-1].output_count() if self.layers else 0

    def forward(self, x):
        x = backend.vector(x)
        for layer in self.layers:
            x = layer.output(x)
        return x

    def forward_trace(self, x):
        return forward_trace(self.layers, x)

    def predict(self, inputs):
        # inputs: flat buffer of examples -> flat buffer of outputs
        X = split_examples(inputs, self.input_count(), "inputs")
        if len(X) == 0:
            return backend.zeros(0)
        return backend.concatenate([self.forward(x) for x in X])

    def evaluate(self, inputs, targets, loss_fn=None):
        """Mean over examples of the summed elementwise loss."""
        if loss_fn is None:
            loss_fn = SquaredError()
        X = split_examples(inputs, self.input_count(), "inputs")
        T = split_examples(targets, self.output_count(), "targets")
        if len(X) != len(T):
            raise ShapeError(f"{len(X)} input examples for {len(T)} target examples")
        if len(X) == 0:
            return 0.0
        total = 0.0
        for x, t in zip(X, T):
            total += float(backend.to_cpu(backend.sum(loss_fn.loss(self.forward(x), t))))
        return total / len(X)

    def parameters(self):
        return [L.params() for L in self.layers if L.weight_count() > 0]

    def snapshot(self):
        # Deep-copy all params into a flat list of CPU arrays
        snap = []
        for L in self.layers:
            for p in L.params():
                snap.append(np.copy(backend.to_cpu(p)))
        return snap


def split_examples(buffer, width, what="examples"):
    """View a flat buffer as rows of `width` values, one row per example."""
    flat = backend.vector(buffer)
    if width == 0:
        raise ShapeError("network has no layers")
    if len(flat) % width:
        raise ShapeError(f"{what} of length {len(flat)} is not a multiple of {width}")
    return backend.reshape(flat, (len(flat) // width, width))


def forward_trace(layers, x):
    """Forward pass for one example, keeping each layer's (inputs, output)."""
    outputs = []
    inputs = backend.vector(x)
    for layer in layers:
        out = layer.output(inputs)
        outputs.append(LayerOut(inputs, out))
        inputs = out
    return outputs
