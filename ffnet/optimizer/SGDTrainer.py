import time

from .SupervisedTrainer import SupervisedTrainer
from ..errors import ShapeError
from ..layers import LayerUpdates
from ..loss import SquaredError
from ..Network import forward_trace, split_examples
from ..helpers.Backend import backend, add_mut


class SGDTrainer(SupervisedTrainer):
    """
    Gradient descent trainer.

    Gradients from every example are accumulated over the whole dataset and applied
    once at the end of each epoch (full-batch descent).
    """

    def __init__(self, epochs, rate, loss=None, verbose=0, logger=None):
        if not rate > 0:
            raise ValueError(f"learning rate must be positive, got {rate}")
        if epochs < 0 or int(epochs) != epochs:
            raise ValueError(f"epochs must be a non-negative integer, got {epochs}")
        self.epochs = int(epochs)
        self.rate = float(rate)
        self.loss = loss if loss is not None else SquaredError()
        self.verbose = verbose
        self.logger = logger

    def _weight_step(self, layer, inputs, delta):
        step = backend.zeros(layer.weight_count())
        derivs = layer.derivw(inputs)
        if derivs is not None:
            if len(derivs) != len(step):
                raise ShapeError(f"{layer!r}: {len(derivs)} weight derivatives for {len(step)} weights")
            if len(delta) != layer.neuron_count():
                raise ShapeError(f"{layer!r}: delta of length {len(delta)} for {layer.neuron_count()} neurons")
            # weight i belongs to neuron i // input_count
            step -= self.rate * backend.repeat(delta, layer.input_count()) * derivs
        return step

    def _bias_step(self, layer, delta):
        step = backend.zeros(layer.neuron_count())
        if layer.neuron_count() > 0:
            if len(delta) != layer.neuron_count():
                raise ShapeError(f"{layer!r}: delta of length {len(delta)} for {layer.neuron_count()} neurons")
            step -= self.rate * delta
        return step

    def train(self, network, inputs, targets):
        layers = list(network)
        if not layers:
            raise ShapeError("cannot train an empty network")
        X = split_examples(inputs, layers[0].input_count(), "inputs")
        T = split_examples(targets, layers[-1].output_count(), "targets")
        if len(X) != len(T):
            raise ShapeError(f"{len(X)} input examples for {len(T)} target examples")

        log_interval = max(1, self.epochs // 10)
        for ep in range(1, self.epochs + 1):
            t0 = time.time()
            updates = [LayerUpdates.zeros(L) for L in layers]
            total_loss = 0.0

            for x, t in zip(X, T):
                # forward pass
                outputs = forward_trace(layers, x)
                y = outputs[-1].output
                total_loss += float(backend.to_cpu(backend.sum(self.loss.loss(y, t))))

                # error differential
                delta_signal = self.loss.deriv(y, t)

                # backward pass
                for L, lo, lu in zip(reversed(layers), reversed(outputs), reversed(updates)):
                    add_mut(lu.ws, self._weight_step(L, lo.inputs, delta_signal))
                    add_mut(lu.bs, self._bias_step(L, delta_signal))
                    delta_signal = L.delta(delta_signal, lo.inputs, lo.output)

            # update batch
            for L, lu in zip(layers, updates):
                L.update(lu.ws, lu.bs)

            train_loss = total_loss / len(X) if len(X) else 0.0
            if self.verbose > 0:
                if ep % log_interval == 0 or ep == 1 or ep == self.epochs:
                    print(f"Epoch {ep}/{self.epochs} - loss: {train_loss:.4f}")
            if self.logger is not None:
                self.logger.log_epoch(ep, time_s=time.time() - t0, loss=train_loss)
