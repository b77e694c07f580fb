from ..errors import ShapeError
from ..helpers.Backend import backend


class LossFunction:
    """A loss function - also known as an error function."""

    def loss1(self, pred, target):
        # Loss for a single prediction vs target
        raise NotImplementedError

    def loss(self, preds, targets):
        """Elementwise loss of the predictions vs the targets."""
        preds, targets = _pair(preds, targets)
        return self.loss1(preds, targets)


class DifferentiableLossFunction(LossFunction):
    def deriv1(self, pred, target):
        # Derivative of a single loss value with respect to the prediction
        raise NotImplementedError

    def deriv(self, preds, targets):
        """Elementwise derivative of the loss with respect to the predictions."""
        preds, targets = _pair(preds, targets)
        return self.deriv1(preds, targets)


def _pair(preds, targets):
    preds = backend.vector(preds)
    targets = backend.vector(targets)
    if len(preds) != len(targets):
        raise ShapeError(f"{len(preds)} predictions for {len(targets)} targets")
    return preds, targets
