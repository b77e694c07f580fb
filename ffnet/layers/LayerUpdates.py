from ..helpers.Backend import backend


class LayerUpdates:
    """Pending weight and bias deltas for one layer, accumulated over an epoch."""
    __slots__ = ("ws", "bs")

    def __init__(self, ws, bs):
        self.ws = ws
        self.bs = bs

    @classmethod
    def zeros(cls, layer):
        return cls(backend.zeros(layer.weight_count()), backend.zeros(layer.neuron_count()))
