class LayerOut:
    """The (inputs, output) pair one layer saw during a single forward pass."""
    __slots__ = ("inputs", "output")

    def __init__(self, inputs, output):
        self.inputs = inputs
        self.output = output
