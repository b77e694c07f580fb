class SupervisedTrainer:
    """A training algorithm for a layer chain."""

    def train(self, network, inputs, targets):
        raise NotImplementedError
