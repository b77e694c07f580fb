import numpy as np
from ffnet import (
    Network,
    DenseLayer,
    HyperbolicLayer,
    SigmoidLayer,
    SGDTrainer,
    RunLogger,
    backend,
)

# Two binary inputs per example, one binary target
INPUTS = [0.0, 0.0,
          0.0, 1.0,
          1.0, 0.0,
          1.0, 1.0]
TARGETS = [0.0,
           1.0,
           1.0,
           0.0]


def build(n_hidden):
    return Network([
        DenseLayer.random(2, n_hidden),
        HyperbolicLayer(n_hidden),
        DenseLayer.random(n_hidden, 1),
        SigmoidLayer(1),
    ])


def show(model, trainer):
    for x, t in zip(np.reshape(INPUTS, (-1, 2)), TARGETS):
        y = backend.to_cpu(model.forward(x))
        print(f"X: {x.tolist()}, Y: {y[0]:.4f}, T: {t}, loss: {float(trainer.loss.loss1(y[0], t)):.6f}")


def test(n_hidden, lr, epochs, log_run=False):
    model = build(n_hidden)
    logger = RunLogger(tag=f"xor_h{n_hidden}") if log_run else None
    trainer = SGDTrainer(epochs, lr, verbose=1, logger=logger)

    print(f"Before training ({model!r}):")
    show(model, trainer)

    trainer.train(model, INPUTS, TARGETS)

    print("After training:")
    show(model, trainer)
    print(f"Mean loss: {model.evaluate(INPUTS, TARGETS, trainer.loss):.6f}")

    if logger is not None:
        logger.save_json()
        print("Loss curve:", logger.plot_loss(tag=f"xor_h{n_hidden}"))


if __name__ == "__main__":
    backend.seed(0)

    test(n_hidden=6, lr=0.1, epochs=1000)
    test(n_hidden=8, lr=0.05, epochs=2000, log_run=True)
