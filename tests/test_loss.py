import numpy as np
import pytest

from ffnet import ShapeError, SquaredError, LossFunction


def test_squared_error_scalar():
    loss = SquaredError()
    assert loss.loss1(3.0, 1.0) == pytest.approx(4.0)
    assert loss.deriv1(3.0, 1.0) == pytest.approx(4.0)
    assert loss.deriv1(1.0, 3.0) == pytest.approx(-4.0)
    assert loss.loss1(0.5, 0.5) == 0.0


def test_squared_error_vectorized():
    loss = SquaredError()
    np.testing.assert_allclose(loss.loss([1.0, 0.0, -1.0], [0.0, 0.0, 1.0]), [1.0, 0.0, 4.0])
    np.testing.assert_allclose(loss.deriv([1.0, 0.0, -1.0], [0.0, 0.0, 1.0]), [2.0, 0.0, -4.0])


def test_vectorized_length_mismatch_is_fatal():
    loss = SquaredError()
    with pytest.raises(ShapeError):
        loss.loss([1.0, 2.0], [1.0])
    with pytest.raises(ShapeError):
        loss.deriv([1.0], [1.0, 2.0])


def test_plain_loss_function_is_not_differentiable():
    class Absolute(LossFunction):
        def loss1(self, pred, target):
            return abs(pred - target)

    loss = Absolute()
    np.testing.assert_allclose(loss.loss([1.0, -2.0], [0.0, 0.0]), [1.0, 2.0])
    assert not hasattr(loss, "deriv")
