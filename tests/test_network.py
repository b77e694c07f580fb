import numpy as np
import pytest

from ffnet import (
    ShapeError,
    Network,
    DenseLayer,
    HyperbolicLayer,
    SigmoidLayer,
    RectifiedLayer,
    SquaredError,
)


def small_network():
    return Network([
        DenseLayer([1.0, -1.0, 0.5, 0.5], [0.0, 0.1], (2, 2)),
        RectifiedLayer(2),
        DenseLayer([2.0, 1.0], [0.5], (2, 1)),
    ])


def test_chain_widths_must_line_up():
    net = Network([DenseLayer.uniform(0.1, 2, 3)])
    with pytest.raises(ShapeError):
        net.add(HyperbolicLayer(4))
    net.add(HyperbolicLayer(3)).add(DenseLayer.uniform(0.1, 3, 1))
    assert len(net) == 3
    assert net.input_count() == 2
    assert net.output_count() == 1


def test_constructor_checks_chain():
    with pytest.raises(ShapeError):
        Network([DenseLayer.uniform(0.1, 2, 3), SigmoidLayer(2)])


def test_forward():
    # hidden: relu([1 - 2, 0.5 + 1 + 0.1]) = [0, 1.6]; out: 0 + 1.6 + 0.5
    np.testing.assert_allclose(small_network().forward([1.0, 2.0]), [2.1], rtol=1e-6)


def test_forward_trace_chains_outputs_into_inputs():
    net = small_network()
    trace = net.forward_trace([1.0, 2.0])
    assert len(trace) == 3
    np.testing.assert_allclose(trace[0].inputs, [1.0, 2.0])
    for prev, cur in zip(trace, trace[1:]):
        np.testing.assert_allclose(cur.inputs, prev.output)
    np.testing.assert_allclose(trace[-1].output, net.forward([1.0, 2.0]))


def test_predict_flat_buffer():
    net = small_network()
    out = net.predict([1.0, 2.0, 0.0, 0.0])
    assert out.shape == (2,)
    np.testing.assert_allclose(out, [2.1, 0.6], rtol=1e-6)


def test_predict_rejects_partial_example():
    with pytest.raises(ShapeError):
        small_network().predict([1.0, 2.0, 3.0])


def test_evaluate():
    net = small_network()
    # errors: 2.1 - 2.0 and 0.6 - 0.0
    assert net.evaluate([1.0, 2.0, 0.0, 0.0], [2.0, 0.0], SquaredError()) == pytest.approx((0.01 + 0.36) / 2, rel=1e-5)
    with pytest.raises(ShapeError):
        net.evaluate([1.0, 2.0, 0.0, 0.0], [2.0])


def test_parameters_and_snapshot():
    net = small_network()
    params = net.parameters()
    assert len(params) == 2
    snap = net.snapshot()
    assert len(snap) == 4
    net[0].update([1.0] * 4, [1.0] * 2)
    np.testing.assert_allclose(snap[0], [1.0, -1.0, 0.5, 0.5])
    np.testing.assert_allclose(net.snapshot()[0], [2.0, 0.0, 1.5, 1.5])


def test_empty_network():
    net = Network()
    assert len(net) == 0
    assert net.input_count() == 0
    with pytest.raises(ShapeError):
        net.predict([1.0])
