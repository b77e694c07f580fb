import csv
import json

from ffnet import DenseLayer, SGDTrainer, RunLogger


def test_log_epoch_writes_csv_once_with_header(tmp_path):
    logger = RunLogger(root=tmp_path, tag="unit")
    logger.log_epoch(1, loss=0.5, time_s=0.01)
    logger.log_epoch(2, loss=0.25, time_s=0.01)

    assert logger.dir.parent == tmp_path
    assert logger.dir.name.startswith("unit_")
    with open(logger.csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["epoch"] for r in rows] == ["1", "2"]
    assert float(rows[1]["loss"]) == 0.25
    assert logger.history("loss") == [0.5, 0.25]


def test_save_json(tmp_path):
    logger = RunLogger(root=tmp_path)
    logger.log_epoch(1, loss=1.0)
    path = logger.save_json()
    with open(path) as f:
        assert json.load(f) == [{"epoch": 1, "loss": 1.0}]


def test_plot_loss_saves_png(tmp_path):
    logger = RunLogger(root=tmp_path, tag="plot")
    for ep, loss in enumerate([1.0, 0.5, 0.2], start=1):
        logger.log_epoch(ep, loss=loss)
    path = logger.plot_loss(tag="plot")
    assert path.endswith("loss_curve_plot_epochs_3.png")
    assert (logger.dir / "plots" / "loss_curve_plot_epochs_3.png").stat().st_size > 0


def test_trainer_records_every_epoch(tmp_path):
    logger = RunLogger(root=tmp_path, tag="fit")
    layer = DenseLayer.uniform(0.0, 1, 1)
    SGDTrainer(8, 0.05, logger=logger).train([layer], [1.0, 2.0], [2.0, 4.0])

    assert [m["epoch"] for m in logger.metrics] == list(range(1, 9))
    assert all(set(m) == {"epoch", "time_s", "loss"} for m in logger.metrics)
    losses = logger.history("loss")
    # first epoch sees the untrained layer: (0 - 2)^2 + (0 - 4)^2 over 2 examples
    assert losses[0] == 10.0
    assert all(b < a for a, b in zip(losses, losses[1:]))
