# helpers/logger.py
import csv, json, datetime, pathlib
import matplotlib.pyplot as plt


class RunLogger:
    def __init__(self, root="runs", tag="run"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
        self.root = pathlib.Path(root)
        self.dir = self.root / f"{tag}_{ts}"
        self.dir.mkdir(parents=True, exist_ok=True)
        self.csv_path = self.dir / "history.csv"
        self.json_path = self.dir / "history.json"
        self.metrics = []  # list of dicts per epoch
        self._csv_header_written = False

    # ---------- logging ----------
    def log_epoch(self, epoch, **kwargs):
        row = {"epoch": int(epoch), **{k: float(v) for k, v in kwargs.items()}}
        self.metrics.append(row)
        with open(self.csv_path, "a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(row.keys()))
            if not self._csv_header_written:
                writer.writeheader()
                self._csv_header_written = True
            writer.writerow(row)

    def history(self, key="loss"):
        return [m[key] for m in self.metrics if key in m]

    def save_json(self):
        with open(self.json_path, "w") as f:
            json.dump(self.metrics, f, indent=2)
        return str(self.json_path)

    # ---------- plotting ----------
    def _plots_dir(self, subdir):
        out = self.dir / subdir
        out.mkdir(parents=True, exist_ok=True)
        return out

    def plot_loss(self, history=None, tag="run", subdir="plots", loss_name="Squared Error"):
        """
        Saves the training loss curve as loss_curve_<tag>_epochs_<n>.png.
        Uses the logged epochs when no history list is given.
        """
        train = self.history("loss") if history is None else list(history)
        outdir = self._plots_dir(subdir)
        plt.figure()
        if len(train) > 0:
            plt.plot(range(1, len(train) + 1), train, label="train loss")
            plt.legend()
        plt.xlabel("Epoch")
        plt.ylabel(f"{loss_name} Loss")
        plt.title(f"Loss vs Epochs ({tag})")
        plt.tight_layout()
        path = outdir / f"loss_curve_{tag}_epochs_{len(train)}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return str(path)
