"""
Dense win-percentage network.

Architecture: 5 normalized team stats → 16 (ReLU) → 8 (ReLU) → 1 (sigmoid).
Trained with MSE and Adam for a fixed number of epochs; there is no early
stopping, the weights from the last epoch are kept.
"""

import logging
from pathlib import Path

import numpy as np
import torch
import torch.nn as nn

from nba_winpct.core.interfaces import BaseModel
from nba_winpct.core.schema import FEATURE_DIM, TrainingBundle
from nba_winpct.models.registry import register

log = logging.getLogger(__name__)


class WinPctNetwork(nn.Module):

    def __init__(self, input_dim: int = FEATURE_DIM, hidden_sizes: list[int] = None):
        super().__init__()
        hidden_sizes = hidden_sizes or [16, 8]

        layers = []
        prev_dim = input_dim
        for h in hidden_sizes:
            layers.extend([nn.Linear(prev_dim, h), nn.ReLU()])
            prev_dim = h
        layers.extend([nn.Linear(prev_dim, 1), nn.Sigmoid()])

        self.net = nn.Sequential(*layers)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        """Forward pass. Returns win% in [0, 1], shape (N,)."""
        return self.net(x).squeeze(-1)


@register("dense")
class DenseModel(BaseModel):

    def __init__(
        self,
        hidden_sizes: list[int] = None,
        lr: float = 0.001,
        epochs: int = 200,
        batch_size: int = 32,
        seed: int | None = None,
    ):
        self.config = dict(input_dim=FEATURE_DIM, hidden_sizes=list(hidden_sizes or [16, 8]))
        self.lr = lr
        self.epochs = epochs
        self.batch_size = batch_size
        self.seed = seed
        self.net: WinPctNetwork | None = None
        self.device = "cpu"

    def fit(self, train: TrainingBundle, val: TrainingBundle) -> dict:
        generator = torch.Generator()
        if self.seed is not None:
            generator.manual_seed(self.seed)
            # Seed weight init without touching the process-wide RNG
            with torch.random.fork_rng(devices=[]):
                torch.manual_seed(self.seed)
                net = WinPctNetwork(**self.config).to(self.device)
        else:
            generator.seed()
            net = WinPctNetwork(**self.config).to(self.device)

        optimizer = torch.optim.Adam(net.parameters(), lr=self.lr)
        criterion = nn.MSELoss()

        X_t, y_t = self._to_tensors(train)
        X_v, y_v = self._to_tensors(val)

        history = {"train_loss": [], "val_loss": []}

        for epoch in range(self.epochs):
            net.train()
            perm = torch.randperm(len(X_t), generator=generator)
            epoch_loss, n_batch = 0.0, 0

            for i in range(0, len(perm), self.batch_size):
                idx = perm[i:i + self.batch_size]
                loss = criterion(net(X_t[idx]), y_t[idx])
                optimizer.zero_grad()
                loss.backward()
                optimizer.step()
                epoch_loss += loss.item()
                n_batch += 1

            train_loss = epoch_loss / max(n_batch, 1)

            net.eval()
            with torch.no_grad():
                val_loss = criterion(net(X_v), y_v).item() if len(X_v) else float("nan")

            history["train_loss"].append(train_loss)
            history["val_loss"].append(val_loss)

            log.debug(f"Epoch {epoch}: loss = {train_loss:.6f}, val_loss = {val_loss:.6f}")
            if epoch % 10 == 0:
                log.info(f"Dense epoch {epoch}: train={train_loss:.4f} val={val_loss:.4f}")

        self.net = net
        return history

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        if self.net is None:
            raise RuntimeError("Model not fitted")
        self.net.eval()
        x = torch.as_tensor(np.asarray(X, dtype=np.float32), device=self.device)
        with torch.no_grad():
            return self.net(x).cpu().numpy()

    def save(self, path: str, **extra):
        if self.net is None:
            raise RuntimeError("Model not fitted")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        torch.save({
            "state_dict": self.net.state_dict(),
            "config": self.config,
            **extra,
        }, path)
        log.info(f"Dense model saved to {path}")

    def load(self, path: str) -> dict:
        """Restore weights. Returns the full checkpoint dict (including extras)."""
        data = torch.load(path, weights_only=False)
        self.config = data["config"]
        self.net = WinPctNetwork(**self.config).to(self.device)
        self.net.load_state_dict(data["state_dict"])
        self.net.eval()
        return data

    def _to_tensors(self, bundle: TrainingBundle):
        return (
            torch.tensor(bundle.features, dtype=torch.float32, device=self.device),
            torch.tensor(bundle.labels, dtype=torch.float32, device=self.device),
        )
