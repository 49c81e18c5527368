import os
import sys

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))


@pytest.fixture
def mix_csv(tmp_path):
    """Small Mix-31-like permeability table, 1-60 MHz."""
    freq = np.array([1e6, 2e6, 5e6, 10e6, 20e6, 30e6, 40e6, 50e6, 60e6])
    mu_p = np.array([1500, 1450, 1200, 800, 400, 250, 170, 120, 90], dtype=float)
    mu_pp = np.array([300, 450, 650, 700, 550, 420, 330, 270, 230], dtype=float)
    path = tmp_path / "mix31.csv"
    lines = ["Frequency,u',u''"]
    lines += [f"{f:g},{a:g},{b:g}" for f, a, b in zip(freq, mu_p, mu_pp)]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="table.csv"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
