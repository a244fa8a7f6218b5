"""K-mer frequency histogram (one bar per distinct k-mer) rendered with matplotlib.

Authors: kmer_dbg contributors
Date: 2026-10-19
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")  # file output only, no display needed
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from .kmer import FrequencyMap  # noqa: E402

TITLE = "K-mer Frequency Histogram"
CANVAS_PX = (640, 480)
DPI = 100


def plot_kmer_histogram(counts: FrequencyMap, path: Union[str, Path]) -> Path:
    """
    Save a bar chart of k-mer counts as a PNG.
    x = enumeration index of each k-mer in the mapping's iteration order,
    y = its count, with the y axis running from 0 to the maximum count.
    Raises ValueError for an empty mapping.
    """
    if not counts:
        raise ValueError("cannot plot a histogram of an empty k-mer count map")

    y = np.fromiter(counts.values(), dtype=np.int64, count=len(counts))
    x = np.arange(len(y))
    max_count = int(y.max())

    fig, ax = plt.subplots(figsize=(CANVAS_PX[0] / DPI, CANVAS_PX[1] / DPI), dpi=DPI)
    try:
        ax.bar(x, y, width=1.0, align="edge", color="red")
        ax.set_xlim(0, len(y))
        ax.set_ylim(0, max_count)
        ax.set_title(TITLE, fontsize=20)
        ax.grid(True, color="0.9")
        ax.set_axisbelow(True)
        fig.tight_layout()

        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(p, dpi=DPI)
    finally:
        plt.close(fig)
    return p
