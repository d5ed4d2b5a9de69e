import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Patch

from .errors import DimensionMismatch
from .gate import Gate
from .truth_table import all_signals

COLORS = ['#ff9999', '#99ccff']  # 0, 1


def plot_decision_regions(gate: Gate, ax=None, figsize=(5, 4)):
    """
    Shade the half-plane where a two-input gate fires and mark the four inputs.

    The boundary is the line w1*x1 + w2*x2 = threshold. A gate with both
    weights 0 is constant and has no boundary line.
    """
    if gate.m != 2:
        raise DimensionMismatch(f"can only plot two-input gates, got {gate.m} input(s)")
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    w1, w2 = gate.weights
    xx, yy = np.meshgrid(np.linspace(-0.5, 1.5, 300),
                         np.linspace(-0.5, 1.5, 300))
    zz = np.where(w1 * xx + w2 * yy >= gate.threshold, 1, 0)

    ax.contourf(xx, yy, zz, levels=[-0.5, 0.5, 1.5], colors=COLORS, alpha=0.6)
    if (w1, w2) != (0, 0):
        ax.contour(xx, yy, w1 * xx + w2 * yy - gate.threshold, levels=[0],
                   colors='black', linewidths=2)

    points = np.array(all_signals(2))
    outputs = np.array([gate.decide(p) for p in points])
    ax.scatter(points[:, 0], points[:, 1], c=[COLORS[o] for o in outputs],
               edgecolors='black', s=80, marker='o')

    legend_elements = [
        Patch(facecolor=COLORS[1], edgecolor='k', label='Output 1'),
        Patch(facecolor=COLORS[0], edgecolor='k', label='Output 0'),
    ]
    ax.set_title(str(gate))
    ax.set_xticks([0, 1])
    ax.set_yticks([0, 1])
    ax.set_xlabel("Input x1")
    ax.set_ylabel("Input x2")
    ax.legend(handles=legend_elements, loc='upper left')
    ax.grid(True)
    return ax
