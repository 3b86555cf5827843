"""Event-study chart style, palette and normal critical values."""

from __future__ import annotations

COLORS = {
    "estimate": "#3D405B",
    "ci": "#81B29A",
    "policy": "#E63946",
    "zero": "#6c757d",
}

# Two-sided normal critical values by confidence level
Z_VALUES = {
    0.80: 1.282,
    0.90: 1.645,
    0.95: 1.960,
    0.99: 2.576,
}

RC_PARAMS = {
    "figure.dpi": 100,
    "savefig.dpi": 150,
    "axes.spines.top": False,
    "axes.spines.right": False,
    "axes.grid": True,
    "axes.grid.axis": "y",
    "grid.alpha": 0.3,
    "errorbar.capsize": 2,
    "legend.frameon": False,
    "font.size": 11,
}


def get_z(ci: float) -> float:
    """Critical value for a supported confidence level."""
    try:
        return Z_VALUES[ci]
    except KeyError:
        raise ValueError(f"Unsupported CI level: {ci}. Use one of {sorted(Z_VALUES)}") from None


def apply_style() -> None:
    """Update matplotlib rcParams with ``RC_PARAMS``."""
    import matplotlib.pyplot as plt

    plt.rcParams.update(RC_PARAMS)
