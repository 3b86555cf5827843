"""Event study visualization functions."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ._style import COLORS


def plot_event_study(
    coefs: pd.DataFrame,
    title: str = "Event Study: Zero Bail × Eligible Offenses",
    xlabel: str = "Event Time",
    reference: int | None = -1,
    ax=None,
    **kwargs,
):
    """Point estimates with confidence intervals by event time.

    Parameters
    ----------
    coefs : pd.DataFrame
        Output of ``extract_event_study``: ``event_time``, ``estimate``,
        ``ci_low``, ``ci_high``.
    title : str
        Plot title.
    xlabel : str
        X-axis label (e.g. "Weeks since statewide start").
    reference : int, optional
        Omitted period, drawn as a hollow marker at zero. A zero row for
        it in ``coefs`` (see ``extract_event_study(reference=...)``) is
        drawn the same way instead of as an estimate.
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates new figure.

    Returns
    -------
    matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=kwargs.get("figsize", (12, 6)))
    else:
        fig = ax.get_figure()

    df = coefs.sort_values("event_time")
    if reference is not None:
        df = df[df["event_time"] != reference]
    yerr = np.vstack([
        df["estimate"] - df["ci_low"],
        df["ci_high"] - df["estimate"],
    ])

    ax.errorbar(
        df["event_time"],
        df["estimate"],
        yerr=yerr,
        fmt="o",
        color=COLORS["estimate"],
        ecolor=COLORS["ci"],
        elinewidth=1.5,
        capsize=2,
        markersize=5,
        label="Estimate (95% CI)",
    )

    if reference is not None:
        ax.plot(
            [reference], [0.0], "o",
            markerfacecolor="white", markeredgecolor=COLORS["estimate"],
            label=f"Reference ({reference})",
        )

    ax.axhline(0, color=COLORS["zero"], linewidth=1)
    ax.axvline(-0.5, color=COLORS["policy"], linestyle="--", linewidth=2, alpha=0.7, label="Policy start")

    ax.set_xlabel(xlabel, fontsize=12, fontweight="bold")
    ax.set_ylabel("Effect on rearrest rate", fontsize=12, fontweight="bold")
    ax.set_title(title, fontsize=13, fontweight="bold")
    ax.legend()

    plt.tight_layout()
    return fig


def plot_rate_heatmap(
    panel: pd.DataFrame,
    event_time_col: str = "event_time_months",
    figsize: tuple[int, int] = (14, 4),
):
    """Arrest-weighted mean rearrest rate by group and event time.

    Rows are the four ``treat`` × ``zb_eligible`` groups; columns are
    event-time levels.

    Parameters
    ----------
    panel : pd.DataFrame
        Simulated panel with ``rearrests``, ``arrests``, ``treat``,
        ``zb_eligible`` and ``event_time_col``.
    event_time_col : str
        Event-time column for the x-axis.
    figsize : tuple
        Figure size.

    Returns
    -------
    matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt
    import seaborn as sns

    fig, ax = plt.subplots(figsize=figsize)

    grouped = (
        panel.groupby(["treat", "zb_eligible", event_time_col])[["rearrests", "arrests"]]
        .sum()
        .reset_index()
    )
    grouped["rate"] = grouped["rearrests"] / grouped["arrests"].where(grouped["arrests"] > 0)
    grouped["group"] = (
        grouped["treat"].map({True: "Treated", False: "Control"})
        + " / "
        + grouped["zb_eligible"].map({1: "ZB eligible", 0: "Ineligible"})
    )
    table = grouped.pivot(index="group", columns=event_time_col, values="rate")

    sns.heatmap(table, cmap="YlOrRd", cbar_kws={"label": "Rearrest rate"}, ax=ax)
    ax.set_xlabel(event_time_col.replace("_", " ").title(), fontsize=12, fontweight="bold")
    ax.set_ylabel("")
    ax.set_title("Rearrest Rate by Group and Event Time", fontsize=13, fontweight="bold")

    plt.tight_layout()
    return fig
