import os
import numpy as np
import matplotlib.pyplot as plt

import utilities as utils

LINE_COLOR = (0.3010, 0.7450, 0.9330)


def impedance_title(
    comment: str,
    n_turns: int,
    od_mm: float,
    id_mm: float,
    ht_mm: float,
    c_shunt: float,
) -> str:
    """
    Three-line figure title: comment, winding/geometry, shunt capacitance in pF.
    """
    return (
        f"Calculated Impedance of {comment}\n"
        f"N = {n_turns} turns | OD = {od_mm:g} mm, ID = {id_mm:g} mm, HT = {ht_mm:g} mm\n"
        f"(shunt capacitance = {c_shunt * 1e12:g} pF)"
    )


def _style_axis(ax, title: str, ylabel: str) -> None:
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.grid(True, which="major", color="k", alpha=0.4)
    ax.minorticks_on()
    ax.grid(True, which="minor", color="k", alpha=0.15, linestyle=":")


def make_impedance_figure(
    freq_Hz: np.ndarray,
    z_total: np.ndarray,
    *,
    title: str,
    out_png: str | None = None,
    mark_srf: bool = True,
    figsize: tuple[float, float] = (12, 8),
    dpi: int = 180,
):
    """
    2x2 panel of the impedance curve vs frequency (MHz):

      [0, 0] |Z|        [0, 1] Resistance Re(Z)
      [1, 0] Phase      [1, 1] Reactance Im(Z)

    With out_png the figure is saved and closed and the PNG path is returned;
    otherwise the open figure is returned.
    """
    freq_Hz = np.asarray(freq_Hz, dtype=float)
    z_total = np.asarray(z_total, dtype=complex)
    if freq_Hz.shape != z_total.shape:
        raise ValueError(f"freq_Hz {freq_Hz.shape} and z_total {z_total.shape} differ in shape")

    x = freq_Hz * 1e-6

    fig, axes = plt.subplots(2, 2, figsize=figsize, sharex=True, constrained_layout=True)

    panels = [
        (axes[0, 0], np.abs(z_total), "Impedance Magnitude (|Z|)", "Ohms"),
        (axes[0, 1], z_total.real, "Resistance", "Ohms"),
        (axes[1, 0], utils.phase_deg(z_total), "Impedance Phase", "Degrees"),
        (axes[1, 1], z_total.imag, "Reactance", "Ohms"),
    ]
    for ax, y, ax_title, ylabel in panels:
        ax.plot(x, y, color=LINE_COLOR, linestyle="-", linewidth=2)
        _style_axis(ax, ax_title, ylabel)

    for ax in axes[-1, :]:
        ax.set_xlabel("MHz")

    if mark_srf:
        f_srf = utils.phase_zero_crossing(freq_Hz, z_total)
        if f_srf is not None:
            for ax in axes.flat:
                ax.axvline(f_srf * 1e-6, color="0.4", linestyle="--", linewidth=1)
            axes[1, 0].annotate(
                f"SRF ≈ {f_srf * 1e-6:.2f} MHz",
                xy=(f_srf * 1e-6, 0.0),
                xytext=(5, 5),
                textcoords="offset points",
                fontsize=9,
            )

    fig.suptitle(title, fontweight="bold")

    if out_png is None:
        return fig

    try:
        out_dir = os.path.dirname(os.path.abspath(out_png))
        os.makedirs(out_dir, exist_ok=True)
        fig.savefig(out_png, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    return out_png
