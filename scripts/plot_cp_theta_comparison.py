from __future__ import annotations

"""Plot Cp-theta comparison of local-inclination pressure methods."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from hypaero.core.oblique_shock import detachment_limit
from hypaero.core.panel_pressure import sweep_pressure_coefficients

METHODS = (
    "modified_newtonian",
    "tangent_wedge",
    "empirical_tangent_wedge",
    "empirical_tangent_cone",
    "dahlem_buck",
    "smyth",
)


def main() -> None:
    cases = [2.0, 4.0, 8.0, 16.0]
    gamma = 1.4
    theta_deg = np.linspace(0.5, 90.0, 359)

    fig, axes = plt.subplots(2, 2, figsize=(12, 8), constrained_layout=True)
    axes = axes.ravel()

    legend_handles = None
    legend_labels = None
    for ax, mach in zip(axes, cases):
        df = sweep_pressure_coefficients(METHODS, theta_deg, mach, gamma, on_error="skip")
        theta_max_deg = np.degrees(detachment_limit(mach, gamma)[0])

        lines = []
        for method in METHODS:
            line, = ax.plot(df["deltar_deg"], df[f"Cp_{method}"], label=method, lw=1.8)
            lines.append(line)
        line_th = ax.axvline(theta_max_deg, color="tab:red", ls=":", lw=1.6, label="theta_max")
        lines.append(line_th)

        if legend_handles is None:
            legend_handles = lines
            legend_labels = [h.get_label() for h in legend_handles]

        ax.set_title(f"M={mach:g}, gamma={gamma}")
        ax.set_xlabel("theta [deg]")
        ax.set_ylabel("Cp")
        ax.grid(True, alpha=0.25)

    fig.suptitle("Cp vs Theta: local-inclination methods")
    fig.legend(
        legend_handles,
        legend_labels,
        loc="lower center",
        bbox_to_anchor=(0.5, -0.04),
        ncol=4,
        frameon=False,
    )

    out_dir = Path("outputs")
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "cp_theta_method_comparison.png"
    fig.savefig(out_path, dpi=180, bbox_inches="tight")
    print(out_path)


if __name__ == "__main__":
    main()
