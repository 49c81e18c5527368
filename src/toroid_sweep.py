#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Impedance of an inductor wound on a ferrite toroid core, vs frequency.

Inductance follows the toroid formula from Fair-Rite's "Specifying a Ferrite
for EMI Suppression" (C. U. Parker):

  Z_L = jω · 4.6052e-10 · N² · (μ' − jμ'') · HT · log10(OD/ID)      [mm]

The self-resonant frequency (SRF) is modelled by a shunt capacitance Cs across
the winding; the two are combined as admittances:

  Z = 1 / (1/Z_L + jωCs)

μ'(f), μ''(f) come from the vendor's CSV for the ferrite mix (frequency [Hz],
μ', μ'' in the first three columns unless --columns is given).

Outputs
-------
  - impedance_<core>_N<turns>_....png : 2×2 panel (|Z|, R, phase, X vs MHz)
  - impedance_<core>_N<turns>_....csv : Z per frequency (skip with --no-csv)

Usage examples
--------------
List core sizes:
  python toroid_sweep.py --list-cores

12 turns on an FT-240 in Mix 31, 1–60 MHz, 0.65 pF shunt:
  python toroid_sweep.py --csv 31-Material-Fair-Rite.csv \
      --core FT-240 --turns 12 --c-shunt-pF 0.65 \
      --fmin-MHz 1 --fmax-MHz 60 --comment "12 tight turns on FT-240 Mix 31 Core"

Custom core:
  python toroid_sweep.py --csv mix43.csv --od-mm 25 --id-mm 15 --ht-mm 10 --turns 8
"""
import argparse
from pathlib import Path

import matplotlib.pyplot as plt

import cores
import ferrite_data
import physics
import plot_util
import utilities as utils
from errors import ToroidImpedanceError


def build_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Ferrite toroid inductor impedance (|Z|, phase, R, X) vs frequency with shunt-C self resonance."
    )
    p.add_argument("--list-cores", action="store_true", help="List available core sizes and exit.")
    p.add_argument("--csv", type=str, default=None, help="Ferrite mix CSV: frequency [Hz], mu', mu''.")
    p.add_argument("--columns", type=str, nargs=3, default=None, metavar=("FREQ", "MU_REAL", "MU_IMAG"),
                   help="Header names of the frequency, mu' and mu'' columns (default: first three columns).")
    p.add_argument("--delimiter", type=str, default=None, help="CSV delimiter (default: detect from header).")

    # Core + winding
    p.add_argument("--core", type=str, default=cores.DEFAULT_CORE,
                   help="Core size key (see --list-cores); --od-mm/--id-mm/--ht-mm override it.")
    p.add_argument("--od-mm", type=float, default=None, help="Outer diameter [mm].")
    p.add_argument("--id-mm", type=float, default=None, help="Inner diameter [mm].")
    p.add_argument("--ht-mm", type=float, default=None, help="Height [mm].")
    p.add_argument("--turns", type=int, default=12, help="Number of turns.")
    p.add_argument("--c-shunt-pF", type=float, default=0.65,
                   help="Shunt capacitance across the winding [pF] (0 disables the SRF).")

    # Band
    p.add_argument("--fmin-MHz", type=float, default=None, help="Drop samples below this frequency [MHz].")
    p.add_argument("--fmax-MHz", type=float, default=None, help="Drop samples above this frequency [MHz].")

    # outputs
    p.add_argument("--comment", type=str, default=None, help="Winding description for the plot title.")
    p.add_argument("--outdir", type=str, default="toroid_impedance_out", help="Output directory.")
    p.add_argument("--tag", type=str, default="", help="Optional filename tag.")
    p.add_argument("--no-csv", action="store_true", help="Do not write the impedance CSV.")
    p.add_argument("--show", action="store_true", help="Display the figure instead of only saving it.")
    return p.parse_args(argv)


def resolve_geometry(args: argparse.Namespace):
    if args.core not in cores.CORE_SIZES:
        choices = "\n".join([f"  - {k}" for k in cores.CORE_SIZES])
        raise SystemExit(f"Unknown core '{args.core}'. Available:\n{choices}")
    par = cores.CORE_SIZES[args.core]
    od_mm = args.od_mm if args.od_mm is not None else par["od_mm"]
    id_mm = args.id_mm if args.id_mm is not None else par["id_mm"]
    ht_mm = args.ht_mm if args.ht_mm is not None else par["ht_mm"]
    custom = any(v is not None for v in (args.od_mm, args.id_mm, args.ht_mm))
    core_name = "custom" if custom else args.core
    return core_name, od_mm, id_mm, ht_mm


def run(args: argparse.Namespace) -> dict:
    core_name, od_mm, id_mm, ht_mm = resolve_geometry(args)
    c_shunt = args.c_shunt_pF * 1e-12

    # Fail on bad geometry/winding before touching the data file
    physics.validate_geometry(od_mm, id_mm, ht_mm)
    physics.validate_winding(args.turns, c_shunt)

    table = ferrite_data.load_permeability_csv(args.csv, columns=args.columns, delimiter=args.delimiter)
    table = ferrite_data.trim_band(
        table,
        fmin_Hz=args.fmin_MHz * 1e6 if args.fmin_MHz is not None else None,
        fmax_Hz=args.fmax_MHz * 1e6 if args.fmax_MHz is not None else None,
    )

    freq_Hz = table["freq_Hz"].to_numpy()
    mu_real = table["mu_real"].to_numpy()
    mu_imag = table["mu_imag"].to_numpy()

    z_total = physics.toroid_impedance(
        freq_Hz, mu_real, mu_imag,
        n_turns=args.turns, od_mm=od_mm, id_mm=id_mm, ht_mm=ht_mm, c_shunt=c_shunt,
    )

    # Low-frequency inductance and the SRF it implies with Cs
    l0_h = float(physics.series_inductance(mu_real[0], args.turns, od_mm, id_mm, ht_mm))
    srf_est = float(physics.self_resonant_frequency(l0_h, c_shunt))
    srf_obs = utils.phase_zero_crossing(freq_Hz, z_total)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    tag = f"_{args.tag}" if args.tag else ""
    stem = (
        f"impedance_{core_name}_N{args.turns}_Cs{args.c_shunt_pF:g}pF_"
        f"f{freq_Hz[0] * 1e-6:g}-{freq_Hz[-1] * 1e-6:g}MHz{tag}"
    )

    saved = {}
    if not args.no_csv:
        out_csv = outdir / f"{stem}.csv"
        utils.impedance_table(freq_Hz, mu_real, mu_imag, z_total).to_csv(out_csv, index=False)
        print("Saved:", out_csv)
        saved["csv"] = out_csv

    comment = args.comment or f"{args.turns} turns on {core_name} core"
    title = plot_util.impedance_title(comment, args.turns, od_mm, id_mm, ht_mm, c_shunt)
    out_png = outdir / f"{stem}.png"

    if args.show:
        fig = plot_util.make_impedance_figure(freq_Hz, z_total, title=title)
        try:
            fig.savefig(out_png, dpi=180, bbox_inches="tight")
            print("Saved:", out_png)
            plt.show()
        finally:
            plt.close(fig)
    else:
        plot_util.make_impedance_figure(freq_Hz, z_total, title=title, out_png=str(out_png))
        print("Saved:", out_png)
    saved["png"] = out_png

    print(f"L0 = {l0_h * 1e6:.3f} uH at {freq_Hz[0] * 1e-6:g} MHz")
    if c_shunt > 0:
        print(f"Estimated SRF (L0, Cs): {srf_est * 1e-6:.3f} MHz")
    srf_sample = None
    if srf_obs is not None:
        print(f"Phase zero crossing: {srf_obs * 1e-6:.3f} MHz")
        i = utils.nearest_index(freq_Hz, srf_obs)
        srf_sample = float(freq_Hz[i])
        print(f"Nearest sample: {srf_sample * 1e-6:g} MHz, |Z| = {abs(z_total[i]):.1f} ohm")
    else:
        print("Phase zero crossing: not within the band")

    return {
        "freq_Hz": freq_Hz,
        "z_total": z_total,
        "l0_h": l0_h,
        "srf_est_Hz": srf_est,
        "srf_obs_Hz": srf_obs,
        "srf_sample_Hz": srf_sample,
        "saved": saved,
    }


def main(argv=None) -> None:
    args = build_args(argv)

    if args.list_cores:
        print("Available cores (OD x ID x HT, mm):")
        for k, par in cores.CORE_SIZES.items():
            print(f" - {k}: {par['od_mm']:g} x {par['id_mm']:g} x {par['ht_mm']:g}")
        return

    if args.csv is None:
        raise SystemExit("--csv is required (ferrite mix table: frequency, mu', mu'')")

    try:
        run(args)
    except ToroidImpedanceError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
