"""
End-to-end runs of the toroid_sweep command line driver.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

import toroid_sweep


class TestToroidSweep:

    def test_end_to_end(self, mix_csv, tmp_path, capsys):
        outdir = tmp_path / "out"
        args = toroid_sweep.build_args([
            "--csv", str(mix_csv), "--core", "FT-240", "--turns", "12",
            "--c-shunt-pF", "0.65", "--outdir", str(outdir), "--tag", "mix31",
        ])
        result = toroid_sweep.run(args)

        assert result["z_total"].shape == result["freq_Hz"].shape == (9,)
        assert result["saved"]["png"].is_file()
        df = pd.read_csv(result["saved"]["csv"])
        assert list(df.columns) == [
            "freq_Hz", "mu_real", "mu_imag", "Z_real_ohm", "Z_imag_ohm", "Z_mag_ohm", "Z_phase_deg",
        ]
        np.testing.assert_allclose(df["Z_mag_ohm"], np.abs(result["z_total"]))
        assert result["saved"]["png"].name.endswith("_mix31.png")

        out = capsys.readouterr().out
        assert "Saved:" in out
        assert "Estimated SRF" in out
        assert "Nearest sample:" in out
        assert result["srf_sample_Hz"] in result["freq_Hz"]
        assert abs(result["srf_sample_Hz"] - result["srf_obs_Hz"]) <= np.max(np.diff(result["freq_Hz"]))

    def test_band_and_no_csv(self, mix_csv, tmp_path):
        args = toroid_sweep.build_args([
            "--csv", str(mix_csv), "--fmin-MHz", "5", "--fmax-MHz", "40",
            "--no-csv", "--outdir", str(tmp_path),
        ])
        result = toroid_sweep.run(args)
        assert result["freq_Hz"][0] == 5e6
        assert result["freq_Hz"][-1] == 40e6
        assert "csv" not in result["saved"]

    def test_custom_geometry_overrides_core(self, mix_csv, tmp_path):
        args = toroid_sweep.build_args([
            "--csv", str(mix_csv), "--od-mm", "25", "--id-mm", "15", "--ht-mm", "10",
            "--outdir", str(tmp_path),
        ])
        assert toroid_sweep.resolve_geometry(args) == ("custom", 25.0, 15.0, 10.0)

    def test_zero_shunt_has_no_srf(self, mix_csv, tmp_path):
        args = toroid_sweep.build_args([
            "--csv", str(mix_csv), "--c-shunt-pF", "0", "--outdir", str(tmp_path),
        ])
        result = toroid_sweep.run(args)
        assert np.isinf(result["srf_est_Hz"])

    def test_list_cores(self, capsys):
        toroid_sweep.main(["--list-cores"])
        out = capsys.readouterr().out
        assert "FT-240: 61 x 35.55 x 12.7" in out

    def test_unknown_core(self, mix_csv):
        with pytest.raises(SystemExit, match="Unknown core"):
            toroid_sweep.main(["--csv", str(mix_csv), "--core", "FT-999"])

    def test_missing_csv_argument(self):
        with pytest.raises(SystemExit, match="--csv is required"):
            toroid_sweep.main([])

    def test_invalid_geometry_exits_before_loading(self, tmp_path):
        with pytest.raises(SystemExit, match="outer diameter"):
            toroid_sweep.main([
                "--csv", str(tmp_path / "absent.csv"), "--od-mm", "10", "--id-mm", "10",
                "--outdir", str(tmp_path),
            ])

    def test_bad_table_exits(self, write_csv, tmp_path):
        path = write_csv("f,a\n1e6,10\n")
        with pytest.raises(SystemExit, match="error:"):
            toroid_sweep.main(["--csv", str(path), "--outdir", str(tmp_path)])

    def test_show_saves_and_closes_figure(self, mix_csv, tmp_path, monkeypatch):
        shown = []
        monkeypatch.setattr(toroid_sweep.plt, "show", lambda: shown.append(True))
        args = toroid_sweep.build_args([
            "--csv", str(mix_csv), "--show", "--no-csv", "--outdir", str(tmp_path),
        ])
        before = len(plt.get_fignums())
        result = toroid_sweep.run(args)
        assert shown == [True]
        assert result["saved"]["png"].is_file()
        assert len(plt.get_fignums()) == before

    def test_show_closes_figure_when_display_fails(self, mix_csv, tmp_path, monkeypatch):
        def _fail():
            raise RuntimeError("no display")

        monkeypatch.setattr(toroid_sweep.plt, "show", _fail)
        args = toroid_sweep.build_args([
            "--csv", str(mix_csv), "--show", "--no-csv", "--outdir", str(tmp_path),
        ])
        before = len(plt.get_fignums())
        with pytest.raises(RuntimeError, match="no display"):
            toroid_sweep.run(args)
        assert len(plt.get_fignums()) == before
