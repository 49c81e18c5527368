#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Imports:
import numpy as np
import pandas as pd


def nearest_index(arr, target):
    arr = np.asarray(arr)
    return int(np.argmin(np.abs(arr - target)))


def phase_deg(z):
    return np.degrees(np.angle(z))


def phase_zero_crossing(freq_Hz, z):
    """
    First frequency where the impedance phase falls through 0° (inductive -> capacitive),
    linearly interpolated between samples. Returns None when the phase never crosses.

    :param freq_Hz: ascending frequencies
    :param z: complex impedance at each frequency
    :return: crossing frequency [Hz] or None
    """
    freq_Hz = np.asarray(freq_Hz, dtype=float)
    ph = phase_deg(z)
    idx = np.flatnonzero((ph[:-1] > 0) & (ph[1:] <= 0))
    if idx.size == 0:
        return None
    i = int(idx[0])
    # phase wraps at ±180°, so only accept a crossing through 0, not a wrap
    if ph[i] - ph[i + 1] > 180.0:
        return None
    f0, f1 = freq_Hz[i], freq_Hz[i + 1]
    p0, p1 = ph[i], ph[i + 1]
    if p0 == p1:
        return float(f0)
    return float(f0 + (f1 - f0) * p0 / (p0 - p1))


def impedance_table(freq_Hz, mu_real, mu_imag, z) -> pd.DataFrame:
    z = np.asarray(z, dtype=complex)
    return pd.DataFrame({
        "freq_Hz": np.asarray(freq_Hz, dtype=float),
        "mu_real": np.asarray(mu_real, dtype=float),
        "mu_imag": np.asarray(mu_imag, dtype=float),
        "Z_real_ohm": z.real,
        "Z_imag_ohm": z.imag,
        "Z_mag_ohm": np.abs(z),
        "Z_phase_deg": phase_deg(z),
    })
