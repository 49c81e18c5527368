#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Imports:
import numpy as np

from errors import NumericDomainError

# H per mm of core height, per unit of relative permeability, per decade of OD/ID:
# mu0 / (2 pi) * ln(10) * 1e-3
K_TOROID = 4.6052e-10


def validate_geometry(od_mm, id_mm, ht_mm):
    dims = {"od_mm": od_mm, "id_mm": id_mm, "ht_mm": ht_mm}
    for name, value in dims.items():
        if not np.isfinite(value) or value <= 0:
            raise NumericDomainError(f"{name} must be a positive finite number, got {value!r}")
    if od_mm <= id_mm:
        raise NumericDomainError(
            f"outer diameter ({od_mm:g} mm) must exceed inner diameter ({id_mm:g} mm)"
        )


def validate_winding(n_turns, c_shunt):
    if isinstance(n_turns, bool) or not np.isfinite(n_turns) or int(n_turns) != n_turns or n_turns < 1:
        raise NumericDomainError(f"n_turns must be an integer >= 1, got {n_turns!r}")
    if not np.isfinite(c_shunt) or c_shunt < 0:
        raise NumericDomainError(f"c_shunt must be a finite non-negative capacitance, got {c_shunt!r}")


def core_factor(od_mm, id_mm, ht_mm):
    """
    Geometry term HT * log10(OD/ID) of the toroid inductance formula [mm].
    """
    validate_geometry(od_mm, id_mm, ht_mm)
    return ht_mm * np.log10(od_mm / id_mm)


def inductor_impedance(freq_Hz, mu_real, mu_imag, n_turns, od_mm, id_mm, ht_mm):
    """
    Z_L(f) = jω K N² (μ' − jμ'') HT log10(OD/ID)

    Real part is the core loss resistance, imaginary part the reactance.
    """
    validate_winding(n_turns, 0.0)
    freq_Hz = np.asarray(freq_Hz, dtype=float)
    mu_real = np.asarray(mu_real, dtype=float)
    mu_imag = np.asarray(mu_imag, dtype=float)
    if not (freq_Hz.shape == mu_real.shape == mu_imag.shape):
        raise NumericDomainError(
            f"frequency and permeability arrays differ in shape: "
            f"{freq_Hz.shape}, {mu_real.shape}, {mu_imag.shape}"
        )

    jw = 1j * 2.0 * np.pi * freq_Hz
    z_l = jw * K_TOROID * n_turns**2 * (mu_real - 1j * mu_imag) * core_factor(od_mm, id_mm, ht_mm)

    if np.any(z_l == 0):
        idx = int(np.flatnonzero(z_l == 0)[0])
        raise NumericDomainError(
            f"inductor impedance is zero at sample {idx} "
            f"(f={freq_Hz.flat[idx]:g} Hz, mu'={mu_real.flat[idx]:g}, mu''={mu_imag.flat[idx]:g})"
        )
    return z_l


def capacitor_admittance(freq_Hz, c_shunt):
    return 1j * 2.0 * np.pi * np.asarray(freq_Hz, dtype=float) * c_shunt


def z2y(z):
    z = np.asarray(z, dtype=complex)
    if np.any(z == 0):
        raise NumericDomainError("cannot invert a zero impedance")
    return 1.0 / z


def y2z(y):
    y = np.asarray(y, dtype=complex)
    if np.any(y == 0):
        raise NumericDomainError("cannot invert a zero admittance")
    return 1.0 / y


def parallel_shunt(z_l, freq_Hz, c_shunt):
    """
    Inductor in parallel with the shunt capacitance; admittances add.
    """
    y_tot = z2y(z_l) + capacitor_admittance(freq_Hz, c_shunt)
    return y2z(y_tot)


def toroid_impedance(freq_Hz, mu_real, mu_imag, *, n_turns, od_mm, id_mm, ht_mm, c_shunt):
    """
    Total impedance of an N-turn winding on a ferrite toroid with a shunt capacitance
    modelling its self resonance. Returns one complex value per frequency.
    """
    validate_geometry(od_mm, id_mm, ht_mm)
    validate_winding(n_turns, c_shunt)
    z_l = inductor_impedance(freq_Hz, mu_real, mu_imag, n_turns, od_mm, id_mm, ht_mm)
    return parallel_shunt(z_l, freq_Hz, c_shunt)


def series_inductance(mu_real, n_turns, od_mm, id_mm, ht_mm):
    """Equivalent series inductance [H], Im(Z_L)/ω."""
    return K_TOROID * n_turns**2 * np.asarray(mu_real, dtype=float) * core_factor(od_mm, id_mm, ht_mm)


def series_resistance(freq_Hz, mu_imag, n_turns, od_mm, id_mm, ht_mm):
    """Equivalent series core-loss resistance [Ω], Re(Z_L)."""
    w = 2.0 * np.pi * np.asarray(freq_Hz, dtype=float)
    return w * K_TOROID * n_turns**2 * np.asarray(mu_imag, dtype=float) * core_factor(od_mm, id_mm, ht_mm)


def self_resonant_frequency(l_h, c_f):
    """
    f_srf = 1 / (2π sqrt(L C)); infinite when there is no shunt capacitance.
    """
    l_h = np.asarray(l_h, dtype=float)
    if c_f == 0:
        return np.full_like(l_h, np.inf)[()]
    return 1.0 / (2.0 * np.pi * np.sqrt(l_h * c_f))
