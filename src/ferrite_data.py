#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ferrite mix permeability tables (frequency, μ', μ'') as published by core vendors.

The vendor CSV carries a header row followed by numeric rows. Unless column
names are given, the first three columns are read by position as

    frequency [Hz], μ' (mu_real), μ'' (mu_imag)

Loaded tables are returned as a DataFrame with columns
``freq_Hz``, ``mu_real`` and ``mu_imag`` in file order.
"""
# Imports:
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from errors import DataFormatError, MissingColumnError

TABLE_COLUMNS = ["freq_Hz", "mu_real", "mu_imag"]


def _detect_delimiter(path: Path) -> str:
    with path.open("r", encoding="utf-8", errors="replace") as fh:
        header = fh.readline()
    for delim in (",", "\t", ";"):
        if delim in header:
            return delim
    return ","


def _read_table(path: Path, delimiter: Optional[str]) -> pd.DataFrame:
    if not path.is_file():
        raise DataFormatError(f"Permeability table not found: {path}")
    if delimiter is None:
        delimiter = _detect_delimiter(path)
    try:
        return pd.read_csv(path, sep=delimiter)
    except pd.errors.EmptyDataError as exc:
        raise DataFormatError(f"Permeability table is empty: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DataFormatError(f"Could not parse permeability table {path}: {exc}") from exc


def _select_columns(raw: pd.DataFrame, columns: Optional[Sequence[str]], path: Path) -> pd.DataFrame:
    if columns is None:
        if raw.shape[1] < 3:
            raise DataFormatError(
                f"{path} has {raw.shape[1]} column(s); expected at least 3 (frequency, mu', mu'')"
            )
        return raw.iloc[:, :3]

    columns = list(columns)
    if len(columns) != 3:
        raise ValueError("columns must name exactly three columns: frequency, mu', mu''")
    header = [str(c).strip() for c in raw.columns]
    raw = raw.set_axis(header, axis=1)
    missing = [c for c in columns if c not in header]
    if missing:
        raise MissingColumnError(f"{path} is missing column(s) {missing}; available: {header}")
    return raw[columns]


def load_permeability_csv(
    path,
    columns: Optional[Sequence[str]] = None,
    delimiter: Optional[str] = None,
) -> pd.DataFrame:
    """
    Read a (frequency, μ', μ'') table and validate it.

    Raises DataFormatError for a missing/unparseable file, fewer than three columns,
    non-numeric or empty cells, non-positive or descending frequencies. Raises
    MissingColumnError when a requested column name is absent.
    """
    path = Path(path).expanduser()
    raw = _read_table(path, delimiter)
    sub = _select_columns(raw, columns, path)
    if sub.empty:
        raise DataFormatError(f"No data rows in {path}")

    try:
        values = sub.apply(pd.to_numeric, errors="raise").to_numpy(float)
    except (ValueError, TypeError) as exc:
        raise DataFormatError(f"Non-numeric value in {path}: {exc}") from exc

    if not np.all(np.isfinite(values)):
        bad = int(np.flatnonzero(~np.isfinite(values).all(axis=1))[0])
        raise DataFormatError(f"Empty or non-finite value in data row {bad} of {path}")

    table = pd.DataFrame(values, columns=TABLE_COLUMNS)
    validate_frequencies(table["freq_Hz"].to_numpy(), source=str(path))
    return table


def validate_frequencies(freq_Hz: np.ndarray, source: str = "table") -> None:
    freq_Hz = np.asarray(freq_Hz, dtype=float)
    if np.any(freq_Hz <= 0):
        idx = int(np.flatnonzero(freq_Hz <= 0)[0])
        raise DataFormatError(f"Frequency must be positive, got {freq_Hz[idx]:g} Hz at row {idx} of {source}")
    if np.any(np.diff(freq_Hz) < 0):
        idx = int(np.flatnonzero(np.diff(freq_Hz) < 0)[0]) + 1
        raise DataFormatError(f"Frequencies are not in ascending order at row {idx} of {source}")


def trim_band(table: pd.DataFrame, fmin_Hz: Optional[float] = None, fmax_Hz: Optional[float] = None) -> pd.DataFrame:
    """
    Keep rows with fmin_Hz <= freq_Hz <= fmax_Hz (either bound may be None).
    """
    if fmin_Hz is not None and fmax_Hz is not None and fmin_Hz > fmax_Hz:
        raise DataFormatError(f"Empty band: fmin {fmin_Hz:g} Hz > fmax {fmax_Hz:g} Hz")

    keep = np.ones(len(table), dtype=bool)
    if fmin_Hz is not None:
        keep &= table["freq_Hz"].to_numpy() >= fmin_Hz
    if fmax_Hz is not None:
        keep &= table["freq_Hz"].to_numpy() <= fmax_Hz

    out = table.loc[keep].reset_index(drop=True)
    if out.empty:
        raise DataFormatError(
            f"No samples between {fmin_Hz if fmin_Hz is not None else '-inf'} and "
            f"{fmax_Hz if fmax_Hz is not None else 'inf'} Hz"
        )
    return out
