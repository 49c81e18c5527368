#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised while loading ferrite data or evaluating toroid impedance.
"""


class ToroidImpedanceError(Exception):
    """Base class for every failure in the load -> compute -> plot pipeline."""


class DataFormatError(ToroidImpedanceError, ValueError):
    """Permeability table is missing, unreadable or malformed."""


class MissingColumnError(DataFormatError):
    """A requested column name is not in the table header."""


class NumericDomainError(ToroidImpedanceError, ValueError):
    """Parameters put the impedance formula outside its domain (zero impedance, OD <= ID, ...)."""
