"""
Built-in continuous distribution families.

This module contains implementations of univariate continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.continuous.gev import configure_gev_family
from pysatl_extradist.families.builtins.continuous.kumaraswamy import (
    configure_kumaraswamy_family,
)
from pysatl_extradist.families.builtins.continuous.power import configure_power_family
from pysatl_extradist.families.builtins.continuous.rayleigh import configure_rayleigh_family

__all__ = [
    "configure_gev_family",
    "configure_kumaraswamy_family",
    "configure_power_family",
    "configure_rayleigh_family",
]
