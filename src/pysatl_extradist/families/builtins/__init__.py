"""
Built-in distribution families for PySATL extradist.

This package contains the parametric families that are available by default:
categorical and discrete normal, the GEV, Kumaraswamy, power and Rayleigh
continuous families, and the multinomial and Dirichlet vector families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.continuous import (
    configure_gev_family,
    configure_kumaraswamy_family,
    configure_power_family,
    configure_rayleigh_family,
)
from pysatl_extradist.families.builtins.discrete import (
    configure_categorical_family,
    configure_discrete_normal_family,
)
from pysatl_extradist.families.builtins.multivariate import (
    configure_dirichlet_family,
    configure_multinomial_family,
)

__all__ = [
    "configure_categorical_family",
    "configure_discrete_normal_family",
    "configure_gev_family",
    "configure_kumaraswamy_family",
    "configure_power_family",
    "configure_rayleigh_family",
    "configure_multinomial_family",
    "configure_dirichlet_family",
]
