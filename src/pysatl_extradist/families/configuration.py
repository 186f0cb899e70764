"""
Distribution Families Configuration
====================================

This module configures the parametric distribution families of the library:

- :class:`Categorical Family` — probabilities over categories 1..k.
- :class:`DiscreteNormal Family` — normal mass folded onto the integers.
- :class:`GeneralizedExtremeValue Family` — location-scale-shape GEV.
- :class:`Kumaraswamy Family` — two-shape distribution on [0, 1].
- :class:`Power Family` — power distribution on (0, alpha).
- :class:`Rayleigh Family` — scale family on [0, inf).
- :class:`Multinomial Family` — category counts of a fixed number of trials.
- :class:`Dirichlet Family` — concentration family on the simplex.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; the register is built once and cached.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_extradist.families.builtins import (
    configure_categorical_family,
    configure_dirichlet_family,
    configure_discrete_normal_family,
    configure_gev_family,
    configure_kumaraswamy_family,
    configure_multinomial_family,
    configure_power_family,
    configure_rayleigh_family,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_categorical_family()
    configure_discrete_normal_family()
    configure_gev_family()
    configure_kumaraswamy_family()
    configure_power_family()
    configure_rayleigh_family()
    configure_multinomial_family()
    configure_dirichlet_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
