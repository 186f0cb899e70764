"""
Built-in multivariate distribution families.

Families whose outcomes are vectors: counts over categories and points of
the probability simplex.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.multivariate.dirichlet import configure_dirichlet_family
from pysatl_extradist.families.builtins.multivariate.multinomial import (
    configure_multinomial_family,
)

__all__ = [
    "configure_dirichlet_family",
    "configure_multinomial_family",
]
