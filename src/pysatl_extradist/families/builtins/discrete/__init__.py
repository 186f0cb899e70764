"""
Built-in discrete distribution families.

This module contains implementations of univariate discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.discrete.categorical import configure_categorical_family
from pysatl_extradist.families.builtins.discrete.discrete_normal import (
    configure_discrete_normal_family,
)

__all__ = [
    "configure_categorical_family",
    "configure_discrete_normal_family",
]
