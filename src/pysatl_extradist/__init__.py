"""
PySATL ExtraDist
================

Vectorised distribution primitives with recycling semantics (categorical,
multinomial, discrete normal, GEV, Kumaraswamy, power, Rayleigh and
Dirichlet), exposed both as module-level functions and as parametric
families built on the PySATL distribution framework.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .engine import *
from .engine import __all__ as _engine_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-extradist")
__all__ = [
    "__version__",
    *_distr_all,
    *_engine_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _engine_all
del _family_all
del _types_all
