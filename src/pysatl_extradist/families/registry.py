"""
Process-wide register of the configured families, looked up by name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_extradist.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """Singleton mapping family names to families, in registration order."""

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Raises
        ------
        ValueError
            If no family of that name is registered.
        """
        families = cls()._families
        if name not in families:
            registered = ", ".join(families) or "none"
            raise ValueError(f"Family '{name}' is not registered (registered: {registered}).")
        return families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def list_registered_families(cls) -> list[str]:
        return list(cls()._families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family '{family.name}' is already registered.")
        families[family.name] = family
        logger.debug(
            "Registered family %s with characteristics %s",
            family.name,
            ", ".join(family.characteristics),
        )

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton; the next access starts empty."""
        cls._instance = None
        logger.debug("Family register reset")
