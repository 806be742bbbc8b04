"""API pública del núcleo molecular.

Reexpone las clases del modelo (molécula, handles, metadatos) para
facilitar importaciones.
"""

from molcore.atom import Atom
from molcore.bond import Bond
from molcore.errors import (
    BondNotFoundError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    KeyNotFoundError,
    MolCoreError,
    StaleHandleError,
    VariantTypeError,
)
from molcore.graph import Graph
from molcore.logging_config import setup_logging
from molcore.molecule import Molecule
from molcore.options import MoleculeOptions
from molcore.variant import Variant, VariantType
from molcore.variantmap import VariantMap

__all__ = [
    "Atom",
    "Bond",
    "BondNotFoundError",
    "Graph",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "KeyNotFoundError",
    "MolCoreError",
    "Molecule",
    "MoleculeOptions",
    "StaleHandleError",
    "Variant",
    "VariantMap",
    "VariantType",
    "VariantTypeError",
    "setup_logging",
]
