"""Opciones de configuración de `Molecule`."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MoleculeOptions:
    """Opciones de control de las búsquedas por par de átomos."""

    # Si es True, `bond_between(a, b)` también encuentra un par guardado como (b, a).
    symmetric_bond_lookup: bool = False
