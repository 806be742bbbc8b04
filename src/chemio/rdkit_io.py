"""Conversión entre `molcore.Molecule` y objetos `Mol` de RDKit.

Solo se traducen números atómicos, órdenes de enlace enteros y los
metadatos primitivos; las moléculas aromáticas se kekulizan antes de
convertirse. Los metadatos vacíos (`VariantType.NULL`) no se exportan y los
enteros fuera del rango de 32 bits se exportan como texto.
"""

from __future__ import annotations

import logging
from typing import Dict

from molcore import Molecule, Variant, VariantType

try:
    from rdkit import Chem
except Exception:  # pragma: no cover - optional dependency at runtime
    Chem = None

logger = logging.getLogger(__name__)

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


def _require_rdkit():
    if Chem is None:
        raise RuntimeError("RDKit no disponible")


def _bond_types() -> Dict[int, "Chem.BondType"]:
    return {
        0: Chem.BondType.ZERO,
        1: Chem.BondType.SINGLE,
        2: Chem.BondType.DOUBLE,
        3: Chem.BondType.TRIPLE,
        4: Chem.BondType.QUADRUPLE,
    }


def element_symbol(atomic_number: int) -> str:
    """Devuelve el símbolo químico de un número atómico (p. ej., 6 -> "C")."""
    _require_rdkit()
    return Chem.GetPeriodicTable().GetElementSymbol(atomic_number)


def _set_rdkit_prop(mol, name: str, value: Variant) -> None:
    if value.type is VariantType.BOOL:
        mol.SetBoolProp(name, value.to_bool())
    elif value.type is VariantType.INT:
        number = value.to_int()
        if _INT32_MIN <= number <= _INT32_MAX:
            mol.SetIntProp(name, number)
        else:
            # RDKit solo admite enteros de 32 bits; se guarda como texto.
            logger.debug("Storing property %s=%d as string", name, number)
            mol.SetProp(name, str(number))
    elif value.type is VariantType.FLOAT:
        mol.SetDoubleProp(name, value.to_float())
    elif value.type is VariantType.STRING:
        mol.SetProp(name, value.to_string())
    else:
        logger.debug("Skipping empty property %s", name)


def molecule_to_rdkit(molecule: Molecule):
    """Construye un `Chem.Mol` equivalente a la molécula.

    Los lazos y los enlaces repetidos no tienen representación en RDKit y
    se omiten con un aviso.

    Args:
        molecule: Molécula de origen.

    Returns:
        Objeto `Chem.Mol` sin sanitizar.

    Raises:
        RuntimeError: Si RDKit no está instalado.
        ValueError: Si un orden de enlace no tiene tipo RDKit.
    """
    _require_rdkit()
    bond_types = _bond_types()
    rw = Chem.RWMol()

    for atomic_number in molecule.atomic_numbers():
        rw.AddAtom(Chem.Atom(atomic_number))

    for (a, b), order in zip(molecule.bond_pairs(), molecule.bond_orders()):
        bond_type = bond_types.get(order)
        if bond_type is None:
            raise ValueError(f"Unsupported bond order for RDKit: {order}")
        if a == b or rw.GetBondBetweenAtoms(a, b) is not None:
            logger.warning("Skipping bond %d-%d: not representable in RDKit", a, b)
            continue
        rw.AddBond(a, b, bond_type)

    mol = rw.GetMol()
    for name in molecule.data_names():
        _set_rdkit_prop(mol, name, molecule.data(name))
    return mol


def rdkit_to_molecule(mol) -> Molecule:
    """Crea una `Molecule` a partir de un `Chem.Mol`.

    Args:
        mol: Molécula RDKit; se kekuliza una copia si tiene aromaticidad.

    Returns:
        Nueva molécula con los mismos índices de átomo que RDKit.

    Raises:
        RuntimeError: Si RDKit no está instalado.
        ValueError: Si `mol` es `None` o tiene enlaces no enteros.
    """
    _require_rdkit()
    if mol is None:
        raise ValueError("Mol inválido")
    if any(bond.GetIsAromatic() for bond in mol.GetBonds()):
        mol = Chem.Mol(mol)
        Chem.Kekulize(mol, clearAromaticFlags=True)

    orders = {bond_type: order for order, bond_type in _bond_types().items()}
    molecule = Molecule()
    atoms = [molecule.add_atom(atom.GetAtomicNum()) for atom in mol.GetAtoms()]

    for bond in mol.GetBonds():
        order = orders.get(bond.GetBondType())
        if order is None:
            raise ValueError(f"Unsupported RDKit bond type: {bond.GetBondType()}")
        molecule.add_bond(atoms[bond.GetBeginAtomIdx()], atoms[bond.GetEndAtomIdx()], order)

    for name, value in mol.GetPropsAsDict(includePrivate=False, includeComputed=False).items():
        if isinstance(value, (bool, int, float, str)):
            molecule.set_data(name, value)
    logger.debug("Converted RDKit mol with %d atoms", molecule.atom_count())
    return molecule
