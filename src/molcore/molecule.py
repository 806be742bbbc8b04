"""Coordinador de entidades de una molécula.

`Molecule` es dueña de la topología (`Graph`), de los atributos por átomo
y por enlace (`EntityStore`) y de un `VariantMap` de metadatos. Cada
operación mutante valida sus argumentos antes de tocar ningún estado, de
modo que una llamada fallida deja la molécula intacta y una llamada
completada mantiene:

* ``len(atomic_numbers()) == atom_count() == graph.size()``
* ``len(bond_pairs()) == len(bond_orders()) == bond_count()``
* cada par de ``bond_pairs()`` apunta a dos átomos existentes.

Eliminar un átomo o un enlace desplaza hacia abajo los índices mayores.
Los extremos de los enlaces supervivientes se renumeran para seguir
apuntando a los mismos átomos.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple, Union

from .atom import Atom
from .bond import Bond
from .errors import BondNotFoundError, InvalidArgumentError, StaleHandleError
from .graph import Graph
from .options import MoleculeOptions
from .store import EntityStore, check_index
from .variant import Variant
from .variantmap import VariantMap

logger = logging.getLogger(__name__)

# Números atómicos y órdenes de enlace se guardan como bytes sin signo.
_MAX_BYTE = 255


def _check_byte(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{what} must be an int, got {value!r}")
    if value < 0 or value > _MAX_BYTE:
        raise InvalidArgumentError(f"{what} {value} out of range [0, {_MAX_BYTE}]")
    return value


def _shift_down(atom_index: int, removed: int) -> int:
    return atom_index - 1 if atom_index > removed else atom_index


class Molecule:
    """Molécula mutable formada por átomos (vértices) y enlaces (aristas)."""

    def __init__(self, options: Optional[MoleculeOptions] = None) -> None:
        """Crea una molécula vacía.

        Args:
            options: Opciones de búsqueda; por defecto `MoleculeOptions()`.
        """
        self.options = options if options is not None else MoleculeOptions()
        self._graph = Graph()
        self._atoms = EntityStore("atomic_number")
        self._bonds = EntityStore("pair", "order")
        self._data = VariantMap()

    # --- Propiedades -----------------------------------------------------

    def size(self) -> int:
        """Número de átomos de la molécula."""
        return self._graph.size()

    def __len__(self) -> int:
        return self._graph.size()

    def is_empty(self) -> bool:
        return self._graph.is_empty()

    def atom_count(self) -> int:
        return self._graph.size()

    def bond_count(self) -> int:
        return len(self._bonds)

    @property
    def graph(self) -> Graph:
        """Topología subyacente; solo debe usarse para lectura."""
        return self._graph

    def atomic_numbers(self) -> Tuple[int, ...]:
        return self._atoms.column("atomic_number")

    def bond_pairs(self) -> Tuple[Tuple[int, int], ...]:
        return self._bonds.column("pair")

    def bond_orders(self) -> Tuple[int, ...]:
        return self._bonds.column("order")

    def set_data(self, name: str, value: Any) -> None:
        """Asigna el metadato `name` (un `Variant` o un valor primitivo)."""
        self._data.set_value(name, value)

    def data(self, name: str) -> Variant:
        """Devuelve el metadato `name`.

        Raises:
            KeyNotFoundError: Si no existe.
        """
        return self._data.value(name)

    def has_data(self, name: str) -> bool:
        return self._data.has_value(name)

    def data_names(self) -> List[str]:
        return self._data.names()

    # --- Átomos ----------------------------------------------------------

    def add_atom(self, atomic_number: int) -> Atom:
        """Añade un átomo al final de la molécula.

        Args:
            atomic_number: Número atómico (0-255).

        Returns:
            Handle del nuevo átomo; su índice es el número previo de átomos.

        Raises:
            InvalidArgumentError: Si el número atómico no es válido.
        """
        _check_byte(atomic_number, "atomic number")
        index = self._graph.add_vertex()
        _, serial = self._atoms.append(atomic_number=atomic_number)
        logger.debug("Added atom %d (Z=%d)", index, atomic_number)
        return Atom(self, index, serial)

    def remove_atom(self, atom: Union[Atom, int]) -> None:
        """Elimina un átomo y todos los enlaces que lo tocan.

        Los átomos con índice mayor bajan una posición y los extremos de los
        enlaces supervivientes se renumeran igual. Los handles a átomos o
        enlaces desplazados quedan obsoletos.

        Args:
            atom: Handle del átomo o su índice.

        Raises:
            InvalidArgumentError: Si el handle es ajeno, vacío u obsoleto.
            IndexOutOfRangeError: Si el índice no existe.
        """
        index = self._atom_index(atom)

        # Un solo recorrido: los enlaces borrados no avanzan el cursor.
        removed_bonds = 0
        i = 0
        while i < len(self._bonds):
            a, b = self._bonds.get("pair", i)
            if a == index or b == index:
                self._graph.remove_edge(a, b)
                self._bonds.remove(i)
                removed_bonds += 1
                continue
            self._bonds.set("pair", i, (_shift_down(a, index), _shift_down(b, index)))
            i += 1

        self._graph.remove_vertex(index)
        self._atoms.remove(index)
        logger.debug("Removed atom %d and %d bond(s)", index, removed_bonds)

    def atom(self, index: int) -> Atom:
        """Devuelve el handle del átomo `index`.

        Raises:
            IndexOutOfRangeError: Si el índice no existe.
        """
        check_index(index, self.atom_count(), "atom")
        return Atom(self, index, self._atoms.serial(index))

    def atoms(self) -> List[Atom]:
        return [self.atom(i) for i in range(self.atom_count())]

    # --- Enlaces ---------------------------------------------------------

    def add_bond(self, a: Atom, b: Atom, order: int = 1) -> Bond:
        """Crea un enlace entre los átomos `a` y `b`.

        No se comprueban lazos ni enlaces duplicados.

        Args:
            a: Primer átomo.
            b: Segundo átomo.
            order: Orden de enlace (0-255).

        Returns:
            Handle del nuevo enlace; su índice es el número previo de enlaces.
        """
        index_a = self._resolve_atom(a)
        index_b = self._resolve_atom(b)
        _check_byte(order, "bond order")
        self._graph.add_edge(index_a, index_b)
        index, serial = self._bonds.append(pair=(index_a, index_b), order=order)
        logger.debug("Added bond %d between atoms %d and %d", index, index_a, index_b)
        return Bond(self, index, serial)

    def remove_bond(self, bond: Union[Bond, int]) -> None:
        """Elimina un enlace por handle o por índice.

        Raises:
            InvalidArgumentError: Si el handle es ajeno, vacío u obsoleto.
            IndexOutOfRangeError: Si el índice no existe.
        """
        if isinstance(bond, Bond):
            index = self._resolve_bond(bond)
        else:
            index = check_index(bond, self.bond_count(), "bond")
        a, b = self._bonds.get("pair", index)
        self._graph.remove_edge(a, b)
        self._bonds.remove(index)
        logger.debug("Removed bond %d", index)

    def remove_bond_between(self, a: Atom, b: Atom) -> None:
        """Elimina el primer enlace `(a, b)` según la búsqueda de `bond_between`.

        Raises:
            BondNotFoundError: Si no hay enlace entre los átomos.
        """
        index = self._find_bond(self._resolve_atom(a), self._resolve_atom(b))
        if index is None:
            raise BondNotFoundError(f"No bond between atoms {a.index} and {b.index}")
        self.remove_bond(index)

    def bond(self, index: int) -> Bond:
        """Devuelve el handle del enlace `index`.

        Raises:
            IndexOutOfRangeError: Si el índice no existe.
        """
        check_index(index, self.bond_count(), "bond")
        return Bond(self, index, self._bonds.serial(index))

    def bond_between(self, a: Atom, b: Atom) -> Bond:
        """Busca el primer enlace entre `a` y `b` en orden de inserción.

        Por defecto la búsqueda distingue el orden: `(a, b)` no encuentra un
        enlace creado como `(b, a)` salvo con `symmetric_bond_lookup`.

        Returns:
            El handle encontrado, o un `Bond()` vacío si no existe.
        """
        index = self._find_bond(self._resolve_atom(a), self._resolve_atom(b))
        if index is None:
            return Bond()
        return self.bond(index)

    def bonds(self) -> List[Bond]:
        return [self.bond(i) for i in range(self.bond_count())]

    def clear(self) -> None:
        """Elimina átomos, enlaces y metadatos."""
        self._graph.clear()
        self._atoms.clear()
        self._bonds.clear()
        self._data.clear()

    # --- Internos --------------------------------------------------------

    def _find_bond(self, index_a: int, index_b: int) -> Optional[int]:
        wanted = (index_a, index_b)
        reverse = (index_b, index_a)
        for i, pair in enumerate(self._bonds.column("pair")):
            if pair == wanted:
                return i
            if self.options.symmetric_bond_lookup and pair == reverse:
                return i
        return None

    def _atom_index(self, atom: Union[Atom, int]) -> int:
        if isinstance(atom, Atom):
            return self._resolve_atom(atom)
        return check_index(atom, self.atom_count(), "atom")

    def _resolve_atom(self, atom: Atom) -> int:
        """Comprueba que el handle es de esta molécula y sigue vigente."""
        if not isinstance(atom, Atom):
            raise InvalidArgumentError(f"Expected an Atom handle, got {atom!r}")
        if not atom.is_valid():
            raise InvalidArgumentError("Atom handle is empty")
        if atom.molecule is not self:
            raise InvalidArgumentError("Atom belongs to a different molecule")
        index = atom.index
        if index >= len(self._atoms) or self._atoms.serial(index) != atom.serial:
            raise StaleHandleError(f"Atom handle at index {index} is stale")
        return index

    def _resolve_bond(self, bond: Bond) -> int:
        if not isinstance(bond, Bond):
            raise InvalidArgumentError(f"Expected a Bond handle, got {bond!r}")
        if not bond.is_valid():
            raise InvalidArgumentError("Bond handle is empty")
        if bond.molecule is not self:
            raise InvalidArgumentError("Bond belongs to a different molecule")
        index = bond.index
        if index >= len(self._bonds) or self._bonds.serial(index) != bond.serial:
            raise StaleHandleError(f"Bond handle at index {index} is stale")
        return index

    def _atomic_number(self, atom: Atom) -> int:
        return self._atoms.get("atomic_number", self._resolve_atom(atom))

    def _set_atomic_number(self, atom: Atom, atomic_number: int) -> None:
        index = self._resolve_atom(atom)
        self._atoms.set("atomic_number", index, _check_byte(atomic_number, "atomic number"))

    def _bond_pair(self, bond: Bond) -> Tuple[int, int]:
        return self._bonds.get("pair", self._resolve_bond(bond))

    def _bond_order(self, bond: Bond) -> int:
        return self._bonds.get("order", self._resolve_bond(bond))

    def _set_bond_order(self, bond: Bond, order: int) -> None:
        index = self._resolve_bond(bond)
        self._bonds.set("order", index, _check_byte(order, "bond order"))

    def __repr__(self) -> str:
        return f"Molecule(atoms={self.atom_count()}, bonds={self.bond_count()})"
