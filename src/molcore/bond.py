"""Handle ligero hacia un enlace almacenado en una `Molecule`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from .atom import Atom
from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .molecule import Molecule


class Bond:
    """Referencia no propietaria `(molécula, índice, serie)` a un enlace.

    Sigue las mismas reglas de obsolescencia que `Atom`, pero sobre el
    espacio de índices de enlaces de la molécula.
    """

    __slots__ = ("_molecule", "_index", "_serial")

    def __init__(
        self,
        molecule: Optional["Molecule"] = None,
        index: int = 0,
        serial: int = 0,
    ) -> None:
        self._molecule = molecule
        self._index = index
        self._serial = serial

    def is_valid(self) -> bool:
        return self._molecule is not None

    @property
    def molecule(self) -> Optional["Molecule"]:
        return self._molecule

    @property
    def index(self) -> int:
        return self._index

    @property
    def serial(self) -> int:
        return self._serial

    def _owner(self) -> "Molecule":
        if self._molecule is None:
            raise InvalidArgumentError("Bond handle is empty")
        return self._molecule

    @property
    def pair(self) -> Tuple[int, int]:
        """Índices de los átomos extremos, en el orden de creación."""
        return self._owner()._bond_pair(self)

    @property
    def atom1(self) -> Atom:
        return self._owner().atom(self.pair[0])

    @property
    def atom2(self) -> Atom:
        return self._owner().atom(self.pair[1])

    @property
    def order(self) -> int:
        return self._owner()._bond_order(self)

    def set_order(self, order: int) -> None:
        self._owner()._set_bond_order(self, order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bond):
            return NotImplemented
        return (
            self._molecule is other._molecule
            and self._index == other._index
            and self._serial == other._serial
        )

    def __hash__(self) -> int:
        return hash((id(self._molecule), self._index, self._serial))

    def __repr__(self) -> str:
        if self._molecule is None:
            return "Bond()"
        return f"Bond(index={self._index})"
