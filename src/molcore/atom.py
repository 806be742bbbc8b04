"""Handle ligero hacia un átomo almacenado en una `Molecule`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .molecule import Molecule


class Atom:
    """Referencia no propietaria `(molécula, índice, serie)` a un átomo.

    Los datos viven en la molécula. Si una eliminación desplaza el índice,
    la serie deja de coincidir y cualquier acceso lanza `StaleHandleError`
    en lugar de leer otro átomo.
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
        """Indica si el handle pertenece a una molécula.

        No garantiza que el átomo siga existiendo en ese índice.
        """
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
            raise InvalidArgumentError("Atom handle is empty")
        return self._molecule

    @property
    def atomic_number(self) -> int:
        return self._owner()._atomic_number(self)

    def set_atomic_number(self, atomic_number: int) -> None:
        self._owner()._set_atomic_number(self, atomic_number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Atom):
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
            return "Atom()"
        return f"Atom(index={self._index})"
