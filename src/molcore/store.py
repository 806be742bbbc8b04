"""Almacén columnar de atributos por entidad.

`EntityStore` agrupa todas las secuencias alineadas por índice de un tipo
de entidad (átomos o enlaces) detrás de un único punto de inserción y de
borrado, de modo que todas las columnas tienen siempre la misma longitud.
Cada fila lleva además un número de serie único que los handles usan
para detectar que su índice ya apunta a otra entidad.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Dict, List, Tuple

from .errors import IndexOutOfRangeError, InvalidArgumentError


def check_index(index: Any, size: int, what: str) -> int:
    """Valida que `index` sea un entero en `[0, size)`.

    Args:
        index: Índice recibido por la API pública.
        size: Número actual de entidades.
        what: Nombre de la entidad para el mensaje de error.

    Returns:
        El índice validado.

    Raises:
        InvalidArgumentError: Si el índice no es un entero.
        IndexOutOfRangeError: Si está fuera de rango.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(f"{what} index must be an int, got {index!r}")
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(f"{what} index {index} out of range [0, {size})")
    return index


class EntityStore:
    """Estructura de arrays con columnas nombradas y una columna de serie."""

    def __init__(self, *columns: str) -> None:
        """Crea un almacén vacío con las columnas indicadas.

        Args:
            *columns: Nombres de las columnas de atributos.
        """
        self._columns: Dict[str, List[Any]] = {name: [] for name in columns}
        self._serials: List[int] = []
        self._next_serial = count(1)

    def __len__(self) -> int:
        return len(self._serials)

    def append(self, **values: Any) -> Tuple[int, int]:
        """Añade una fila al final del almacén.

        Args:
            **values: Un valor por cada columna declarada.

        Returns:
            Tupla `(índice, serie)` de la nueva fila.

        Raises:
            InvalidArgumentError: Si faltan o sobran columnas.
        """
        if set(values) != set(self._columns):
            raise InvalidArgumentError(
                f"Expected columns {sorted(self._columns)}, got {sorted(values)}"
            )
        for name, column in self._columns.items():
            column.append(values[name])
        serial = next(self._next_serial)
        self._serials.append(serial)
        return len(self._serials) - 1, serial

    def remove(self, index: int) -> Dict[str, Any]:
        """Elimina la fila `index`; las filas posteriores bajan una posición.

        Returns:
            Diccionario con los valores de la fila eliminada.
        """
        check_index(index, len(self), "row")
        row = {name: column.pop(index) for name, column in self._columns.items()}
        self._serials.pop(index)
        return row

    def get(self, name: str, index: int) -> Any:
        return self._columns[name][index]

    def set(self, name: str, index: int, value: Any) -> None:
        self._columns[name][index] = value

    def serial(self, index: int) -> int:
        return self._serials[index]

    def column(self, name: str) -> Tuple[Any, ...]:
        """Instantánea inmutable de una columna."""
        return tuple(self._columns[name])

    def clear(self) -> None:
        for column in self._columns.values():
            column.clear()
        self._serials.clear()
