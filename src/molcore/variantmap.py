"""Mapa de nombres a valores `Variant`."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

from .errors import KeyNotFoundError
from .variant import Variant


class VariantMap:
    """Mapa con claves de texto únicas y valores `Variant`."""

    def __init__(self) -> None:
        self._map: Dict[str, Variant] = {}

    def size(self) -> int:
        return len(self._map)

    def is_empty(self) -> bool:
        return not self._map

    def set_value(self, name: str, value: Any) -> None:
        """Inserta o reemplaza el valor asociado a `name`.

        Args:
            name: Clave del valor.
            value: `Variant` o valor primitivo (se envuelve en un `Variant`).

        Raises:
            VariantTypeError: Si el valor primitivo no está soportado.
        """
        self._map[name] = Variant(value)

    def value(self, name: str) -> Variant:
        """Devuelve una copia del valor asociado a `name`.

        Raises:
            KeyNotFoundError: Si la clave no existe.
        """
        try:
            return self._map[name].copy()
        except KeyError:
            raise KeyNotFoundError(name) from None

    def has_value(self, name: str) -> bool:
        return name in self._map

    def remove_value(self, name: str) -> Variant:
        """Elimina la clave y devuelve su último valor."""
        try:
            return self._map.pop(name)
        except KeyError:
            raise KeyNotFoundError(name) from None

    def names(self) -> List[str]:
        return list(self._map)

    def clear(self) -> None:
        self._map.clear()

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, name: object) -> bool:
        return name in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._map))
