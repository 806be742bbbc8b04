"""Valor genérico con tipo etiquetado para metadatos moleculares.

Un `Variant` guarda exactamente un valor de un conjunto cerrado de tipos
primitivos. Los valores son inmutables, de modo que copiar un `Variant`
equivale a duplicar su contenido.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import VariantTypeError


class VariantType(str, Enum):
    """Tipos que puede contener un `Variant`."""
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


def _infer_type(value: Any) -> VariantType:
    if value is None:
        return VariantType.NULL
    # bool antes que int: bool es subclase de int.
    if isinstance(value, bool):
        return VariantType.BOOL
    if isinstance(value, int):
        return VariantType.INT
    if isinstance(value, float):
        return VariantType.FLOAT
    if isinstance(value, str):
        return VariantType.STRING
    raise VariantTypeError(f"Unsupported variant value type: {type(value).__name__}")


class Variant:
    """Unión etiquetada sobre bool, int, float y str.

    `Variant()` construye el valor vacío (`VariantType.NULL`).
    """

    __slots__ = ("_type", "_value")

    def __init__(self, value: Any = None) -> None:
        """Construye el variant a partir de un valor primitivo u otro variant.

        Args:
            value: Valor a envolver; `None` produce un variant vacío.

        Raises:
            VariantTypeError: Si el tipo del valor no está soportado.
        """
        if isinstance(value, Variant):
            self._type = value._type
            self._value = value._value
            return
        self._type = _infer_type(value)
        self._value = value

    @property
    def type(self) -> VariantType:
        """Tipo activo del variant."""
        return self._type

    def is_null(self) -> bool:
        return self._type is VariantType.NULL

    def value(self) -> Any:
        """Devuelve el valor tal cual, sea cual sea su tipo."""
        return self._value

    def _expect(self, expected: VariantType) -> Any:
        if self._type is not expected:
            raise VariantTypeError(
                f"Variant holds {self._type.value}, not {expected.value}"
            )
        return self._value

    def to_bool(self) -> bool:
        return self._expect(VariantType.BOOL)

    def to_int(self) -> int:
        return self._expect(VariantType.INT)

    def to_float(self) -> float:
        return self._expect(VariantType.FLOAT)

    def to_string(self) -> str:
        return self._expect(VariantType.STRING)

    def copy(self) -> "Variant":
        return Variant(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._type, self._value))

    def __repr__(self) -> str:
        return f"Variant({self._value!r})"
