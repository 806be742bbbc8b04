"""Excepciones del núcleo molecular.

Todas las comprobaciones de precondiciones se ejecutan siempre; cada
excepción hereda además del builtin más cercano para que los manejadores
genéricos (`ValueError`, `KeyError`, ...) sigan funcionando.
"""


class MolCoreError(Exception):
    """Base de todos los errores del núcleo."""


class InvalidArgumentError(MolCoreError, ValueError):
    """Se lanza cuando una operación recibe un argumento que viola su contrato."""


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    """Se lanza cuando un índice no está en el rango `[0, count)`."""


class StaleHandleError(InvalidArgumentError):
    """Se lanza al usar un handle cuyo índice ya apunta a otra entidad."""


class BondNotFoundError(InvalidArgumentError, LookupError):
    """Se lanza cuando no existe un enlace entre el par de átomos pedido."""


class KeyNotFoundError(MolCoreError, KeyError):
    """Se lanza al consultar una clave ausente en un `VariantMap`."""


class VariantTypeError(MolCoreError, TypeError):
    """Se lanza al leer un `Variant` como un tipo distinto del activo."""
