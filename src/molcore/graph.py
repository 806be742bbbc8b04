"""Grafo no dirigido de vértices indexados densamente.

El grafo no conoce la química: solo guarda vértices `0..N-1` y aristas
entre ellos (se admiten lazos y aristas paralelas). Eliminar un vértice
renumera los vértices posteriores, bajando su índice en uno.
"""

from __future__ import annotations

import logging
from typing import List

from .errors import InvalidArgumentError
from .store import check_index

logger = logging.getLogger(__name__)


class Graph:
    """Listas de adyacencia indexadas por vértice."""

    def __init__(self) -> None:
        self._adjacency: List[List[int]] = []

    def size(self) -> int:
        """Número de vértices."""
        return len(self._adjacency)

    vertex_count = size

    def is_empty(self) -> bool:
        return not self._adjacency

    def edge_count(self) -> int:
        # Cada arista aparece dos veces (también los lazos, en la misma lista).
        return sum(len(neighbors) for neighbors in self._adjacency) // 2

    def add_vertex(self) -> int:
        """Añade un vértice y devuelve su índice (el número previo de vértices)."""
        self._adjacency.append([])
        return len(self._adjacency) - 1

    def remove_vertex(self, index: int) -> None:
        """Elimina el vértice `index` y las aristas que aún lo toquen.

        Los vértices con índice mayor bajan una posición y las listas de
        adyacencia se renumeran en consecuencia.

        Raises:
            IndexOutOfRangeError: Si el vértice no existe.
        """
        check_index(index, self.size(), "vertex")
        dangling = [n for n in self._adjacency[index] if n != index]
        if dangling:
            logger.debug("Dropping %d dangling edge(s) of vertex %d", len(dangling), index)
        for neighbor in dangling:
            self._adjacency[neighbor].remove(index)
        del self._adjacency[index]
        for neighbors in self._adjacency:
            neighbors[:] = [n - 1 if n > index else n for n in neighbors]

    def add_edge(self, a: int, b: int) -> None:
        """Crea una arista entre los vértices `a` y `b`."""
        check_index(a, self.size(), "vertex")
        check_index(b, self.size(), "vertex")
        self._adjacency[a].append(b)
        self._adjacency[b].append(a)

    def remove_edge(self, a: int, b: int) -> None:
        """Elimina una arista entre `a` y `b`.

        Con aristas paralelas se elimina solo una de ellas.

        Raises:
            InvalidArgumentError: Si no hay arista entre los vértices.
        """
        check_index(a, self.size(), "vertex")
        check_index(b, self.size(), "vertex")
        if b not in self._adjacency[a]:
            raise InvalidArgumentError(f"No edge between vertices {a} and {b}")
        self._adjacency[a].remove(b)
        self._adjacency[b].remove(a)

    def neighbors(self, index: int) -> List[int]:
        check_index(index, self.size(), "vertex")
        return list(self._adjacency[index])

    def degree(self, index: int) -> int:
        check_index(index, self.size(), "vertex")
        return len(self._adjacency[index])

    def clear(self) -> None:
        self._adjacency.clear()
