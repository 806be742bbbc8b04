"""Pruebas unitarias para test_molecule."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from molcore import (
    Atom,
    Bond,
    BondNotFoundError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    KeyNotFoundError,
    Molecule,
    MoleculeOptions,
    StaleHandleError,
    VariantType,
)


def _assert_consistent(test, molecule):
    """Comprueba que las colecciones paralelas siguen alineadas."""
    test.assertEqual(len(molecule.atomic_numbers()), molecule.atom_count())
    test.assertEqual(molecule.graph.size(), molecule.atom_count())
    test.assertEqual(len(molecule.bond_pairs()), molecule.bond_count())
    test.assertEqual(len(molecule.bond_orders()), molecule.bond_count())
    test.assertEqual(molecule.graph.edge_count(), molecule.bond_count())
    for a, b in molecule.bond_pairs():
        test.assertTrue(0 <= a < molecule.atom_count())
        test.assertTrue(0 <= b < molecule.atom_count())


class MoleculeAtomTest(unittest.TestCase):
    """Casos de prueba para MoleculeAtomTest."""

    def test_add_atom_indices_follow_call_order(self):
        """Verifica add atom indices follow call order.

        Returns:
            None.

        """
        molecule = Molecule()
        self.assertTrue(molecule.is_empty())
        atoms = [molecule.add_atom(z) for z in (6, 1, 1, 8)]
        self.assertEqual([atom.index for atom in atoms], [0, 1, 2, 3])
        self.assertEqual(molecule.atom_count(), 4)
        self.assertEqual(molecule.size(), 4)
        self.assertEqual(len(molecule), 4)
        self.assertEqual(molecule.atomic_numbers(), (6, 1, 1, 8))
        _assert_consistent(self, molecule)

    def test_atom_accessor(self):
        molecule = Molecule()
        carbon = molecule.add_atom(6)
        fetched = molecule.atom(0)
        self.assertTrue(fetched.is_valid())
        self.assertIs(fetched.molecule, molecule)
        self.assertEqual(fetched, carbon)
        self.assertEqual(fetched.atomic_number, 6)
        with self.assertRaises(IndexOutOfRangeError):
            molecule.atom(1)
        with self.assertRaises(InvalidArgumentError):
            molecule.atom(-1)

    def test_set_atomic_number(self):
        molecule = Molecule()
        atom = molecule.add_atom(6)
        atom.set_atomic_number(7)
        self.assertEqual(molecule.atomic_numbers(), (7,))
        with self.assertRaises(InvalidArgumentError):
            atom.set_atomic_number(300)
        self.assertEqual(atom.atomic_number, 7)

    def test_invalid_atomic_number_leaves_molecule_unchanged(self):
        molecule = Molecule()
        with self.assertRaises(InvalidArgumentError):
            molecule.add_atom(-1)
        with self.assertRaises(InvalidArgumentError):
            molecule.add_atom("C")
        self.assertTrue(molecule.is_empty())
        _assert_consistent(self, molecule)

    def test_remove_atom_out_of_range(self):
        molecule = Molecule()
        molecule.add_atom(6)
        with self.assertRaises(IndexOutOfRangeError):
            molecule.remove_atom(1)
        self.assertEqual(molecule.atom_count(), 1)

    def test_empty_atom_handle(self):
        atom = Atom()
        self.assertFalse(atom.is_valid())
        self.assertIsNone(atom.molecule)
        with self.assertRaises(InvalidArgumentError):
            atom.atomic_number
        with self.assertRaises(InvalidArgumentError):
            Molecule().remove_atom(atom)


class MoleculeBondTest(unittest.TestCase):
    """Casos de prueba para MoleculeBondTest."""

    def test_methane_like_scenario(self):
        """Verifica el escenario básico de creación y borrado.

        Returns:
            None.

        """
        molecule = Molecule()
        a0 = molecule.add_atom(6)
        a1 = molecule.add_atom(1)
        molecule.add_bond(a0, a1, 1)
        self.assertEqual(molecule.atom_count(), 2)
        self.assertEqual(molecule.bond_count(), 1)
        self.assertTrue(molecule.bond_between(a0, a1).is_valid())

        molecule.remove_atom(a0)
        self.assertEqual(molecule.atom_count(), 1)
        self.assertEqual(molecule.bond_count(), 0)
        self.assertEqual(molecule.atomic_numbers(), (1,))
        _assert_consistent(self, molecule)

    def test_add_bond_then_lookup_returns_same_index(self):
        molecule = Molecule()
        a, b, c = (molecule.add_atom(6) for _ in range(3))
        first = molecule.add_bond(a, b, 1)
        second = molecule.add_bond(b, c, 2)
        self.assertEqual(first.index, 0)
        self.assertEqual(second.index, 1)
        self.assertEqual(molecule.bond_between(a, b).index, first.index)
        self.assertEqual(molecule.bond_between(b, c), second)
        self.assertEqual(second.order, 2)
        self.assertEqual(second.pair, (1, 2))
        self.assertEqual(second.atom1, b)
        self.assertEqual(second.atom2, c)

    def test_bond_between_missing_returns_empty_handle(self):
        molecule = Molecule()
        a = molecule.add_atom(6)
        b = molecule.add_atom(8)
        bond = molecule.bond_between(a, b)
        self.assertFalse(bond.is_valid())
        self.assertEqual(bond, Bond())

    def test_bond_between_is_order_sensitive(self):
        """Verifica que (a, b) no encuentra un enlace guardado como (b, a).

        Returns:
            None.

        """
        molecule = Molecule()
        a = molecule.add_atom(6)
        b = molecule.add_atom(8)
        molecule.add_bond(b, a, 2)
        self.assertFalse(molecule.bond_between(a, b).is_valid())
        self.assertTrue(molecule.bond_between(b, a).is_valid())
        with self.assertRaises(BondNotFoundError):
            molecule.remove_bond_between(a, b)
        self.assertEqual(molecule.bond_count(), 1)
        molecule.remove_bond_between(b, a)
        self.assertEqual(molecule.bond_count(), 0)
        _assert_consistent(self, molecule)

    def test_symmetric_lookup_option(self):
        molecule = Molecule(options=MoleculeOptions(symmetric_bond_lookup=True))
        a = molecule.add_atom(6)
        b = molecule.add_atom(8)
        bond = molecule.add_bond(b, a, 2)
        self.assertEqual(molecule.bond_between(a, b), bond)
        molecule.remove_bond_between(a, b)
        self.assertEqual(molecule.bond_count(), 0)

    def test_parallel_bonds_and_self_bonds_are_allowed(self):
        molecule = Molecule()
        a = molecule.add_atom(6)
        b = molecule.add_atom(6)
        molecule.add_bond(a, b, 1)
        molecule.add_bond(a, b, 2)
        molecule.add_bond(a, a, 1)
        self.assertEqual(molecule.bond_count(), 3)
        self.assertEqual(molecule.bond_between(a, b).index, 0)
        molecule.remove_bond_between(a, b)
        self.assertEqual(molecule.bond_orders(), (2, 1))
        _assert_consistent(self, molecule)

        molecule.remove_atom(a)
        self.assertEqual(molecule.bond_count(), 0)
        _assert_consistent(self, molecule)

    def test_remove_bond_by_index_and_handle(self):
        molecule = Molecule()
        atoms = [molecule.add_atom(6) for _ in range(3)]
        molecule.add_bond(atoms[0], atoms[1], 1)
        last = molecule.add_bond(atoms[1], atoms[2], 3)
        molecule.remove_bond(0)
        self.assertEqual(molecule.bond_pairs(), ((1, 2),))
        self.assertEqual(molecule.bond_orders(), (3,))
        # El enlace restante bajó de índice: el handle antiguo queda obsoleto.
        with self.assertRaises(StaleHandleError):
            molecule.remove_bond(last)
        molecule.remove_bond(molecule.bond(0))
        self.assertEqual(molecule.bond_count(), 0)
        with self.assertRaises(IndexOutOfRangeError):
            molecule.remove_bond(0)
        _assert_consistent(self, molecule)

    def test_set_bond_order(self):
        molecule = Molecule()
        a = molecule.add_atom(6)
        b = molecule.add_atom(6)
        bond = molecule.add_bond(a, b)
        self.assertEqual(bond.order, 1)
        bond.set_order(3)
        self.assertEqual(molecule.bond_orders(), (3,))
        with self.assertRaises(InvalidArgumentError):
            molecule.add_bond(a, b, 256)
        self.assertEqual(molecule.bond_count(), 1)


class MoleculeRemovalTest(unittest.TestCase):
    """Casos de prueba para MoleculeRemovalTest."""

    def test_remove_atom_renumbers_surviving_bonds(self):
        """Verifica que borrar el átomo 0 renumera el enlace 1-2 a 0-1.

        Returns:
            None.

        """
        molecule = Molecule()
        a0 = molecule.add_atom(6)
        molecule.add_atom(7)
        molecule.add_atom(8)
        molecule.add_bond(molecule.atom(1), molecule.atom(2), 2)

        molecule.remove_atom(a0)

        self.assertEqual(molecule.bond_count(), 1)
        self.assertEqual(molecule.bond_pairs(), ((0, 1),))
        bond = molecule.bond(0)
        self.assertEqual(bond.atom1.atomic_number, 7)
        self.assertEqual(bond.atom2.atomic_number, 8)
        self.assertEqual(molecule.graph.neighbors(0), [1])
        self.assertEqual(molecule.bond_between(molecule.atom(0), molecule.atom(1)), bond)
        _assert_consistent(self, molecule)

    def test_remove_atom_drops_only_touching_bonds(self):
        molecule = Molecule()
        atoms = [molecule.add_atom(z) for z in (6, 6, 8, 1, 1)]
        molecule.add_bond(atoms[0], atoms[1], 1)
        molecule.add_bond(atoms[1], atoms[2], 2)
        molecule.add_bond(atoms[1], atoms[3], 1)
        molecule.add_bond(atoms[2], atoms[4], 1)
        molecule.add_bond(atoms[0], atoms[3], 1)

        molecule.remove_atom(1)

        self.assertEqual(molecule.atomic_numbers(), (6, 8, 1, 1))
        self.assertEqual(molecule.bond_pairs(), ((1, 3), (0, 2)))
        self.assertEqual(molecule.bond_orders(), (1, 1))
        _assert_consistent(self, molecule)

    def test_handles_after_removal_are_stale(self):
        molecule = Molecule()
        a0 = molecule.add_atom(6)
        a1 = molecule.add_atom(1)
        molecule.remove_atom(a0)
        self.assertTrue(a1.is_valid())
        with self.assertRaises(StaleHandleError):
            a1.atomic_number
        with self.assertRaises(StaleHandleError):
            molecule.remove_atom(a0)
        with self.assertRaises(StaleHandleError):
            molecule.add_bond(a1, molecule.atom(0))
        self.assertEqual(molecule.atom(0).atomic_number, 1)

    def test_lower_index_handles_survive_removal(self):
        molecule = Molecule()
        a0 = molecule.add_atom(6)
        molecule.add_atom(1)
        molecule.remove_atom(1)
        self.assertEqual(a0.atomic_number, 6)

    def test_handle_does_not_alias_new_atom_at_same_index(self):
        molecule = Molecule()
        old = molecule.add_atom(6)
        molecule.remove_atom(old)
        new = molecule.add_atom(8)
        self.assertEqual(old.index, new.index)
        self.assertNotEqual(old, new)
        with self.assertRaises(StaleHandleError):
            old.atomic_number

    def test_foreign_handles_rejected(self):
        first = Molecule()
        second = Molecule()
        a = first.add_atom(6)
        b = second.add_atom(6)
        with self.assertRaises(InvalidArgumentError):
            first.add_bond(a, b)
        with self.assertRaises(InvalidArgumentError):
            second.remove_atom(a)
        with self.assertRaises(InvalidArgumentError):
            first.bond_between(a, b)
        self.assertEqual(first.bond_count(), 0)
        self.assertEqual(first.atom_count(), 1)

    def test_foreign_and_empty_bond_handles_rejected(self):
        """Verifica que los handles de enlace ajenos o vacíos se rechazan.

        Returns:
            None.

        """
        first = Molecule()
        second = Molecule()
        first.add_bond(first.add_atom(6), first.add_atom(8))
        foreign = second.add_bond(second.add_atom(6), second.add_atom(8))
        with self.assertRaises(InvalidArgumentError):
            first.remove_bond(foreign)
        with self.assertRaises(InvalidArgumentError):
            first.remove_bond(Bond())
        with self.assertRaises(InvalidArgumentError):
            Bond().order
        with self.assertRaises(InvalidArgumentError):
            Bond().pair
        self.assertEqual(first.bond_count(), 1)
        self.assertEqual(second.bond_count(), 1)

    def test_stale_bond_handle_raises(self):
        molecule = Molecule()
        atoms = [molecule.add_atom(6) for _ in range(3)]
        molecule.add_bond(atoms[0], atoms[1], 1)
        shifted = molecule.add_bond(atoms[1], atoms[2], 2)
        molecule.remove_bond(0)
        with self.assertRaises(StaleHandleError):
            shifted.order
        with self.assertRaises(StaleHandleError):
            shifted.pair
        with self.assertRaises(StaleHandleError):
            shifted.set_order(3)
        self.assertEqual(molecule.bond(0).order, 2)


class MoleculeDataTest(unittest.TestCase):
    """Casos de prueba para MoleculeDataTest."""

    def test_set_and_read_data(self):
        molecule = Molecule()
        molecule.set_data("name", "ethanol")
        molecule.set_data("charge", 0)
        self.assertTrue(molecule.has_data("name"))
        self.assertEqual(molecule.data("name").to_string(), "ethanol")
        self.assertIs(molecule.data("charge").type, VariantType.INT)
        self.assertEqual(sorted(molecule.data_names()), ["charge", "name"])

    def test_missing_data_raises(self):
        with self.assertRaises(KeyNotFoundError):
            Molecule().data("missing")

    def test_clear(self):
        molecule = Molecule()
        a = molecule.add_atom(6)
        molecule.add_bond(a, molecule.add_atom(1))
        molecule.set_data("name", "CH")
        molecule.clear()
        self.assertTrue(molecule.is_empty())
        self.assertEqual(molecule.bond_count(), 0)
        self.assertFalse(molecule.has_data("name"))
        _assert_consistent(self, molecule)

    def test_atoms_and_bonds_listing(self):
        molecule = Molecule()
        atoms = [molecule.add_atom(z) for z in (6, 8)]
        bond = molecule.add_bond(*atoms, 2)
        self.assertEqual(molecule.atoms(), atoms)
        self.assertEqual(molecule.bonds(), [bond])
        self.assertEqual(repr(molecule), "Molecule(atoms=2, bonds=1)")


if __name__ == "__main__":
    unittest.main()
