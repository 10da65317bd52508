import unittest

from rubiks.core.base import (
    Axis, Cell, Color, CubeError, DimensionError, InvalidMoveError, Pole,
)
from rubiks.model.cube import Cube, is_exposed, layer_position


def _replace_cell(cube, position, cell):
    x, y, z = position
    layers = [[list(row) for row in layer] for layer in cube.layers]
    layers[z][y][x] = cell
    return Cube(layers)


class TestSolvedCube(unittest.TestCase):
    def test_starts_solved(self):
        cube = Cube.solved(3)
        self.assertEqual(cube.size, 3)
        self.assertTrue(cube.is_solved())
        cube.check_invariants()

    def test_color_counts(self):
        counts = Cube.solved(3).color_counts()
        for color in Color:
            if color.is_physical:
                self.assertEqual(counts[color], 9)
        self.assertEqual(counts[Color.HIDDEN], 27 * 6 - 54)

    def test_single_cell_cube_shows_all_colors(self):
        cube = Cube.solved(1)
        cell = cube.cell(0, 0, 0)
        self.assertEqual(cell.colors, (Color.RED, Color.ORANGE, Color.WHITE,
                                       Color.YELLOW, Color.BLUE, Color.GREEN))
        cube.check_invariants()

    def test_corner_cell(self):
        cell = Cube.solved(3).cell(2, 2, 0)
        self.assertEqual(cell, Cell(px=Color.RED, py=Color.WHITE, nz=Color.GREEN))

    def test_faces(self):
        cube = Cube.solved(3)
        self.assertEqual(cube.face(Axis.X, Pole.POS), ((Color.RED,) * 3,) * 3)
        self.assertEqual(cube.face(Axis.Z, Pole.NEG), ((Color.GREEN,) * 3,) * 3)


class TestCubeShape(unittest.TestCase):
    def test_empty_cube(self):
        with self.assertRaises(DimensionError):
            Cube(())

    def test_wrong_row_count(self):
        layers = [list(layer) for layer in Cube.solved(2).layers]
        layers[1] = layers[1][:1]
        with self.assertRaises(DimensionError):
            Cube(layers)

    def test_non_cell_entry(self):
        with self.assertRaises(DimensionError):
            Cube([[["red"]]])

    def test_invalid_size(self):
        with self.assertRaises(DimensionError):
            Cube.solved(0)

    def test_cell_needs_six_faces(self):
        with self.assertRaises(DimensionError):
            Cell.from_colors([Color.RED] * 5)

    def test_dimension_error_is_a_cube_error(self):
        self.assertTrue(issubclass(DimensionError, CubeError))
        self.assertTrue(issubclass(CubeError, ValueError))


class TestLayers(unittest.TestCase):
    def test_z_layer_is_stored_layer(self):
        cube = Cube.solved(3)
        self.assertEqual(cube.layer(Axis.Z, 1), cube.layers[1])

    def test_layer_layout(self):
        # X layers: rows along Z, columns along Y
        self.assertEqual(layer_position(Axis.X, 2, 1, 0), (2, 0, 1))
        self.assertEqual(layer_position(Axis.Y, 0, 2, 1), (2, 0, 1))
        self.assertEqual(layer_position(Axis.Z, 1, 0, 2), (2, 0, 1))

    def test_layer_cells(self):
        cube = Cube.solved(3)
        for row in cube.layer(Axis.X, 2):
            for cell in row:
                self.assertEqual(cell.px, Color.RED)

    def test_invalid_depth(self):
        cube = Cube.solved(3)
        with self.assertRaises(InvalidMoveError):
            cube.layer(Axis.Y, 3)
        with self.assertRaises(InvalidMoveError):
            cube.layer(Axis.Y, -1)

    def test_is_exposed(self):
        self.assertTrue(is_exposed(3, (2, 1, 1), Axis.X, Pole.POS))
        self.assertFalse(is_exposed(3, (2, 1, 1), Axis.X, Pole.NEG))
        self.assertTrue(is_exposed(1, (0, 0, 0), Axis.Z, Pole.NEG))


class TestInvariants(unittest.TestCase):
    def test_colored_interior_face(self):
        cube = _replace_cell(Cube.solved(3), (1, 1, 1), Cell(px=Color.RED))
        with self.assertRaises(CubeError):
            cube.check_invariants()

    def test_hidden_exterior_face(self):
        cube = _replace_cell(Cube.solved(3), (0, 0, 0),
                             Cell(nx=Color.ORANGE, ny=Color.YELLOW))
        with self.assertRaises(CubeError):
            cube.check_invariants()

    def test_unsolved_but_valid(self):
        cube = _replace_cell(Cube.solved(3), (1, 1, 0), Cell(nz=Color.RED))
        cube.check_invariants()
        self.assertFalse(cube.is_solved())


if __name__ == "__main__":
    unittest.main()
