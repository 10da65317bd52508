import unittest

from rubiks.core.base import Axis, Color, Locus, Pole, ProjectionError, SOLVED_COLORS
from rubiks.game import view_matrix
from rubiks.model.cube import Cube
from rubiks.view.algebra import identity
from rubiks.view.projection import (
    Square, cube_to_squares, depth, is_facing_viewer, position_cube, project,
    render_order, signed_area, square_corners,
)

LOCUS = Locus(Axis.Z, Pole.NEG, (0, 0))


def _square(*points):
    return Square(locus=LOCUS, front=Color.GREEN, back=Color.HIDDEN, points=tuple(points))


def _facing_faces(rotation, size=3):
    transform = position_cube(rotation, 5.0)
    squares = cube_to_squares(transform, Cube.solved(size))
    facing = [s for s in squares if is_facing_viewer(600.0, s)]
    return facing, {(s.locus.axis, s.locus.pole) for s in facing}


class TestProject(unittest.TestCase):
    def test_point_on_view_axis_projects_to_center(self):
        for d in (0.3, 1.0, 600.0):
            projected = project(d, _square((0.0, 0.0, 5.0)))
            self.assertEqual(projected.points, ((0.0, 0.0, 5.0),))

    def test_perspective_divide(self):
        projected = project(2.0, _square((1.0, 2.0, 4.0)))
        self.assertEqual(projected.points, ((0.5, 1.0, 4.0),))
        self.assertEqual(projected.locus, LOCUS)

    def test_point_behind_viewer(self):
        with self.assertRaises(ProjectionError):
            project(600.0, _square((1.0, 1.0, 0.0)))
        with self.assertRaises(ProjectionError):
            project(600.0, _square((1.0, 1.0, -2.0)))

    def test_invalid_screen_distance(self):
        with self.assertRaises(ProjectionError):
            project(0.0, _square((0.0, 0.0, 5.0)))


class TestSquares(unittest.TestCase):
    def test_one_square_per_sticker(self):
        squares = cube_to_squares(lambda path: path, Cube.solved(3))
        self.assertEqual(len(squares), 54)
        for square in squares:
            self.assertEqual(square.front, SOLVED_COLORS[(square.locus.axis, square.locus.pole)])
            self.assertEqual(square.back, Color.HIDDEN)
            self.assertEqual(len(square.points), 4)

    def test_back_of_single_cell_is_opposite_face(self):
        squares = cube_to_squares(lambda path: path, Cube.solved(1))
        right = [s for s in squares if s.locus == Locus(Axis.X, Pole.POS, (0, 0))][0]
        self.assertEqual(right.front, Color.RED)
        self.assertEqual(right.back, Color.ORANGE)

    def test_corners_lie_on_the_face(self):
        for point in square_corners(3, Axis.Y, Pole.NEG, 1, 2):
            self.assertEqual(point[1], -1.0)
        xs = sorted({p[0] for p in square_corners(2, Axis.Z, Pole.POS, 0, 1)})
        self.assertEqual(xs, [0.0, 1.0])

    def test_signed_area(self):
        self.assertEqual(signed_area(((0, 0), (1, 0), (1, 1), (0, 1))), 1.0)
        self.assertEqual(signed_area(((0, 0), (0, 1), (1, 1), (1, 0))), -1.0)

    def test_depth_is_nearest_point(self):
        self.assertEqual(depth(_square((0, 0, 7.0), (1, 0, 4.5), (1, 1, 6.0))), 4.5)


class TestPositionCube(unittest.TestCase):
    def test_offset_must_clear_cube(self):
        with self.assertRaises(ProjectionError):
            position_cube(identity(), 1.5)
        with self.assertRaises(ProjectionError):
            position_cube(identity(), 3.0, scaling=2.0)

    def test_scaling_must_be_positive(self):
        with self.assertRaises(ProjectionError):
            position_cube(identity(), 5.0, scaling=0.0)

    def test_transform_keeps_cube_in_front(self):
        transform = position_cube(view_matrix(40.0, 70.0), 2.0)
        for square in cube_to_squares(transform, Cube.solved(2)):
            for point in square.points:
                self.assertGreater(point[2], 0.0)


class TestFacing(unittest.TestCase):
    def test_head_on_view_shows_one_face(self):
        facing, faces = _facing_faces(identity())
        self.assertEqual(faces, {(Axis.Z, Pole.NEG)})
        self.assertEqual(len(facing), 9)

    def test_generic_view_shows_three_faces(self):
        facing, faces = _facing_faces(view_matrix(30.0, -25.0))
        self.assertEqual(faces, {(Axis.X, Pole.POS), (Axis.Y, Pole.POS), (Axis.Z, Pole.NEG)})
        self.assertEqual(len(facing), 27)

    def test_other_side(self):
        _, faces = _facing_faces(view_matrix(-30.0, 25.0), size=2)
        self.assertEqual(faces, {(Axis.X, Pole.NEG), (Axis.Y, Pole.NEG), (Axis.Z, Pole.NEG)})


class TestRenderOrder(unittest.TestCase):
    def setUp(self):
        transform = position_cube(view_matrix(30.0, -25.0), 5.0)
        self.drawables = render_order(600.0, cube_to_squares(transform, Cube.solved(3)))

    def test_farthest_first(self):
        self.assertEqual(len(self.drawables), 54)
        for farther, nearer in zip(self.drawables, self.drawables[1:]):
            self.assertGreaterEqual(farther.depth, nearer.depth)

    def test_nearest_square_faces_viewer(self):
        self.assertTrue(self.drawables[-1].facing)
        self.assertEqual(self.drawables[-1].color, self.drawables[-1].front)

    def test_hidden_backs_of_far_squares(self):
        far = [d for d in self.drawables if not d.facing]
        self.assertEqual(len(far), 27)
        self.assertTrue(all(d.color is Color.HIDDEN for d in far))

    def test_to_dict(self):
        data = self.drawables[0].to_dict()
        self.assertEqual(len(data["polygon"]), 4)
        self.assertIn(data["locus"]["pole"], ("+", "-"))


if __name__ == "__main__":
    unittest.main()
