import math
import unittest

from molecule_spin.renderer.engine import (
    Axis,
    Scene,
    Sphere,
    Vec3,
    glyph_for_luminance,
    intersect_sphere,
    rotate_point,
)


class Vec3Tests(unittest.TestCase):
    def test_arithmetic(self) -> None:
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(0.5, -1.0, 2.0)
        self.assertEqual(a + b, Vec3(1.5, 1.0, 5.0))
        self.assertEqual(a - b, Vec3(0.5, 3.0, 1.0))
        self.assertEqual(-a, Vec3(-1.0, -2.0, -3.0))
        self.assertEqual(a * 2.0, Vec3(2.0, 4.0, 6.0))
        self.assertEqual(2.0 * a, Vec3(2.0, 4.0, 6.0))
        self.assertEqual(a / 2.0, Vec3(0.5, 1.0, 1.5))
        self.assertAlmostEqual(a.dot(b), 0.5 - 2.0 + 6.0)

    def test_length_and_normalisation(self) -> None:
        vec = Vec3(3.0, 0.0, 4.0)
        self.assertAlmostEqual(vec.length(), 5.0)
        self.assertAlmostEqual(vec.length_squared(), 25.0)
        unit = vec.normalized()
        self.assertAlmostEqual(unit.length(), 1.0)
        self.assertAlmostEqual(unit.x, 0.6)

    def test_zero_vector_normalisation_is_unguarded(self) -> None:
        with self.assertRaises(ZeroDivisionError):
            Vec3(0.0, 0.0, 0.0).normalized()

    def test_multiply_by_vector_rejected(self) -> None:
        with self.assertRaises(TypeError):
            Vec3(1.0, 1.0, 1.0) * Vec3(1.0, 1.0, 1.0)  # type: ignore[operator]


class IntersectionTests(unittest.TestCase):
    def test_ray_at_centre_hits_at_surface_distance(self) -> None:
        t = intersect_sphere(Vec3(0.0, 0.0, -10.0), Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.0, 0.0), 2.0)
        self.assertAlmostEqual(t, 8.0)

    def test_camera_scenario_hits_at_z_minus_r(self) -> None:
        for z, radius in ((30.0, 7.7), (12.5, 3.2), (5.0, 4.999)):
            t = intersect_sphere(Vec3(0.0, 0.0, -z), Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.0, 0.0), radius)
            self.assertAlmostEqual(t, z - radius, places=9)

    def test_direction_need_not_be_unit(self) -> None:
        t = intersect_sphere(Vec3(0.0, 0.0, -10.0), Vec3(0.0, 0.0, 2.0), Vec3(0.0, 0.0, 0.0), 2.0)
        self.assertAlmostEqual(t, 4.0)

    def test_ray_pointing_away_is_not_a_hit(self) -> None:
        t = intersect_sphere(Vec3(0.0, 0.0, -10.0), Vec3(0.0, 0.0, -1.0), Vec3(0.0, 0.0, 0.0), 2.0)
        self.assertLessEqual(t, 0.0)

    def test_ray_passing_beside_sphere_misses(self) -> None:
        t = intersect_sphere(Vec3(2.5, 0.0, -10.0), Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.0, 0.0), 2.0)
        self.assertEqual(t, -1.0)

    def test_off_axis_sphere(self) -> None:
        centre = Vec3(4.0, -1.0, 3.0)
        t = intersect_sphere(Vec3(4.0, -1.0, -30.0), Vec3(0.0, 0.0, 1.0), centre, 1.5)
        self.assertAlmostEqual(t, 33.0 - 1.5)


class RotationTests(unittest.TestCase):
    point = Vec3(-11.36948, 9.18588, 2.5)

    def assertVecAlmostEqual(self, a: Vec3, b: Vec3, places: int = 9) -> None:
        self.assertAlmostEqual(a.x, b.x, places=places)
        self.assertAlmostEqual(a.y, b.y, places=places)
        self.assertAlmostEqual(a.z, b.z, places=places)

    def test_zero_angle_is_identity(self) -> None:
        for axis in Axis:
            self.assertEqual(rotate_point(self.point, 0.0, axis), self.point)

    def test_rotation_is_reversible(self) -> None:
        for axis in Axis:
            for theta in (0.01, 1.0, 3.3, -2.0):
                there = rotate_point(self.point, theta, axis)
                back = rotate_point(there, -theta, axis)
                self.assertVecAlmostEqual(back, self.point)

    def test_rotation_preserves_norm(self) -> None:
        for axis in Axis:
            for step in range(0, 628, 37):
                rotated = rotate_point(self.point, step / 100.0, axis)
                self.assertAlmostEqual(rotated.length(), self.point.length(), places=9)

    def test_axis_coordinate_unchanged(self) -> None:
        self.assertEqual(rotate_point(self.point, 0.7, Axis.X).x, self.point.x)
        self.assertEqual(rotate_point(self.point, 0.7, Axis.Y).y, self.point.y)
        self.assertEqual(rotate_point(self.point, 0.7, Axis.Z).z, self.point.z)

    def test_quarter_turns(self) -> None:
        quarter = math.pi / 2.0
        self.assertVecAlmostEqual(rotate_point(Vec3(0.0, 1.0, 0.0), quarter, Axis.X), Vec3(0.0, 0.0, 1.0))
        self.assertVecAlmostEqual(rotate_point(Vec3(1.0, 0.0, 0.0), quarter, Axis.Y), Vec3(0.0, 0.0, -1.0))
        self.assertVecAlmostEqual(rotate_point(Vec3(1.0, 0.0, 0.0), quarter, Axis.Z), Vec3(0.0, 1.0, 0.0))

    def test_default_axis_is_x(self) -> None:
        self.assertEqual(rotate_point(self.point, 0.4), rotate_point(self.point, 0.4, Axis.X))


class GlyphTests(unittest.TestCase):
    glyphs = ".-:=+*#@"

    def test_negative_luminance_uses_dimmest_glyph(self) -> None:
        self.assertEqual(glyph_for_luminance(-0.3, self.glyphs), ".")
        self.assertEqual(glyph_for_luminance(0.0, self.glyphs), ".")

    def test_buckets(self) -> None:
        self.assertEqual(glyph_for_luminance(0.5, self.glyphs), "+")
        self.assertEqual(glyph_for_luminance(0.124, self.glyphs), ".")
        self.assertEqual(glyph_for_luminance(0.125, self.glyphs), "-")
        self.assertEqual(glyph_for_luminance(0.99, self.glyphs), "@")

    def test_full_luminance_maps_to_brightest(self) -> None:
        self.assertEqual(glyph_for_luminance(1.0, self.glyphs), "@")

    def test_mapping_is_monotonic(self) -> None:
        previous = -1
        for step in range(1000):
            index = self.glyphs.index(glyph_for_luminance(step / 1000.0, self.glyphs))
            self.assertGreaterEqual(index, previous)
            previous = index
        self.assertEqual(previous, len(self.glyphs) - 1)


class SceneValidationTests(unittest.TestCase):
    def test_sphere_requires_positive_radius(self) -> None:
        with self.assertRaises(ValueError):
            Sphere("ghost", Vec3(0.0, 0.0, 0.0), 0.0)
        with self.assertRaises(ValueError):
            Sphere("ghost", Vec3(0.0, 0.0, 0.0), -1.0)

    def test_rotated_sphere_keeps_radius_and_rest_centre(self) -> None:
        sphere = Sphere("oxygen", Vec3(5.6379, 0.83238, 0.0), 6.6)
        moved = sphere.rotated(1.2, Axis.Y)
        self.assertEqual(moved.radius, sphere.radius)
        self.assertEqual(moved.name, "oxygen")
        self.assertEqual(sphere.center, Vec3(5.6379, 0.83238, 0.0))
        self.assertNotEqual(moved.center, sphere.center)

    def test_scene_rejects_empty_grid_and_ramp(self) -> None:
        ball = (Sphere("ball", Vec3(0.0, 0.0, 0.0), 1.0),)
        with self.assertRaises(ValueError):
            Scene(spheres=ball, width=0)
        with self.assertRaises(ValueError):
            Scene(spheres=ball, height=0)
        with self.assertRaises(ValueError):
            Scene(spheres=ball, glyphs="")


if __name__ == "__main__":
    unittest.main()
