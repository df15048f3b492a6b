import math

import pytest

from meshforge.geometry import Face, Vec3, Vertex
from meshforge.model import Model
from meshforge.transforms.basic import Translate
from meshforge.transforms.projection import Cylindrical, Orthographic, Perspective


def make_test_cube() -> Model:
    model = Model("TestCube")
    front = [(-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)]
    for z, nz in ((0.5, 1.0), (-0.5, -1.0)):
        for x, y in front:
            model.mesh.add_vertex(Vertex(Vec3(x, y, z), Vec3(0.0, 0.0, nz)))
    model.mesh.add_face(Face.triangle(0, 1, 2), None)
    model.mesh.add_face(Face.triangle(0, 2, 3), None)
    return model


def single_vertex_model(position: Vec3, normal: Vec3 = Vec3(0.0, 0.0, 1.0)) -> Model:
    model = Model("Point")
    model.mesh.add_vertex(Vertex(position, normal))
    return model


def positions(model: Model):
    return [tuple(v.position) for v in model.mesh.vertices]


# Perspective


def test_perspective_transform_changes_positions():
    model = make_test_cube()
    original = positions(model)
    Perspective.z_positive(0.0, 0.0, 2.0, 1.0).apply(model)
    changed = any(
        any(abs(a - b) > 0.001 for a, b in zip(new, old))
        for new, old in zip(positions(model), original)
    )
    assert changed


def test_perspective_far_objects_appear_smaller():
    near = make_test_cube()
    far = make_test_cube()
    far.apply(Translate(0.0, 0.0, 1.0))

    perspective = Perspective(Vec3(0.0, 0.0, -5.0), 5.0, False)
    perspective.apply(near)
    perspective.apply(far)

    near_width = max(abs(v.position.x) for v in near.mesh.vertices) * 2.0
    far_width = max(abs(v.position.x) for v in far.mesh.vertices) * 2.0
    assert near_width > far_width


def test_perspective_single_point_values():
    model = single_vertex_model(Vec3(1.0, 1.0, 0.0))
    Perspective(Vec3(0.0, 0.0, -5.0), 5.0).apply(model)
    vertex = model.mesh.vertices[0]
    assert vertex.position.x == pytest.approx(1.0)
    assert vertex.position.y == pytest.approx(1.0)
    assert vertex.position.z == pytest.approx(math.sqrt(27.0))
    length = math.sqrt(27.0)
    assert tuple(vertex.normal) == pytest.approx((-1.0 / length, -1.0 / length, -5.0 / length))


def test_perspective_preserve_z_keeps_depth():
    model = single_vertex_model(Vec3(2.0, -1.0, 3.0))
    Perspective(Vec3(0.0, 0.0, -1.0), 2.0, preserve_z=True).apply(model)
    vertex = model.mesh.vertices[0]
    assert vertex.position.x == pytest.approx(1.0)
    assert vertex.position.y == pytest.approx(-0.5)
    assert vertex.position.z == pytest.approx(3.0)


def test_perspective_point_behind_eye_is_pushed_in_front():
    model = single_vertex_model(Vec3(1.0, 0.0, 0.0))
    Perspective.z_negative(0.0, 0.0, 2.0, 1.0).apply(model)
    vertex = model.mesh.vertices[0]
    assert vertex.position.x == pytest.approx(100.0)
    assert vertex.position.y == pytest.approx(0.0)
    assert vertex.position.z == pytest.approx(math.sqrt(1.0 + 0.0001))


# Orthographic


def test_orthographic_onto_xy_flattens_z_and_keeps_xy():
    model = make_test_cube()
    original = positions(model)
    Orthographic.onto_xy().apply(model)

    zs = [v.position.z for v in model.mesh.vertices]
    assert max(zs) - min(zs) < 0.01
    for (x, y, _), (ox, oy, _) in zip(positions(model), original):
        assert abs(x - ox) < 0.01
        assert abs(y - oy) < 0.01


def test_orthographic_onto_yz_flattens_x():
    model = make_test_cube()
    Orthographic.onto_yz().apply(model)
    xs = [v.position.x for v in model.mesh.vertices]
    assert max(xs) - min(xs) < 0.01


def test_orthographic_onto_xz_flattens_y_and_keeps_xz():
    model = make_test_cube()
    original = positions(model)
    Orthographic.onto_xz().apply(model)
    for (x, y, z), (ox, _, oz) in zip(positions(model), original):
        assert y == pytest.approx(0.0, abs=1e-9)
        assert x == pytest.approx(ox)
        assert z == pytest.approx(oz)


def test_orthographic_point_and_normals():
    model = single_vertex_model(Vec3(1.0, 2.0, 3.0), Vec3(1.0, 0.0, 1.0))
    Orthographic.onto_xy().apply(model)
    vertex = model.mesh.vertices[0]
    assert tuple(vertex.position) == pytest.approx((1.0, 2.0, 0.0))
    assert tuple(vertex.normal) == pytest.approx((1.0, 0.0, 0.0))


def test_orthographic_normal_along_direction_becomes_direction():
    model = single_vertex_model(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    Orthographic.onto_xy().apply(model)
    assert tuple(model.mesh.vertices[0].normal) == pytest.approx((0.0, 0.0, 1.0))


def test_orthographic_preserve_z_keeps_position():
    model = single_vertex_model(Vec3(1.0, 2.0, 3.0))
    Orthographic(Vec3(0.0, 0.0, 2.0), preserve_z=True).apply(model)
    assert tuple(model.mesh.vertices[0].position) == pytest.approx((1.0, 2.0, 3.0))


# Cylindrical


def test_cylindrical_projects_onto_surface():
    model = make_test_cube()
    original = positions(model)
    Cylindrical.y_axis(0.0, 0.0, 1.0).apply(model)

    changed = any(
        abs(x - ox) > 0.001 or abs(z - oz) > 0.001
        for (x, _, z), (ox, _, oz) in zip(positions(model), original)
    )
    assert changed

    for x, y, z in positions(model):
        assert abs(math.hypot(x, z) - 1.0) < 0.01
    for (_, y, _), (_, oy, _) in zip(positions(model), original):
        assert abs(y - oy) < 0.01


def test_cylindrical_preserve_radius_keeps_varied_distances():
    model = make_test_cube()
    Cylindrical(Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 0.0), 1.0, True).apply(model)
    distances = [math.hypot(x, z) for x, _, z in positions(model)]
    assert max(distances) - min(distances) > 0.1


def test_cylindrical_preserve_radius_leaves_varied_points_in_place():
    model = Model("Points")
    model.mesh.add_vertex(Vertex(Vec3(1.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0)))
    model.mesh.add_vertex(Vertex(Vec3(0.0, 2.0, 3.0), Vec3(0.0, 0.0, 1.0)))
    Cylindrical(Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 0.0), 5.0, True).apply(model)
    assert tuple(model.mesh.vertices[0].position) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
    assert tuple(model.mesh.vertices[1].position) == pytest.approx((0.0, 2.0, 3.0), abs=1e-9)
    assert model.mesh.vertices[0].normal.magnitude() == pytest.approx(1.0)


def test_cylindrical_point_values_and_normal():
    model = single_vertex_model(Vec3(1.0, 5.0, 0.0))
    Cylindrical.y_axis(0.0, 0.0, 2.0).apply(model)
    vertex = model.mesh.vertices[0]
    assert tuple(vertex.position) == pytest.approx((2.0, 5.0, 0.0), abs=1e-9)
    assert tuple(vertex.normal) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)


def test_cylindrical_keeps_direction_around_axis():
    model = single_vertex_model(Vec3(0.0, 0.0, 1.0))
    Cylindrical.y_axis(0.0, 0.0, 2.0).apply(model)
    assert tuple(model.mesh.vertices[0].position) == pytest.approx((0.0, 0.0, 2.0), abs=1e-9)


def test_cylindrical_point_on_axis_is_unchanged():
    model = single_vertex_model(Vec3(0.0, 0.0, 4.0), Vec3(0.0, 1.0, 0.0))
    Cylindrical.z_axis(0.0, 0.0, 3.0).apply(model)
    vertex = model.mesh.vertices[0]
    assert tuple(vertex.position) == (0.0, 0.0, 4.0)
    assert tuple(vertex.normal) == (0.0, 1.0, 0.0)


def test_cylindrical_x_axis_with_offset_center():
    model = single_vertex_model(Vec3(7.0, 1.0, 0.0))
    Cylindrical.x_axis(1.0, 1.0, 0.5).apply(model)
    x, y, z = model.mesh.vertices[0].position
    assert x == pytest.approx(7.0)
    assert math.hypot(y - 1.0, z - 1.0) == pytest.approx(0.5)
    assert y == pytest.approx(1.0, abs=1e-9)
    assert z == pytest.approx(0.5)