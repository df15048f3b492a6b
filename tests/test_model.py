import pytest

from meshforge.errors import TransformError
from meshforge.geometry import Vec3, Vertex
from meshforge.model import Model, Transform


class _Shift(Transform):
    def __init__(self, dx):
        self.dx = dx

    def apply(self, model):
        for vertex in model.mesh.vertices:
            vertex.position = vertex.position + Vec3(self.dx, 0.0, 0.0)


class _Failing(Transform):
    def apply(self, model):
        raise TransformError("cannot do it")


class _Broken(Transform):
    def apply(self, model):
        raise ValueError("bug")


def _model_with_point():
    model = Model("Point")
    model.mesh.add_vertex(Vertex.with_position(0.0, 0.0, 0.0))
    return model


def test_create_empty_model():
    model = Model("TestModel")
    assert model.name == "TestModel"
    assert model.mesh.vertices == []
    assert model.mesh.faces == []


def test_apply_chains_and_returns_self():
    model = _model_with_point()
    result = model.apply(_Shift(1.0)).apply(_Shift(2.0))
    assert result is model
    assert model.mesh.vertices[0].position == Vec3(3.0, 0.0, 0.0)


def test_apply_ignores_transform_errors():
    model = _model_with_point()
    result = model.apply(_Failing()).apply(_Shift(1.0))
    assert result is model
    assert model.mesh.vertices[0].position == Vec3(1.0, 0.0, 0.0)


def test_direct_transform_apply_raises():
    model = _model_with_point()
    with pytest.raises(TransformError) as info:
        _Failing().apply(model)
    assert info.value.message == "cannot do it"


def test_apply_propagates_other_exceptions():
    model = _model_with_point()
    with pytest.raises(ValueError):
        model.apply(_Broken())


def test_transform_is_abstract():
    with pytest.raises(TypeError):
        Transform()


def test_models_have_independent_meshes():
    first = _model_with_point()
    second = Model("Other")
    assert len(first.mesh.vertices) == 1
    assert len(second.mesh.vertices) == 0