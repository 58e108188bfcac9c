import numpy as np
import pytest

from dhrender.core.store import DeclarationStore, TRIANGLE_DTYPE, VERTEX_DTYPE


def test_exact_allocation():
    store = DeclarationStore(2, 1)
    assert store.vertex_count == 2
    assert store.triangle_count == 1
    assert store.vertices.dtype == VERTEX_DTYPE
    assert store.triangles.dtype == TRIANGLE_DTYPE
    assert not store.complete()


def test_append_until_full():
    store = DeclarationStore(2, 1)
    assert store.declare_vertex(1, -2, 3, 0xFF0000)
    assert store.declare_vertex(4, 5, 0, 0)
    assert not store.declare_vertex(7, 8, 9, 0)
    assert store.vertices_written == 2
    assert not store.complete()

    assert store.declare_triangle(0, 1, 1, 0x00FF00)
    assert not store.declare_triangle(0, 0, 0, 0)
    assert store.complete()

    assert store.vertices[0].tolist() == (1, -2, 3, 0xFF0000)
    assert store.triangles[0].tolist() == (0, 1, 1, 0x00FF00)


def test_empty_store_is_complete():
    store = DeclarationStore(0, 0)
    assert store.complete()
    store.seal()
    assert store.sealed


def test_views_are_read_only():
    store = DeclarationStore(1, 0)
    store.declare_vertex(1, 2, 3, 4)
    with pytest.raises(ValueError):
        store.vertices["x"][0] = 10


def test_seal():
    store = DeclarationStore(1, 0)
    store.declare_vertex(0, 0, 0, 0)
    store.seal()
    assert store.sealed
    assert not store.vertices.flags.writeable
    np.testing.assert_array_equal(store.vertices["z"], [0])


def test_seal_requires_complete():
    store = DeclarationStore(1, 0)
    with pytest.raises(AssertionError):
        store.seal()
