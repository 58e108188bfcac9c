import pytest

from dhrender.core import error as dh_error
from dhrender.core import types as dh
from dhrender.core.compiler import first_pass
from dhrender.core.context_init import init_compile_params
from dhrender.core.error import ScriptError


def run_first_pass(text, params=None):
    with dh.ScriptSource.from_text(text) as source:
        return first_pass(source, params)


def first_pass_error(text, params=None):
    with pytest.raises(ScriptError) as exc:
        run_first_pass(text, params)
    return exc.value


def test_counts_operations(script):
    body = "0 0 0 v 1 0 0 v 0 1 0 v 0 1 2 {ff0000} t"
    config, counts = run_first_pass(script(body))
    assert config == dh.ScriptConfig(4, 4, dh.SHADE_FLAT)
    assert counts == dh.ScriptCounts(3, 1)


def test_empty_body(script):
    _, counts = run_first_pass(script(""))
    assert counts == dh.ScriptCounts(0, 0)


def test_other_entities_ignored(script):
    # rejected by the second pass, not counted by the first
    _, counts = run_first_pass(script('foo ?x (1) "s" pre{ab} {zz} 1.5 v'))
    assert counts == dh.ScriptCounts(1, 0)


def test_stray_metacommand(script):
    err = first_pass_error(script("0 0 0 v\n%dim 1 1;"))
    assert err.code == dh_error.STRAY_METACOMMAND
    assert err.line == 5


def test_vertex_limit(script):
    params = init_compile_params({"MaxVertices": 2})
    _, counts = run_first_pass(script("v\nv"), params)
    assert counts.vertex_count == 2
    err = first_pass_error(script("v\nv\nv"), params)
    assert err.code == dh_error.TOO_MANY_VERTICES
    assert err.line == 6


def test_triangle_limit(script):
    params = init_compile_params({"MaxTriangles": 1})
    err = first_pass_error(script("t t"), params)
    assert err.code == dh_error.TOO_MANY_TRIANGLES
    assert err.line == 4


def test_trailing_data(script):
    err = first_pass_error(script("0 0 0 v") + "junk\n")
    assert err.code == dh_error.TRAILER
    assert err.line == 6


def test_missing_eof_marker():
    err = first_pass_error("%dhrender;\n%dim 1 1;\n%shade vertex;\n0 0 0 {000000} v\n")
    assert err.code == dh_error.UNEXPECTED_EOF
    assert err.line == 0


def test_source_is_rewound(script):
    with dh.ScriptSource.from_text(script("0 0 0 v")) as source:
        first = first_pass(source)
        second = first_pass(source)
    assert first == second
