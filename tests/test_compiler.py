import pytest

from dhrender.core import error as dh_error
from dhrender.core import types as dh
from dhrender.core.compiler import (
    CompiledScript,
    compile_file,
    compile_script,
    compile_text,
    first_pass,
)
from dhrender.core.context_init import init_compile_params
from dhrender.core.error import ScriptError

SAMPLE = """\
%dhrender;
%dim 640 480;
%shade vertex;
# a single triangle
0 0 0 {ff0000} v
639 0 10 {00ff00} v
320 479 20 {0000ff} v
0 1 2 t
|;
"""


def test_compile_text():
    compiled = compile_text(SAMPLE)
    assert isinstance(compiled, CompiledScript)
    assert compiled.config == dh.ScriptConfig(640, 480, dh.SHADE_INTER)
    assert compiled.counts == dh.ScriptCounts(3, 1)
    assert compiled.store.sealed
    assert compiled.store.vertices["color"].tolist() == [0xFF0000, 0x00FF00, 0x0000FF]


def test_compile_file(tmp_path):
    path = tmp_path / "scene.dhr"
    path.write_text(SAMPLE)
    compiled = compile_file(str(path))
    assert compiled.store.triangles.tolist() == [(0, 1, 2, 0)]


def test_compile_file_crlf(tmp_path):
    path = tmp_path / "scene.dhr"
    path.write_bytes(SAMPLE.replace("\n", "\r\n").replace("0 0 0 {", "0 0 -1 {").encode())
    with pytest.raises(ScriptError) as exc:
        compile_file(str(path))
    assert exc.value.code == dh_error.NEGATIVE_Z
    assert exc.value.line == 5


def test_compile_missing_file(tmp_path):
    with pytest.raises(OSError):
        compile_file(str(tmp_path / "missing.dhr"))


def test_empty_script():
    compiled = compile_text("%dhrender;\n%dim 1 1;\n%shade triangle;\n|;\n")
    assert compiled.counts == dh.ScriptCounts(0, 0)
    assert len(compiled.store.vertices) == 0
    assert len(compiled.store.triangles) == 0


def test_first_pass_only():
    with dh.ScriptSource.from_text(SAMPLE) as source:
        config, counts = first_pass(source)
    assert config.width == 640
    assert counts == dh.ScriptCounts(3, 1)


def test_compile_script_reads_source_twice():
    with dh.ScriptSource.from_text(SAMPLE) as source:
        a = compile_script(source)
        b = compile_script(source)
    assert a.store.vertices.tolist() == b.store.vertices.tolist()


def test_params_override():
    params = init_compile_params({"MaxVertices": 2})
    with pytest.raises(ScriptError) as exc:
        compile_text(SAMPLE, params)
    assert exc.value.code == dh_error.TOO_MANY_VERTICES
    assert exc.value.line == 7


def test_vertex_limit(script):
    body = "\n".join(["0 0 0 v"] * 16384)
    compiled = compile_text(script(body))
    assert compiled.counts.vertex_count == 16384

    body = "\n".join(["0 0 0 v"] * 16385)
    with pytest.raises(ScriptError) as exc:
        compile_text(script(body))
    assert exc.value.code == dh_error.TOO_MANY_VERTICES
    assert exc.value.line == 3 + 16385


def test_triangle_limit(script):
    tris = ["0 0 0 {000000} t"] * 16384
    compiled = compile_text(script("\n".join(["0 0 0 v"] + tris)))
    assert compiled.counts.triangle_count == 16384

    with pytest.raises(ScriptError) as exc:
        compile_text(script("\n".join(["0 0 0 v"] + tris + tris[:1])))
    assert exc.value.code == dh_error.TOO_MANY_TRIANGLES
    assert exc.value.line == 4 + 16385


def test_first_pass_errors_win(script):
    # the first pass rejects trailing data before the body is executed
    with pytest.raises(ScriptError) as exc:
        compile_text(script("0 0 -1 v") + "junk\n")
    assert exc.value.code == dh_error.TRAILER
