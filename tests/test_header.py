import pytest

from dhrender.core import error as dh_error
from dhrender.core import types as dh
from dhrender.core.context_init import init_compile_params
from dhrender.core.error import ScriptError
from dhrender.core.header import parse_header


def header(tokenizer, params, text):
    return parse_header(tokenizer(text), params)


def header_error(tokenizer, params, text):
    with pytest.raises(ScriptError) as exc:
        header(tokenizer, params, text)
    return exc.value


def test_valid_header(tokenizer, params):
    config, ent = header(tokenizer, params, "%dhrender;\n%dim 4 3;\n%shade vertex;\n|;")
    assert config == dh.ScriptConfig(4, 3, dh.SHADE_INTER)
    assert ent.kind == dh.E_EOF


def test_header_any_order(tokenizer, params):
    config, ent = header(tokenizer, params, "%dhrender;\n%shade triangle;\n%dim 640 480;\n1 |;")
    assert config == dh.ScriptConfig(640, 480, dh.SHADE_FLAT)
    assert (ent.kind, ent.key) == (dh.E_NUMERIC, "1")


def test_shade_names_map_vertex_to_interpolated(tokenizer, params):
    config, _ = header(tokenizer, params, "%dhrender; %dim 1 1; %shade vertex; |;")
    assert config.shade == dh.SHADE_INTER
    config, _ = header(tokenizer, params, "%dhrender; %dim 1 1; %shade triangle; |;")
    assert config.shade == dh.SHADE_FLAT


def test_maximum_dimensions(tokenizer, params):
    config, _ = header(tokenizer, params, "%dhrender; %dim 16384 16384; %shade vertex; |;")
    assert (config.width, config.height) == (16384, 16384)


@pytest.mark.parametrize("text", [
    "%dhr;\n|;",
    "1 2 |;",
    "%dhrender 1;\n|;",
    '%"dhrender";\n|;',
    "%;\n|;",
    "",
    "%dhrender",
    "%dhrender (;",
    "# only a comment\n",
])
def test_no_signature(tokenizer, params, text):
    err = header_error(tokenizer, params, text)
    assert err.code == dh_error.NO_SIGNATURE
    assert err.line == 0
    assert str(err) == "Failed to read script signature"


def test_dim_repeated(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%dim 10 10;\n%dim 10 10;\n%shade vertex;\n|;")
    assert err.code == dh_error.HEADER_REPEATED
    assert err.line == 3


def test_shade_repeated(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%shade vertex;\n%shade vertex;\n|;")
    assert err.code == dh_error.HEADER_REPEATED
    assert err.line == 3


@pytest.mark.parametrize("dims", ["0 5", "5 0", "-1 5", "16385 1", "1 16385"])
def test_dimension_out_of_range(tokenizer, params, dims):
    err = header_error(tokenizer, params, f"%dhrender;\n%dim {dims};\n|;")
    assert err.code == dh_error.DIMENSION_RANGE
    assert err.line == 2


@pytest.mark.parametrize("dims", ["a 5", "5", '"5" 5', "5 5.0", "99999999999 5"])
def test_dim_syntax(tokenizer, params, dims):
    err = header_error(tokenizer, params, f"%dhrender;\n%dim {dims};\n|;")
    assert err.code == dh_error.HEADER_SYNTAX


def test_dim_extra_token(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%dim 4 4 4;\n|;")
    assert err.code == dh_error.INVALID_HEADER_COMMAND


def test_shade_unknown_mode(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%shade smooth;\n|;")
    assert err.code == dh_error.SHADING_MODE


def test_shade_missing_mode(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%shade;\n|;")
    assert err.code == dh_error.HEADER_SYNTAX


@pytest.mark.parametrize("cmd", ["%color red;", "%;", '%"dim" 1 1;'])
def test_invalid_header_command(tokenizer, params, cmd):
    err = header_error(tokenizer, params, f"%dhrender;\n{cmd}\n|;")
    assert err.code == dh_error.INVALID_HEADER_COMMAND
    assert err.line == 2


def test_missing_dimensions(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%shade vertex;\n|;")
    assert err.code == dh_error.NO_DIMENSIONS
    assert err.line == 0


def test_missing_shading_mode(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%dim 2 2;\n|;")
    assert err.code == dh_error.NO_SHADING_MODE
    assert err.line == 0


def test_stream_error_in_header(tokenizer, params):
    err = header_error(tokenizer, params, "%dhrender;\n%dim 4 %")
    assert err.code == dh_error.NESTED_METACOMMAND
    assert err.line == 2


def test_custom_max_dim(tokenizer):
    small = init_compile_params({"MaxDim": 8})
    err = header_error(tokenizer, small, "%dhrender;\n%dim 9 4;\n|;")
    assert err.code == dh_error.DIMENSION_RANGE
