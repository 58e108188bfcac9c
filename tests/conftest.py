import pytest

from dhrender.core import types as dh
from dhrender.core.context_init import init_compile_params
from dhrender.core.tokenizer import Tokenizer


def build_script(body, dim=(4, 4), shade="triangle"):
    """Assemble a complete script from a body string."""
    lines = ["%dhrender;"]
    if dim is not None:
        lines.append(f"%dim {dim[0]} {dim[1]};")
    if shade is not None:
        lines.append(f"%shade {shade};")
    lines.append(body)
    lines.append("|;")
    return "\n".join(lines) + "\n"


@pytest.fixture
def script():
    return build_script


@pytest.fixture
def params():
    return init_compile_params()


@pytest.fixture
def tokenizer():
    def _make(text):
        return Tokenizer(dh.ScriptSource.from_text(text))
    return _make
