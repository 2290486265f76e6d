from pathlib import Path

import pytest

from interopgen.catalog import build_catalog
from interopgen.common import load_json_object
from interopgen.targets import get_target
from interopgen.types import CallVariant, Parameter

SAMPLES = Path(__file__).resolve().parents[1] / "samples"


@pytest.fixture
def sample_path() -> Path:
    return SAMPLES / "panda_catalog.json"


@pytest.fixture
def csharp():
    return get_target("csharp")


@pytest.fixture
def sample_catalog(sample_path, csharp):
    return build_catalog(load_json_object(sample_path), csharp)


def make_variant(target, wrapper_name, cpp_name="f", return_type=None, params=(), **kwargs) -> CallVariant:
    return CallVariant(
        cpp_name=cpp_name,
        wrapper_name=wrapper_name,
        unique_name=f"u_{wrapper_name}",
        return_remap=target.remap_parameter(return_type) if return_type is not None else None,
        parameters=[Parameter(target.remap_parameter(t), f"param{n}") for n, t in enumerate(params)],
        **kwargs,
    )
