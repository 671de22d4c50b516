from copy import deepcopy

import pytest

from flagscan import FlagSetBuilder


@pytest.fixture
def values():
    builder = FlagSetBuilder()
    builder.add_flag("--port", int, default=8080)
    builder.add_flag("--tag", list[str], default=["base"])
    return builder.build().new_values()


def test_initial_values(values):
    assert values.as_dict() == {"port": 8080, "tag": ["base"]}
    assert values == {"port": 8080, "tag": ["base"]}
    assert list(values) == ["port", "tag"]
    assert len(values) == 2


def test_unknown_field(values):
    with pytest.raises(AttributeError, match="no flag named 'nope'"):
        values.nope
    with pytest.raises(AttributeError):
        values.nope = 1
    with pytest.raises(KeyError):
        values["nope"] = 1
    assert values.get("nope", 3) == 3
    assert "nope" not in values


def test_assignment(values):
    values.port = 1
    values["tag"] = []
    assert values["port"] == 1
    assert values.tag == []


def test_deepcopy_is_independent(values):
    copied = deepcopy(values)
    copied.tag.append("x")
    assert values.tag == ["base"]
    assert copied.tag == ["base", "x"]


def test_repr(values):
    assert repr(values) == "FlagValues(port=8080, tag=['base'])"
