"""
Example table: values against DSL expressions from the default namespace.
"""

import pytest

from typecontracts import dsl as t
from typecontracts.testing import has_type

ACCEPTS = [
    (5, t.integer()),
    (5, t.integer(minimum=0)),
    (5, t.integer(minimum=5)),
    (5, t.integer(minimum=0, maximum=10)),
    (5, t.odd()),
    (5, t.one_of(1, 2, 3, 4, 5)),
    (1.2, t.numeric()),
    (1.5, t.is_("integer?") | t.numeric(maximum=2)),
    ("abc", t.string()),
    ("abc", t.any()),
    ("abc", t.is_not("isspace")),
    ("abc", t.non_empty()),
    ("abc", t.has("upper")),
    ("abc", t.has("__len__")),
    ("abc", t.value("abc")),
    ([1, 2, 3], t.array(t.integer())),
    ([1, 2, 3], t.array(t.one_of(1, 2, 3))),
]

REJECTS = [
    (5, t.one_of(1, 2, 3, 4)),
    (5, t.integer(minimum=6)),
    (5, t.integer(maximum=4)),
    (1.2, t.integer()),
    (1.2, t.string()),
    ("abc", t.void()),
    ("abc", t.has("size")),
    (5, t.is_("odd?")),
    (5, t.is_not("odd?")),
    ("abc", t.integer()),
    ("abc", t.array(t.string())),
    ([1, 2, 3], t.integer()),
    ([1, 2, 3], t.array(t.string())),
    ([1, 2, 3], t.array(t.one_of("1", "2", "3"))),
]


@pytest.mark.parametrize("value, type_", ACCEPTS, ids=lambda p: getattr(p, "constraint_name", repr(p)))
def test_accepts(value, type_):
    assert has_type(value, type_)


@pytest.mark.parametrize("value, type_", REJECTS, ids=lambda p: getattr(p, "constraint_name", repr(p)))
def test_rejects(value, type_):
    result = type_.check(value)
    assert not result.is_success()
    assert result.reasons
