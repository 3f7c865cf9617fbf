"""Variant Graph tests — privacy filtering and one-level parent access."""

from cyanvas.core.variants import is_root, parent, variants
from tests.factories import attach_variant, make_chart


def test_variants_hide_non_public_children_by_default():
    root = make_chart("root")
    public = attach_variant(root, make_chart("pub", visibility="public"))
    attach_variant(root, make_chart("priv", visibility="private"))
    attach_variant(root, make_chart("sched", visibility="scheduled"))
    assert variants(root) == [public]


def test_variants_include_private_when_trusted():
    root = make_chart("root")
    a = attach_variant(root, make_chart("a", visibility="public"))
    b = attach_variant(root, make_chart("b", visibility="private"))
    assert variants(root, include_private=True) == [a, b]


def test_chart_without_children_has_no_variants():
    assert variants(make_chart("lonely")) == []


def test_parent_resolves_variant_of():
    root = make_chart("root")
    child = attach_variant(root, make_chart("child"))
    assert parent(child) is root
    assert parent(root) is None


def test_root_detection():
    root = make_chart("root")
    child = attach_variant(root, make_chart("child"))
    assert is_root(root)
    assert not is_root(child)
