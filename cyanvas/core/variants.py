"""Variant Graph — one-level parent/child access over the variant_of relation.

Invariants:
    - Children are derived from the parent's reverse relationship, never stored twice
    - Untrusted callers only ever see public children
    - No traversal beyond one level
"""

from cyanvas.core.domain_types import Visibility
from cyanvas.core.repository_protocols import ChartLike


def variants(chart: ChartLike, include_private: bool = False) -> list[ChartLike]:
    """Children of a chart; public ones only unless include_private."""
    children = list(chart.child_variants)
    if include_private:
        return children
    return [c for c in children if Visibility(c.visibility) is Visibility.PUBLIC]


def parent(chart: ChartLike) -> ChartLike | None:
    if chart.variant_id is None:
        return None
    return chart.variant_of


def is_root(chart: ChartLike) -> bool:
    """Root charts have no parent and are eligible for discovery listing."""
    return chart.variant_id is None
