"""Resource Slots — resolves a chart's attached assets into the nine named slots.

Invariants:
    - Result always has one key per ResourceKind, value None when the slot is empty
    - First match wins when the store holds duplicates for one kind
    - Pure, no IO
"""

from typing import Iterable

from cyanvas.core.domain_types import ResourceKind
from cyanvas.core.repository_protocols import FileResourceLike

ResourceSlots = dict[ResourceKind, FileResourceLike | None]

PLACEHOLDER_ASSET: dict[str, str] = {"hash": "", "url": ""}


def resolve_resources(file_resources: Iterable[FileResourceLike]) -> ResourceSlots:
    """Map each slot to the first resource of that kind, or None."""
    slots: ResourceSlots = {kind: None for kind in ResourceKind}
    for resource in file_resources:
        kind = ResourceKind(resource.kind)
        if slots[kind] is None:
            slots[kind] = resource
    return slots


def resource_slot(
    slots: ResourceSlots, kind: ResourceKind | str,
) -> FileResourceLike | None:
    """Look up a single slot by kind (tablet backgrounds are only reachable here)."""
    return slots.get(ResourceKind(kind))


def asset_ref(resource: FileResourceLike | None) -> dict[str, str] | None:
    """{hash, url} for a present resource, None when the slot is empty."""
    if resource is None:
        return None
    return resource.to_asset_ref()


def asset_ref_or_placeholder(
    resource: FileResourceLike | None, fallback_url: str = "",
) -> dict[str, str]:
    """{hash, url} for a present resource, else the placeholder reference."""
    if resource is not None:
        return resource.to_asset_ref()
    return {**PLACEHOLDER_ASSET, "url": fallback_url}
