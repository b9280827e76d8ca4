"""Type hierarchy metadata linking shredded rows to their parent event."""

from __future__ import annotations

import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    import collections.abc as cabc

# Every shredded row hangs off the events table.
TYPE_HIERARCHY_ROOT = "events"


class TypeHierarchy(msgspec.Struct, kw_only=True, frozen=True):
    """Lineage of a shredded instance back to its root event.

    Attributes
    ----------
    root_id
        ``event_id`` of the root event.
    root_tstamp
        Collector timestamp of the root event.
    ref_root
        Type (table) name of the root, always ``events``.
    ref_tree
        Type names from the root down to this instance.
    ref_parent
        Type name of the immediate parent.

    """

    root_id: str
    root_tstamp: str
    ref_root: str
    ref_tree: tuple[str, ...]
    ref_parent: str

    def complete(self, names: cabc.Iterable[str]) -> TypeHierarchy:
        """Return a copy with ``names`` appended to the reference tree."""
        return msgspec.structs.replace(self, ref_tree=(*self.ref_tree, *names))

    def to_json(self) -> dict[str, typ.Any]:
        """Return the ``hierarchy`` object attached to shredded rows."""
        return {
            "rootId": self.root_id,
            "rootTstamp": self.root_tstamp,
            "refRoot": self.ref_root,
            "refTree": list(self.ref_tree),
            "refParent": self.ref_parent,
        }


def make_partial_hierarchy(root_id: str, root_tstamp: str) -> TypeHierarchy:
    """Return the hierarchy known before any instance is resolved.

    The tree holds only the root until :meth:`TypeHierarchy.complete` adds
    the instance's own type. The parent is always the root because contexts
    are never shredded out of other contexts.
    """
    return TypeHierarchy(
        root_id=root_id,
        root_tstamp=root_tstamp,
        ref_root=TYPE_HIERARCHY_ROOT,
        ref_tree=(TYPE_HIERARCHY_ROOT,),
        ref_parent=TYPE_HIERARCHY_ROOT,
    )
