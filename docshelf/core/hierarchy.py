"""
Content Hierarchy

Builds the ordered parent/child forest used for sidebar navigation and
flattens it back into reading order for previous/next links.

Works on anything shaped like a content item (pages and articles alike):

    item.id         unique identifier
    item.parent_id  identifier of the parent item, or None for top level
    item.order      sibling position, ascending (None counts as 0)

Placement rules:
    parent_id is empty            → root
    parent_id resolves to an item → child of that item
    parent_id does not resolve    → dropped (appears nowhere in the forest)

Siblings are sorted by order; equal orders keep their input order.
Nodes on a parent_id cycle have no path to a root and are never emitted.

Example:
    forest = build_tree(pages)
    reading_order = flatten(forest)
    previous, following = find_neighbours(reading_order, current.id)
"""

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Protocol, TypeVar


class TreeItem(Protocol):
    """Structural type for items the builder can arrange."""

    @property
    def id(self) -> Hashable: ...

    @property
    def parent_id(self) -> Optional[Hashable]: ...

    @property
    def order(self) -> Optional[int]: ...


ItemT = TypeVar("ItemT", bound=TreeItem)

# Marker meaning "do not filter on category"
ANY_CATEGORY: Any = object()


@dataclass
class TreeNode(Generic[ItemT]):
    """An item plus its ordered children."""

    item: ItemT
    children: list["TreeNode[ItemT]"] = field(default_factory=list)

    @property
    def id(self) -> Hashable:
        return self.item.id

    @property
    def parent_id(self) -> Optional[Hashable]:
        return self.item.parent_id

    @property
    def order(self) -> int:
        return self.item.order or 0


def build_tree(items: Iterable[ItemT]) -> list[TreeNode[ItemT]]:
    """Arrange a flat sequence of items into an ordered forest.

    Args:
        items: Items of a single container, in any order

    Returns:
        Root nodes sorted by order, each with recursively sorted children
    """
    nodes = [TreeNode(item) for item in items]

    lookup: dict[Hashable, TreeNode[ItemT]] = {}
    for node in nodes:
        # First occurrence wins on duplicate ids
        lookup.setdefault(node.id, node)

    roots: list[TreeNode[ItemT]] = []
    for node in nodes:
        if not node.parent_id:
            roots.append(node)
        elif node.parent_id in lookup:
            lookup[node.parent_id].children.append(node)

    # Every child list belongs to exactly one node, so sorting them all
    # here sorts every level without recursing.
    for node in nodes:
        node.children.sort(key=_sort_key)
    roots.sort(key=_sort_key)

    return roots


def flatten(forest: Iterable[TreeNode[ItemT]]) -> list[ItemT]:
    """Emit the items of a forest in pre-order (parents before children).

    Args:
        forest: Root nodes, as returned by build_tree()

    Returns:
        Items in reading order
    """
    result: list[ItemT] = []
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        result.append(node.item)
        stack.extend(reversed(node.children))
    return result


def find_neighbours(
    sequence: Sequence[ItemT],
    item_id: Hashable,
) -> tuple[Optional[ItemT], Optional[ItemT]]:
    """Find the items immediately before and after item_id.

    Args:
        sequence: Items in reading order, usually from flatten()
        item_id: Identifier of the current item

    Returns:
        (previous, next); either is None at the ends, both are None when
        item_id is not in the sequence
    """
    for index, item in enumerate(sequence):
        if item.id == item_id:
            previous = sequence[index - 1] if index > 0 else None
            following = sequence[index + 1] if index + 1 < len(sequence) else None
            return previous, following
    return None, None


def find_ancestors(
    items: Iterable[ItemT],
    item_id: Hashable,
) -> list[ItemT]:
    """Collect the ancestors of item_id, outermost first.

    The walk stops at the first parent_id that does not resolve and at the
    first item seen twice, so dangling parents and cycles end it early.

    Args:
        items: Items of a single container
        item_id: Identifier of the current item

    Returns:
        Ancestors from the root down to the direct parent; empty for a root
        item or an unknown id
    """
    lookup: dict[Hashable, ItemT] = {}
    for item in items:
        lookup.setdefault(item.id, item)

    current = lookup.get(item_id)
    if current is None:
        return []

    ancestors: list[ItemT] = []
    seen = {current.id}
    while current.parent_id and current.parent_id in lookup:
        current = lookup[current.parent_id]
        if current.id in seen:
            break
        seen.add(current.id)
        ancestors.append(current)

    ancestors.reverse()
    return ancestors


def scope_items(
    items: Iterable[ItemT],
    *,
    category_id: Any = ANY_CATEGORY,
    published_only: bool = False,
) -> list[ItemT]:
    """Select the items that take part in one build_tree() call.

    Args:
        items: Every item of a container
        category_id: Keep only items in this category; None keeps the
            uncategorized ones; ANY_CATEGORY (default) keeps all
        published_only: Drop unpublished items (reader views)

    Returns:
        Matching items in their original order
    """
    scoped = []
    for item in items:
        if published_only and not getattr(item, "published", False):
            continue
        if category_id is not ANY_CATEGORY and getattr(item, "category_id", None) != category_id:
            continue
        scoped.append(item)
    return scoped


def _sort_key(node: TreeNode[Any]) -> int:
    return node.order
