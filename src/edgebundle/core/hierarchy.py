"""
Hierarchy and Identifier Resolution.

Wraps the validated input tree with parent back-references and computes
each node's dotted identifier exactly once, at construction time:

    id(root)  = root.name
    id(node)  = id(parent) + "." + node.name

Identifiers are therefore a pure function of tree position, and looking
one up never walks the ancestor chain again.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .types import TreeNode


class HierarchyNode:
    """
    A positioned node of the hierarchy.

    Attributes:
        data: The input node this wraps.
        parent: Back-reference to the parent (None for the root). Never owning.
        children: Child nodes in document order.
        depth: Distance from the root (root is 0).
        height: Longest distance down to a leaf (leaves are 0).
        id: Dotted path identifier from the root.
    """

    __slots__ = ("data", "parent", "children", "depth", "height", "id", "_leaves")

    def __init__(self, data: TreeNode, parent: Optional[HierarchyNode] = None):
        self.data = data
        self.parent = parent
        self.depth = 0 if parent is None else parent.depth + 1
        self.id = data.name if parent is None else f"{parent.id}.{data.name}"
        self.children: Tuple[HierarchyNode, ...] = ()
        self.height = 0
        self._leaves: Optional[Tuple[HierarchyNode, ...]] = None

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"HierarchyNode({self.id!r})"

    # =========================================================================
    # Traversal
    # =========================================================================

    def descendants(self) -> Iterator[HierarchyNode]:
        """Yield this node and every descendant in pre-order (document order)."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> Tuple[HierarchyNode, ...]:
        """All leaves below this node in document order."""
        if self._leaves is None:
            self._leaves = tuple(n for n in self.descendants() if n.is_leaf)
        return self._leaves

    def ancestors(self) -> List[HierarchyNode]:
        """This node followed by each ancestor up to the root."""
        chain = []
        node: Optional[HierarchyNode] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        return chain

    def common_ancestor(self, other: HierarchyNode) -> Optional[HierarchyNode]:
        """Lowest node that is an ancestor of both (a node is its own ancestor)."""
        mine = {id(n) for n in self.ancestors()}
        for node in other.ancestors():
            if id(node) in mine:
                return node
        return None

    def path(self, end: HierarchyNode) -> List[HierarchyNode]:
        """
        Shortest path through the tree from this node to `end`.

        Climbs from this node to the lowest common ancestor, then descends
        to `end`. Both endpoints are included. These nodes are the control
        points of a bundled curve.
        """
        ancestor = self.common_ancestor(end)
        up: List[HierarchyNode] = []
        node: Optional[HierarchyNode] = self
        while node is not None and node is not ancestor:
            up.append(node)
            node = node.parent
        if ancestor is not None:
            up.append(ancestor)

        down: List[HierarchyNode] = []
        node = end
        while node is not None and node is not ancestor:
            down.append(node)
            node = node.parent
        return up + list(reversed(down))


def build_hierarchy(root: TreeNode) -> HierarchyNode:
    """Wrap an input tree, computing ids, depths and heights for every node."""
    top = HierarchyNode(root)
    order = [top]
    stack = [top]
    while stack:
        node = stack.pop()
        node.children = tuple(HierarchyNode(child, node) for child in node.data.children)
        order.extend(node.children)
        stack.extend(node.children)

    # Parents precede their children in `order`
    for node in reversed(order):
        if node.children:
            node.height = 1 + max(child.height for child in node.children)
    return top


def node_id(node: HierarchyNode) -> str:
    """Canonical dotted identifier of a node."""
    return node.id
