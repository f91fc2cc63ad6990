"""
Unbalanced binary search tree.

Nodes own only their children. Every structural change is propagated by
having the recursive helpers return the (possibly new) subtree root, which
the caller reattaches -- no parent pointers anywhere.
"""

import logging
import sys
from typing import TypeVar, Generic, List, Optional, TextIO

T = TypeVar('T')

logger = logging.getLogger(__name__)


class UnderflowError(ValueError):
    """Raised when an operation that needs a non-empty tree gets an empty one."""

    def __init__(self, message: str = "tree is empty") -> None:
        super().__init__(message)


class BinarySearchTree(Generic[T]):
    """
    Ordered container over any totally ordered element type; duplicates ignored.

    No rebalancing is ever done, so a sorted insertion order degenerates the
    tree into a list. insert/remove, height/count, the structural comparisons,
    copy/mirror, rotations and level_order recurse once per level, which caps
    the usable height at roughly sys.getrecursionlimit(). contains, find_min,
    find_max and the in/pre/post-order walks are iterative.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None

    # -- search / insert / remove ------------------------------------------

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            return BinarySearchTree.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        return node

    def insert(self, value: T) -> None:
        self._root = self._insert(self._root, value)

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            successor = self._find_min(node.right)
            assert successor is not None
            node.value = successor.value
            node.right = self._remove(node.right, node.value)
        else:
            return node.left if node.left is not None else node.right
        return node

    def remove(self, value: T) -> None:
        self._root = self._remove(self._root, value)

    def contains(self, value: T) -> bool:
        return self._find_node(self._root, value) is not None

    def find_min(self) -> T:
        node = self._find_min(self._root)
        if node is None:
            raise UnderflowError("find_min from empty tree")
        return node.value

    def find_max(self) -> T:
        node = self._find_max(self._root)
        if node is None:
            raise UnderflowError("find_max from empty tree")
        return node.value

    def is_empty(self) -> bool:
        return self._root is None

    def make_empty(self) -> None:
        self._root = None

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    # -- structural queries ------------------------------------------------

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return self._height(self._root)

    def _count(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + self._count(node.left) + self._count(node.right)

    def count(self) -> int:
        return self._count(self._root)

    def is_full(self) -> bool:
        """
        Aggregate check: node count equals 2 * height + 1.

        Only the totals are compared, not the per-node shape, so this is a
        necessary condition for a perfect tree rather than a proof of one.
        An empty tree is never full (0 != -1).
        """
        return self.count() == 2 * self.height() + 1

    # -- structural comparison ---------------------------------------------

    def _compare_structure(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None:
            return False
        return (self._compare_structure(a.left, b.left)
                and self._compare_structure(a.right, b.right))

    def compare_structure(self, other: 'BinarySearchTree[T]') -> bool:
        """True if both trees have the same shape; element values are ignored."""
        return self._compare_structure(self._root, other._root)

    def _equal(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None:
            return False
        return (a.value == b.value
                and self._equal(a.left, b.left)
                and self._equal(a.right, b.right))

    def equal(self, other: 'BinarySearchTree[T]') -> bool:
        """Same shape and pairwise equal values. Raises UnderflowError if other is empty."""
        if other._root is None:
            raise UnderflowError("equal against empty tree")
        return self._equal(self._root, other._root)

    # -- copy / mirror -----------------------------------------------------

    def _copy(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        clone = BinarySearchTree.Node(node.value)
        clone.left = self._copy(node.left)
        clone.right = self._copy(node.right)
        return clone

    def copy(self) -> 'BinarySearchTree[T]':
        if self._root is None:
            raise UnderflowError("copy of empty tree")
        clone: BinarySearchTree[T] = BinarySearchTree()
        clone._root = self._copy(self._root)
        return clone

    def _mirror(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        flipped = BinarySearchTree.Node(node.value)
        flipped.left = self._mirror(node.right)
        flipped.right = self._mirror(node.left)
        return flipped

    def mirror(self) -> 'BinarySearchTree[T]':
        """
        New tree flipped left-to-right at every node.

        The result holds the elements in descending in-order sequence, so it
        no longer satisfies the ordering invariant: insert, remove and
        contains on it do not have search-tree semantics.
        """
        if self._root is None:
            raise UnderflowError("mirror of empty tree")
        flipped: BinarySearchTree[T] = BinarySearchTree()
        flipped._root = self._mirror(self._root)
        return flipped

    def is_mirror(self, other: 'BinarySearchTree[T]') -> bool:
        return self.equal(other.mirror())

    # -- rotations ---------------------------------------------------------

    def _right_rotate(self, k2: Node) -> Node:
        k1 = k2.left
        assert k1 is not None
        k2.left = k1.right
        k1.right = k2
        return k1

    def _left_rotate(self, k2: Node) -> Node:
        k1 = k2.right
        assert k1 is not None
        k2.right = k1.left
        k1.left = k2
        return k1

    def _rotate_at(self, node: Node, value: T, right: bool) -> Node:
        if value < node.value:
            assert node.left is not None
            node.left = self._rotate_at(node.left, value, right)
        elif value > node.value:
            assert node.right is not None
            node.right = self._rotate_at(node.right, value, right)
        elif right:
            return self._right_rotate(node)
        else:
            return self._left_rotate(node)
        return node

    def _rotate(self, value: T, right: bool) -> bool:
        direction = "right" if right else "left"
        target = self._find_node(self._root, value)
        if target is None:
            logger.warning("cannot rotate %s at %r: value not present in the tree",
                           direction, value)
            return False

        pivot = target.left if right else target.right
        if pivot is None:
            logger.warning("cannot rotate %s at %r: node has no %s child",
                           direction, value, "left" if right else "right")
            return False

        assert self._root is not None
        self._root = self._rotate_at(self._root, value, right)
        logger.debug("rotated %s at %r, %r promoted", direction, value, pivot.value)
        return True

    def rotate_right(self, value: T) -> bool:
        """
        Single right rotation at the node holding value.

        The node's left child takes its place and the node becomes that
        child's right child; the child's former right subtree moves over as
        the node's new left subtree. Returns False, leaving the tree
        untouched, when value is absent or its node has no left child.
        """
        return self._rotate(value, right=True)

    def rotate_left(self, value: T) -> bool:
        """Mirror image of rotate_right; needs a right child at value."""
        return self._rotate(value, right=False)

    # -- traversals and rendering ------------------------------------------

    def _collect_level(self, node: Optional[Node], level: int, out: List[T]) -> None:
        if node is None:
            return
        if level == 1:
            out.append(node.value)
        elif level > 1:
            self._collect_level(node.left, level - 1, out)
            self._collect_level(node.right, level - 1, out)

    def level_order(self) -> List[List[T]]:
        levels: List[List[T]] = []
        for level in range(1, self.height() + 2):
            row: List[T] = []
            self._collect_level(self._root, level, row)
            levels.append(row)
        return levels

    def level_order_traversal(self, out: Optional[TextIO] = None) -> None:
        out = out if out is not None else sys.stdout
        if self.is_empty():
            print("Empty tree", file=out)
            return
        for row in self.level_order():
            print(" ".join(str(value) for value in row), file=out)

    def print_tree(self, out: Optional[TextIO] = None) -> None:
        out = out if out is not None else sys.stdout
        if self.is_empty():
            print("Empty tree", file=out)
            return
        for value in self.in_order():
            print(value, file=out)

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(count={self.count()}, height={self.height()})"
