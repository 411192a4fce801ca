"""Unbalanced binary search tree.

Every mutating helper takes a subtree root and returns the (possibly new)
root of that subtree, which the caller rebinds. Nodes carry no parent
pointers.
"""

import logging
from collections import deque
from typing import Any, Deque, Generic, Iterator, List, Optional, Protocol, TextIO, TypeVar

logger = logging.getLogger(__name__)


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)


class UnderflowError(ValueError):
    """Raised when reading an extremal value from an empty tree."""


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    # -- core mutation -----------------------------------------------------

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return BinarySearchTree.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            logger.debug("insert: %r already present, ignored", value)
        return node

    def insert(self, value: T) -> None:
        """Insert ``value``; duplicates are ignored."""
        self._root = self._insert(self._root, value)

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            logger.debug("remove: %r not found", value)
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            # Two children: pull up the in-order successor.
            node.value = self._find_min(node.right).value
            node.right = self._remove(node.right, node.value)
        else:
            self._size -= 1
            return node.left if node.left is not None else node.right
        return node

    def remove(self, value: T) -> None:
        """Remove ``value``. Nothing happens if it is not in the tree."""
        self._root = self._remove(self._root, value)

    def _contains(self, node: Optional[Node], value: T) -> bool:
        if node is None:
            return False
        if value < node.value:
            return self._contains(node.left, value)
        if value > node.value:
            return self._contains(node.right, value)
        return True

    def contains(self, value: T) -> bool:
        return self._contains(self._root, value)

    def _find_min(self, node: Node) -> Node:
        if node.left is None:
            return node
        return self._find_min(node.left)

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def find_min(self) -> T:
        if self._root is None:
            raise UnderflowError("find_min from empty tree")
        return self._find_min(self._root).value

    def find_max(self) -> T:
        if self._root is None:
            raise UnderflowError("find_max from empty tree")
        return self._find_max(self._root).value

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return self._height(self._root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def make_empty(self) -> None:
        self._root = None
        self._size = 0

    # -- traversal ---------------------------------------------------------

    def pre_order(self) -> Iterator[T]:
        if self._root is None:
            return
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[T]:
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def post_order(self) -> Iterator[T]:
        stack: List[BinarySearchTree.Node] = []
        last: Optional[BinarySearchTree.Node] = None
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last:
                node = top.right
            else:
                yield top.value
                last = stack.pop()

    def level_order(self) -> List[List[T]]:
        """Return the elements grouped by depth, root level first."""
        levels: List[List[T]] = []
        if self._root is None:
            return levels

        current: Deque[BinarySearchTree.Node] = deque([self._root])
        following: Deque[BinarySearchTree.Node] = deque()
        row: List[T] = []
        while current:
            node = current.popleft()
            row.append(node.value)
            if node.left is not None:
                following.append(node.left)
            if node.right is not None:
                following.append(node.right)
            if not current:
                levels.append(row)
                row = []
                current, following = following, current
        return levels

    # -- printing ----------------------------------------------------------

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        """Print the elements in sorted order, one per line."""
        if self.is_empty():
            print("Empty tree", file=file)
            return
        for value in self.in_order():
            print(value, file=file)

    def _print_traversal(self, title: str, values: Iterator[T], file: Optional[TextIO]) -> None:
        print(title, file=file)
        print(" ".join(str(v) for v in values), file=file)

    def print_pre_order(self, file: Optional[TextIO] = None) -> None:
        self._print_traversal("Pre order traversal of tree", self.pre_order(), file)

    def print_in_order(self, file: Optional[TextIO] = None) -> None:
        self._print_traversal("Inorder traversal of tree", self.in_order(), file)

    def print_post_order(self, file: Optional[TextIO] = None) -> None:
        self._print_traversal("Post order traversal of tree", self.post_order(), file)

    def print_level_order(self, file: Optional[TextIO] = None) -> None:
        for row in self.level_order():
            print(" ".join(str(v) for v in row), file=file)

    # -- structure ---------------------------------------------------------

    def _node_count(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + self._node_count(node.left) + self._node_count(node.right)

    def node_count(self) -> int:
        return self._node_count(self._root)

    def _copy(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        clone = BinarySearchTree.Node(node.value)
        clone.left = self._copy(node.left)
        clone.right = self._copy(node.right)
        return clone

    def copy(self) -> 'BinarySearchTree[T]':
        """Return a deep copy sharing no nodes with this tree."""
        clone: BinarySearchTree[T] = BinarySearchTree()
        clone._root = self._copy(self._root)
        clone._size = self._size
        return clone

    def _mirror(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        image = BinarySearchTree.Node(node.value)
        image.left = self._mirror(node.right)
        image.right = self._mirror(node.left)
        return image

    def mirror(self) -> 'BinarySearchTree[T]':
        """Return a new tree with left and right swapped at every node.

        The result is ordered descending, so it is not a valid search tree
        for ``insert``/``remove``/``contains``; it is meant for comparison
        and printing.
        """
        image: BinarySearchTree[T] = BinarySearchTree()
        image._root = self._mirror(self._root)
        image._size = self._size
        return image

    def _same_shape(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None:
            return False
        return self._same_shape(a.left, b.left) and self._same_shape(a.right, b.right)

    def compare_structure(self, other: 'BinarySearchTree[T]') -> bool:
        """True if both trees have the same shape, whatever their values."""
        return self._same_shape(self._root, other._root)

    def _equals(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None:
            return False
        if a.value != b.value:
            return False
        return self._equals(a.left, b.left) and self._equals(a.right, b.right)

    def equals(self, other: 'BinarySearchTree[T]') -> bool:
        """True if both trees have the same shape and the same values."""
        return self._equals(self._root, other._root)

    def _is_full(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if node.left is None and node.right is None:
            return True
        if node.left is None or node.right is None:
            return False
        return self._is_full(node.left) and self._is_full(node.right)

    def is_full(self) -> bool:
        return self._is_full(self._root)

    def _is_mirror(self, a: Optional[Node], b: Optional[Node]) -> bool:
        if a is None and b is None:
            return True
        if a is None or b is None or a.value != b.value:
            return False
        return self._is_mirror(a.right, b.left) and self._is_mirror(a.left, b.right)

    def is_mirror(self, other: 'BinarySearchTree[T]') -> bool:
        return self._is_mirror(self._root, other._root)

    # -- rotation ----------------------------------------------------------

    def _rotate_left(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            logger.debug("rotate_left: %r not found", value)
            return None

        if value < node.value:
            node.left = self._rotate_left(node.left, value)
            return node
        if value > node.value:
            node.right = self._rotate_left(node.right, value)
            return node

        pivot = node.right
        if pivot is None:
            logger.debug("rotate_left: %r has no right child", value)
            return node
        node.right = pivot.left
        pivot.left = node
        return pivot

    def rotate_left(self, value: T) -> None:
        """Promote the right child of the node holding ``value``.

        Does nothing if ``value`` is absent or its node has no right child.
        """
        self._root = self._rotate_left(self._root, value)

    def _rotate_right(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            logger.debug("rotate_right: %r not found", value)
            return None

        if value < node.value:
            node.left = self._rotate_right(node.left, value)
            return node
        if value > node.value:
            node.right = self._rotate_right(node.right, value)
            return node

        pivot = node.left
        if pivot is None:
            logger.debug("rotate_right: %r has no left child", value)
            return node
        node.left = pivot.right
        pivot.right = node
        return pivot

    def rotate_right(self, value: T) -> None:
        """Promote the left child of the node holding ``value``.

        Does nothing if ``value`` is absent or its node has no left child.
        """
        self._root = self._rotate_right(self._root, value)

    # -- dunders -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        return self.equals(other)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.in_order())})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.height()})"
