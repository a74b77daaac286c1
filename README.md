# structkit

Small, readable implementations of classic data structures, with no
dependencies beyond the standard library.

## Modules

- `structkit.bst`: `BinarySearchTree` built from `TreeNode` objects. Values
  equal to a node go to its left subtree. It supports `insert`, `in`,
  `len()`, iteration in sorted order, `delete` (returns whether a value was
  removed), `height` (-1 for an empty tree), `minimum` and `maximum` (raise
  `ValueError` when empty), `preorder`, `inorder`, `postorder` and
  `level_order` (each returns a list), and `successor` (the next value in
  order, `None` if there is none, `KeyError` if the value is absent).
  The module also provides `is_bst` and `is_bst_by_range`, which check
  the ordering of any tree of `TreeNode` objects.
- `structkit.linked_list`: `LinkedList`, a singly linked list. Positions
  passed to `insert_at` and `delete_at` count from 1; `index` returns a
  0-based position or raises `ValueError`. It can `insert_beginning`,
  `append`, `delete_first`, `delete_last`, reverse in place with `reverse`,
  `reverse_recursive` or `reverse_with_stack`, and return
  `reversed_values` without changing the list. `str()` gives
  `2->4->End_of_list`.
- `structkit.doubly_linked_list`: `DoublyLinkedList` with `insert_at_head`
  and `insert_at_tail`, iterable forwards and with `reversed()`.
- `structkit.stack`: `ArrayStack` (bounded, default size 50, raises
  `StackOverflowError` when full), `LinkedStack` (unbounded), and
  `reverse_string`. Popping or reading the top of an empty stack raises
  `IndexError`.
- `structkit.linked_queue`: `LinkedQueue`, a FIFO queue with `enqueue`,
  `dequeue` and `front`; the last two raise `IndexError` when empty.
- `structkit.menu`: an interactive text menu for a linked list, with
  `run(stdin, stdout)` and the `main` entry point.

## Installation

```
pip install .
```

## Usage

```python
from structkit.bst import BinarySearchTree

tree = BinarySearchTree([15, 10, 20, 25, 8, 12])
tree.height()      # 2
tree.minimum()     # 8
tree.maximum()     # 25
12 in tree         # True
tree.inorder()     # [8, 10, 12, 15, 20, 25]
tree.successor(12) # 15
```

```python
from structkit.linked_list import LinkedList

items = LinkedList([2, 4, 6, 8])
items.reverse()
list(items)        # [8, 6, 4, 2]
```

```python
from structkit.stack import reverse_string

reverse_string("hello")  # "olleh"
```

## Interactive menu

```
structkit-menu
```

The menu lets you create, display, insert into, delete from, search and
reverse a linked list, reading whole numbers from standard input. It ends
when you choose Exit (7) or input runs out. The list lives only for the
session; nothing is saved.

## Tests

```
pip install .[test]
pytest
```