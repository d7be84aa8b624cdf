# dsakit

A collection of classic data structures and algorithms written in plain
Python, with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `binary_search`, `fibonacci_search` (index in an ascending sequence, or -1) |
| `dsakit.sorting` | `counting_sort`, `dutch_flag_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `wave_sort`, `rank_transform` (all return new lists) |
| `dsakit.array_problems` | `three_sum_closest`, `increasing_triplet`, `count_monotonic_subarrays`, `fibonacci_memo`, `fibonacci_table` |
| `dsakit.expressions` | `precedence`, `infix_to_postfix`, `infix_to_prefix`, `evaluate_prefix`, `evaluate_postfix`, `brackets_balanced`, `reverse_words` |
| `dsakit.structures` | `BoundedStack`, `CircularQueue`, `LinkedQueue`, `reverse_stack` |
| `dsakit.hashing` | `ProbingTable`, `DirectHashTable`, `CollisionError`, `is_prime`, `next_prime` |
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList` |
| `dsakit.binary_tree` | `Node`, `NULL_MARKER`, `build_tree`, `preorder`, `inorder`, `postorder`, `inorder_iterative`, `preorder_iterative`, `count_nodes`, `sum_nodes`, `height`, `is_balanced`, `find_path`, `lowest_common_ancestor`, `left_view`, `sum_replace` |
| `dsakit.trie` | `Trie` |
| `dsakit.graphs` | `undirected_adjacency`, `format_adjacency`, `bfs`, `dfs`, `dfs_iterative`, `all_paths`, `has_cycle_undirected`, `has_cycle_directed`, `topological_sort` |
| `dsakit.disjoint_set` | `DisjointSet`, `equations_possible`, `has_cycle_union_find` |
| `dsakit.spanning_tree` | `kruskal`, `prim` |

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.expressions import infix_to_postfix, evaluate_postfix

merge_sort([5, 4, 3, 2, 1])          # [1, 2, 3, 4, 5]
binary_search([1, 3, 5, 7], 5)       # 2
infix_to_postfix("a+b*c")            # "abc*+"
evaluate_postfix("46+2/5*7+")        # 32
```

Expression operands are single characters: lower-case letters or digits
when converting, digits when evaluating. Division truncates toward zero.

```python
from dsakit.binary_tree import build_tree, inorder
from dsakit.trie import Trie

# Preorder values, -1 marking an empty subtree.
root = build_tree([1, 2, 4, -1, -1, 5, -1, -1, 3, -1, -1])
inorder(root)                        # [4, 2, 5, 1, 3]

trie = Trie()
trie.insert("ABCD")
trie.search("ABCD")                  # True
trie.search("ABCF")                  # False
```

```python
from dsakit.graphs import bfs, undirected_adjacency
from dsakit.spanning_tree import kruskal

graph = undirected_adjacency([(1, 2), (1, 3), (2, 4)])
bfs(graph, 1)                        # [1, 2, 3, 4]

edges = [(0, 1, 4), (1, 2, 1), (0, 2, 3)]
kruskal(edges)                       # (4, [(1, 2, 1), (0, 2, 3)])
```

`kruskal` and `prim` both return `(cost, edges)`; `prim` gives each edge
as `(parent, node, weight)` in the order nodes joined the tree.

## Errors

Where an operation cannot proceed, an exception is raised rather than a
message printed:

- `BoundedStack.push` and `CircularQueue.enqueue` raise `OverflowError`
  when full; `pop`, `dequeue` and `peek` raise `IndexError` when empty.
- `ProbingTable.insert` raises `OverflowError` when no slot is free.
- `DirectHashTable.insert` raises `CollisionError` (a `ValueError`) when
  the slot holds a different key; `remove` raises `KeyError`.
- `SinglyLinkedList.delete` raises `ValueError` for a missing value;
  `DoublyLinkedList.delete_at` raises `IndexError` for a bad position.
- `topological_sort` raises `ValueError` when the graph has a cycle.

Most functions return new values; `sum_replace` and `reverse_stack`
change their argument in place.

## What it does not do

This is a library only. It has no command-line program, no interactive
menus and no input reading; nothing is printed. Callers pass values in
and get results back.