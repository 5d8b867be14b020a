# dsakit

A collection of classic data structures and algorithms, each written as a
small Python module you can import, and each with an interactive command
that reads its input from standard input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `dsakit.polynomial` | `add_polynomials` merges two polynomials given as `Term` lists sorted by descending exponent; `format_compact` and `format_spaced` render them |
| `dsakit.sparse` | `add_sparse` adds two sparse matrices given as row-major `Entry` triples (zero sums are dropped); `transpose` and `format_table` |
| `dsakit.infix` | `to_postfix` converts an infix expression of single-character operands to postfix; `priority` gives operator strength |
| `dsakit.expression_tree` | `build_tree` makes an `ExprNode` tree from postfix; `postorder` and `preorder` walk it |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `quick_sort`, `merge_sort`, each returning the sorted list and a step count |
| `dsakit.search` | `binary_search` returns an index of the target, or `None` |
| `dsakit.graph` | `bfs` returns the breadth-first visiting order of an adjacency matrix |
| `dsakit.queues` | Bounded `LinearQueue`, `CircularQueue` and `Deque` (default capacity 5) |
| `dsakit.browser` | Back/forward navigation `History` |
| `dsakit.bst` | A `BinarySearchTree` with `insert`, `in` membership and `inorder` |
| `dsakit.hashtable` | A `LinearProbingTable` (ten slots by default) with `insert`, `find` and `slots` |

A `LinearQueue` does not reuse slots freed by dequeuing: once every slot has
been used it reports full until a dequeue on the empty queue resets it. A
`CircularQueue` reuses its slots.

## Library use

```python
from dsakit.infix import to_postfix
from dsakit.expression_tree import build_tree, preorder

postfix = to_postfix("(a+b)*c")      # "ab+c*"
print(preorder(build_tree(postfix)))  # "*+abc"
```

```python
from dsakit.queues import CircularQueue, QueueFull

queue = CircularQueue()
for value in (10, 20, 30, 40, 50):
    queue.enqueue(value)
try:
    queue.enqueue(60)
except QueueFull:
    print("Queue is full!")
```

```python
from dsakit.hashtable import LinearProbingTable

table = LinearProbingTable()
table.insert(25)
table.insert(35)
print(table.find(35))  # 6
```

Operations that cannot proceed raise an exception (`QueueFull`,
`QueueEmpty`, `NavigationError`, `TableFull`, or `ValueError` for malformed
expressions and matrices) rather than returning a status value.

## Commands

Each command prompts for its input on standard input:

```
dsakit-polynomial [--spaced]                  # add two polynomials
dsakit-sparse                                 # add two sparse matrices and show the transpose
dsakit-infix                                  # infix to postfix
dsakit-expression-tree                        # postfix to postorder and prefix forms
dsakit-sort [bubble|insertion|quick|merge]    # sort numbers with one algorithm (default: bubble)
dsakit-search                                 # binary search
dsakit-bfs                                    # breadth-first search on an adjacency matrix
dsakit-queue [linear|circular|deque] [--capacity N]   # menu-driven queue (default: linear, 5 slots)
dsakit-browser                                # back/forward navigation menu
dsakit-bst                                    # binary search tree menu
dsakit-hash [--size N]                        # linear probing hash table menu (default: 10 slots)
```

For example:

```
$ dsakit-infix
Enter infix expression: a+b*c-d/e
Postfix: abc*+de/-
```

## What it does not do

The structures live only in memory: nothing is saved between runs of a
command, and the binary search tree and hash table offer no deletion.