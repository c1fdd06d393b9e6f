# dslab

Classic data-structure and algorithm exercises. Each module is a small
importable library, and each also has an interactive console program that
reads its choices from standard input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules and commands

| Module | Command | What it does |
| --- | --- | --- |
| `dslab.hashing` | `dslab-hashing` | Telephone book held in two hash tables, `ChainingTable` and `LinearProbingTable`. `search` returns a `SearchResult` with the phone number, or `None`, and the number of key comparisons. |
| `dslab.dictionary` | `dslab-dictionary` | `ChainedDictionary`: unique-key mapping on a chained hash table. `insert` raises `DuplicateKeyError` for a repeated key. `find` and `delete` raise `KeyError` for a missing key. |
| `dslab.bst` | `dslab-bst` | `BinarySearchTree` with `insert`, `contains`, `height` (nodes on the longest path), `minimum`, `mirror` and `inorder`. The command starts from the values 50, 30, 70, 20, 40, 60, 80. |
| `dslab.exprtree` | `dslab-exprtree` | `build_from_prefix` turns a prefix expression with single-letter operands, such as `+--a*bc/def`, into an `ExprNode` tree. `postorder` lists the tree without recursion. `delete_tree` detaches the nodes children first. |
| `dslab.threaded` | `dslab-threaded` | `ThreadedBinaryTree`: a search tree whose `convert` turns right links into inorder-successor threads. `inorder` walks the tree along those threads. |
| `dslab.heaps` | `dslab-heaps` | `max_heapify`, `min_heapify`, `build_max_heap` and `build_min_heap`. `max_min(marks)` returns `(highest, lowest)`. |
| `dslab.landmarks` | `dslab-landmarks` | `LandmarkGraph`: an undirected adjacency-list graph with `bfs` and `dfs`. The command uses a fixed sample campus map. |
| `dslab.flights` | `dslab-flights` | `FlightGraph` of cities and weighted flights, with `reachable` and `is_connected`. |
| `dslab.obst` | `dslab-obst` | `optimal_bst(keys, p, q)` returns an `OptimalBST` with the minimum cost, the root table, `root_index` and `root_key`. |
| `dslab.avl` | `dslab-avl` | `AVLDictionary` mapping keywords to meanings. It has `insert`, `delete`, `update`, `search` (with a comparison count), `ascending`, `descending` and `max_comparisons`. |
| `dslab.records` | `dslab-records` | `RecordFile`: a sequential binary file of fixed-size `StudentRecord` entries, with `insert`, `records`, `find`, `delete` and `edit`. |

## Library use

```python
from dslab.hashing import ChainingTable, LinearProbingTable

chain = ChainingTable()
chain.insert("alice", 101)
print(chain.search("alice"))        # SearchResult(phone=101, comparisons=1)

from dslab.avl import AVLDictionary

words = AVLDictionary()
words.insert("apple", "fruit")
words.insert("brick", "block")
print(words.ascending())            # [('apple', 'fruit'), ('brick', 'block')]
print(words.max_comparisons())      # 2

from dslab.heaps import max_min

print(max_min([67, 88, 45, 92, 71]))  # (92, 45)

from dslab.exprtree import build_from_prefix, postorder

print(postorder(build_from_prefix("+--a*bc/def")))  # abc*-de/-f+

from dslab.obst import optimal_bst

tree = optimal_bst([10, 20, 30], [0.3, 0.2, 0.1], [0.1, 0.1, 0.1, 0.1])
print(tree.cost, tree.root_key)
```

## Details worth knowing

- The hash tables have a fixed number of slots, 10 by default, and never
  resize. `LinearProbingTable.insert` returns `False` when the table is
  full.
- In `ChainingTable` and `ChainedDictionary`, new entries go to the head
  of their chain.
- `BinarySearchTree` and `ThreadedBinaryTree` put equal values in the
  right subtree. Once a `ThreadedBinaryTree` has been converted,
  `insert` raises `RuntimeError`.
- Each `StudentRecord` is stored as a little-endian entry. The name and
  the subject must each encode to fewer than 20 UTF-8 bytes, or `pack`
  raises `ValueError`.

## Console programs

Each command reads whitespace-separated input from standard input, so it
can be used interactively or fed from a file:

```
dslab-bst
dslab-records < commands.txt
```

## Limitations

- The commands take no command-line options. Everything comes from
  standard input.
- `dslab-records` always keeps its data in `Records.dat` in the current
  directory. To use another file, call `RecordFile(path)` from Python.