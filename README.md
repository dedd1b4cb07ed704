# edakit

Classic data structures and worked algorithm solutions in plain Python.
It needs nothing outside the standard library.

## Data structures

- `edakit.avl_set.AVLSet`: an ordered set kept balanced as an AVL tree.
  It takes an optional strict ordering `less`. It supports `insert`,
  `erase`, `in`, `len`, in-order iteration, `kth(k)` for the k-th smallest
  element counting from 1, and `copy`.
- `edakit.bintree.BinTree`: an immutable binary tree whose subtrees are
  shared. `BinTree()` is empty and `BinTree(left, elem, right)` has a root.
  It provides `root`, `left`, `right`, `is_empty`, and the traversals
  `preorder`, `inorder`, `postorder` and `levelorder`. Iterating over a tree
  yields its elements in inorder. `read_tree(tokens, empty)` builds a tree
  from a preorder token stream in which `empty` marks a missing subtree.
- `edakit.priority_queue.PriorityQueue`: a binary heap ordered by an
  optional `before(a, b)` relation, smallest first by default. It provides
  `push`, `top`, `pop` (which returns the removed element), `len`,
  truthiness and `is_complete`.
- `edakit.intinf.IntInf`: integers with a saturating `+Inf`. The module
  also exports the constant `INFINITY`.

## Problem solvers

Each module below has a `run(text)` function. It takes the whole
judge-style input as a string and returns the whole output. Each module
also has a function that solves a single case directly:

| module | function |
| --- | --- |
| `merging` | `total_effort(values)` |
| `monitoring` | `schedule(users, k)` |
| `emergency` | `EmergencyQueue`, `process_events(events)` |
| `checkouts` | `assigned_checkout(n, times)` |
| `task_conflicts` | `has_conflict(single, periodic, horizon)` |
| `avl_check` | `is_avl(tree)` |
| `network_diameter` | `floyd(graph)`, `path(...)`, `diameter(people, relations)` |
| `treasure` | `best_treasure(chests, air)` |
| `palindrome` | `longest_palindrome(text)`, `complete_palindrome(text)` |
| `lcs` | `longest_common_subsequence(x, y)` |
| `parenthesization` | `multiply(x, y)`, `can_produce(word, target)` |
| `coins` | `min_coins(values, amounts, price)` |
| `cows` | `max_food(buckets)` |
| `assignment` | `min_assignment_time(times)` |
| `cassette` | `max_recording(songs, side)` |

Two branch-and-bound solvers can be used only as library functions.
They have no `run` function and no command:

- `knapsack.knapsack(items, capacity)` solves the 0/1 knapsack problem over
  `Item(weight, value)` objects.
- `deadline_tasks.schedule_tasks(tasks)` chooses which
  `Task(duration, deadline, penalty)` to do so that the total penalty is as
  small as possible.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from edakit.avl_set import AVLSet
from edakit.priority_queue import PriorityQueue
from edakit.lcs import longest_common_subsequence
from edakit import merging

s = AVLSet([5, 3, 8, 1])
print(list(s))        # [1, 3, 5, 8]
print(3 in s)         # True
print(s.kth(2))       # 3

q = PriorityQueue([5, 1, 3])
print(q.pop())        # 1

print(longest_common_subsequence("AGGTAB", "GXTXAYB"))

print(merging.run("3 1 2 3\n0\n"), end="")   # 9
```

## Command line

The `edakit` command runs one solver on a file of test cases. It reads
standard input when the file is `-` or is left out, and writes the answers
to standard output:

```
edakit merging cases.txt
edakit lcs < cases.txt
edakit --help
```

The problems it accepts are `assignment`, `avl-check`, `cassette`,
`checkouts`, `coins`, `cows`, `emergency`, `lcs`, `merging`, `monitoring`,
`network-diameter`, `palindrome`, `parenthesization`, `task-conflicts` and
`treasure`. If the input cannot be read or is malformed, the command prints
a message to standard error and exits with status 1.

## What it does not do

The package has no judge-style input format and no command for the
knapsack or deadline-task solvers. It does not check answers against
expected output and does not keep any files of cases of its own.