# dstructs

Classic data structures and algorithms in plain Python, with no
third-party dependencies.

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
| `dstructs.bst` | `Node` and `BinarySearchTree`: `insert`, `delete`, `in`, in-order iteration, `len`, `total`, `minimum`, `maximum`, `parent`, `kth_smallest`, `first_greater`, `what` |
| `dstructs.bst_cli` | `run` and `main`: a menu-driven binary search tree session over text streams |
| `dstructs.search` | `binary_search`, `binary_search_recursive`, `common_elements`, `common_by_search` |
| `dstructs.bitwise` | `sum_bits`, `subset_sums`, `subsets_reaching` |
| `dstructs.hashtable` | `WordTable` with `Probing.LINEAR` or `Probing.QUADRATIC`, `IntHashMap`, `hash_word`, `load_dictionary` |
| `dstructs.trie` | `Trie` of words made of the letters a to z, `load_trie` |
| `dstructs.records` | `Student`, `Employee`, `parse_students`, `max_average_student`, `create_employees`, `random_jagged` |
| `dstructs.heap` | `MinHeap` (`push`, `pop`, `peek`), `heapsort`, `is_heap_recursive`, `is_heap_iterative` |
| `dstructs.linked_list` | `LinkedList`: `push_front`, `reverse`, `insert_at`, `insert_after_fours` |
| `dstructs.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `merge_insertion_sort`, `quick_sort` |
| `dstructs.queues` | `CircularQueue` (ring buffer that doubles when full), `LinkedQueue` |
| `dstructs.expression` | `is_balanced`, `priority`, `is_operator`, `infix_to_postfix` |

Notes on behaviour:

- `BinarySearchTree` puts equal values in the left subtree; with
  `allow_duplicates=False`, `insert` returns `False` for a value already
  present. `delete` raises `KeyError` for a missing value and
  `kth_smallest` raises `IndexError` for a rank outside `1..len(tree)`.
- `binary_search` and `binary_search_recursive` return the index found, or
  `None`.
- `WordTable.discard` empties the slot outright, so a word that had probed
  past it may no longer be found. `IntHashMap` uses tombstones instead.
- `load_dictionary` and `load_trie` read a file holding a word count
  followed by that many words.
- The sorting functions return a new sorted list and leave their input alone.
- `MinHeap.pop`, `MinHeap.peek`, `dequeue` and `peek` on the queues raise
  `IndexError` when empty.
- `infix_to_postfix` accepts non-negative integers, `+ - * / % ^` and the
  brackets `( ) { } [ ]`; it separates tokens with single spaces, treats all
  operators as left-associative and raises `ValueError` on unbalanced
  brackets or any other character.

## Examples

```python
from dstructs.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)
print(40 in tree)              # True
print(list(tree))              # [20, 30, 40, 50, 60, 70]
print(tree.kth_smallest(2))    # 30
print(tree.first_greater(45))  # 50
tree.delete(30)
```

```python
from dstructs.hashtable import Probing, WordTable
from dstructs.trie import Trie

table = WordTable(probing=Probing.QUADRATIC)
table.insert("apple")
print("apple" in table)        # True

words = Trie(["cat", "car", "dog"])
words.remove("car")
print(list(words))             # ['cat', 'dog']
```

```python
from dstructs.heap import MinHeap, is_heap_iterative
from dstructs.queues import CircularQueue
from dstructs.sorting import merge_sort

heap = MinHeap([5, 1, 4])
heap.push(2)
print(heap.pop())              # 1

queue = CircularQueue()
queue.enqueue(10)
queue.enqueue(20)
print(queue.dequeue())         # 10

print(merge_sort([12, 11, 13, 5, 6, 7]))  # [5, 6, 7, 11, 12, 13]
print(is_heap_iterative([1, 2, 3, 4]))    # True
```

```python
from dstructs.expression import infix_to_postfix, is_balanced

print(is_balanced("(1+2)*[3]"))  # True
print(infix_to_postfix("3+4*2"))  # 3 4 2 * +
```

## Command line

```
dstructs-bst
```

starts an interactive binary search tree session that reads menu choices
and values as whitespace-separated integers from standard input:

1. insert a value
2. delete a value
3. search for a value
4. print the sum of the values
5. print an in-order traversal
7. print the smallest value greater than a given number (`none` if there is none)

Choosing 6, or any number above 7, ends the menu; the program then asks
for a rank and prints the item of that rank, or says there is none. The
session also ends quietly when input runs out. The same loop is available
from Python as `dstructs.bst_cli.run(stdin, stdout)`, which returns the
tree it built.

## What it does not do

`dstructs-bst` is the only command. The hash tables, trie, heap, queues,
linked list and the other modules are libraries only: there is no
interactive program for them, and nothing is saved between runs.