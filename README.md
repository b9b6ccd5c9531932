# labworks

A collection of small, self-contained data structures and exercises, each in
its own module. There are no third-party dependencies.

| Module                  | What it holds                                                              |
|-------------------------|----------------------------------------------------------------------------|
| `labworks.bst`          | `BinarySearchTree` of `TreeNode` nodes, `SearchOrder`, in-order traversal  |
| `labworks.linked_list`  | `DoublyLinkedList` of `Node` objects with positional insertion             |
| `labworks.add`          | `add(a, b)` and the `labworks-add` command                                 |
| `labworks.storage`      | `Storage`, a fixed-length array with `copy()` and `take()`                 |
| `labworks.streams`      | `print_integers` and `print_max_float` stream formatters                   |
| `labworks.timesheet`    | `TimeSheet` with totals, averages and standard deviation                   |
| `labworks.stats`        | `total`, `minimum`, `maximum`, `average`, `number_with_max_occurrence`, `sort_descending` |
| `labworks.geometry`     | single-precision `Point` arithmetic and a `PolyLine` of at most ten points |
| `labworks.lawns`        | `RectangleLawn`, `SquareLawn`, `CircleLawn`, `EquilateralTriangleLawn` with grass, sod-roll and fence pricing |
| `labworks.containers`   | list and mapping helpers such as `convert_vectors_to_map`, `combine_lists`, `combine_maps`, `format_map` |
| `labworks.fixed_vector` | `FixedVector` and the bit-packed `FixedBoolVector`                         |
| `labworks.game`         | `Game` spawning `IceCube` objects from an `ObjectPool`, driven by `TableRandom` |

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Examples

Binary search tree (values not greater than a node go to its left):

```python
from labworks.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (10, 15, 5, 4, 19, 20, 17, 12, 7):
    tree.insert(value)

tree.search(12)                                # True
tree.delete(10)                                # True
BinarySearchTree.traverse_in_order(tree.root)  # [4, 5, 7, 12, 15, 17, 19, 20]
list(tree)                                     # the same list
```

Doubly linked list:

```python
from labworks.linked_list import DoublyLinkedList

items = DoublyLinkedList()
items.insert("b")
items.insert("a", 0)   # insert before position 0
items[0].data          # "a"
len(items)             # 2
```

Lawns:

```python
from labworks.lawns import RectangleLawn, GrassType, FenceType

lawn = RectangleLawn(10, 20)
lawn.area()                            # 200
lawn.grass_price(GrassType.BERMUDA)    # 1600
lawn.minimum_sod_rolls_count()         # 667
lawn.minimum_fences_count()            # 240
lawn.fence_price(FenceType.RED_CEDAR)  # 360
```

Object pool and game loop:

```python
from labworks.game import Game

game = Game(1, 4)
for _ in range(5):
    game.spawn()
game.update()
len(game.active_objects)         # 4: one cube melted after a single frame
game.object_pool.free_count      # 1: the melted cube went back to the pool
```

## Errors

Where an operation cannot be carried out, an exception is raised:

- `PolyLine.add` / `add_point` raise `PolyLineFullError` once ten points are held;
  `remove_point` and indexing raise `IndexError`; `min_bounding_rectangle` raises
  `ValueError` on an empty line.
- `FixedVector.add` and `FixedBoolVector.add` raise `FixedVectorFullError` when
  full; `remove` and `index_of` raise `ValueError` for a missing item.
- `Storage.update`, `TimeSheet.time_entry` and `DoublyLinkedList[...]` raise
  `IndexError` out of range.
- `stats.minimum` and `stats.maximum` raise `ValueError` on an empty sequence.

Some operations quietly do nothing instead: `TimeSheet.add_time` ignores hours
outside 1..10 or beyond the sheet's limit, and `ObjectPool.put` drops an item
when the pool is full.

## Command-line tools

Print the sum of two integers (1 and 3 when none are given):

```
labworks-add
labworks-add 2 5
```

Read whitespace-separated numbers from standard input, echo each one as a
signed, fixed three-decimal value and finish with the largest:

```
echo "1.5 abc -2 7.25" | labworks-streams
```

Tokens that are not numbers are skipped.

`print_integers`, which lists 32-bit integers in octal, decimal and hexadecimal
columns, has no command of its own; call it from Python with any text streams:

```python
import io, sys
from labworks.streams import print_integers

print_integers(io.StringIO("8 255 x -1"), sys.stdout)
```

## Running the tests

```
pytest
```