# xcorekit

Small fixed-capacity containers, bit and byte-order helpers, and
thread synchronisation primitives. Pure Python, no dependencies.

## Containers

Each container has a fixed capacity chosen at construction, along with
`capacity()`, `empty()`, `full()` (where it applies) and `clear()`.

- `xcorekit.array.Array`: a bounded sequence with `push_back`, `pop_back`
  (returns the removed element), `back`, `insert(before, element)`,
  `erase(index)`, indexing, assignment by index and iteration.
- `xcorekit.ring_queue.RingQueue`: a bounded double-ended queue in a
  circular buffer, with `push_back`, `push_front`, `pop_back`, `pop_front`
  (both return the removed element), `front`, `back`, indexing from the
  front and iteration.
- `xcorekit.byte_queue.ByteQueue`: a circular byte buffer.
  `push(data)` stores as many bytes as fit and returns the count;
  `pop(length)` removes and returns up to `length` bytes.
  `deferred_pop(offset)` returns a read-only view of the contiguous queued
  bytes, to be released with `abandon(size)`; `deferred_push(offset)`
  returns a writable view of the contiguous free space, committed with
  `advance(size)`.
- `xcorekit.linked_list.LinkedList`: a singly linked list of `ListNode`
  objects (`data`, `next`). It can be built from an iterable and offers
  `head()`, `push_back`, `push_front`, `insert(previous, element)` (at the
  front when `previous` is `None`), `find`, `find_if`, `erase` and
  `erase_if` (both return how many elements were removed) and
  `erase_node(node)`, which returns the node that followed.
- `xcorekit.tree.Tree`: an AVL tree of `TreeNode` objects ordered by a
  three-way comparator (natural ordering when none is given). Duplicates
  are allowed. `insert` returns the new node, `find` returns a matching node
  or `None`, `erase(node)` removes it, iteration yields elements in
  ascending order, and `height()` gives the number of levels.

```python
from xcorekit.array import Array
from xcorekit.ring_queue import RingQueue
from xcorekit.byte_queue import ByteQueue
from xcorekit.tree import Tree

array = Array(4)
array.push_back(1)
array.insert(0, 0)
assert list(array) == [0, 1]

queue = RingQueue(3)
queue.push_back("b")
queue.push_front("a")
assert queue.front() == "a" and queue.back() == "b"

buffer = ByteQueue(8)
assert buffer.push(b"hello world") == 8
assert buffer.pop(5) == b"hello"

tree = Tree(8, lambda a, b: (a > b) - (a < b))
for value in (3, 1, 2):
    tree.insert(value)
assert list(tree) == [1, 2, 3]
```

Bulk byte operations report how much they transferred. Single-element
operations raise instead: adding to a full `Array`, `RingQueue` or `Tree`
raises `OverflowError`, and reading or removing from an empty `Array` or
`RingQueue` raises `IndexError`. Out-of-range offsets or sizes on a
`ByteQueue` raise `ValueError`, as does erasing a node that belongs to
another list or tree.

## Bits and byte order

`xcorekit.bits` works on unsigned integers of the stated width and raises
`ValueError` for values that do not fit.

- `to_big_endian_16/32/64` and `from_big_endian_16/32/64` swap byte order;
  the `to_little_endian_*` and `from_little_endian_*` functions return the
  value unchanged after checking its width.
- `reverse_bytes_16_pairs` swaps the bytes within each half-word of a 32-bit
  value; `reverse_bytes_signed_16` swaps the low half-word's bytes and
  sign-extends the result.
- `reverse_bits_32` and `count_leading_zeros_32`.
- `saturated_add(a, b, bits=32, signed=True)` and `saturated_sub` clamp the
  result to the range of the given width.

```python
from xcorekit.bits import to_big_endian_16, saturated_add, saturated_sub

assert to_big_endian_16(0x1234) == 0x3412
assert saturated_add(120, 10, 8, True) == 127
assert saturated_sub(5, 10, 8, False) == 0
```

## Synchronisation

`xcorekit.sync.Mutex` is a non-recursive lock with `lock()`, `unlock()`
(raises `RuntimeError` if not held), `locked()`, `try_lock(timeout_ms)` and
use as a context manager. `xcorekit.sync.Semaphore` is a counting semaphore
with `post()`, `wait()`, `try_wait(timeout_ms)` and `value()`.

```python
from xcorekit.sync import Mutex, Semaphore

mutex = Mutex()
with mutex:
    assert not mutex.try_lock(0)

semaphore = Semaphore(1)
assert semaphore.try_wait(0)
assert semaphore.value() == 0
```

## What it does not do

This is a library only: there is no command-line tool. The containers live
in memory and offer no persistence, and the synchronisation primitives work
between threads of one process, not between processes.

## Tests

```
pip install -e ".[test]"
pytest
```