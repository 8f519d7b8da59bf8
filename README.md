# dsakit

Classic data structures and algorithms in plain Python, using only the
standard library. Each structure or family of algorithms lives in its own
module.

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.stack` | `Stack` (list-backed, `push`, `pop`, `peek`, `is_empty`, `len()`) |
| `dsakit.stack_apps` | `par_checker1`, `par_checker2`, `par_checker3`, `base_converter_2`, `base_converter`, `infix_to_postfix` |
| `dsakit.queue` | `Queue` with a fixed capacity, `CapacityError`, `hot_potato` |
| `dsakit.deque` | `Deque` with a fixed capacity, `pal_checker` |
| `dsakit.linked_list` | `LinkedList` (push/pop at the head, `peek`, `replace_head`, `drain`, iteration), `ListStack` |
| `dsakit.list_vec` | `LVec`, a vector-like container stored in linked nodes |
| `dsakit.recursion` | `nums_sum1` … `nums_sum5`, `num2str_rec`, `num2str_stk`, `move2tower` |
| `dsakit.search` | `sequential_search`, `sequential_search_ordered`, `sequential_search_pos`, `binary_search1`, `binary_search2`, `interpolation_search`, `exponential_search` |
| `dsakit.sort` | `bubble_sort1/2/3`, `cocktail_sort`, `comb_sort`, `cbic_sort1/2`, `quick_sort`, `insertion_sort`, `bin_insertion_sort`, `shell_sort`, `merge_sort`, `select_sort`, `heap_sort`, `bucket_sort`, `counting_sort`, `radix_sort` |
| `dsakit.coins` | Coin change: `num_coins_rec1`, `num_coins_rec2`, `num_coins_dp`, `num_coins_dp_show`, `coins_used` |
| `dsakit.distance` | `hamming_distance1`, `hamming_distance2`, `hamming_distance_str`, `edit_distance1`, `edit_distance2` |
| `dsakit.trie` | `Trie` over the letters a–z |
| `dsakit.base58` | `encode_to_base58`, `decode_from_base58`, `DecodeError`, `InvalidLengthError`, `InvalidCharacterError` |
| `dsakit.bloom_filter` | `BloomFilter` |
| `dsakit.conshash` | Consistent hashing: `Node`, `Ring`, `hash_conshash` |
| `dsakit.lru` | `LRUCache` |
| `dsakit.hashmap` | `HashMap`, open addressing with positive integer keys and linear probing |
| `dsakit.graph_matrix` | `VertexMatrix`, `GraphMatrix` (adjacency matrix) |
| `dsakit.graph_adjlist` | `VertexAdjlist`, `GraphAdjlist` (weighted adjacency lists) |
| `dsakit.traverse` | `create_graph`, `bfs`, `dfs` |
| `dsakit.dijkstra` | `Vertex`, `dijkstra` |
| `dsakit.binary_tree` | `BinaryTree` plus `preorder`, `inorder`, `postorder` |
| `dsakit.binary_heap` | `BinaryHeap`, a min-heap of integers |
| `dsakit.bst` | `BST`, a binary search tree from keys to values |
| `dsakit.avl_tree` | `AvlTree`, `AvlNode` |
| `dsakit.cli` | The `dsakit` command |

## Installation

```
pip install .
```

## Examples

Stacks and expressions:

```python
from dsakit.stack import Stack
from dsakit.stack_apps import infix_to_postfix, par_checker2

s = Stack()
s.push(1)
s.push(2)
assert s.peek() == 2
assert len(s) == 2

assert par_checker2("(){[]}")
assert infix_to_postfix("( A + B ) * ( C + D )") == "A B + C D + * "
```

Sorting works in place on a mutable sequence:

```python
from dsakit.sort import merge_sort, quick_sort

nums = [1, 2, 8, 3, 4, 9, 5, 6, 7]
merge_sort(nums)
assert nums == [1, 2, 3, 4, 5, 6, 7, 8, 9]

nums = [1, 2, 8, 3, 4, 9, 5, 6, 7]
quick_sort(nums, 0, len(nums) - 1)
assert nums[-1] == 9
```

`counting_sort` and `radix_sort` accept non-negative integers only and raise
`ValueError` otherwise. `comb_sort` stops after a single pass at gap 1, so for
some inputs its result is only nearly sorted.

Coin change:

```python
from dsakit.coins import coins_used, num_coins_dp, num_coins_dp_show

cashes = [1, 5, 10, 20, 50]
assert num_coins_dp(cashes, 81) == 4

count, table = num_coins_dp_show(cashes, 81)
notes = coins_used(table, 81)
assert count == len(notes) and sum(notes) == 81
```

Base58 text encoding:

```python
from dsakit.base58 import decode_from_base58, encode_to_base58

assert encode_to_base58("abc") == "ZiCa"
assert decode_from_base58("ZiCa") == "abc"
```

An LRU cache:

```python
from dsakit.lru import LRUCache

cache = LRUCache(2)
cache.insert("foo", 1)
cache.insert("bar", 2)
cache.get("foo")
cache.insert("baz", 3)
assert "bar" not in cache
assert "foo" in cache
```

A consistent hashing ring:

```python
from dsakit.conshash import Node, Ring, hash_conshash

node = Node(host="localhost", ip="127.0.0.1", port=23)
ring = Ring(3)
ring.add(node)
assert ring.get(hash_conshash(f"{node}0")) == node
```

Shortest paths:

```python
from dsakit.dijkstra import Vertex, dijkstra

s, t = Vertex("s"), Vertex("t")
distances = dijkstra(s, {s: [(t, 10)]})
assert distances[t] == 10
```

An AVL tree:

```python
from dsakit.avl_tree import AvlTree

tree = AvlTree()
for v in range(1, 8):
    tree.insert(v)
assert list(tree) == [1, 2, 3, 4, 5, 6, 7]
assert tree.depth() == 3
```

## Behaviour worth knowing

- Adding to a full `Queue` or `Deque`, or inserting into a `HashMap` with no
  free slot, raises `dsakit.queue.CapacityError`. Removing from an empty
  container returns `None`.
- `HashMap` keys must be positive integers; other keys raise `ValueError`.
- `decode_from_base58` raises `InvalidCharacterError` (with `char` and `index`)
  for bytes outside the alphabet, `InvalidLengthError` when the decoded data
  would exceed 132 bytes, and `DecodeError` when the result is not valid UTF-8.
- `BloomFilter(cap, ert)` uses random hash seeds unless `seeds=(a, b)` is
  given; membership is tested with `in`.
- The traversal helpers (`BinaryTree.preorder`, `BST.inorder`, `bfs`, `dfs`,
  `move2tower`, `create_graph` and so on) print what they visit and also
  return it as a list.

## Command line

The `dsakit` command prints a greeting line, sorts a sample array with
`bubble_sort1`, and walks a small `BinaryTree` in pre-, in- and post-order:

```
dsakit
```

It takes no options besides `--help`.

## Running the tests

```
pip install ".[test]"
pytest
```