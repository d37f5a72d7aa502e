# algokit

Classic algorithms and small data structures in plain Python, with no
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

| Module               | Contents |
|----------------------|----------|
| `algokit.sorting`    | `bubble_sort`, `cocktail_sort`, `quick_sort`, `insertion_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `radix_sort`, `merge_sorted`, `count_inversions` |
| `algokit.benchmark`  | `first_pivot_quick_sort`, `time_sort`, `time_cases`, `CaseTimings`, `format_table`, `main` |
| `algokit.searching`  | `binary_search`, `count_at_most` |
| `algokit.arrays`     | `four_sum`, `next_permutation`, `permutations`, `maximum`, `swap_contents`, `longest_zero_run`, `numbers_with_longest_zero_run`, `count_keys` |
| `algokit.numeric`    | `power_mod`, `determinant`, `factorial`, `factorial_digits`, `sum_of_factorials`, `matrix_multiply`, `fractional_knapsack`, `count_up` |
| `algokit.text`       | `is_palindrome`, `reverse`, `is_balanced`, `sender_checksum`, `receiver_checksum` |
| `algokit.bst`        | `BinarySearchTree` |
| `algokit.deque`      | `BoundedDeque`, `QueueOverflow`, `QueueUnderflow` |
| `algokit.circular`   | `CircularList` |
| `algokit.graphs`     | `Graph`, `Edge`, `kruskal`, `spanning_tree_report` |
| `algokit.buffer`     | `BoundedBuffer`, `BufferFull`, `BufferEmpty` |
| `algokit.billing`    | `LineItem`, `Order`, `BillTotals`, `compute_totals`, `render_bill`, `InvoiceStore`, `main` |
| `algokit.employees`  | `Employee`, `highest_paid`, `describe` |

### Sorting and searching

Every sort takes any iterable and returns a new ascending list, leaving the
input untouched. `radix_sort` accepts only non-negative integers and raises
`ValueError` otherwise. `merge_sorted` merges two already ascending
sequences; `count_inversions` counts pairs that are out of order.

`binary_search(items, target)` returns the index of `target` in an ascending
sequence, or `None` when it is absent. `count_at_most(items, target)` counts
the items less than or equal to `target`; the items need not be sorted.

```python
from algokit import searching, sorting

data = [12, 11, 13, 5, 6, 7]
ordered = sorting.merge_sort(data)          # [5, 6, 7, 11, 12, 13]
sorting.count_inversions(data)              # 10
searching.binary_search(ordered, 13)        # 5
searching.binary_search(ordered, 4)         # None
```

### Arrays

- `four_sum(nums, target)` lists every unique quadruplet, each ascending,
  whose sum is `target`.
- `next_permutation(nums)` returns the lexicographically next arrangement;
  the last arrangement wraps round to the first.
- `permutations(items)` is a generator of tuples, one per arrangement.
- `maximum(items)` raises `ValueError` on an empty input.
- `swap_contents(first, second)` exchanges two equally long mutable sequences
  in place and raises `ValueError` when their lengths differ.
- `longest_zero_run(number)` gives the longest run of zero bits in a positive
  number's binary form (0 for numbers that are not positive);
  `numbers_with_longest_zero_run(numbers)` returns the numbers sharing the
  longest run, in reverse input order.
- `count_keys(names)` returns a case-sensitive `collections.Counter`.

### Numbers

```python
from algokit import numeric

numeric.power_mod(20, 2_000_000, 1_000_000_007)
numeric.determinant([[1, 2], [3, 4]])          # -2
numeric.matrix_multiply([[1, 2]], [[3], [4]])  # [[11]]
numeric.factorial_digits(25)                   # exact decimal digits of 25!
list(numeric.count_up(98))                     # [98, 99, 100]
```

`determinant` expands along the first row and raises `ValueError` for a
non-square or empty matrix. `matrix_multiply` raises `ValueError` when the
shapes do not fit. `fractional_knapsack(items, capacity)` takes
`(weight, profit)` pairs, fills the knapsack by profit per unit weight,
splitting the last item if needed, and returns the best profit; weights must
be positive.

### Text

```python
from algokit import text

text.is_balanced("[4-6]((8){(9-8)})")  # True
text.is_palindrome("Level")            # True, letter case is ignored
text.reverse("abc")                    # "cba"
```

`sender_checksum(values)` is the bitwise complement of the sum of the values;
`receiver_checksum(values, checksum)` returns 0 when the received values match
the checksum.

### Data structures

`BinarySearchTree` stores keys with equal keys going to the right. It
supports `insert`, `delete` (returns whether a key was removed), `search`
(returns a bool), `minimum` and `maximum` (raise `ValueError` when empty),
`successor` and `predecessor` (return `None` at the ends and raise `KeyError`
for a missing key), and `inorder`. It also supports `len`, `in` and iteration.

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)
tree.inorder()         # [20, 40, 50, 70]
tree.successor(40)     # 50
```

`BoundedDeque(capacity=7)` is a fixed-size double-ended queue on a circular
array with `push_front`, `push_back`, `pop_front`, `pop_back`, `is_empty` and
`is_full`. Adding to a full deque raises `QueueOverflow`; removing from an
empty one raises `QueueUnderflow`.

`CircularList` is a circular singly linked list; `insert_front(value)` makes
`value` the first element, and iterating yields values front to back.

`BoundedBuffer(capacity=3)` models the producer/consumer exercise by counting:
`produce()` returns the new item's number and raises `BufferFull` when all
slots are taken; `consume()` returns the newest item's number and raises
`BufferEmpty` when there is none. It does not start threads.

### Graphs

`Graph(vertices)` is an undirected graph; `add_edge` links two vertices and
`bfs(start)` returns the visiting order. `kruskal(matrix)` builds a minimum
spanning forest from a cost adjacency matrix where `0` means "no edge", as a
list of `Edge(u, v, w)`. `spanning_tree_report` names vertices by letter:

```python
from algokit.graphs import kruskal, spanning_tree_report

edges = kruskal([
    [0, 4, 0],
    [4, 0, 2],
    [0, 2, 0],
])
print(spanning_tree_report(edges))
```

prints

```

C - B : 2
B - A : 4
Spanning tree cost: 6
```

### Billing and employees

`compute_totals(subtotal)` applies a 10% discount and then 9% CGST and 9%
SGST on the net total. `render_bill(order)` returns the invoice text for an
`Order` of `LineItem`s. `InvoiceStore(path)` appends orders to a file as one
JSON object per line and can `load_all()` or `find(customer)` them.

`highest_paid(employees)` returns the `Employee` with the largest salary (the
earliest wins a tie) and raises `ValueError` for none; `describe(employee)`
formats the details.

## Command-line tools

Time the first-element-pivot quicksort on ascending, random and descending
input and print a tab-separated table of microseconds. Sizes default to 1000,
10000 and 100000 and may be given as arguments:

```
algokit-benchmark
algokit-benchmark 500 5000
```

Run the interactive restaurant billing menu, which generates, lists and
searches invoices saved in `invoices.txt` (or the file given with `--store`):

```
algokit-bill
algokit-bill --store my-invoices.txt
```

## What it does not do

The employee helpers work on `Employee` objects you build yourself; there is
no command that reads employee records interactively. The factorial helpers
compute their results directly and do not run anything in separate threads.