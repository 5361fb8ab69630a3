# algocraft

Classic algorithms and data structures in plain Python, with no
third-party dependencies, plus an `algocraft` command that runs a number
of them from the terminal.

## What is inside

| Module | Contents |
|---|---|
| `algocraft.data_structures.binary_search_tree` | `BinarySearchTree` |
| `algocraft.data_structures.disjoint_set` | `DisjointSet` (union–find with path compression and union by rank) |
| `algocraft.data_structures.singly_linked_list` | `SinglyLinkedList` |
| `algocraft.sorting.common` | `SortOrder`, `wants_state`, `format_state` |
| `algocraft.sorting.*_sort` | `bubble_sort`, `counting_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `selection_sort`, `shell_sort` |
| `algocraft.searching.linear_search` | `linear_search` |
| `algocraft.searching.binary_search` | `binary_search` |
| `algocraft.searching.ternary_search` | `ternary_search`, `Pattern` |
| `algocraft.number_theory.binomial` | `binomial_coefficient` |
| `algocraft.number_theory.euclid` | `gcd`, `extended_euclidean` |
| `algocraft.number_theory.fast_exponentiation` | `fast_exp`, `digits_required` |
| `algocraft.number_theory.fibonacci` | `fibonacci`, `fibonacci_fast`, `matrix_product`, `matrix_power` |
| `algocraft.number_theory.perfect` | `is_perfect` |
| `algocraft.number_theory.sieve` | `simple_sieve`, `primes_up_to` |
| `algocraft.dynamic_programming.matrix_chain` | `matrix_chain_order`, `optimal_brackets`, `format_brackets`, `optimal_parenthesization` |
| `algocraft.dynamic_programming.kadane` | `maximum_subarray` |
| `algocraft.strings.kmp` | `kmp_search`, `partial_match_table` |
| `algocraft.strings.lcs` | `longest_common_subsequence`, `lcs_lengths` |
| `algocraft.backtracking.n_queens` | `place_queens`, `is_safe`, `format_board` |
| `algocraft.cli` | `main`, `build_parser` |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the library

### Data structures

```python
from algocraft.data_structures.binary_search_tree import BinarySearchTree
from algocraft.data_structures.disjoint_set import DisjointSet
from algocraft.data_structures.singly_linked_list import SinglyLinkedList

tree = BinarySearchTree()
for value in (10, 14, 12, 5):
    tree.insert(value)

print(10 in tree)            # True
print(list(tree.inorder()))  # [5, 10, 12, 14]
tree.remove(10)
print(10 in tree)            # False

groups = DisjointSet(16)
groups.join(0, 8)
print(groups.find(8))        # 0
print(len(groups))           # 16

items = SinglyLinkedList([1, 2, 3])
items.insert_front(0)
print(items[0], len(items))  # 0 4
```

`BinarySearchTree` keeps duplicates (equal values go to the left subtree).
`remove` raises `KeyError` when the value is absent. Traversals are
generators, each in a recursive (`inorder`, `preorder`, `postorder`) and an
iterative (`inorder_iterative`, `preorder_iterative`, `postorder_iterative`)
form.

`DisjointSet(n)` partitions `range(n)`; `find` and `join` raise
`IndexError` for elements outside it.

`SinglyLinkedList` inserts at either end in O(1); `delete_front` and
`delete_rear` do nothing on an empty list, and `value_at` / indexing raise
`IndexError` outside the list.

### Number theory

```python
from algocraft.number_theory.binomial import binomial_coefficient
from algocraft.number_theory.euclid import gcd, extended_euclidean
from algocraft.number_theory.fast_exponentiation import fast_exp
from algocraft.number_theory.fibonacci import fibonacci, fibonacci_fast
from algocraft.number_theory.perfect import is_perfect
from algocraft.number_theory.sieve import primes_up_to

binomial_coefficient(40, 20)   # 137846528820
gcd(12, 18)                    # 6
fast_exp(2, 100)               # 976371285 (taken modulo 10^9+7)
fibonacci(50)                  # 12586269025
fibonacci_fast(50)             # 12586269025
is_perfect(496)                # True
primes_up_to(20)               # [2, 3, 5, 7, 11, 13, 17, 19]
```

`binomial_coefficient`, `fibonacci` and `fibonacci_fast` return their
results modulo 2^64, so very large values wrap around as an unsigned 64-bit
integer would. `fast_exp(base, exponent)` returns the exact power while it
fits in 19 decimal digits and the power modulo 10^9+7 beyond that; pass
`mod` to choose the modulus yourself. `extended_euclidean(a, b)` returns
coefficients `(x, y)` with `x*a + y*b == gcd(a, b)`.

### Searching

`linear_search(element, values)` and `binary_search(value, sorted_values,
low=0, high=None)` return an index or `-1`. `ternary_search(values,
pattern)` returns the position of the maximum of an ascending-then-
descending sequence (`Pattern.ASCEND_THEN_DESCEND`) or of the minimum of a
descending-then-ascending one (`Pattern.DESCEND_THEN_ASCEND`).

### Sorting

Every sorting function sorts a list in place and takes the values, a
`SortOrder` (`ASCENDING` by default, or `DESCENDING`) and an optional
`on_step` callback that receives a copy of the values as the algorithm
progresses. `quick_sort` also accepts a `random.Random` as `rng` for the
pivot choice. `counting_sort` works on integers and `radix_sort` on
non-negative integers only (it raises `ValueError` otherwise).

```python
from algocraft.sorting.common import SortOrder, format_state
from algocraft.sorting.merge_sort import merge_sort

values = [5, 3, 9, 1]
merge_sort(values, SortOrder.DESCENDING, on_step=lambda s: print(format_state(s)))
print(values)   # [9, 5, 3, 1]
```

### Dynamic programming, strings and backtracking

```python
from algocraft.dynamic_programming.matrix_chain import (
    matrix_chain_order,
    optimal_parenthesization,
)
from algocraft.dynamic_programming.kadane import maximum_subarray
from algocraft.strings.kmp import kmp_search
from algocraft.strings.lcs import longest_common_subsequence
from algocraft.backtracking.n_queens import place_queens, format_board

matrix_chain_order([40, 20, 30, 10, 30])    # 26000
optimal_parenthesization([10, 20, 30])      # "(AB)"
maximum_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # Subarray(total=6, start=3, end=6)
kmp_search("aba", "abababa")                # [0, 2, 4]
longest_common_subsequence("ABCBDAB", "BDCABA")    # a subsequence of length 4
print(format_board(place_queens(4)))
```

`place_queens(n)` returns a board (`board[row][col]` is `True` where a queen
stands) or `None` when no placement exists; `n` must be between 0 and 40.

## Command line

The `algocraft` command takes one sub-command per algorithm, with all input
given as arguments:

```
algocraft --help
algocraft sort merge 5 3 9 1 --order d --show-state
algocraft queens 8
algocraft matrix-chain 40 20 30 10 30
algocraft max-subarray -- -2 1 -3 4 -1 2 1 -5 4
algocraft power 2 100
algocraft primes 50
algocraft kmp abababa aba
algocraft lcs ABCBDAB BDCABA
```

`sort` accepts `bubble`, `counting`, `heap`, `insertion`, `merge`, `quick`,
`radix`, `selection` or `shell`; `--order` takes an answer starting with
`d` for descending (anything else is ascending), and `--show-state` prints
the values after each step. Given no values it prints "Nothing to sort
here." and exits with status 2. Invalid input (for instance more than 40
queens, or a negative value for radix sort) is reported as a usage error.

## What it does not do

The command does not prompt for input; everything is passed on the command
line. It has no sub-commands for the data structures, the searches,
binomial coefficients, GCD, Fibonacci numbers or perfect numbers — those
are available from Python only.