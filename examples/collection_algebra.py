"""
Walkthrough: Positional and Combinatorial Algebra of Sequences

Demonstrates:
- Text helpers: ``remove_extra_space``, ``match_all``,
  ``starts_with_one_of``
- Iterable helpers: ``is_single``, ``has_duplicates``, ``count``,
  ``count_where``, ``largest_where``
- Single-difference detection between near-equal sequences
- Contiguous in-order run containment
- Cyclic (``permute``) and full (``with_order``) reordering
- Lazy Lehmer-code permutation enumeration with random access and
  inverse lookup, including index spaces far beyond ``sys.maxsize``
- Mixed-radix "spread and combine" indexing across rows of candidates
- Bounded in-place range reorganisation
- Mapping helpers: ``single_entry_where``, ``first_key_where``,
  ``reverse``

Every printed result is also asserted, so the script doubles as a
smoke test of the public API.
"""

import math

import numpy as np
import pandas as pd

from corextensions import (
    all_choices,
    all_permutations,
    contains_in_order,
    find_single_extra_from,
    find_single_missing_from,
    inverse_order,
    map_with_index,
    permutation_to_index,
    permute,
    replace_elements_by_reorganisation,
    sample_permutations,
    spread_and_combine,
    spread_and_combine_at_index,
    spread_and_combine_to_index,
    swap,
    with_order,
    zip_two_lists,
)
from corextensions.iterables import (
    count,
    count_where,
    has_duplicates,
    is_single,
    largest_where,
)
from corextensions.mappings import first_key_where, reverse, single_entry_where
from corextensions.strings import match_all, remove_extra_space, starts_with_one_of

# ============================================================================
# Text
# ============================================================================

raw_value = "  I       want  to     leave.       "
vowels = ["a", "e", "i", "o", "u"]

value = remove_extra_space(raw_value)
starts = [m.start() for m in match_all(value, vowels)]
print(f"{value!r}: vowels at {starts}")
assert value == "I want to leave."
assert starts == [3, 8, 11, 12, 14]
assert not starts_with_one_of(value, vowels)

# ============================================================================
# Iterables
# ============================================================================

numbers = [5, 10, 12, 8, 5]
assert not is_single(numbers)
assert has_duplicates(numbers)
assert (count(numbers, -2), count(numbers, 5), count(numbers, 8)) == (0, 2, 1)
assert list(map_with_index(numbers, lambda x, i: x * i)) == [0, 10, 24, 24, 20]

swap(numbers, 0, 2)
print(f"after swap(0, 2): {numbers}")
assert numbers == [12, 10, 5, 8, 5]

values = {1, 3, 5, -2}
assert count_where(values, lambda v: abs(v) > 2) == 2
assert largest_where(values, lambda v: v) == 5

# ============================================================================
# Single differences and ordered runs
# ============================================================================

print("\nSingle differences")
print("-" * 60)
missing = find_single_missing_from([1, 2, 4], [1, 2, 3, 4])
extra = find_single_extra_from(["a", "b", "x", "c"], ["a", "b", "c"])
print(f"  [1, 2, 4] lacks index {missing} of [1, 2, 3, 4]")
print(f"  ['a', 'b', 'x', 'c'] has an extra element at index {extra}")
assert (missing, extra) == (2, 2)

assert contains_in_order([1, 2, 3, 4, 2], [2, 3, 4])
assert not contains_in_order([1, 2, 3, 4, 2], [1, 3, 4])

# ============================================================================
# Reordering
# ============================================================================

print("\nReordering")
print("-" * 60)
sentence = ["I", "would", "have", "known", "not", "that"]
permute(sentence, [2, 3, 4])
print(f"  permute [2, 3, 4]: {' '.join(sentence)}")
assert sentence == ["I", "would", "not", "have", "known", "that"]

order = [3, 0, 1, 2]
words = ["I", "went", "there", "yesterday"]
moved = with_order(words, order)
print(f"  with_order {order}: {' '.join(moved)}")
assert moved == ["yesterday", "I", "went", "there"]
assert with_order(moved, inverse_order(order)) == words

# ============================================================================
# Permutation enumeration
# ============================================================================

print("\nPermutations")
print("-" * 60)
letters = list("abcd")
view = all_permutations(letters)
assert len(view) == math.factorial(len(letters))
for k in (0, 1, 23):
    print(f"  view[{k:2d}] = {''.join(view[k])}")
    assert view.index(view[k]) == k
assert view[0] == letters

# Random access works well beyond what could ever be materialised.
alphabet = list("abcdefghijklmnopqrstuvwxyz")
huge = all_permutations(alphabet)
k = huge.total // 3
middle = huge[k]
print(f"  26! = {huge.total:,}")
print(f"  rank {k:,} -> {''.join(middle)}")
assert permutation_to_index(alphabet, middle) == k

samples = sample_permutations(letters, 5, random_state=42)
assert len({tuple(s) for s in samples}) == 5
assert letters not in samples

# ============================================================================
# Spread and combine
# ============================================================================

print("\nSpread and combine")
print("-" * 60)
rows = [["small", "large"], ["red", "green", "blue"], ["cotton", "wool"]]
choices = spread_and_combine(rows)
assert len(choices) == 2 * 3 * 2

table = pd.DataFrame(choices, columns=["size", "colour", "fabric"])
print(table.to_string())

for i, choice in enumerate(choices):
    assert spread_and_combine_at_index(rows, i) == choice
    assert spread_and_combine_to_index(rows, choice) == i

assert all_choices([1, 2]) == [[], [1], [2], [1, 2]]

# ============================================================================
# Range reorganisation and zipping
# ============================================================================

fruits = ["apple", "banana", "carrot", "mango", "pineapple"]
replace_elements_by_reorganisation(fruits, 1, 3, np.array([1, 0]))
assert fruits == ["apple", "carrot", "banana", "mango", "pineapple"]
replace_elements_by_reorganisation(fruits, 1, 4, [2, 2])
print(f"\nreorganised: {fruits}")
assert fruits == ["apple", "mango", "mango", "pineapple"]

pairs = zip_two_lists([1, 2, 3], ["one", "two", "three"])
print("zipped: " + ", ".join(str(p) for p in pairs))

# ============================================================================
# Mappings
# ============================================================================

mapping = {"first": 1, "second": 2, "third": 3, "fourth": 4}
assert single_entry_where(mapping, lambda key, v: len(key) + v > 9) == ("fourth", 4)
assert first_key_where(mapping, lambda key, v: v % 2 == 0) == "second"
assert reverse(mapping) == {1: "first", 2: "second", 3: "third", 4: "fourth"}

print("\nAll checks passed.")
