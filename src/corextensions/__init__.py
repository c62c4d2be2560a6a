"""corextensions — Helper algorithms for built-in sequences, mappings and text.

Centres on the positional and combinatorial algebra of ordered
sequences: single-difference detection between near-equal sequences,
ordered run containment, cyclic and full reordering, lazy
Lehmer-code-indexed permutation enumeration, mixed-radix "spread and
combine" indexing across rows of candidates, and bounded in-place
range reorganisation.  Smaller iterable, numeric, mapping and text
helpers round out the toolkit.

Public API:
    .. autosummary::
        find_single_missing_from
        find_single_extra_from
        find_single_swapped_from
        contains_in_order
        starts_with
        ends_with
        has_same_length_as
        permute
        with_order
        inverse_order
        swap
        all_permutations
        other_permutations
        permutation_at_index
        permutation_to_index
        sample_permutations
        first_difference_to
        distance_to
        all_indices_of
        all_indices_where
        Permutations
        OtherPermutations
        spread_and_combine
        spread_and_combine_at_index
        spread_and_combine_to_index
        spread_and_combine_indices
        all_choices
        SpreadAndCombine
        replace_elements_by_reorganisation
        partition_in_order
        add_within
        update_all
        map_with_index
        zip_two_lists
        MappedSequence
        ZippedSequence
        ZippedContent
        shallow_equals
        resolve_equality
        get_equality
        set_equality
"""

from . import iterables, mappings, numeric, strings
from ._config import get_equality, set_equality
from .combinatorics import (
    SpreadAndCombine,
    all_choices,
    spread_and_combine,
    spread_and_combine_at_index,
    spread_and_combine_indices,
    spread_and_combine_to_index,
)
from .comparison import (
    contains_in_order,
    ends_with,
    find_single_extra_from,
    find_single_missing_from,
    find_single_swapped_from,
    has_same_length_as,
    starts_with,
)
from .equality import resolve_equality, shallow_equals
from .permutations import (
    OtherPermutations,
    Permutations,
    all_indices_of,
    all_indices_where,
    all_permutations,
    distance_to,
    first_difference_to,
    inverse_order,
    other_permutations,
    permutation_at_index,
    permutation_to_index,
    permute,
    sample_permutations,
    swap,
    with_order,
)
from .reorganisation import (
    add_within,
    partition_in_order,
    replace_elements_by_reorganisation,
    update_all,
)
from .views import (
    MappedSequence,
    ZippedContent,
    ZippedSequence,
    map_with_index,
    zip_two_lists,
)

__all__ = [
    "find_single_missing_from",
    "find_single_extra_from",
    "find_single_swapped_from",
    "contains_in_order",
    "starts_with",
    "ends_with",
    "has_same_length_as",
    "permute",
    "with_order",
    "inverse_order",
    "swap",
    "all_permutations",
    "other_permutations",
    "permutation_at_index",
    "permutation_to_index",
    "sample_permutations",
    "first_difference_to",
    "distance_to",
    "all_indices_of",
    "all_indices_where",
    "Permutations",
    "OtherPermutations",
    "spread_and_combine",
    "spread_and_combine_at_index",
    "spread_and_combine_to_index",
    "spread_and_combine_indices",
    "all_choices",
    "SpreadAndCombine",
    "replace_elements_by_reorganisation",
    "partition_in_order",
    "add_within",
    "update_all",
    "map_with_index",
    "zip_two_lists",
    "MappedSequence",
    "ZippedSequence",
    "ZippedContent",
    "shallow_equals",
    "resolve_equality",
    "get_equality",
    "set_equality",
]

__version__ = "0.1.0"
