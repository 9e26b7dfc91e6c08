"""
Grouping and reduce side of the index.

``reduce_postings`` is what a reducer runs once the shuffle has handed it
every value of a key. ``group_by_key`` stands in for the shuffle when the
whole index is built in one process.
"""
from collections import defaultdict
from typing import Dict, Iterable, List

from .terms import PivotKey, PostingEntry

PostingsList = Dict[PivotKey, List[str]]


def reduce_postings(values: Iterable[str]) -> List[str]:
    """Sort the values of one key; duplicates are kept."""
    return sorted(values)


def group_by_key(entries: Iterable[PostingEntry]) -> Dict[PivotKey, List[str]]:
    """Collect values per key in arrival order."""
    groups = defaultdict(list)
    for key, value in entries:
        groups[key].append(value)
    return dict(groups)


def build_postings(entries: Iterable[PostingEntry]) -> PostingsList:
    """Group ``entries`` and reduce every key, keys in sorted order."""
    groups = group_by_key(entries)
    return {key: reduce_postings(groups[key]) for key in sorted(groups)}


def merge_groups(*groups: Dict[PivotKey, List[str]]) -> Dict[PivotKey, List[str]]:
    """Concatenate per-key values of several partitions' groups."""
    merged = defaultdict(list)
    for group in groups:
        for key, values in group.items():
            merged[key].extend(values)
    return dict(merged)
