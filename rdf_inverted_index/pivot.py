"""
Fans every emission unit out into its three pivot entries.
"""
from .terms import PivotKey, PivotKind, PostingEntry


def pivot(unit):
    """Return the (predobj, subjobj, subjpred) entries for one unit."""
    subject, predicate, label = unit
    return (
        PostingEntry(PivotKey(PivotKind.PRED_OBJ, predicate, label), subject),
        PostingEntry(PivotKey(PivotKind.SUBJ_OBJ, subject, label), predicate),
        PostingEntry(PivotKey(PivotKind.SUBJ_PRED, subject, predicate), label),
    )


def pivot_all(units):
    for unit in units:
        yield from pivot(unit)
