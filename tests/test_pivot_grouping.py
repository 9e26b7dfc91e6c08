import unittest

from rdf_inverted_index.grouping import (
    build_postings, group_by_key, merge_groups, reduce_postings,
)
from rdf_inverted_index.pivot import pivot, pivot_all
from rdf_inverted_index.terms import (
    EmissionUnit, PivotKey, PivotKind, PlainLiteral, PostingEntry, Resource,
    Triple,
)
from rdf_inverted_index.tokens import TokenClassifier


def predobj(predicate, label):
    return PivotKey(PivotKind.PRED_OBJ, predicate, label)


class TestPivot(unittest.TestCase):
    def test_resource_triple_fans_out_to_three_entries(self):
        unit = EmissionUnit("ex:Alice", "ex:knows", "Resource:ex:Bob")
        self.assertEqual(pivot(unit), (
            PostingEntry(PivotKey(PivotKind.PRED_OBJ, "ex:knows", "Resource:ex:Bob"), "ex:Alice"),
            PostingEntry(PivotKey(PivotKind.SUBJ_OBJ, "ex:Alice", "Resource:ex:Bob"), "ex:knows"),
            PostingEntry(PivotKey(PivotKind.SUBJ_PRED, "ex:Alice", "ex:knows"), "Resource:ex:Bob"),
        ))

    def test_entry_count_follows_token_count(self):
        classifier = TokenClassifier()
        triples = [
            Triple("ex:A", "ex:knows", Resource("ex:B")),
            Triple("ex:A", "ex:name", PlainLiteral("Big (Red) Dog")),
            Triple("ex:A", "ex:note", PlainLiteral("the of")),
        ]
        units = [u for t in triples for u in classifier.classify(t)]
        # 1 resource + 3 tokens + 0 tokens
        self.assertEqual(len(list(pivot_all(units))), 3 * (1 + 3 + 0))


class TestPivotKey(unittest.TestCase):
    def test_ordering_compares_all_fields(self):
        keys = [
            PivotKey(PivotKind.SUBJ_PRED, "a", "b"),
            PivotKey(PivotKind.PRED_OBJ, "b", "a"),
            PivotKey(PivotKind.PRED_OBJ, "a", "c"),
            PivotKey(PivotKind.PRED_OBJ, "a", "b"),
        ]
        self.assertEqual(sorted(keys), [keys[3], keys[2], keys[1], keys[0]])
        self.assertNotEqual(PivotKey(PivotKind.SUBJ_OBJ, "a", "b"),
                            PivotKey(PivotKind.PRED_OBJ, "a", "b"))

    def test_record_round_trip(self):
        key = PivotKey(PivotKind.SUBJ_OBJ, "ex:A", "Resource:ex:B")
        self.assertEqual(key.to_record(), ["subjobj", "ex:A", "Resource:ex:B"])
        self.assertEqual(PivotKey.from_record(key.to_record()), key)


class TestGrouping(unittest.TestCase):
    def test_reduce_sorts_and_keeps_duplicates(self):
        self.assertEqual(reduce_postings(["B", "A", "B"]), ["A", "B", "B"])

    def test_sort_is_idempotent(self):
        values = reduce_postings(["c", "a", "b", "a"])
        self.assertEqual(reduce_postings(values), values)

    def test_group_keeps_arrival_order(self):
        key = predobj("P", "Resource:R")
        groups = group_by_key([PostingEntry(key, "B"), PostingEntry(key, "A")])
        self.assertEqual(groups, {key: ["B", "A"]})

    def test_build_postings_with_duplicates(self):
        classifier = TokenClassifier()
        triples = [
            Triple("B", "P", Resource("R")),
            Triple("A", "P", Resource("R")),
            Triple("A", "P", Resource("R")),
        ]
        entries = pivot_all(u for t in triples for u in classifier.classify(t))
        postings = build_postings(entries)

        self.assertEqual(postings[predobj("P", "Resource:R")], ["A", "A", "B"])
        self.assertEqual(postings[PivotKey(PivotKind.SUBJ_PRED, "A", "P")],
                         ["Resource:R", "Resource:R"])
        self.assertEqual(list(postings), sorted(postings))

    def test_merge_groups_concatenates(self):
        key = predobj("P", "L")
        merged = merge_groups({key: ["b"]}, {key: ["a"]}, {})
        self.assertEqual(merged, {key: ["b", "a"]})
