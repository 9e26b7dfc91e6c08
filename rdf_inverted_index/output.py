"""
Text layout of one postings record:

    ["predobj", "<predicate>", "<label>"]<TAB>["<subject>", ...]
"""
import json

from .terms import PivotKey


def format_record(key, postings):
    return f"{json.dumps(key.to_record())}\t{json.dumps(list(postings))}"


def parse_record(line):
    key, postings = line.rstrip("\n").split("\t", 1)
    return PivotKey.from_record(json.loads(key)), json.loads(postings)
