"""
Data types shared by every stage of the index: triples, the three RDF
object shapes, pivot keys and the entries emitted for them.
"""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Union


@dataclass(frozen=True)
class Resource:
    identifier: str


@dataclass(frozen=True)
class PlainLiteral:
    text: str
    language: Optional[str] = None


@dataclass(frozen=True)
class TypedLiteral:
    text: str
    datatype: str


RDFTerm = Union[Resource, PlainLiteral, TypedLiteral]


@dataclass(frozen=True)
class Triple:
    subject: str
    predicate: str
    object: RDFTerm

    def __post_init__(self):
        if not self.subject:
            raise ValueError("triple subject must not be empty")
        if not self.predicate:
            raise ValueError("triple predicate must not be empty")


class PivotKind(str, Enum):
    """Which two triple components make up a key."""
    PRED_OBJ = "predobj"
    SUBJ_OBJ = "subjobj"
    SUBJ_PRED = "subjpred"


class PivotKey(NamedTuple):
    kind: PivotKind
    first: str
    second: str

    def to_record(self):
        return [self.kind.value, self.first, self.second]

    @classmethod
    def from_record(cls, record):
        kind, first, second = record
        return cls(PivotKind(kind), first, second)


class PostingEntry(NamedTuple):
    key: PivotKey
    value: str


class EmissionUnit(NamedTuple):
    subject: str
    predicate: str
    label: str


RESOURCE_PREFIX = "Resource:"
TYPED_LITERAL_PREFIX = "TypedLiteral:"
PLAIN_LITERAL_PREFIX = "PlainLiteral:"


def render_typed(text, datatype):
    return f"{text}^^{datatype}"


def render_plain(text, language=None):
    if language:
        return f"{text}@{language}"
    return text


def resource_label(resource):
    return RESOURCE_PREFIX + resource.identifier


def typed_literal_label(literal):
    return TYPED_LITERAL_PREFIX + render_typed(literal.text, literal.datatype)


def plain_token_label(token, flag, language=None):
    return f"{PLAIN_LITERAL_PREFIX}{flag}:{render_plain(token, language)}"
