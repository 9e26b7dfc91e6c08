"""Pivoted inverted index over RDF triples, built as a MapReduce job."""
from .terms import (
    EmissionUnit, PivotKey, PivotKind, PlainLiteral, PostingEntry,
    Resource, Triple, TypedLiteral,
)
from .assembler import DocumentAssembler
from .triples import ParseError, RdflibTripleSource
from .stopwords import StopWords
from .tokens import TokenClassifier
from .pivot import pivot_all
from .grouping import build_postings, group_by_key, reduce_postings
from .pipeline import DocumentIndexer, index_fragments, index_partitions

__version__ = "0.1.0"
