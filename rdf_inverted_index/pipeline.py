"""
Map side of the index for one input partition, and a single-process
driver that runs the whole index without a cluster.
"""
import logging
from collections import Counter

from .assembler import DocumentAssembler
from .config import DEFAULT_DOC_END_MARKER
from .grouping import group_by_key, merge_groups, reduce_postings
from .pivot import pivot_all
from .tokens import TokenClassifier
from .triples import ParseError, RdflibTripleSource

logger = logging.getLogger(__name__)


class DocumentIndexer:
    """Assembler -> triple source -> classifier -> pivot emitter.

    One instance per partition; it holds the partition's partial document
    and its stats, nothing else.
    """

    def __init__(self, marker=DEFAULT_DOC_END_MARKER, triple_source=None,
                 classifier=None, joiner=""):
        self.assembler = DocumentAssembler(marker, joiner=joiner)
        self.triple_source = triple_source or RdflibTripleSource()
        self.classifier = classifier or TokenClassifier()
        self.stats = Counter()

    def feed(self, fragment):
        """Take one fragment; return the entries of a document it completes."""
        self.stats["fragments"] += 1
        document = self.assembler.feed(fragment)
        if document is None:
            return []
        return self.emit(document)

    def emit(self, document):
        """Return every posting entry of one complete document."""
        self.stats["documents"] += 1
        try:
            triples = self.triple_source.parse(document)
        except ParseError as e:
            self.stats["parse_errors"] += 1
            logger.error(f"Skipping document {self.stats['documents']}: {e}")
            return []

        entries = []
        for triple in triples:
            self.stats["triples"] += 1
            entries.extend(pivot_all(self.classifier.classify(triple)))
        self.stats["entries"] += len(entries)
        return entries

    def finish(self):
        """Close the partition, dropping any document without an end marker."""
        leftover = self.assembler.discard()
        if leftover.strip():
            self.stats["discarded_fragments"] += 1
            logger.warning(
                f"Discarding {len(leftover)} chars with no "
                f"{self.assembler.marker!r} at end of partition"
            )
        return leftover


def index_partitions(partitions, marker=DEFAULT_DOC_END_MARKER,
                     triple_source=None, classifier=None, joiner=""):
    """Build the postings of several partitions of fragments in-process.

    Each partition gets its own indexer; grouped values are merged across
    partitions before any key is sorted.
    """
    groups = []
    for fragments in partitions:
        indexer = DocumentIndexer(marker, triple_source, classifier, joiner)
        entries = []
        for fragment in fragments:
            entries.extend(indexer.feed(fragment))
        indexer.finish()
        logger.info(f"Partition done: {dict(indexer.stats)}")
        groups.append(group_by_key(entries))

    merged = merge_groups(*groups)
    return {key: reduce_postings(merged[key]) for key in sorted(merged)}


def index_fragments(fragments, marker=DEFAULT_DOC_END_MARKER,
                    triple_source=None, classifier=None, joiner=""):
    """Single partition shortcut for ``index_partitions``."""
    return index_partitions([fragments], marker, triple_source, classifier, joiner)
