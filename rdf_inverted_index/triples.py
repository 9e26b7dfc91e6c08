"""
Turns an RDF/XML document into Triple values using rdflib.
"""
import logging

from rdflib import BNode, Graph, Literal, URIRef

from .config import DEFAULT_BASE_URI, RDF_FORMAT
from .terms import PlainLiteral, Resource, Triple, TypedLiteral

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """The document could not be parsed into triples."""


def to_term(node):
    """Map an rdflib node onto Resource, PlainLiteral or TypedLiteral."""
    if isinstance(node, Literal):
        if node.datatype is not None:
            return TypedLiteral(str(node), str(node.datatype))
        return PlainLiteral(str(node), node.language)
    if isinstance(node, (URIRef, BNode)):
        return Resource(str(node))
    return None


class RdflibTripleSource:
    """Parses whole documents; raises ParseError on malformed input."""

    def __init__(self, rdf_format=RDF_FORMAT, base=DEFAULT_BASE_URI):
        self.rdf_format = rdf_format
        self.base = base

    def parse(self, document):
        graph = Graph()
        try:
            graph.parse(data=document, format=self.rdf_format, publicID=self.base)
        except Exception as e:
            raise ParseError(f"cannot parse {self.rdf_format} document: {e}") from e

        triples = []
        for subject, predicate, obj in graph:
            term = to_term(obj)
            if term is None:
                logger.debug(f"Skipping object of unknown node type: {obj!r}")
                continue
            try:
                triples.append(Triple(str(subject), str(predicate), term))
            except ValueError as e:
                logger.warning(f"Skipping statement ({subject!r}, {predicate!r}): {e}")
        return triples
