"""
Classifies triple objects and splits plain literals into indexable tokens.
"""
import logging
import re

from .stopwords import StopWords
from .terms import (
    EmissionUnit, PlainLiteral, Resource, TypedLiteral,
    plain_token_label, resource_label, typed_literal_label,
)

logger = logging.getLogger(__name__)

# only ASCII letters and digits count as alphanumeric
_EDGE_SYMBOLS = re.compile(r"^[^a-zA-Z0-9]+|[^a-zA-Z0-9]+$")

SENSITIVE = "s"
INSENSITIVE = "i"


def strip_symbols(token):
    """Remove non-alphanumeric characters from both ends of ``token``."""
    return _EDGE_SYMBOLS.sub("", token)


def case_flag(token):
    return SENSITIVE if token[:1].isupper() else INSENSITIVE


class TokenClassifier:
    """Produces the emission units of one triple.

    Resources and typed literals give a single unit. Plain literals are
    split on whitespace and give one unit per token that survives symbol
    stripping and the stop-word filter, possibly none.
    """

    def __init__(self, stop_words=None):
        self.stop_words = stop_words if stop_words is not None else StopWords()

    def tokenize(self, text):
        tokens = []
        for raw in text.split():
            token = strip_symbols(raw)
            if not token or self.stop_words.is_stop_word(token.lower()):
                continue
            tokens.append(token)
        return tokens

    def classify(self, triple):
        obj = triple.object
        if isinstance(obj, Resource):
            return [EmissionUnit(triple.subject, triple.predicate, resource_label(obj))]
        if isinstance(obj, TypedLiteral):
            return [EmissionUnit(triple.subject, triple.predicate, typed_literal_label(obj))]
        if isinstance(obj, PlainLiteral):
            return [
                EmissionUnit(
                    triple.subject,
                    triple.predicate,
                    plain_token_label(token, case_flag(token), obj.language),
                )
                for token in self.tokenize(obj.text)
            ]
        logger.debug(f"Dropping object of unknown shape: {obj!r}")
        return []
