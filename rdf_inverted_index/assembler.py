"""
Rebuilds whole documents out of the text fragments of one input partition.
"""


class DocumentAssembler:
    """Buffers fragments until the end marker shows up.

    Fragments must arrive in their original order. Nothing is checked
    except whether the buffer contains ``marker``; once it does the whole
    buffer comes out as one document and the buffer is cleared.
    """

    def __init__(self, marker, joiner=""):
        if not marker:
            raise ValueError("document end marker must not be empty")
        self.marker = marker
        self.joiner = joiner
        self._buffer = ""

    @property
    def pending(self):
        """Text waiting for its end marker."""
        return self._buffer

    def feed(self, fragment):
        """Append ``fragment``; return the completed document or None."""
        # the marker can straddle the previous fragment and this one
        start = max(0, len(self._buffer) - len(self.marker) + 1)
        self._buffer += fragment + self.joiner
        if self.marker not in self._buffer[start:]:
            return None
        document, self._buffer = self._buffer, ""
        return document

    def discard(self):
        """Drop any partial document and return it."""
        leftover, self._buffer = self._buffer, ""
        return leftover
