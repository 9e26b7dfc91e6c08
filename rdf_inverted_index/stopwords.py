"""
Stop-word lookup used to filter literal tokens.
"""

# Lucene's English stop set
ENGLISH_STOP_WORDS = frozenset([
    "a", "an", "and", "are", "as", "at", "be", "but", "by",
    "for", "if", "in", "into", "is", "it",
    "no", "not", "of", "on", "or", "such",
    "that", "the", "their", "then", "there", "these",
    "they", "this", "to", "was", "will", "with",
])


class StopWords:
    def __init__(self, words=ENGLISH_STOP_WORDS):
        self.words = frozenset(w.lower() for w in words)

    @classmethod
    def from_file(cls, path):
        """One word per line; blank lines and ``#`` comments ignored."""
        words = []
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.split("#", 1)[0].strip()
                if word:
                    words.append(word)
        return cls(words)

    def is_stop_word(self, token):
        """``token`` is expected lowercased already."""
        return token in self.words

    def __contains__(self, token):
        return self.is_stop_word(token)

    def __len__(self):
        return len(self.words)
