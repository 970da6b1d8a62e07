"""Word list loading for the prefix trie."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from wordsearch.trie import Trie

logger = logging.getLogger("wordsearch")

# Used when no dictionary file is configured.
DEFAULT_WORDS = (
    "a", "ad", "ah", "am", "an", "and", "ant", "ants", "anti", "ape", "apes",
    "apt", "arc", "are", "area", "arm", "art", "as", "ash", "at", "ate", "bad",
    "bag", "ban", "banana", "band", "bane", "bar", "bare", "bat", "bats", "be",
    "bead", "bean", "bear", "beat", "bed", "bee", "beg", "bet", "bid", "bin",
    "bit", "bite", "boa", "boat", "bog", "bone", "bot", "bow", "boy", "bud",
    "bun", "but", "by", "cab", "can", "cane", "cap", "cape", "car", "care",
    "cart", "case", "cast", "cat", "cats", "cod", "cog", "con", "cone", "cot",
    "cow", "cry", "cub", "cue", "cut", "dab", "dam", "dare", "dart", "date",
    "den", "dent", "dew", "did", "die", "dig", "dim", "din", "dine", "dip",
    "do", "doe", "dog", "don", "done", "dot", "dote", "dry", "due", "ear",
    "earn", "east", "eat", "eats", "egg", "end", "era", "eta", "fan", "far",
    "fat", "fig", "fin", "fit", "go", "goat", "god", "got", "ha", "hat", "he",
    "hen", "hi", "hit", "hot", "i", "in", "ink", "inn", "is", "it", "its",
    "net", "nest", "new", "nit", "no", "nod", "node", "none", "nor", "not",
    "note", "now", "nut", "oat", "oats", "odd", "ode", "of", "on", "one",
    "ones", "or", "ore", "our", "out", "pan", "pane", "pant", "par", "pat",
    "pea", "pen", "pet", "pie", "pin", "pine", "pit", "pot", "ran", "rant",
    "rat", "rate", "red", "rest", "rod", "rode", "rot", "run", "sat", "sea",
    "seat", "set", "sit", "so", "son", "star", "stare", "tab", "tan", "tar",
    "tea", "ten", "tend", "tent", "the", "tie", "tin", "tine", "to", "toe",
    "ton", "tone", "top", "tot", "tote", "train", "trap", "tree", "try", "tub",
    "tube", "tune", "up", "us", "use", "we", "wet", "win", "wine", "wit",
    "won", "yes", "yet",
)


def read_words(path: str | Path, min_length: int = 1) -> Iterator[str]:
    """Yield one word per non-blank line, stripped of surrounding whitespace."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and len(word) >= min_length:
                yield word


def load_trie(path: str | Path | None = None, min_length: int = 1) -> Trie:
    if path is None:
        words = [w for w in DEFAULT_WORDS if len(w) >= min_length]
        logger.warning("No dictionary configured, using %d built-in words", len(words))
        return Trie.from_words(words)

    trie = Trie()
    count = 0
    for word in read_words(path, min_length):
        trie.add_word(word)
        count += 1
    logger.info("Loaded %s words from %s", f"{count:,}", path)
    return trie
