"""Passage sources for typing tests."""

import logging
import random
import re
from pathlib import Path
from typing import List, Optional, Protocol

log = logging.getLogger("typeladder.passage_store")

TEXT_SNIPPETS = [
    "The concept of artificial intelligence has captivated the human imagination for decades. "
    "From the early days of simple algorithms to the complex neural networks of today, the journey "
    "has been nothing short of extraordinary. As machines learn to process information in ways that "
    "mimic the human brain, we are witnessing a transformation in how we interact with technology. "
    "The potential applications are vast, ranging from healthcare diagnostics to autonomous vehicles, "
    "promising a future where efficiency and innovation go hand in hand.",
    "In the heart of the bustling city, amidst the cacophony of honking cars and hurried footsteps, "
    "there lies a hidden garden. It is a sanctuary of peace, where the air is filled with the scent "
    "of blooming jasmine and the gentle sound of a trickling fountain. Here, time seems to slow down, "
    "allowing one to escape the relentless pace of modern life. It serves as a reminder that even in "
    "the most chaotic of environments, moments of tranquility can be found if one knows where to look.",
    "Software engineering is more than just writing code; it is an art form that requires creativity, "
    "logic, and a deep understanding of problem-solving. Every line of code is a building block in a "
    "larger structure, designed to perform specific tasks with precision and efficiency. The challenge "
    "lies not only in making it work but in making it maintainable and scalable. As technology evolves, "
    "so too must the skills of the engineer, constantly adapting to new languages, frameworks, and "
    "methodologies.",
    "The universe is a vast and mysterious expanse, filled with wonders that we are only just beginning "
    "to understand. From the swirling nebulae that birth new stars to the black holes that devour "
    "everything in their path, the cosmos is a testament to the power of nature. Exploring these "
    "celestial bodies helps us answer fundamental questions about our existence and our place in the "
    "grand scheme of things. It is a journey of discovery that pushes the boundaries of human knowledge "
    "and inspires generations to look up at the stars with wonder.",
]

COMMON_WORDS = [
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "I",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their", "what",
    "so", "up", "out", "if", "about", "who", "get", "which", "go", "me",
]


def split_passage(text: str) -> List[str]:
    """Split passage text into target words on whitespace."""
    return text.split()


class PassageStore(Protocol):
    """Supplies passages to the engine."""

    def next_passage(self) -> List[str]: ...

    def rewind(self) -> None: ...


class SnippetPassageStore:
    """Cycles through a fixed list of passages in order."""

    def __init__(self, snippets: Optional[List[str]] = None):
        snippets = TEXT_SNIPPETS if snippets is None else snippets
        self.snippets = [s for s in snippets if split_passage(s)]
        if not self.snippets:
            raise ValueError("SnippetPassageStore needs at least one non-empty snippet")
        self._next_index = 0

    def next_passage(self) -> List[str]:
        text = self.snippets[self._next_index]
        self._next_index = (self._next_index + 1) % len(self.snippets)
        return split_passage(text)

    def rewind(self) -> None:
        self._next_index = 0


class RandomWordPassageStore:
    """Builds passages from randomly drawn common words.

    Seeded, so rewinding replays the same sequence of passages.
    """

    def __init__(self, word_count: int = 30, words: Optional[List[str]] = None,
                 seed: Optional[int] = None):
        if word_count < 1:
            raise ValueError(f"word_count must be positive, got {word_count}")
        self.word_count = word_count
        self.words = list(COMMON_WORDS if words is None else words)
        if not self.words:
            raise ValueError("RandomWordPassageStore needs a non-empty word list")
        self.seed = random.randrange(2**32) if seed is None else seed
        self._rng = random.Random(self.seed)

    def next_passage(self) -> List[str]:
        return [self._rng.choice(self.words) for _ in range(self.word_count)]

    def rewind(self) -> None:
        self._rng = random.Random(self.seed)


class TextFilePassageStore(SnippetPassageStore):
    """Uses the blank-line separated paragraphs of a text file as passages."""

    def __init__(self, path: Path):
        self.path = Path(path)
        text = self.path.read_text(encoding="utf-8")
        paragraphs = [p.strip() for p in re.split(r"\n\s*\n", text)]
        log.info(f"Loaded {len(paragraphs)} paragraphs from {self.path}")
        super().__init__([p for p in paragraphs if p])
