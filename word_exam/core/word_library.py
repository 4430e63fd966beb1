"""Loading and lookup for the vocabulary word library.

File format (one entry per line, UTF-8):

    abandon,to give up completely
    accelerate,to speed up; to bring about sooner

Each line is split on its first comma; the left side is the word and the
rest is the definition. Blank lines and lines without both halves are skipped.
A word that appears twice keeps its last definition.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
import logging
from pathlib import Path

from word_exam.core.exceptions import InvalidArgumentError, WordLibraryUnavailableError
from word_exam.core.models import WordEntry

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_PATH = Path(__file__).resolve().parent.parent / "data" / "word_library.txt"
# Built-in words used whenever the library file cannot be loaded.
_FALLBACK_ENTRIES = [
    ("abandon", "to give up; to leave behind"),
    ("accelerate", "to speed up; to promote"),
    ("benefit", "an advantage; a profit"),
    ("capacity", "ability; volume that can be held"),
    ("diverse", "different; of many kinds"),
    ("efficient", "productive without waste; capable"),
    ("generate", "to produce; to bring into being"),
    ("highlight", "to emphasise; to make prominent"),
    ("illustrate", "to explain; to make clear by example"),
    ("justify", "to show to be right; to defend"),
    ("maintain", "to keep up; to preserve"),
    ("neglect", "to ignore; to fail to care for"),
    ("optimize", "to make as good as possible; to perfect"),
    ("persist", "to continue firmly; to last"),
    ("qualify", "to make eligible; to limit"),
    ("relevant", "related; to the point"),
    ("stimulate", "to excite; to encourage"),
    ("temporary", "lasting a short time; provisional"),
    ("ultimate", "final; fundamental"),
    ("validate", "to verify; to confirm"),
]


class WordLibrary(Mapping[str, str]):
    """Read-only mapping from word to definition."""

    def __init__(self, entries: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        if isinstance(entries, Mapping):
            entries = entries.items()
        words: dict[str, str] = {}
        for word, definition in entries:
            words[word] = definition
        self._words = words

    def __getitem__(self, word: str) -> str:
        return self._words[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordLibrary({len(self._words)} words)"

    def definition_of(self, word: str) -> str:
        try:
            return self._words[word]
        except KeyError:
            raise InvalidArgumentError(f"Word '{word}' is not in the library.") from None

    def entries(self) -> list[WordEntry]:
        return [WordEntry(word=word, definition=definition) for word, definition in self._words.items()]


def parse_word_library(text: str) -> WordLibrary:
    pairs: list[tuple[str, str]] = []
    for raw_line in text.splitlines():
        if "," not in raw_line:
            continue
        word, definition = (part.strip() for part in raw_line.split(",", 1))
        if word and definition:
            pairs.append((word, definition))
    return WordLibrary(pairs)


def load_word_library(file_path: Path) -> WordLibrary:
    """Load a library file, raising WordLibraryUnavailableError if it is unusable."""
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordLibraryUnavailableError(f"Cannot read word library {file_path}: {exc}") from exc

    library = parse_word_library(text)
    if not library:
        raise WordLibraryUnavailableError(f"Word library {file_path} contains no entries.")
    logger.info("Loaded %d words from %s", len(library), file_path)
    return library


def load_word_library_or_fallback(file_path: Path | None = None) -> WordLibrary:
    """Load the library file, substituting the built-in words on any failure."""
    try:
        return load_word_library(file_path or DEFAULT_LIBRARY_PATH)
    except WordLibraryUnavailableError as exc:
        logger.warning("%s Using the built-in word library.", exc)
        return fallback_word_library()


def fallback_word_library() -> WordLibrary:
    return WordLibrary(_FALLBACK_ENTRIES)
