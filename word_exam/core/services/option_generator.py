"""Builds the shuffled multiple-choice definitions for a word."""

from __future__ import annotations

from collections.abc import Mapping
import random

from word_exam.constants.exam_constants import OPTIONS_PER_QUESTION
from word_exam.core.exceptions import InvalidArgumentError
from word_exam.core.models import OptionSet


def generate_options(
    word: str,
    library: Mapping[str, str],
    rng: random.Random | None = None,
) -> OptionSet:
    """Return the correct definition of ``word`` mixed with up to three distractors.

    Distractors are drawn from every other definition in the library; any
    definition whose text equals the correct one is excluded even when it
    belongs to a different word. Libraries with fewer than four distinct
    definitions produce fewer than four options.
    """
    if word not in library:
        raise InvalidArgumentError(f"Word '{word}' is not in the library.")
    rng = rng or random.Random()

    correct = library[word]
    pool = [definition for definition in library.values() if definition != correct]
    rng.shuffle(pool)
    distractors = pool[: OPTIONS_PER_QUESTION - 1]

    options = [correct, *distractors]
    rng.shuffle(options)
    return OptionSet(word=word, options=tuple(options), correct_index=options.index(correct))
