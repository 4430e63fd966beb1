from __future__ import annotations

import random

import pytest

from word_exam.core.exceptions import InvalidArgumentError
from word_exam.core.services.option_generator import generate_options


def test_options_contain_correct_definition_once(small_library):
    for seed in range(20):
        option_set = generate_options("cat", small_library, random.Random(seed))

        assert len(option_set.options) == 4
        assert option_set.options.count(small_library["cat"]) == 1
        assert option_set.correct_definition == small_library["cat"]
        assert set(option_set.options) == set(small_library.values())


def test_distractors_come_from_other_words():
    library = {f"word{i}": f"definition {i}" for i in range(10)}

    option_set = generate_options("word3", library, random.Random(7))

    assert len(option_set.options) == 4
    assert len(set(option_set.options)) == 4
    assert all(option in library.values() for option in option_set.options)
    assert option_set.options[option_set.correct_index] == "definition 3"


def test_small_library_yields_fewer_options():
    library = {"cat": "feline", "dog": "canine"}

    option_set = generate_options("dog", library, random.Random(1))

    assert sorted(option_set.options) == ["canine", "feline"]
    assert option_set.correct_definition == "canine"


def test_single_word_library_yields_only_correct_option():
    option_set = generate_options("cat", {"cat": "feline"}, random.Random(0))

    assert option_set.options == ("feline",)
    assert option_set.correct_index == 0


def test_duplicate_definition_text_is_not_used_as_distractor():
    library = {"big": "large", "large": "large", "tiny": "small"}

    option_set = generate_options("big", library, random.Random(3))

    assert option_set.options.count("large") == 1
    assert sorted(option_set.options) == ["large", "small"]


def test_unknown_word_is_rejected(small_library):
    with pytest.raises(InvalidArgumentError):
        generate_options("unicorn", small_library, random.Random(0))


def test_correct_position_varies_with_shuffle(small_library):
    positions = {generate_options("sun", small_library, random.Random(seed)).correct_index for seed in range(50)}

    assert len(positions) > 1
