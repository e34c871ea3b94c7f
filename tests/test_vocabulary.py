import random

import pytest

from worsd.models import EmptyVocabularyError
from worsd.services.target_selector import RandomTargetSelector
from worsd.services.vocabulary import Vocabulary


def test_from_file_splits_on_any_whitespace(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane slate\n\tTRACE\n\ncrane a toolong abc12 steer", encoding="utf-8")
    vocabulary = Vocabulary.from_file(path)
    assert vocabulary.all() == ("crane", "slate", "trace", "steer")
    assert vocabulary.contains("trace")
    assert not vocabulary.contains("toolong")


def test_from_file_respects_word_length(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat dog crane", encoding="utf-8")
    assert Vocabulary.from_file(path, word_length=3).all() == ("cat", "dog")


def test_missing_file_falls_back(tmp_path):
    vocabulary = Vocabulary.from_file(tmp_path / "missing.txt")
    assert vocabulary.all() == ("worsd",)


def test_empty_file_falls_back(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("a bb ccc\n", encoding="utf-8")
    assert Vocabulary.from_file(path).all() == ("worsd",)


def test_undecodable_file_falls_back(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"crane\nsl\xffte\n")
    assert Vocabulary.from_file(path).all() == ("worsd",)


def test_membership_operators(vocabulary):
    assert "crane" in vocabulary
    assert "zzzzz" not in vocabulary
    assert len(vocabulary) == 9


def test_selector_chooses_from_vocabulary(vocabulary):
    selector = RandomTargetSelector(random.Random(7))
    for _ in range(20):
        assert selector.choose(vocabulary) in vocabulary


def test_selector_fails_on_empty_vocabulary():
    with pytest.raises(EmptyVocabularyError):
        RandomTargetSelector().choose(Vocabulary([]))
