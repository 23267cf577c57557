from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

import autocorrect.engine as engine_mod
from autocorrect.engine import SuggestionEngine
from autocorrect.exceptions import ConfigurationError
from autocorrect.models import Outcome
from autocorrect.typo import levenshtein

DICTIONARY = [
    "about", "bat", "bear", "car", "cart", "cat", "cats", "coat", "cot", "cow",
    "dog", "door", "kitten", "mitten", "sitting", "the", "their", "there", "they",
]


def _exhaustive(words, threshold, typed):
    scored = sorted((levenshtein(typed, w), w) for w in words)
    return [w for d, w in scored if 0 < d <= threshold]


def test_ranks_by_distance_then_alphabetically(animal_engine):
    result = animal_engine.suggest("cwt")
    assert result.outcome is Outcome.SUGGESTIONS
    # cat and cot are one edit away, cow two, dog three
    assert result.as_list() == ["cat", "cot", "cow"]


def test_distance_groups_come_before_alphabetical_order():
    engine = SuggestionEngine(["aaa", "zz", "abc"], threshold=2)
    # "zz" is one deletion from "zzz"; "aaa" and "abc" are three edits from it
    assert engine.suggest("zzz").as_list() == ["zz"]
    assert engine.suggest("abd").as_list() == ["abc", "aaa"]


def test_exact_match_returns_no_words(animal_engine):
    result = animal_engine.suggest("cat")
    assert result.is_exact_match
    assert result.words == ()


def test_no_match_is_distinct_from_exact_match():
    engine = SuggestionEngine(["zzz"], threshold=1)
    result = engine.suggest("abc")
    assert result.is_no_match
    assert not result.is_exact_match
    assert result.words == ()


def test_word_at_length_band_edge_is_suggested():
    # "cats" is one insertion away from "cat" and one character longer
    engine = SuggestionEngine(["cats", "dog"], threshold=1)
    assert engine.suggest("cat").as_list() == ["cats"]
    assert engine.suggest("catsup").is_no_match


def test_empty_query_is_not_an_error():
    engine = SuggestionEngine(["a", "ab", "b"], threshold=1)
    assert engine.suggest("").as_list() == ["a", "b"]


def test_lookup_is_case_sensitive():
    engine = SuggestionEngine(["Cat"], threshold=1)
    assert engine.suggest("cat").as_list() == ["Cat"]
    assert "Cat" in engine
    assert "cat" not in engine


@pytest.mark.parametrize("typed", ["cat", "cwt", "kiten", "thier", "dor", "x", "", "sittin", "abut"])
@pytest.mark.parametrize("threshold", [1, 2, 3])
def test_matches_exhaustive_comparison(typed, threshold):
    engine = SuggestionEngine(DICTIONARY, threshold)
    result = engine.suggest(typed)
    expected = _exhaustive(DICTIONARY, threshold, typed)
    if typed in DICTIONARY:
        assert result.is_exact_match
    elif not expected:
        assert result.is_no_match
    else:
        assert result.as_list() == expected


def test_every_suggestion_is_within_threshold():
    engine = SuggestionEngine(DICTIONARY, threshold=2)
    for typed in ("thay", "kiten", "coww"):
        words = engine.suggest(typed).words
        assert typed not in words
        assert all(0 < levenshtein(typed, w) <= 2 for w in words)
        within = [w for w in DICTIONARY if levenshtein(typed, w) <= 2]
        assert len(words) <= len(within)


def test_candidates_group_by_length_and_prune():
    engine = SuggestionEngine(["b", "abcd", "abc", "ab", "a", "ba"], threshold=1)
    assert engine.candidates("ab") == ["b", "a", "ab", "ba", "abc"]


def test_suggest_scores_exactly_the_candidates(monkeypatch):
    engine = SuggestionEngine(DICTIONARY, threshold=1)
    scored = []

    def _recording_levenshtein(a, b):
        scored.append(b)
        return levenshtein(a, b)

    monkeypatch.setattr(engine_mod, "levenshtein", _recording_levenshtein)

    engine.suggest("cst")

    assert scored == engine.candidates("cst")
    assert "kitten" not in scored


@pytest.mark.parametrize("threshold", [0, -1, "2", 1.5, True, None])
def test_rejects_unusable_threshold(threshold):
    with pytest.raises(ConfigurationError):
        SuggestionEngine(["cat"], threshold)


def test_dictionary_is_copied_at_construction():
    words = ["cat", "cot"]
    engine = SuggestionEngine(words, threshold=1)
    words.append("cow")
    assert len(engine) == 2
    assert engine.words == ("cat", "cot")
    assert engine.threshold == 1


def test_accepts_any_iterable_of_words():
    engine = SuggestionEngine(iter(["cat", "cot"]), threshold=1)
    assert engine.suggest("cut").as_list() == ["cat", "cot"]


def test_concurrent_queries_agree_with_sequential():
    engine = SuggestionEngine(DICTIONARY, threshold=2)
    queries = ["cwt", "thier", "kiten", "dor", "zzzz"] * 20
    sequential = [engine.suggest(q) for q in queries]
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(engine.suggest, queries))
    assert parallel == sequential
