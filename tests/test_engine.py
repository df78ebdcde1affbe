from itertools import product

import pytest
from wordle_assistant.engine import score, is_consistent, filter_candidates, validate_feedback


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "egyyy"),
    ("level", "level", "ggggg"),
    ("lemon", "level", "ggeee"),
    ("cools", "scoop", "yygey"),
    ("raise", "crane", "yyeeg"),
    ("stare", "crane", "eegyg"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected


@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "egggyy"),
    ("planet", "palate", "gyyeyy"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected


@pytest.mark.parametrize("rule", ["counts", "containment"])
def test_all_hits_keeps_only_the_guess(rule):
    words = ["crane", "crank", "trace", "caner"]
    assert filter_candidates(words, [("crane", "ggggg")], 5, rule) == ["crane"]
    assert filter_candidates(["crank", "trace"], [("crane", "ggggg")], 5, rule) == []


@pytest.mark.parametrize("rule", ["counts", "containment"])
def test_all_misses(rule):
    # disjoint from "crane" -> kept; any shared letter -> dropped
    assert is_consistent("pilot", "crane", "eeeee", rule) is True
    assert is_consistent("moist", "crane", "eeeee", rule) is True
    assert is_consistent("pilar", "crane", "eeeee", rule) is False
    assert is_consistent("bingo", "crane", "eeeee", rule) is False


@pytest.mark.parametrize("rule", ["counts", "containment"])
def test_present_needs_letter_elsewhere(rule):
    # 'r' present (not at index 1), everything else missing
    assert is_consistent("droit", "crane", "eyeee", rule) is False  # 'r' in the same slot
    assert is_consistent("robot", "crane", "eyeee", rule) is True
    assert is_consistent("pilot", "crane", "eyeee", rule) is False  # no 'r' at all


def test_repeated_letter_hit_and_miss():
    # "sassy" vs "stomp": first 's' green, the other two grey
    fb = score("sassy", "stomp")
    assert fb == "geeee"
    assert is_consistent("stomp", "sassy", fb, "counts") is True
    assert is_consistent("stoss", "sassy", fb, "counts") is False
    # the containment check rejects the real answer here
    assert is_consistent("stomp", "sassy", fb, "containment") is False


def test_repeated_letter_minimum_count():
    # both reported e's are yellow and the third is grey -> exactly two e's
    fb = score("geese", "elder")
    assert is_consistent("elder", "geese", fb) is True
    assert is_consistent("older", "geese", fb) is False


@pytest.mark.parametrize("answer", ["level", "scoop", "crane", "sassy", "eerie"])
def test_counts_rule_keeps_the_true_answer(answer):
    for guess in ["belle", "cools", "geese", "sassy", "radio"]:
        assert is_consistent(answer, guess, score(guess, answer)) is True


def test_filter_is_idempotent():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", "yyeeg")]
    once = filter_candidates(words, history, N=5)
    assert "crane" in once and "stare" not in once and "scoop" not in once
    assert filter_candidates(once, history, N=5) == once


def test_filter_skips_wrong_length():
    assert filter_candidates(["crane", "cranes", "cran"], [], N=5) == ["crane"]


def test_unknown_rule_rejected():
    with pytest.raises(ValueError):
        is_consistent("crane", "crane", "ggggg", rule="entropy")


def test_validate_feedback():
    assert validate_feedback("geeye", 5) == (True, None)
    ok, msg = validate_feedback("gee", 5)
    assert ok is False and "5 chars" in msg
    ok, msg = validate_feedback("gxeye", 5)
    assert ok is False and "g = green" in msg
    assert validate_feedback("GEEYE", 5)[0] is False


def test_counts_rule_matches_scorer_exhaustively():
    # every 4-letter word over {a, b, c}: a candidate fits exactly when it
    # would have produced the same feedback as the answer
    words = ["".join(p) for p in product("abc", repeat=4)]
    table = {(g, c): score(g, c) for g in words for c in words}
    for g in words:
        for a in words:
            fb = table[(g, a)]
            for c in words:
                assert is_consistent(c, g, fb) == (table[(g, c)] == fb), (g, a, c)
