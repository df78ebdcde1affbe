import pytest
from wordle_assistant.solvers import (
    NoCandidatesAvailable, create_solver, distinct_letter_score, get_solver_ids,
)


@pytest.mark.parametrize("word,expected", [
    ("radio", 5), ("mamma", 2), ("aabbc", 3), ("arose", 5), ("spoon", 4),
])
def test_distinct_letter_score(word, expected):
    assert distinct_letter_score(word) == expected


def test_registry_lists_solvers():
    assert get_solver_ids() == ["distinct_letters", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("entropy")


def test_picks_highest_distinct_count():
    solver = create_solver("distinct_letters")
    assert solver.select({"mamma", "spoon", "arose"}) == "arose"
    assert solver.select(["mamma", "aabbc"]) == "aabbc"


def test_ties_go_to_lexicographically_smallest():
    solver = create_solver("distinct_letters")
    words = ["trace", "crane", "react", "actor"]
    assert solver.select(words) == "actor"
    assert solver.select(list(reversed(words))) == "actor"
    assert solver.select(set(words)) == "actor"


def test_selection_is_repeatable():
    solver = create_solver("distinct_letters")
    words = {"spoon", "sweet", "slate", "stale", "steal"}
    picks = {solver.select(words) for _ in range(5)}
    assert picks == {"slate"}


def test_single_candidate_is_returned():
    assert create_solver("distinct_letters").select({"mamma"}) == "mamma"


@pytest.mark.parametrize("solver_id", ["distinct_letters", "random_consistent"])
def test_empty_candidates_raise(solver_id):
    solver = create_solver(solver_id)
    with pytest.raises(NoCandidatesAvailable):
        solver.select(set())
    with pytest.raises(NoCandidatesAvailable):
        solver.next_guess({"candidates": set()})


def test_random_consistent_is_seeded():
    words = {"crane", "trace", "react", "actor", "slate"}
    a = create_solver("random_consistent")
    b = create_solver("random_consistent")
    a.reset(seed=7)
    b.reset(seed=7)
    picks_a = [a.select(words) for _ in range(4)]
    picks_b = [b.select(words) for _ in range(4)]
    assert picks_a == picks_b
    assert set(picks_a) <= words
