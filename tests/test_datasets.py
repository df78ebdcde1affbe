from pathlib import Path
from wordle_assistant.datasets import (
    load_dictionary, pretty_summary, read_wordlist, validate_wordlist, write_wordlist,
)


def test_read_wordlist_spans_lines(tmp_path: Path):
    p = tmp_path / "real_wordles.csv"
    p.write_text("cigar,rebut,sissy\nhumph\n\nawake,blush,\n", encoding="utf-8")
    assert read_wordlist(p) == ["cigar", "rebut", "sissy", "humph", "awake", "blush"]


def test_load_dictionary_normalizes_and_filters_length(tmp_path: Path):
    p = tmp_path / "words.csv"
    p.write_text("Crane, slate ,cranes\ncran,CRANE\n", encoding="utf-8")
    assert load_dictionary(p, 5) == {"crane", "slate"}
    assert load_dictionary(p, 6) == {"cranes"}


def test_load_dictionary_missing_file_is_not_fatal(tmp_path: Path, capsys):
    words = load_dictionary(tmp_path / "nope.csv", 5)
    assert words == set()
    assert "Could not read word list" in capsys.readouterr().err


def test_write_then_read(tmp_path: Path):
    words = ["crane", "slate", "trace"]
    out = write_wordlist(words, tmp_path / "out" / "list.csv", per_line=2)
    assert Path(out).read_text(encoding="utf-8") == "crane,slate\ntrace\n"


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.csv"
    p.write_text("crane,raise\nstare\n", encoding="utf-8")
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True and rep["count"] == 3 and rep["issues"] == []
    s = pretty_summary(rep)
    assert s.startswith("N=5 | words=3 (uniq=3, invalid=0") and s.endswith("| OK")


def test_validate_wordlist_flags_problems(tmp_path: Path):
    p = tmp_path / "words.csv"
    p.write_text("crane,CRANE,???,crane,cranes\n", encoding="utf-8")
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert rep["invalid_tokens"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "missing.csv"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "not found" in rep["issues"][0]
