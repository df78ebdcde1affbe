from script.extract_wordle_answers import parse_answers, unique_preserve_order

HTML = """
<html><body>
<p>2024-01-01 (Mon) 926 CRANE</p>
<p>2024-01-02 (Tue) 927 SLATE</p>
<p>2024-01-03 (Wed) 928 CRANE</p>
<p>Not an answer row</p>
</body></html>
"""


def test_parse_answers_dedupes_in_calendar_order():
    assert parse_answers(HTML) == ["crane", "slate"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
