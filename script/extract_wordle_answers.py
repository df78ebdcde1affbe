"""
Scrape past Wordle answers from wordlehints.co.uk into a real_wordles.csv list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates while preserving calendar order, and writes the
  comma-separated layout the assistant's loader reads.

Usage:
    python -m script.extract_wordle_answers --out real_wordles.csv
    # or alphabetically sorted:
    python -m script.extract_wordle_answers --sort --out real_wordles.csv
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordle_assistant.datasets import DEFAULT_WORDLIST, write_wordlist

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Build the assistant's word list from past Wordle answers")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=DEFAULT_WORDLIST)
    ap.add_argument("--per-line", type=int, default=10, help="words per CSV line")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    write_wordlist(answers, args.out, per_line=args.per_line)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
