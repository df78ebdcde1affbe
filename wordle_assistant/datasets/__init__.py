from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORDLIST, load_dictionary, read_wordlist, write_wordlist

__all__ = [
    "validate_wordlist", "pretty_summary",
    "DEFAULT_WORDLIST", "load_dictionary", "read_wordlist", "write_wordlist",
]
