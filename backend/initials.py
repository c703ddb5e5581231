# initials.py
import re

# Unicode White_Space characters. str.split() would also break on the U+001C-U+001F separators.
WHITESPACE_RE = re.compile(
    r"[\u0009-\u000d\u0020\u0085\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def split_words(name):
    return [word for word in WHITESPACE_RE.split(name) if word]


def extract_initials(name):
    """
    Returns the uppercase first character of every whitespace-delimited word in name.
    Empty or blank names give an empty string.
    """
    initials = []
    for word in split_words(name):
        first = word[0]
        upper = first.upper()
        # Keep one character per word even when casing expands it (e.g. "ß" -> "SS").
        initials.append(upper if len(upper) == 1 else first)
    return "".join(initials)


def spread_initials(initials):
    """
    Turns an explicit initials string like "TZ" into a name ("T Z") that extract_initials maps back.
    """
    return " ".join(ch for ch in initials if not WHITESPACE_RE.fullmatch(ch))
