"""Smart title extraction for notes created without an explicit title.

Strategies are tried in order and the first one that yields a title wins:

1. sentence boundary: the earliest ``.``, ``!`` or ``?`` on the first line
   that is outside a quoted span and followed by whitespace, a quote or the
   end of the text. A single period is dropped from the title, ``!`` and
   ``?`` are kept.
2. line break: the first line, when a newline shows up in the scan prefix.
3. length fallback: content longer than ``truncate_length`` is cut at the
   last word boundary (or hard-cut) and suffixed with an ellipsis.
4. short content: returned as is.

Strategies 1 and 2 only read the first ``title_max_length`` codepoints, so
every result fits the title validator. The content itself is never changed.
"""
from __future__ import annotations

from typing import Optional

from smartnotes.validation.rules import DEFAULT_RULES, ValidationRules

QUOTE_CHARS = "\"'"
SENTENCE_ENDS = ".!?"


def _is_apostrophe(text: str, i: int) -> bool:
    # don't, it's, O'Brien
    return 0 < i < len(text) - 1 and text[i - 1].isalnum() and text[i + 1].isalnum()


def _sentence_title(text: str, rules: ValidationRules) -> Optional[str]:
    limit = min(len(text), rules.title_max_length)
    newline = text.find("\n", 0, limit)
    if newline != -1:
        limit = newline

    open_quote: Optional[str] = None
    i = 0
    while i < limit:
        ch = text[i]

        if ch in QUOTE_CHARS and not _is_apostrophe(text, i):
            if open_quote is None:
                open_quote = ch
            elif open_quote == ch:
                open_quote = None
            i += 1
            continue

        if open_quote is not None or ch not in SENTENCE_ENDS:
            i += 1
            continue

        # treat "?!" or "..." as one boundary
        end = i + 1
        while end < len(text) and text[end] in SENTENCE_ENDS:
            end += 1

        nxt = text[end] if end < len(text) else ""
        if nxt and not nxt.isspace() and nxt not in QUOTE_CHARS:
            i = end
            continue

        run = text[i:end]
        candidate = text[:i] if run == "." else text[:end]
        candidate = candidate.strip()
        if candidate and len(candidate) <= rules.title_max_length:
            return candidate
        i = end

    return None


def _first_line_title(text: str, rules: ValidationRules) -> Optional[str]:
    prefix = text[: rules.title_max_length]
    newline = prefix.find("\n")
    if newline == -1:
        return None
    first_line = prefix[:newline].strip()
    return first_line or None


def truncate_title(text: str, rules: ValidationRules = DEFAULT_RULES) -> str:
    """Shorten text to at most truncate_length codepoints, ellipsis included.

    Prefers cutting on the last whitespace that is not too close to the
    start; otherwise hard-cuts the text.
    """
    text = text.strip()
    if len(text) <= rules.truncate_length:
        return text

    cut = rules.truncate_length - len(rules.ellipsis)
    for i in range(cut, rules.min_break_index - 1, -1):
        if text[i].isspace():
            return text[:i].rstrip() + rules.ellipsis

    return text[:cut] + rules.ellipsis


def extract_title(content: str, rules: ValidationRules = DEFAULT_RULES) -> str:
    text = content.strip()
    if not text:
        return rules.untitled

    title = _sentence_title(text, rules)
    if title is None:
        title = _first_line_title(text, rules)
    if title is None:
        title = truncate_title(text, rules)
    return title
