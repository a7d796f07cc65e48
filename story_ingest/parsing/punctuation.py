"""Punctuation spacing repair for reconstructed prose.

PDF text runs often glue sentences and quotes together ("end.Next",
'said"Hello"'). fix_punctuation_spacing inserts the missing spaces in one
pass. It only ever inserts a space between two non-space characters, and
every rule keys on such an adjacency, so running it twice changes nothing.
"""

import re

# Characters allowed directly after sentence punctuation
_TIGHT_FOLLOWERS = r".,!?;:\"')\]}”’…"
_AFTER_PUNCTUATION = re.compile(rf"[.,!?](?=[^\s{_TIGHT_FOLLOWERS}])")

_BEFORE_OPEN_PAREN = re.compile(r"(?<=\w)\(")
_AFTER_CLOSE_PAREN = re.compile(r"\)(?=\w)")

_BEFORE_OPEN_CURLY = re.compile(r"(?<=[\w.,!?;:)])“")
_AFTER_CLOSE_CURLY = re.compile(r"”(?=[\w(])")

_OPEN_QUOTE_PRECEDER = re.compile(r"[\w.,!?;:)]")
_CLOSE_QUOTE_FOLLOWER = re.compile(r"[\w(]")


def _space_after_punctuation(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        mark = match.group()
        pos = match.start()
        # 3.14, 1,000
        if mark in ".," and pos > 0 and text[pos - 1].isdigit() and text[pos + 1].isdigit():
            return mark
        return mark + " "

    return _AFTER_PUNCTUATION.sub(replace, text)


def _space_around_parentheses(text: str) -> str:
    text = _BEFORE_OPEN_PAREN.sub(" (", text)
    return _AFTER_CLOSE_PAREN.sub(") ", text)


def _space_around_curly_quotes(text: str) -> str:
    text = _BEFORE_OPEN_CURLY.sub(" “", text)
    return _AFTER_CLOSE_CURLY.sub("” ", text)


def _space_around_straight_quotes(line: str) -> str:
    """Pair straight quotes left to right and space their outer sides.

    An odd trailing quote has no known direction and is left alone.
    """
    positions = [i for i, ch in enumerate(line) if ch == '"']
    paired = len(positions) - len(positions) % 2
    if not paired:
        return line

    parts: list[str] = []
    start = 0
    for n, pos in enumerate(positions[:paired]):
        parts.append(line[start:pos])
        opening = n % 2 == 0
        if opening and pos > 0 and _OPEN_QUOTE_PRECEDER.match(line[pos - 1]):
            parts.append(" ")
        parts.append('"')
        if not opening and pos + 1 < len(line) and _CLOSE_QUOTE_FOLLOWER.match(line[pos + 1]):
            parts.append(" ")
        start = pos + 1
    parts.append(line[start:])
    return "".join(parts)


def fix_punctuation_spacing(text: str) -> str:
    """Insert missing spaces around punctuation, parentheses and quotes.

    - one space after . , ! ? when a non-space character follows, except
      before closing quotes/brackets, more punctuation, or inside numbers
    - a space before "(" and after ")" when they touch a word
    - a space before an opening quote and after a closing quote when they
      touch text outside the quotes; never inside the quotes

    Correctly spaced text is returned unchanged.

    Args:
        text: Reconstructed prose.

    Returns:
        Text with punctuation spacing repaired.
    """
    text = _space_after_punctuation(text)
    text = _space_around_parentheses(text)
    text = _space_around_curly_quotes(text)
    return "\n".join(_space_around_straight_quotes(line) for line in text.split("\n"))
