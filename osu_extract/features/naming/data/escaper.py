import os
from typing import Optional
from ..domain.interfaces import IFilenameSanitizer

def default_escape_char() -> str:
    """Backslash, unless it is a path separator on this platform (Windows)."""
    if "\\" in (os.sep, os.altsep):
        return "^"
    return "\\"


class DefaultEscaper(IFilenameSanitizer):
    """
    Character-wise escaping in the style of a classic "escape default":

        tab, CR, LF, '   ->  \\t \\r \\n \\'
        the escape char  ->  doubled
        printable ASCII  ->  unchanged
        anything else    ->  \\u{hex}

    Path separators and characters Windows refuses in filenames are treated
    as "anything else", so they never reach the filesystem raw.
    """

    SIMPLE_ESCAPES = {"\t": "t", "\r": "r", "\n": "n", "'": "'"}

    # Printable, but unsafe in a path component on at least one platform
    RESERVED = frozenset('/\\<>:"|?*')

    def __init__(self, escape_char: Optional[str] = None):
        self.escape_char = escape_char or default_escape_char()
        if len(self.escape_char) != 1 or self.escape_char in ("/", os.sep, os.altsep):
            raise ValueError(f"Invalid escape character: {self.escape_char!r}")
        self._reverse = {v: k for k, v in self.SIMPLE_ESCAPES.items()}

    def escape(self, text: str) -> str:
        out = []
        for c in text:
            if c == self.escape_char:
                out.append(c + c)
            elif c in self.SIMPLE_ESCAPES:
                out.append(self.escape_char + self.SIMPLE_ESCAPES[c])
            elif c in self.RESERVED or not (0x20 <= ord(c) <= 0x7E):
                out.append(f"{self.escape_char}u{{{ord(c):x}}}")
            else:
                out.append(c)
        return "".join(out)

    def unescape(self, text: str) -> str:
        out = []
        i = 0
        n = len(text)
        while i < n:
            c = text[i]
            if c != self.escape_char or i + 1 >= n:
                out.append(c)
                i += 1
                continue

            nxt = text[i + 1]
            if nxt == self.escape_char:
                out.append(nxt)
                i += 2
            elif nxt in self._reverse:
                out.append(self._reverse[nxt])
                i += 2
            elif nxt == "u" and text.startswith("{", i + 2) and "}" in text[i + 3:]:
                end = text.index("}", i + 3)
                try:
                    out.append(chr(int(text[i + 3:end], 16)))
                    i = end + 1
                except (ValueError, OverflowError):
                    # Not a valid code point, keep it literally
                    out.append(c)
                    i += 1
            else:
                out.append(c)
                i += 1
        return "".join(out)
