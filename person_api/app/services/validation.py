"""
Name validation shared by person creation and replacement.

A valid name starts with one or more letters.  After that it may
contain further letters and separator pairs: one of ``'``, ``,``,
``.``, space or ``-`` followed by a letter or a space.  This accepts
"Margaret Thatcher", "J.K. Rowling" or "Mary-Jane O'Neil" and rejects
digits, most punctuation, a leading separator and a dangling
separator at the end ("Lee.").

The pattern is written with disjoint alternatives so matching is
linear in the length of the input.
"""

import re

NAME_PATTERN = re.compile(r"[a-zA-Z]+(?:[',. -][a-zA-Z ]|[a-zA-Z])*")


def is_valid_name(name: str) -> bool:
    """Return ``True`` if ``name`` is an acceptable person name."""
    if not isinstance(name, str):
        return False
    return NAME_PATTERN.fullmatch(name) is not None
