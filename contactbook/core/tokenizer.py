"""Splits raw argument text into a preamble and prefixed values.

    "Alice d/2026-10-19 1000 note/checkup"
        preamble -> "Alice"
        d/       -> "2026-10-19 1000"
        note/    -> "checkup"

A prefix only counts when it starts the text or follows whitespace, so a
value such as "a/b" inside a note is left alone. A known prefix after a
space always starts a new value, even inside a note: "note/see d/r" gives
note/ -> "see" and a second d/ value "r".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

PREFIX_DATE = "d/"
PREFIX_NOTE = "note/"
PREFIX_REMINDER = "r/"


@dataclass
class ArgumentMultimap:
    """Prefix -> values mapping produced by `tokenize`."""

    preamble: str = ""
    values: dict[str, list[str]] = field(default_factory=dict)

    def get_preamble(self) -> str:
        return self.preamble

    def get_value(self, prefix: str) -> str | None:
        """Return the last value given for `prefix`, or None if absent."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self.values.get(prefix, []))


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Tokenize `args` against the known `prefixes`."""
    if not prefixes:
        return ArgumentMultimap(preamble=args.strip())

    # Longest first so "note/" is never shadowed by a shorter prefix
    alternatives = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    pattern = re.compile(rf"(?:^|(?<=\s))({alternatives})")

    matches = list(pattern.finditer(args))
    if not matches:
        return ArgumentMultimap(preamble=args.strip())

    multimap = ArgumentMultimap(preamble=args[: matches[0].start()].strip())
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(args)
        value = args[match.end():end].strip()
        multimap.values.setdefault(match.group(1), []).append(value)
    return multimap
