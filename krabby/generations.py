"""
generations – Parse generation selectors such as ``"1-3"`` or ``"1,4,7"``.

Two grammars are accepted:
  - an inclusive range ``"a-b"``
  - a comma separated list ``"a,b,c"`` (a single number is a one-item list)

Every member must lie in 1..9 and the expanded set must not be empty, so a
reversed range like ``"5-2"`` is rejected instead of selecting nothing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator

from krabby.config import GENERATION_MAX, GENERATION_MIN
from krabby.errors import InvalidGenerationError

_NUMBER = re.compile(r"[0-9]+")


def _parse_number(token: str, raw: str) -> int:
    if not _NUMBER.fullmatch(token):
        raise InvalidGenerationError(raw)
    return int(token)


@dataclass(frozen=True)
class Generations:
    """Non-empty, validated set of generation numbers."""
    values: FrozenSet[int]
    raw: str = field(default="", compare=False)

    @classmethod
    def parse(cls, raw: str) -> "Generations":
        if "-" in raw:
            start, end = raw.split("-", 1)
            first = _parse_number(start, raw)
            last = _parse_number(end, raw)
            gens = set(range(first, last + 1))
        else:
            gens = {_parse_number(token, raw) for token in raw.split(",")}

        if not gens or any(not GENERATION_MIN <= g <= GENERATION_MAX for g in gens):
            raise InvalidGenerationError(raw)
        return cls(frozenset(gens), raw)

    @classmethod
    def all(cls) -> "Generations":
        return cls(frozenset(range(GENERATION_MIN, GENERATION_MAX + 1)))

    def __contains__(self, gen: object) -> bool:
        return gen in self.values

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return self.raw or ",".join(str(g) for g in self)


def parse_generations(raw: str) -> Generations:
    """Shorthand for :meth:`Generations.parse`."""
    return Generations.parse(raw)
