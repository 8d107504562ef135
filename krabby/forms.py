"""
forms – Canonical pokemon forms plus a catch-all for one-off variants.

A Form is a tagged value: ``kind`` names one of the canonical variants,
and ``kind == FormKind.OTHER`` carries the original token in ``name`` so
it can be echoed back unchanged (``Form.parse(t).token == t`` for every
token).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence


class FormKind(str, Enum):
    REGULAR = "regular"
    MEGA = "mega"
    MEGA_X = "mega-x"
    MEGA_Y = "mega-y"
    GMAX = "gmax"
    ALOLA = "alola"
    GALAR = "galar"
    HISUI = "hisui"
    PALDEA = "paldea"
    OTHER = "other"     # one-offs such as "primal"


_CANONICAL = {kind.value: kind for kind in FormKind if kind is not FormKind.OTHER}


@dataclass(frozen=True)
class Form:
    kind: FormKind
    name: str = ""  # payload, only meaningful for OTHER

    @classmethod
    def parse(cls, token: str) -> "Form":
        kind = _CANONICAL.get(token)
        if kind is None:
            return cls(FormKind.OTHER, token)
        return cls(kind)

    @classmethod
    def other(cls, token: str) -> "Form":
        return cls(FormKind.OTHER, token)

    @property
    def token(self) -> str:
        if self.kind is FormKind.OTHER:
            return self.name
        return self.kind.value

    @property
    def is_regular(self) -> bool:
        return self.kind is FormKind.REGULAR

    def matches_exclusion(self, excluded: "Form") -> bool:
        """
        True if *excluded* rules this form out.

        Canonical forms match by value.  Any two OTHER forms match each
        other whatever their payload, so excluding ``Form.other("")``
        removes every one-off form.  This is long-standing behaviour the
        ``--no-variant`` flag relies on.
        """
        if self.kind is FormKind.OTHER and excluded.kind is FormKind.OTHER:
            return True
        return self == excluded

    def __str__(self) -> str:
        return self.token


REGULAR = Form(FormKind.REGULAR)
MEGA = Form(FormKind.MEGA)
MEGA_X = Form(FormKind.MEGA_X)
MEGA_Y = Form(FormKind.MEGA_Y)
GMAX = Form(FormKind.GMAX)
ALOLA = Form(FormKind.ALOLA)
GALAR = Form(FormKind.GALAR)
HISUI = Form(FormKind.HISUI)
PALDEA = Form(FormKind.PALDEA)

MEGA_FORMS = (MEGA, MEGA_X, MEGA_Y)
GMAX_FORMS = (GMAX,)
REGIONAL_FORMS = (ALOLA, GALAR, HISUI, PALDEA)
ANY_OTHER_FORM = Form.other("")


def filter_forms(forms: Iterable[Form], exclude: Sequence[Form]) -> List[Form]:
    """Return *forms* in order, minus those matched by any excluded form."""
    return [
        form for form in forms
        if not any(form.matches_exclusion(ex) for ex in exclude)
    ]


def exclusion_groups(
    no_mega: bool = False,
    no_gmax: bool = False,
    no_regional: bool = False,
    no_variant: bool = False,
) -> List[Form]:
    """Build the exclusion list for the random command's ``--no-*`` flags."""
    exclude: List[Form] = []
    if no_mega or no_variant:
        exclude.extend(MEGA_FORMS)
    if no_gmax or no_variant:
        exclude.extend(GMAX_FORMS)
    if no_regional or no_variant:
        exclude.extend(REGIONAL_FORMS)
    if no_variant:
        exclude.append(ANY_OTHER_FORM)
    return exclude
