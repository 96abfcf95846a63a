"""Kinship terms for a walk of parent/child/spouse steps."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from kintree.models import Gender


class Step(str, Enum):
    PARENT_UP = "U"  # child -> parent
    PARENT_DOWN = "D"  # parent -> child
    SPOUSE = "S"


class GenderedTerm(NamedTuple):
    male: str
    female: str
    neutral: str

    def for_gender(self, gender: Gender, greats: int = 0) -> str:
        if gender == Gender.MALE:
            term = self.male
        elif gender == Gender.FEMALE:
            term = self.female
        else:
            term = self.neutral
        return "Great-" * greats + term


SPOUSE = GenderedTerm("Husband", "Wife", "Spouse")
PARENT = GenderedTerm("Father", "Mother", "Parent")
GRANDPARENT = GenderedTerm("Grandfather", "Grandmother", "Grandparent")
CHILD = GenderedTerm("Son", "Daughter", "Child")
GRANDCHILD = GenderedTerm("Grandson", "Granddaughter", "Grandchild")
SIBLING = GenderedTerm("Brother", "Sister", "Sibling")
NIECE_NEPHEW = GenderedTerm("Nephew", "Niece", "Niece/Nephew")
AUNT_UNCLE = GenderedTerm("Uncle", "Aunt", "Aunt/Uncle")

PARENT_IN_LAW = GenderedTerm("Father-in-Law", "Mother-in-Law", "Parent-in-Law")
CHILD_IN_LAW = GenderedTerm("Son-in-Law", "Daughter-in-Law", "Child-in-Law")
SIBLING_IN_LAW = GenderedTerm("Brother-in-Law", "Sister-in-Law", "Sibling-in-Law")
AUNT_UNCLE_IN_LAW = GenderedTerm("Uncle-in-Law", "Aunt-in-Law", "Aunt/Uncle-in-Law")

STEP_RELATIONS: dict[tuple[Step, ...], GenderedTerm] = {
    (Step.PARENT_UP, Step.SPOUSE): GenderedTerm("Step-Father", "Step-Mother", "Step-Parent"),
    (Step.SPOUSE, Step.PARENT_DOWN): GenderedTerm("Step-Son", "Step-Daughter", "Step-Child"),
    (Step.PARENT_UP, Step.SPOUSE, Step.PARENT_DOWN): GenderedTerm(
        "Step-Brother", "Step-Sister", "Step-Sibling"
    ),
}

ORDINALS = {
    1: "First",
    2: "Second",
    3: "Third",
    4: "Fourth",
    5: "Fifth",
    6: "Sixth",
    7: "Seventh",
    8: "Eighth",
    9: "Ninth",
    10: "Tenth",
}


@dataclass(frozen=True)
class WalkShape:
    """
    A walk of the form S? U* D* S?, summarised by run lengths.

    `up` and `down` count the blood steps; the flags record a single spouse hop
    before or after them.
    """

    up: int
    down: int
    leading_spouse: bool = False
    trailing_spouse: bool = False

    @property
    def is_blood(self) -> bool:
        return not (self.leading_spouse or self.trailing_spouse)

    @classmethod
    def from_steps(cls, steps: list[Step]) -> "WalkShape | None":
        """Summarise `steps`, or return None if they don't fit S? U* D* S?."""
        body = list(steps)
        leading = bool(body) and body[0] == Step.SPOUSE
        if leading:
            body = body[1:]
        trailing = bool(body) and body[-1] == Step.SPOUSE
        if trailing:
            body = body[:-1]

        up = 0
        while up < len(body) and body[up] == Step.PARENT_UP:
            up += 1
        down = 0
        while up + down < len(body) and body[up + down] == Step.PARENT_DOWN:
            down += 1

        if up + down != len(body):
            return None
        return cls(up=up, down=down, leading_spouse=leading, trailing_spouse=trailing)


def ordinal(n: int) -> str:
    if n in ORDINALS:
        return ORDINALS[n]
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def cousin_term(degree: int, removed: int) -> str:
    """e.g. (1, 0) -> "First Cousin", (2, 3) -> "Second Cousin 3 Times Removed"."""
    term = f"{ordinal(degree)} Cousin"
    if removed == 1:
        return f"{term} Once Removed"
    if removed == 2:
        return f"{term} Twice Removed"
    if removed > 2:
        return f"{term} {removed} Times Removed"
    return term


def _blood_term(up: int, down: int, gender: Gender) -> str | None:
    if down == 0:
        if up == 1:
            return PARENT.for_gender(gender)
        if up >= 2:
            return GRANDPARENT.for_gender(gender, greats=up - 2)
        return None
    if up == 0:
        if down == 1:
            return CHILD.for_gender(gender)
        return GRANDCHILD.for_gender(gender, greats=down - 2)
    if up == 1 and down == 1:
        return SIBLING.for_gender(gender)
    # Nieces/nephews and aunts/uncles take at most one Great- prefix
    if up == 1:
        return NIECE_NEPHEW.for_gender(gender, greats=1 if down > 2 else 0)
    if down == 1:
        return AUNT_UNCLE.for_gender(gender, greats=1 if up > 2 else 0)
    return cousin_term(min(up, down) - 1, abs(up - down))


def _shape_term(shape: WalkShape, gender: Gender) -> str | None:
    if shape.is_blood:
        return _blood_term(shape.up, shape.down, gender)

    if shape.trailing_spouse and not shape.leading_spouse:
        # spouse of a blood relative
        if shape.down == 1:
            if shape.up == 0:
                return CHILD_IN_LAW.for_gender(gender)
            if shape.up == 1:
                return SIBLING_IN_LAW.for_gender(gender)
            return AUNT_UNCLE_IN_LAW.for_gender(gender)
        return None

    if shape.leading_spouse and not shape.trailing_spouse:
        # blood relative of a spouse
        if shape.up == 1 and shape.down == 0:
            return PARENT_IN_LAW.for_gender(gender)
        if shape.up == 1 and shape.down == 1:
            return SIBLING_IN_LAW.for_gender(gender)
    return None


def classify(steps: list[Step], gender: Gender = Gender.OTHER) -> str | None:
    """
    Name the relationship described by a walk, from the walk's start to its end.

    `gender` is that of the person at the end of the walk and picks between the
    gendered variants of a term. Returns None when no rule applies.
    """
    if not steps:
        return None
    if list(steps) == [Step.SPOUSE]:
        return SPOUSE.for_gender(gender)

    shape = WalkShape.from_steps(steps)
    if shape is not None:
        term = _shape_term(shape, gender)
        if term is not None:
            return term

    step_relation = STEP_RELATIONS.get(tuple(steps))
    if step_relation is not None:
        return step_relation.for_gender(gender)
    return None


def pattern_of(steps: list[Step]) -> str:
    return "".join(s.value for s in steps)
