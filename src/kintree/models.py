"""Data classes for family tree entities."""

from dataclasses import dataclass, field
from enum import Enum


INFERRED_ID_PREFIX = "r_inferred_"
INFERRED_LABEL = "Inferred Parent"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class RelationshipType(str, Enum):
    PARENT = "PARENT"  # person1 is parent of person2
    SPOUSE = "SPOUSE"


@dataclass
class Person:
    id: str
    first_name: str
    last_name: str = ""
    gender: Gender = Gender.OTHER
    birth_date: str | None = None
    death_date: str | None = None
    photo_url: str = ""
    bio: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p) or self.id


@dataclass
class Relationship:
    id: str
    person1_id: str
    person2_id: str
    type: RelationshipType
    label: str | None = None  # cosmetic only, never changes traversal


@dataclass
class RelatedPerson:
    person: Person
    relationship: Relationship


@dataclass
class ImmediateFamily:
    parents: list[RelatedPerson] = field(default_factory=list)
    children: list[RelatedPerson] = field(default_factory=list)
    spouses: list[RelatedPerson] = field(default_factory=list)
    siblings: list[Person] = field(default_factory=list)


@dataclass
class PathResult:
    path: list[str]  # person ids, start first
    description: str
    pattern: str = ""  # one of U/D/S per hop
