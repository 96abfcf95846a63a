import pytest

from kintree.models import Gender, Person, Relationship, RelationshipType


def make_person(pid: str, gender: Gender = Gender.OTHER) -> Person:
    return Person(id=pid, first_name=pid.capitalize(), gender=gender)


def parent(parent_id: str, child_id: str, label: str | None = None) -> Relationship:
    return Relationship(
        id=f"r_{parent_id}_{child_id}",
        person1_id=parent_id,
        person2_id=child_id,
        type=RelationshipType.PARENT,
        label=label,
    )


def spouse(a: str, b: str) -> Relationship:
    return Relationship(
        id=f"r_{a}_{b}_sp", person1_id=a, person2_id=b, type=RelationshipType.SPOUSE
    )


@pytest.fixture
def family_tree() -> tuple[list[Person], list[Relationship]]:
    """Three generations with one recorded parent per child and a stranger."""
    people = [
        make_person("grandpa", Gender.MALE),
        make_person("grandma", Gender.FEMALE),
        make_person("dad", Gender.MALE),
        make_person("mom", Gender.FEMALE),
        make_person("uncle", Gender.MALE),
        make_person("me", Gender.MALE),
        make_person("sister", Gender.FEMALE),
        make_person("cousin", Gender.FEMALE),
        make_person("stranger"),
    ]
    relationships = [
        spouse("grandpa", "grandma"),
        parent("grandma", "dad"),
        parent("grandma", "uncle"),
        spouse("dad", "mom"),
        parent("dad", "me"),
        parent("dad", "sister"),
        parent("uncle", "cousin"),
    ]
    return people, relationships
