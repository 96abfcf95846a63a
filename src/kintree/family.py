"""Immediate family lookups over a normalized relationship set."""

from kintree.models import (
    ImmediateFamily,
    Person,
    RelatedPerson,
    Relationship,
    RelationshipType,
)


def _related(
    people_by_id: dict[str, Person], pairs: list[tuple[str, Relationship]]
) -> list[RelatedPerson]:
    """Resolve (person_id, relationship) pairs, dropping dangling ids and repeats."""
    out: list[RelatedPerson] = []
    seen: set[str] = set()
    for pid, rel in pairs:
        person = people_by_id.get(pid)
        if person is None or pid in seen:
            continue
        seen.add(pid)
        out.append(RelatedPerson(person=person, relationship=rel))
    return out


def get_immediate_family(
    person_id: str, people: list[Person], relationships: list[Relationship]
) -> ImmediateFamily:
    """
    Collect parents, children, spouses and siblings of a person.

    Parents, children and spouses are paired with the relationship that links
    them. Siblings are everyone else who has a PARENT edge from one of this
    person's parents, returned in the order of `people`.
    """
    people_by_id = {p.id: p for p in people}

    parent_pairs = []
    child_pairs = []
    spouse_pairs = []
    for r in relationships:
        if r.type == RelationshipType.PARENT:
            if r.person2_id == person_id:
                parent_pairs.append((r.person1_id, r))
            if r.person1_id == person_id:
                child_pairs.append((r.person2_id, r))
        elif r.type == RelationshipType.SPOUSE:
            if r.person1_id == person_id:
                spouse_pairs.append((r.person2_id, r))
            elif r.person2_id == person_id:
                spouse_pairs.append((r.person1_id, r))

    family = ImmediateFamily(
        parents=_related(people_by_id, parent_pairs),
        children=_related(people_by_id, child_pairs),
        spouses=_related(people_by_id, spouse_pairs),
    )

    if family.parents:
        parent_ids = {rp.person.id for rp in family.parents}
        sibling_ids = {
            r.person2_id
            for r in relationships
            if r.type == RelationshipType.PARENT
            and r.person1_id in parent_ids
            and r.person2_id != person_id
        }
        family.siblings = [p for p in people if p.id in sibling_ids]

    return family
