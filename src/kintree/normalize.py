"""Derive a complete relationship set by inferring parents through spouse links."""

import logging

from kintree.models import (
    INFERRED_ID_PREFIX,
    INFERRED_LABEL,
    Person,
    Relationship,
    RelationshipType,
)

logger = logging.getLogger(__name__)


def normalize_relationships(
    people: list[Person], relationships: list[Relationship]
) -> list[Relationship]:
    """
    Return the relationships plus any PARENT edges implied by spouse links.

    If ParentA is a recorded parent of Child and ParentA is married to ParentB,
    ParentB is added as a parent of Child. The input list is left untouched and
    the result is always a superset of it.

    Args:
        people: Known people; spouses missing from this list are never inferred.
        relationships: Raw relationships, possibly already normalized.

    Returns:
        A new list of relationships with inferred edges appended.
    """
    normalized = list(relationships)
    person_ids = {p.id for p in people}

    # Insertion-ordered so inferred ids are stable for a given input
    parents_by_child: dict[str, list[str]] = {}
    spouses_of: dict[str, list[str]] = {}

    for rel in relationships:
        if rel.type == RelationshipType.PARENT:
            parents = parents_by_child.setdefault(rel.person2_id, [])
            if rel.person1_id not in parents:
                parents.append(rel.person1_id)
        elif rel.type == RelationshipType.SPOUSE:
            for a, b in ((rel.person1_id, rel.person2_id), (rel.person2_id, rel.person1_id)):
                partners = spouses_of.setdefault(a, [])
                if b not in partners:
                    partners.append(b)

    inferred = 0
    for child_id, parent_ids in parents_by_child.items():
        # parent_ids grows while iterating, so spouses of inferred parents are visited too
        for parent_id in parent_ids:
            for spouse_id in spouses_of.get(parent_id, []):
                if spouse_id in parent_ids:
                    continue
                if spouse_id not in person_ids:
                    logger.debug(
                        "Skipping inference for child %s: spouse %s of %s is unknown",
                        child_id,
                        spouse_id,
                        parent_id,
                    )
                    continue
                normalized.append(
                    Relationship(
                        id=f"{INFERRED_ID_PREFIX}{parent_id}_{spouse_id}_{child_id}",
                        person1_id=spouse_id,
                        person2_id=child_id,
                        type=RelationshipType.PARENT,
                        label=INFERRED_LABEL,
                    )
                )
                parent_ids.append(spouse_id)
                inferred += 1

    logger.debug("Inferred %d parent relationships", inferred)
    return normalized


def is_inferred(relationship: Relationship) -> bool:
    """True for edges synthesized by normalize_relationships."""
    return relationship.id.startswith(INFERRED_ID_PREFIX)


def strip_inferred(relationships: list[Relationship]) -> list[Relationship]:
    """Drop inferred edges; they are a view-time derivation and never persisted."""
    return [r for r in relationships if not is_inferred(r)]
