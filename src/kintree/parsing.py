"""GEDCOM import into people and relationships."""

import logging
from pathlib import Path

from ged4py import GedcomReader

from kintree.models import Gender, Person, Relationship, RelationshipType

logger = logging.getLogger(__name__)

SEX_MAP = {
    "M": Gender.MALE,
    "F": Gender.FEMALE,
}


def xref_to_id(xref_id: str) -> str:
    """Turn a GEDCOM xref like '@I_347421849@' into a person id 'I_347421849'."""
    person_id = xref_id.strip().strip("@")
    if not person_id:
        raise ValueError(f"Empty GEDCOM reference: {xref_id!r}")
    return person_id


def extract_name_parts(indi) -> tuple[str, str]:
    """Extract given name and surname from an individual record."""
    name_rec = indi.sub_tag("NAME")
    if name_rec is None or name_rec.value is None:
        return ("Unknown", "")

    # ged4py returns NAME as tuple: (given, surname, suffix)
    if isinstance(name_rec.value, tuple):
        given, surname, suffix = name_rec.value
        surname = " ".join(p for p in (surname, suffix) if p)
        return (given or "Unknown", surname)

    # Fallback: string format "Given /Surname/"
    givn = name_rec.sub_tag("GIVN")
    surn = name_rec.sub_tag("SURN")
    if givn or surn:
        return (givn.value if givn else "Unknown", surn.value if surn else "")
    full_name = str(name_rec.value).replace("/", " ").split()
    return (full_name[0] if full_name else "Unknown", " ".join(full_name[1:]))


def extract_event_date(indi, tag: str) -> str | None:
    """Return the DATE text of an event tag (BIRT, DEAT, ...)."""
    event = indi.sub_tag(tag)
    if event is None:
        return None
    date_rec = event.sub_tag("DATE")
    # ged4py may return DateValue objects
    if date_rec and date_rec.value:
        return str(date_rec.value)
    return None


def extract_gender(indi) -> Gender:
    sex_rec = indi.sub_tag("SEX")
    sex = str(sex_rec.value).strip().upper() if sex_rec and sex_rec.value else ""
    return SEX_MAP.get(sex, Gender.OTHER)


def read_people(reader: GedcomReader) -> list[Person]:
    people: list[Person] = []
    for rec in reader.records0("INDI"):
        if rec.xref_id is None:
            continue
        first_name, last_name = extract_name_parts(rec)
        people.append(
            Person(
                id=xref_to_id(rec.xref_id),
                first_name=first_name,
                last_name=last_name,
                gender=extract_gender(rec),
                birth_date=extract_event_date(rec, "BIRT"),
                death_date=extract_event_date(rec, "DEAT"),
            )
        )
    return people


def read_relationships(reader: GedcomReader) -> list[Relationship]:
    """
    Turn FAM records into relationships.

    Each couple gets a SPOUSE edge and each listed partner a PARENT edge to
    every child of the family.
    """
    relationships: list[Relationship] = []

    for rec in reader.records0("FAM"):
        if rec.xref_id is None:
            continue
        fam_id = xref_to_id(rec.xref_id)

        partner_ids = []
        for tag in ("HUSB", "WIFE"):
            partner = rec.sub_tag(tag)
            if partner is not None and partner.xref_id:
                partner_ids.append(xref_to_id(partner.xref_id))

        child_ids = [xref_to_id(c.xref_id) for c in rec.sub_tags("CHIL") if c.xref_id]

        if len(partner_ids) == 2:
            relationships.append(
                Relationship(
                    id=f"r_{fam_id}_spouse",
                    person1_id=partner_ids[0],
                    person2_id=partner_ids[1],
                    type=RelationshipType.SPOUSE,
                )
            )

        for child_id in child_ids:
            for parent_id in partner_ids:
                relationships.append(
                    Relationship(
                        id=f"r_{fam_id}_{parent_id}_{child_id}",
                        person1_id=parent_id,
                        person2_id=child_id,
                        type=RelationshipType.PARENT,
                    )
                )

    return relationships


def load_gedcom(filepath: Path) -> tuple[list[Person], list[Relationship]]:
    """Parse a GEDCOM file into people and recorded relationships."""
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"GEDCOM file not found: {filepath}")

    with GedcomReader(str(filepath)) as reader:
        people = read_people(reader)
        relationships = read_relationships(reader)

    logger.debug(
        "Loaded %d people and %d relationships from %s",
        len(people),
        len(relationships),
        filepath,
    )
    return people, relationships
