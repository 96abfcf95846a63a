"""
Command-line access to a family tree:

1) Load people and relationships from a GEDCOM file or a kintree SQLite database.
2) Normalize them, inferring parents through spouse links.
3) Store them, list a person's immediate family, or name how two people are related.
"""

import argparse
import logging
from pathlib import Path
import sqlite3
import sys

from kintree.database import create_database, load_data, store_data
from kintree.family import get_immediate_family
from kintree.graph import find_path
from kintree.models import Person, Relationship
from kintree.normalize import normalize_relationships
from kintree.parsing import load_gedcom

logger = logging.getLogger(__name__)

GEDCOM_SUFFIXES = {".ged", ".gedcom"}


def load_source(source: Path) -> tuple[list[Person], list[Relationship]]:
    """Load raw people and relationships from a GEDCOM file or SQLite database."""
    if source.suffix.lower() in GEDCOM_SUFFIXES:
        return load_gedcom(source)

    if not source.exists():
        raise FileNotFoundError(f"Database not found: {source}")
    conn = sqlite3.connect(source)
    try:
        return load_data(conn)
    finally:
        conn.close()


def _label(person: Person) -> str:
    return f"{person.full_name} ({person.id})"


def cmd_store(args, people: list[Person], relationships: list[Relationship]) -> int:
    db_path: Path = args.db

    # Delete existing database to ensure fresh start
    if db_path.exists():
        db_path.unlink()
        print(f"Deleted existing database: {db_path}")

    print(f"Storing data in SQLite: {db_path}")
    conn = create_database(db_path)
    try:
        store_data(conn, people, relationships)
    finally:
        conn.close()
    print("Done!")
    return 0


def cmd_family(args, people: list[Person], relationships: list[Relationship]) -> int:
    people_by_id = {p.id: p for p in people}
    person = people_by_id.get(args.person_id)
    if person is None:
        print(f"Unknown person: {args.person_id}", file=sys.stderr)
        return 1

    family = get_immediate_family(person.id, people, relationships)
    print(f"Immediate family of {_label(person)}:")

    for title, related in (
        ("Parents", family.parents),
        ("Children", family.children),
        ("Spouses", family.spouses),
    ):
        print(f"  {title}:")
        if not related:
            print("    (none)")
        for rp in related:
            label = f" [{rp.relationship.label}]" if rp.relationship.label else ""
            print(f"    - {_label(rp.person)}{label}")

    print("  Siblings:")
    if not family.siblings:
        print("    (none)")
    for sibling in family.siblings:
        print(f"    - {_label(sibling)}")
    return 0


def cmd_path(args, people: list[Person], relationships: list[Relationship]) -> int:
    people_by_id = {p.id: p for p in people}
    for pid in (args.start_id, args.end_id):
        if pid not in people_by_id:
            print(f"Unknown person: {pid}", file=sys.stderr)
            return 1

    start = people_by_id[args.start_id]
    end = people_by_id[args.end_id]
    result = find_path(start.id, end.id, people, relationships)
    if result is None:
        print(f"No relationship found between {_label(start)} and {_label(end)}")
        return 0

    print(" -> ".join(people_by_id[pid].full_name for pid in result.path))
    print(f"{end.full_name} is {start.full_name}'s {result.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kintree",
        description="Explore family relationships in a GEDCOM file or kintree database.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Save a GEDCOM file as a database
  kintree store family.ged family_tree.db

  # Immediate family of a person
  kintree family family_tree.db I12

  # How two people are related
  kintree path family.ged I12 I40
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_store = sub.add_parser("store", help="Store a tree in a SQLite database")
    p_store.add_argument("source", type=Path, help="GEDCOM file or database")
    p_store.add_argument("db", type=Path, help="Output SQLite database path")
    p_store.set_defaults(func=cmd_store)

    p_family = sub.add_parser("family", help="List a person's immediate family")
    p_family.add_argument("source", type=Path, help="GEDCOM file or database")
    p_family.add_argument("person_id", help="Person ID")
    p_family.set_defaults(func=cmd_family)

    p_path = sub.add_parser("path", help="Describe how two people are related")
    p_path.add_argument("source", type=Path, help="GEDCOM file or database")
    p_path.add_argument("start_id", help="Person the description is relative to")
    p_path.add_argument("end_id", help="Person being described")
    p_path.set_defaults(func=cmd_path)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        people, relationships = load_source(args.source)
    except (OSError, ValueError, sqlite3.Error) as e:
        print(f"Error loading {args.source}: {e}", file=sys.stderr)
        return 1
    logger.info("Loaded %d people and %d relationships", len(people), len(relationships))

    if args.command != "store":
        relationships = normalize_relationships(people, relationships)
    return args.func(args, people, relationships)


if __name__ == "__main__":
    sys.exit(main())
