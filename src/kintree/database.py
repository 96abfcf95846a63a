"""SQLite database operations for family tree storage."""

import logging
from pathlib import Path
import sqlite3

from kintree.models import Gender, Person, Relationship, RelationshipType
from kintree.normalize import is_inferred

logger = logging.getLogger(__name__)


def create_database(db_path: Path) -> sqlite3.Connection:
    """Create SQLite database with person and relationship tables."""
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS person (
            id TEXT PRIMARY KEY,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL DEFAULT '',
            gender TEXT NOT NULL,
            birth_date TEXT,
            death_date TEXT,
            photo_url TEXT NOT NULL DEFAULT '',
            bio TEXT NOT NULL DEFAULT ''
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS relationship (
            id TEXT PRIMARY KEY,
            person1_id TEXT NOT NULL,
            person2_id TEXT NOT NULL,
            type TEXT NOT NULL,
            label TEXT,
            FOREIGN KEY (person1_id) REFERENCES person(id),
            FOREIGN KEY (person2_id) REFERENCES person(id)
        )
    """)

    conn.commit()
    return conn


def store_data(conn: sqlite3.Connection, people: list[Person], relationships: list[Relationship]):
    """
    Insert people and relationships into the database.

    Inferred relationships are skipped; they are rebuilt by normalization after
    every load.
    """
    cursor = conn.cursor()

    cursor.executemany(
        """
        INSERT OR REPLACE INTO person
        (id, first_name, last_name, gender, birth_date, death_date, photo_url, bio)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        [
            (
                p.id,
                p.first_name,
                p.last_name,
                p.gender.value,
                p.birth_date,
                p.death_date,
                p.photo_url,
                p.bio,
            )
            for p in people
        ],
    )

    durable = [r for r in relationships if not is_inferred(r)]
    if len(durable) != len(relationships):
        logger.debug("Not storing %d inferred relationships", len(relationships) - len(durable))

    cursor.executemany(
        """
        INSERT OR REPLACE INTO relationship (id, person1_id, person2_id, type, label)
        VALUES (?, ?, ?, ?, ?)
        """,
        [(r.id, r.person1_id, r.person2_id, r.type.value, r.label) for r in durable],
    )

    conn.commit()


def load_data(conn: sqlite3.Connection) -> tuple[list[Person], list[Relationship]]:
    """Read people and relationships back in insertion order."""
    cursor = conn.cursor()

    cursor.execute(
        "SELECT id, first_name, last_name, gender, birth_date, death_date, photo_url, bio "
        "FROM person ORDER BY rowid"
    )
    people = [
        Person(
            id=row[0],
            first_name=row[1],
            last_name=row[2],
            gender=Gender(row[3]),
            birth_date=row[4],
            death_date=row[5],
            photo_url=row[6],
            bio=row[7],
        )
        for row in cursor.fetchall()
    ]

    cursor.execute(
        "SELECT id, person1_id, person2_id, type, label FROM relationship ORDER BY rowid"
    )
    relationships = [
        Relationship(
            id=row[0],
            person1_id=row[1],
            person2_id=row[2],
            type=RelationshipType(row[3]),
            label=row[4],
        )
        for row in cursor.fetchall()
    ]

    return people, relationships
