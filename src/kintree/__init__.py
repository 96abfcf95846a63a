"""Family tree normalization, immediate family lookups and kinship paths."""

from kintree.family import get_immediate_family
from kintree.graph import find_path
from kintree.kinship import Step, classify
from kintree.models import (
    Gender,
    ImmediateFamily,
    PathResult,
    Person,
    RelatedPerson,
    Relationship,
    RelationshipType,
)
from kintree.normalize import is_inferred, normalize_relationships, strip_inferred

__all__ = [
    "Gender",
    "ImmediateFamily",
    "PathResult",
    "Person",
    "RelatedPerson",
    "Relationship",
    "RelationshipType",
    "Step",
    "classify",
    "find_path",
    "get_immediate_family",
    "is_inferred",
    "normalize_relationships",
    "strip_inferred",
]
