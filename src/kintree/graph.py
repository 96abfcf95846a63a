"""NetworkX graph building and relationship path search."""

import logging

import networkx as nx

from kintree.kinship import Step, classify, pattern_of
from kintree.models import Gender, PathResult, Person, Relationship, RelationshipType

logger = logging.getLogger(__name__)


def build_graph(relationships: list[Relationship]) -> nx.Graph:
    """
    Build an undirected graph with one edge per related pair of people.

    Every relationship is traversable in both directions regardless of type.
    When several relationships join the same pair, the first one in
    `relationships` is kept on the edge as `relationship`.
    """
    G = nx.Graph()
    for rel in relationships:
        if G.has_edge(rel.person1_id, rel.person2_id):
            continue
        G.add_edge(rel.person1_id, rel.person2_id, relationship=rel)
    return G


def walk_steps(G: nx.Graph, path: list[str]) -> list[Step]:
    """Translate consecutive people on `path` into parent/child/spouse steps."""
    steps: list[Step] = []
    for current_id, next_id in zip(path, path[1:]):
        data = G.get_edge_data(current_id, next_id)
        if data is None:
            continue
        rel: Relationship = data["relationship"]
        if rel.type == RelationshipType.SPOUSE:
            steps.append(Step.SPOUSE)
        elif rel.type == RelationshipType.PARENT:
            # person1 is the parent, so leaving person1 goes down a generation
            steps.append(Step.PARENT_DOWN if rel.person1_id == current_id else Step.PARENT_UP)
    return steps


def describe_path(G: nx.Graph, path: list[str], people: list[Person]) -> PathResult:
    """Classify a path of person ids into a kinship description."""
    if len(path) < 2:
        return PathResult(path=path, description="Self")

    steps = walk_steps(G, path)
    target = next((p for p in people if p.id == path[-1]), None)
    gender = target.gender if target is not None else Gender.OTHER

    description = classify(steps, gender)
    if description is None:
        description = f"{len(path) - 1} degrees of separation"
    return PathResult(path=path, description=description, pattern=pattern_of(steps))


def find_path(
    start_id: str, end_id: str, people: list[Person], relationships: list[Relationship]
) -> PathResult | None:
    """
    Find a shortest chain of relationships between two people and name it.

    Args:
        start_id: The person the description is relative to
        end_id: The person being described
        people: All people, used for the target's gender
        relationships: Normalized relationships

    Returns:
        A PathResult, or None when the two people are not connected.
    """
    if start_id == end_id:
        return PathResult(path=[start_id], description="Self")

    G = build_graph(relationships)
    try:
        path = nx.shortest_path(G, start_id, end_id)
    except (nx.NodeNotFound, nx.NetworkXNoPath):
        logger.debug("No relationship path between %s and %s", start_id, end_id)
        return None

    return describe_path(G, path, people)
