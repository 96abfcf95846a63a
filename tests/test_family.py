from conftest import make_person, parent, spouse

from kintree.family import get_immediate_family
from kintree.models import Gender
from kintree.normalize import normalize_relationships


def ids(related):
    return [rp.person.id for rp in related]


def test_inferred_parent_listed_with_recorded_parent():
    people = [
        make_person("alice", Gender.FEMALE),
        make_person("bob", Gender.MALE),
        make_person("carol", Gender.FEMALE),
    ]
    relationships = normalize_relationships(
        people, [parent("alice", "carol"), spouse("bob", "alice")]
    )

    family = get_immediate_family("carol", people, relationships)

    assert sorted(ids(family.parents)) == ["alice", "bob"]
    labels = {rp.person.id: rp.relationship.label for rp in family.parents}
    assert labels == {"alice": None, "bob": "Inferred Parent"}
    assert family.children == []
    assert family.siblings == []


def test_spouses_found_in_either_direction(family_tree):
    people, relationships = family_tree
    assert ids(get_immediate_family("mom", people, relationships).spouses) == ["dad"]
    assert ids(get_immediate_family("dad", people, relationships).spouses) == ["mom"]


def test_siblings_share_a_parent(family_tree):
    people, relationships = family_tree
    relationships = normalize_relationships(people, relationships)

    family = get_immediate_family("me", people, relationships)

    assert [p.id for p in family.siblings] == ["sister"]
    assert sorted(ids(family.parents)) == ["dad", "mom"]


def test_no_parents_means_no_siblings():
    people = [make_person(pid) for pid in ("a", "b", "kid1", "kid2")]
    relationships = [spouse("a", "b"), parent("a", "kid1"), parent("a", "kid2")]

    family = get_immediate_family("b", people, relationships)

    assert family.siblings == []
    assert ids(family.spouses) == ["a"]


def test_dangling_references_are_filtered():
    people = [make_person("a"), make_person("b")]
    relationships = [parent("ghost", "a"), parent("a", "b"), spouse("a", "phantom")]

    family = get_immediate_family("a", people, relationships)

    assert family.parents == []
    assert ids(family.children) == ["b"]
    assert family.spouses == []


def test_duplicate_edges_listed_once():
    people = [make_person("a"), make_person("b"), make_person("c")]
    first = parent("a", "b")
    relationships = [first, parent("a", "b", label="Guardian"), parent("c", "b")]

    family = get_immediate_family("b", people, relationships)

    assert ids(family.parents) == ["a", "c"]
    assert family.parents[0].relationship is first


def test_parent_child_lookups_are_symmetric(family_tree):
    people, relationships = family_tree
    relationships = normalize_relationships(people, relationships)
    families = {p.id: get_immediate_family(p.id, people, relationships) for p in people}

    for pid, family in families.items():
        for child in ids(family.children):
            assert pid in ids(families[child].parents)
        for par in ids(family.parents):
            assert pid in ids(families[par].children)


def test_everyone_sharing_a_parent_is_a_sibling(family_tree):
    people, relationships = family_tree
    relationships = normalize_relationships(people, relationships)
    families = {p.id: get_immediate_family(p.id, people, relationships) for p in people}

    for x in families:
        for y in families:
            if x == y:
                continue
            if set(ids(families[x].parents)) & set(ids(families[y].parents)):
                assert y in [p.id for p in families[x].siblings]
