import pytest

from kintree.models import Gender, RelationshipType
from kintree.parsing import load_gedcom, xref_to_id

GEDCOM = """\
0 HEAD
1 SOUR kintree-tests
1 GEDC
2 VERS 5.5.1
2 FORM LINEAGE-LINKED
1 CHAR UTF-8
0 @I1@ INDI
1 NAME John /Smith/
1 SEX M
1 BIRT
2 DATE 1 JAN 1900
1 FAMS @F1@
0 @I2@ INDI
1 NAME Mary /Jones/
1 SEX F
1 FAMS @F1@
0 @I3@ INDI
1 NAME Alex /Smith/
1 FAMC @F1@
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 CHIL @I3@
0 TRLR
"""


@pytest.fixture
def gedcom_file(tmp_path):
    path = tmp_path / "family.ged"
    path.write_text(GEDCOM, encoding="utf-8")
    return path


def test_xref_to_id():
    assert xref_to_id("@I_347421849@") == "I_347421849"
    assert xref_to_id("I674624289") == "I674624289"
    with pytest.raises(ValueError):
        xref_to_id("@@")


def test_load_people(gedcom_file):
    people, _ = load_gedcom(gedcom_file)

    by_id = {p.id: p for p in people}
    assert set(by_id) == {"I1", "I2", "I3"}
    assert (by_id["I1"].first_name, by_id["I1"].last_name) == ("John", "Smith")
    assert by_id["I1"].gender == Gender.MALE
    assert by_id["I2"].gender == Gender.FEMALE
    assert by_id["I3"].gender == Gender.OTHER
    assert by_id["I1"].birth_date is not None
    assert by_id["I2"].birth_date is None


def test_families_become_spouse_and_parent_edges(gedcom_file):
    _, relationships = load_gedcom(gedcom_file)

    edges = {(r.type, r.person1_id, r.person2_id) for r in relationships}
    assert edges == {
        (RelationshipType.SPOUSE, "I1", "I2"),
        (RelationshipType.PARENT, "I1", "I3"),
        (RelationshipType.PARENT, "I2", "I3"),
    }
    assert len({r.id for r in relationships}) == 3


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gedcom(tmp_path / "missing.ged")
