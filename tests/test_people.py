"""
Unit tests for analytics/people.py — pure functions only, no store required.
"""
from analytics.people import (
    add_child_person,
    add_person,
    apply_edit,
    delete_person,
    move_person,
    next_person_id,
    update_person,
)
from conftest import make_link, make_person
from models import ChildInput, Document, PersonEdit, PersonInput, Position


def make_doc(node_ids=(), links=()):
    return Document(
        nodes=[make_person(i) for i in node_ids],
        links=[make_link(s, t) for s, t in links],
    )


# ── next_person_id ─────────────────────────────────────────────────────────────

class TestNextPersonId:
    def test_empty(self):
        assert next_person_id([]) == "1"

    def test_count_plus_one_without_gaps(self):
        assert next_person_id([make_person("1"), make_person("2")]) == "3"

    def test_no_collision_after_delete(self):
        # "1" was deleted: count + 1 would give "3" again
        assert next_person_id([make_person("2"), make_person("3")]) == "4"

    def test_non_numeric_ids_ignored(self):
        assert next_person_id([make_person("abc"), make_person("2")]) == "3"

    def test_skips_taken_value(self):
        assert next_person_id([make_person("abc"), make_person("x")]) == "3"
        assert next_person_id([make_person("3"), make_person("x")]) == "4"


# ── add_person ─────────────────────────────────────────────────────────────────

class TestAddPerson:
    def test_appends_person(self):
        doc, person = add_person(make_doc(["1"]), PersonInput(name="Ada", status="CEO", team="Eng"))
        assert person.id == "2"
        assert person.notes == ""
        assert doc.nodes[-1] == person
        assert doc.links == []

    def test_connects_when_requested(self):
        doc, person = add_person(make_doc(["1"]), PersonInput(name="Ada"), connect_to="1")
        assert doc.links == [make_link("1", person.id)]

    def test_empty_name_is_noop(self):
        original = make_doc(["1"], [("1", "1")])
        doc, person = add_person(original, PersonInput(name=""), connect_to="1")
        assert person is None
        assert doc == original

    def test_input_document_untouched(self):
        original = make_doc(["1"])
        add_person(original, PersonInput(name="Ada"))
        assert [n.id for n in original.nodes] == ["1"]


# ── update_person ──────────────────────────────────────────────────────────────

class TestUpdatePerson:
    EDIT = PersonEdit(name="New", status="Interview", starred=True, team="Ops", notes="call back")

    def test_replaces_in_place(self):
        doc, person = update_person(make_doc(["1", "2", "3"]), "2", self.EDIT)
        assert [n.id for n in doc.nodes] == ["1", "2", "3"]
        assert doc.nodes[1] == person
        assert (person.name, person.status, person.starred, person.team, person.notes) == (
            "New", "Interview", True, "Ops", "call back",
        )

    def test_keeps_id_and_position(self):
        p = make_person("1", x=3, y=4)
        edited = apply_edit(p, self.EDIT)
        assert (edited.id, edited.x, edited.y) == ("1", 3, 4)
        assert p.name == "person-1"

    def test_no_selection_is_noop(self):
        original = make_doc(["1"])
        assert update_person(original, None, self.EDIT) == (original, None)
        assert update_person(original, "", self.EDIT) == (original, None)

    def test_unknown_id_is_noop(self):
        original = make_doc(["1"])
        assert update_person(original, "9", self.EDIT) == (original, None)


# ── add_child_person ───────────────────────────────────────────────────────────

class TestAddChildPerson:
    def test_child_has_no_team_and_is_linked(self):
        parent = make_person("1", team="Eng")
        doc, child = add_child_person(Document(nodes=[parent]), "1", ChildInput(name="Kid", starred=True))
        assert child.id == "2"
        assert child.team == ""
        assert child.starred is True
        assert doc.links == [make_link("1", "2")]

    def test_missing_parent_is_noop(self):
        original = make_doc(["1"])
        assert add_child_person(original, None, ChildInput(name="Kid")) == (original, None)

    def test_empty_child_name_is_noop(self):
        original = make_doc(["1"])
        assert add_child_person(original, "1", ChildInput(name="")) == (original, None)


# ── delete_person ──────────────────────────────────────────────────────────────

class TestDeletePerson:
    def test_cascade(self):
        doc, removed = delete_person(make_doc(["1", "2", "3"], [("1", "2"), ("2", "3")]), "2")
        assert removed.id == "2"
        assert [n.id for n in doc.nodes] == ["1", "3"]
        assert doc.links == []

    def test_other_records_untouched(self):
        original = make_doc(["1", "2", "3", "4"], [("1", "2"), ("3", "4"), ("4", "1"), ("2", "2")])
        doc, _ = delete_person(original, "2")
        assert doc.nodes == [original.nodes[0], original.nodes[2], original.nodes[3]]
        assert doc.links == [make_link("3", "4"), make_link("4", "1")]

    def test_no_selection_is_noop(self):
        original = make_doc(["1"])
        assert delete_person(original, None) == (original, None)


# ── move_person ────────────────────────────────────────────────────────────────

class TestMovePerson:
    def test_records_position(self):
        doc, moved = move_person(make_doc(["1", "2"]), "2", Position(x=10, y=-20))
        assert (moved.x, moved.y) == (10, -20)
        assert doc.nodes[1] == moved
        assert doc.nodes[0].x is None

    def test_team_node_ignored(self):
        original = make_doc(["1"])
        assert move_person(original, "team_Eng", Position(x=1, y=1)) == (original, None)

    def test_unknown_id_ignored(self):
        original = make_doc(["1"])
        assert move_person(original, "7", Position(x=1, y=1)) == (original, None)
