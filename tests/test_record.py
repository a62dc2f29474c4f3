"""Tests for DocumentationRecord and reduce()."""

import dataclasses

import pytest

from better_help.docs import DocumentationRecord, Section, reduce


class TestDocumentationRecord:
    def test_empty_record_has_no_sections(self):
        record = DocumentationRecord()
        assert record.is_empty()
        assert all(record.get(section) is None for section in Section)

    def test_empty_sequence_is_absent(self):
        record = DocumentationRecord(commands=[], notes=())
        assert record.commands is None
        assert record.notes is None
        assert record.is_empty()

    def test_lists_are_frozen_to_tuples(self):
        record = DocumentationRecord(commands=["hubot ping - pong"])
        assert record.commands == ("hubot ping - pong",)

    def test_record_is_immutable(self):
        record = DocumentationRecord(commands=("a",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.commands = ("b",)

    def test_from_sections(self):
        record = DocumentationRecord.from_sections(
            {Section.DESCRIPTION: ["Pings."], Section.AUTHOR: ["someone"]}
        )
        assert record.description == ("Pings.",)
        assert record.author == ("someone",)
        assert record.commands is None

    def test_first_description(self):
        assert DocumentationRecord().first_description() == ""
        assert DocumentationRecord(description=("one", "two")).first_description() == "one"

    def test_to_dict_skips_absent_sections(self):
        record = DocumentationRecord(description=("d",), urls=("http://example.com",))
        assert record.to_dict() == {"description": ["d"], "urls": ["http://example.com"]}


class TestReduce:
    def test_absent_operands(self):
        record = DocumentationRecord(commands=("a",))
        assert reduce(record, None) is record
        assert reduce(None, record) is record
        assert reduce(None, None) is None

    def test_union_preserves_order_and_drops_duplicates(self):
        first = DocumentationRecord(commands=("a", "b"))
        second = DocumentationRecord(commands=("b", "c"))
        assert reduce(first, second).commands == ("a", "b", "c")

    def test_duplicates_inside_second_operand_are_dropped(self):
        first = DocumentationRecord(commands=("a",))
        second = DocumentationRecord(commands=("c", "c", "a"))
        assert reduce(first, second).commands == ("a", "c")

    def test_every_section_is_merged(self):
        first = DocumentationRecord(description=("d1",), author=("x",))
        second = DocumentationRecord(description=("d2",), tags=("fun",), author=("x", "y"))
        merged = reduce(first, second)
        assert merged.description == ("d1", "d2")
        assert merged.author == ("x", "y")
        assert merged.tags == ("fun",)
        assert merged.commands is None

    def test_section_absent_on_one_side(self):
        first = DocumentationRecord(notes=("n",))
        second = DocumentationRecord(commands=("c",))
        merged = reduce(first, second)
        assert merged.notes == ("n",)
        assert merged.commands == ("c",)

    def test_duplicates_in_one_sided_section_are_dropped(self):
        first = DocumentationRecord(notes=("n", "n"), urls=("u",))
        second = DocumentationRecord(commands=("c", "d", "c"), urls=("u",))
        merged = reduce(first, second)
        assert merged.notes == ("n",)
        assert merged.commands == ("c", "d")
        assert merged.urls == ("u",)

    def test_operands_are_not_modified(self):
        first = DocumentationRecord(commands=("a",))
        second = DocumentationRecord(commands=("b",))
        reduce(first, second)
        assert first.commands == ("a",)
        assert second.commands == ("b",)

    def test_order_of_operands_gives_same_entries(self):
        first = DocumentationRecord(commands=("a", "b"), urls=("u",))
        second = DocumentationRecord(commands=("c", "a"))
        forward = reduce(first, second)
        backward = reduce(second, first)
        assert set(forward.commands) == set(backward.commands)
        assert forward.urls == backward.urls
