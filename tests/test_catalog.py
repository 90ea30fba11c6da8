"""
Tests for the template catalog.
"""

import dataclasses

import pytest

from tdl_editor.catalog import (
    CatalogEntry,
    find_entry,
    get_entry,
    list_entries,
    resolve_entry,
)
from tdl_editor.errors import CatalogError
from tdl_editor.generator import GenerationRequest, generate


class TestListEntries:
    """Tests for catalog enumeration."""

    def test_order(self):
        assert [entry.name for entry in list_entries()] == [
            "Custom Report",
            "Custom Menu",
            "Custom Field",
            "Custom Button",
            "Field Validation",
            "Collection Object",
        ]

    def test_names_unique(self):
        names = [entry.name for entry in list_entries()]
        assert len(names) == len(set(names))

    def test_every_entry_described(self):
        for entry in list_entries():
            assert entry.description
            assert entry.body.startswith("[")

    def test_bodies_have_no_trailing_newline(self):
        for entry in list_entries():
            assert not entry.body.endswith("\n")

    def test_custom_report_body(self):
        assert get_entry(0).body == (
            "[Report: My Custom Report]\n"
            "    Use : DSP Report\n"
            "    Form : My Custom Form\n"
            "\n"
            "[Form: My Custom Form]\n"
            "    Use : DSP Form\n"
            "    Parts : My Custom Part\n"
            "\n"
            "[Part: My Custom Part]\n"
            "    Line : My Title Line\n"
            "\n"
            "[Line: My Title Line]\n"
            "    Use : Title Line\n"
            '    Set : 1 : "My Custom Report"'
        )

    def test_field_validation_body(self):
        assert get_entry(4).body == (
            "[Field: Amount Field]\n"
            "    Use : Amount Field\n"
            "    Validate : ##Amount > 0\n"
            '    Error : "Amount must be greater than zero"'
        )

    def test_entries_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_entry(0).body = "changed"

    def test_bodies_unchanged_after_generation(self):
        before = [entry.body for entry in list_entries()]
        generate(GenerationRequest(kind="Report", name="Other", attributes="Form : X"))
        assert [entry.body for entry in list_entries()] == before


class TestLookup:
    """Tests for entry lookup."""

    def test_get_entry(self):
        assert get_entry(1).name == "Custom Menu"

    @pytest.mark.parametrize("index", [-1, 6, 100])
    def test_get_entry_out_of_range(self, index):
        with pytest.raises(CatalogError):
            get_entry(index)

    def test_find_entry_case_insensitive(self):
        assert find_entry("  custom button ").name == "Custom Button"

    def test_find_entry_unknown(self):
        with pytest.raises(CatalogError, match="Unknown template"):
            find_entry("Nope")

    def test_resolve_by_int(self):
        assert resolve_entry(5).name == "Collection Object"

    def test_resolve_by_position_string(self):
        assert resolve_entry("1").name == "Custom Report"

    def test_resolve_position_zero_rejected(self):
        with pytest.raises(CatalogError):
            resolve_entry("0")

    def test_resolve_by_name(self):
        entry = resolve_entry("Custom Field")
        assert isinstance(entry, CatalogEntry)
        assert "[#Object: Voucher]" in entry.body
