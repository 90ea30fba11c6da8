"""
Tests for the document generator — header, Use line, attribute lines.
"""

import pytest

from tdl_editor.errors import MissingNameError, ValidationError
from tdl_editor.generator import (
    GenerationRequest,
    ObjectKind,
    generate,
    generate_document,
    is_known_kind,
    object_kinds,
)


class TestGenerate:
    """Tests for generate()."""

    def test_full_request(self, report_request):
        assert generate(report_request) == (
            "[Report: My Report]\n"
            "    Use : DSP Report\n"
            "    Form : F1\n"
            "    Title : T1\n"
        )

    def test_header_only(self):
        assert generate(GenerationRequest(kind="Field", name="X")) == "[Field: X]\n"

    def test_use_clause_without_attributes(self):
        request = GenerationRequest(kind="Form", name="My Form", use_clause="DSP Form")
        assert generate(request) == "[Form: My Form]\n    Use : DSP Form\n"

    def test_empty_use_clause_is_skipped(self):
        request = GenerationRequest(kind="Part", name="P", use_clause="")
        assert generate(request) == "[Part: P]\n"

    def test_first_line_is_header(self, report_request):
        first_line = generate(report_request).split("\n")[0]
        assert first_line == "[Report: My Report]"

    def test_attribute_lines_are_trimmed_and_blank_lines_dropped(self):
        request = GenerationRequest(
            kind="Line",
            name="Title",
            attributes="   Use : Title Line  \n\n \t \n\tSet : 1 : \"Hello\"\n",
        )
        assert generate(request) == (
            "[Line: Title]\n"
            "    Use : Title Line\n"
            '    Set : 1 : "Hello"\n'
        )

    def test_crlf_attribute_lines(self):
        request = GenerationRequest(kind="Field", name="F", attributes="A : 1\r\nB : 2\r\n")
        assert generate(request) == "[Field: F]\n    A : 1\n    B : 2\n"

    def test_whitespace_only_attributes(self):
        request = GenerationRequest(kind="Field", name="F", attributes=" \n  \n")
        assert generate(request) == "[Field: F]\n"

    def test_special_characters_are_not_escaped(self):
        request = GenerationRequest(
            kind="Field",
            name="Amount <Field> & Co",
            attributes='Validate : ##Amount > 0\nError : "Amount & more"',
        )
        document = generate(request)
        assert "[Field: Amount <Field> & Co]" in document
        assert "    Validate : ##Amount > 0\n" in document
        assert '    Error : "Amount & more"\n' in document

    def test_template_syntax_in_input_is_literal(self):
        request = GenerationRequest(kind="Field", name="{{ kind }}", attributes="{% raw %}")
        assert generate(request) == "[Field: {{ kind }}]\n    {% raw %}\n"

    def test_unknown_kind_is_accepted(self):
        request = GenerationRequest(kind="#Object", name="Voucher")
        assert generate(request) == "[#Object: Voucher]\n"

    def test_kind_and_name_are_not_trimmed(self):
        request = GenerationRequest(kind="Report", name=" Padded ")
        assert generate(request) == "[Report:  Padded ]\n"

    def test_deterministic(self, report_request):
        same = GenerationRequest(
            kind="Report",
            name="My Report",
            use_clause="DSP Report",
            attributes="Form : F1\n\nTitle : T1",
        )
        assert generate(report_request) == generate(same)

    def test_indent_is_four_spaces(self):
        request = GenerationRequest(kind="Field", name="F", use_clause="U", attributes="A")
        assert generate(request) == "[Field: F]\n    Use : U\n    A\n"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_missing_name(self, name):
        with pytest.raises(MissingNameError, match="name required"):
            generate(GenerationRequest(kind="Report", name=name))

    def test_missing_name_is_validation_error(self):
        with pytest.raises(ValidationError):
            generate(GenerationRequest(kind="Report", name=""))


class TestGenerateDocument:
    """Tests for the result-returning wrapper."""

    def test_success(self, report_request):
        result = generate_document(report_request)
        assert result.success
        assert result.error_message is None
        assert result.document == generate(report_request)
        assert result.metadata == {
            "kind": "Report",
            "name": "My Report",
            "known_kind": True,
            "line_count": 4,
        }

    def test_unknown_kind_metadata(self):
        result = generate_document(GenerationRequest(kind="System", name="Formula"))
        assert result.success
        assert result.metadata["known_kind"] is False

    def test_failure(self):
        result = generate_document(GenerationRequest(kind="Report", name="  "))
        assert not result.success
        assert result.document == ""
        assert result.error_message == "name required"
        assert isinstance(result.exception, MissingNameError)


class TestObjectKinds:
    """Tests for the documented kind list."""

    def test_order(self):
        assert object_kinds() == [
            "Report",
            "Form",
            "Part",
            "Line",
            "Field",
            "Collection",
            "Menu",
            "Button",
            "Function",
            "Object",
        ]

    def test_str(self):
        assert str(ObjectKind.COLLECTION) == "Collection"

    def test_is_known_kind(self):
        assert is_known_kind("Menu")
        assert not is_known_kind("menu")
        assert not is_known_kind("Anything")
