"""Tests for StringsData and PackedStringsData.

Covers JSON shape validation, wire field names and immutability.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from respack.diagnostics import DocumentShapeError
from respack.model import PackedStringsData, StringsData


class TestStringsData:
    """Authoring-format documents."""

    def test_from_dict(self) -> None:
        data = StringsData.from_dict({"lang": "en", "strings": {"Greeting": "Hello"}})
        assert data.lang == "en"
        assert dict(data.strings) == {"Greeting": "Hello"}

    def test_missing_fields_default_to_empty(self) -> None:
        data = StringsData.from_dict({})
        assert data.lang == ""
        assert dict(data.strings) == {}

    def test_null_fields_default_to_empty(self) -> None:
        data = StringsData.from_dict({"lang": None, "strings": None})
        assert data == StringsData()

    def test_unknown_fields_ignored(self) -> None:
        data = StringsData.from_dict({"lang": "et", "strings": {}, "comment": "draft"})
        assert data.lang == "et"

    @pytest.mark.parametrize(
        ("doc", "fragment"),
        [
            ([], "translation document must be a JSON object"),
            ({"lang": 1}, "field 'lang' must be a string"),
            ({"strings": ["Hello"]}, "field 'strings' must be a JSON object"),
            ({"strings": {"Greeting": 3}}, "translation for name 'Greeting' must be a string"),
        ],
    )
    def test_shape_errors(self, doc: object, fragment: str) -> None:
        with pytest.raises(DocumentShapeError, match=fragment):
            StringsData.from_dict(doc)

    def test_to_dict_uses_lowercase_fields(self) -> None:
        data = StringsData("en", {"A": "x"})
        assert data.to_dict() == {"lang": "en", "strings": {"A": "x"}}

    def test_strings_are_read_only(self) -> None:
        source = {"A": "x"}
        data = StringsData("en", source)
        source["B"] = "y"
        assert "B" not in data.strings
        with pytest.raises(TypeError):
            data.strings["C"] = "z"  # type: ignore[index]

    def test_frozen(self) -> None:
        data = StringsData("en")
        with pytest.raises(FrozenInstanceError):
            data.lang = "et"  # type: ignore[misc]


class TestPackedStringsData:
    """Generated packed tables."""

    def test_from_dict(self) -> None:
        table = PackedStringsData.from_dict(
            {"Lang": "en", "VersionHash": "abc", "Strings": ["x", "", "z"]}
        )
        assert table == PackedStringsData("en", "abc", ("x", "", "z"))
        assert len(table) == 3

    def test_null_strings_is_empty_table(self) -> None:
        table = PackedStringsData.from_dict({"Lang": "en", "VersionHash": "abc", "Strings": None})
        assert table.strings == ()

    def test_list_converted_to_tuple(self) -> None:
        table = PackedStringsData("en", "h", ["a"])  # type: ignore[arg-type]
        assert table.strings == ("a",)

    @pytest.mark.parametrize(
        ("doc", "fragment"),
        [
            ("text", "packed table must be a JSON object"),
            ({"VersionHash": 5}, "field 'VersionHash' must be a string"),
            ({"Strings": {"0": "x"}}, "field 'Strings' must be a JSON array"),
            ({"Strings": ["x", None]}, "packed string 1 must be a string"),
        ],
    )
    def test_shape_errors(self, doc: object, fragment: str) -> None:
        with pytest.raises(DocumentShapeError, match=fragment):
            PackedStringsData.from_dict(doc)

    def test_to_dict_uses_capitalized_fields(self) -> None:
        table = PackedStringsData("et", "h", ("a", ""))
        assert table.to_dict() == {"Lang": "et", "VersionHash": "h", "Strings": ["a", ""]}
