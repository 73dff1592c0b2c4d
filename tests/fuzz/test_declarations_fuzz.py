"""Hypothesis-based fuzzing of declaration extraction and document parsing.

Arbitrary input must fail only with the documented respack exceptions:
- parse_declarations() raises DeclarationSyntaxError or nothing
- ResourceIDSet.from_declarations() raises DeclarationValueError or nothing
- StringsData/PackedStringsData.from_dict() raise DocumentShapeError or nothing
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from respack.declarations import parse_declarations
from respack.diagnostics import DeclarationSyntaxError, DeclarationValueError, DocumentShapeError
from respack.model import PackedStringsData, StringsData
from respack.resid import ResourceIDSet

pytestmark = pytest.mark.fuzz

_ATOMS = st.sampled_from(
    ["0", "1", "-1", "'a'", "True", "None", "1.5", "A", "B", "f()", "x.y", "1j", "..."]
)
_OPS = st.sampled_from(["+", "-", "*", "//", "%", "/", "**"])
_ANNOTATIONS = st.sampled_from(
    ["", ": int", ": str", ": Final[int]", ": Final", ": float", ": 'int'", ": list[int]"]
)


@st.composite
def _expressions(draw: st.DrawFn) -> str:
    parts = [draw(_ATOMS)]
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        parts.extend([draw(_OPS), draw(_ATOMS)])
    return " ".join(parts)


@st.composite
def _declaration_sources(draw: st.DrawFn) -> str:
    lines = []
    for _ in range(draw(st.integers(min_value=0, max_value=8))):
        name = draw(st.sampled_from(["A", "B", "C", "VERSION_HASH", "_"]))
        lines.append(f"{name}{draw(_ANNOTATIONS)} = {draw(_expressions())}")
    return "\n".join(lines) + "\n"


_JSON = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=10), children, max_size=4),
    max_leaves=12,
)


class TestDeclarationFuzz:
    @given(source=st.text(max_size=200))
    @settings(max_examples=300)
    def test_arbitrary_text(self, source: str) -> None:
        """Arbitrary text either parses or raises DeclarationSyntaxError."""
        try:
            parse_declarations(source)
        except DeclarationSyntaxError:
            event("outcome=syntax_error")
        else:
            event("outcome=parsed")

    @given(source=_declaration_sources())
    @settings(max_examples=500)
    def test_constant_modules(self, source: str) -> None:
        """Well-formed modules only ever fail selection with DeclarationValueError."""
        declarations = parse_declarations(source)
        try:
            ids = ResourceIDSet.from_declarations(declarations)
        except DeclarationValueError:
            event("outcome=value_error")
            return
        event(f"identifiers={len(ids)}")
        assert all(isinstance(v, int) and v >= 0 for v in ids.names.values())
        assert isinstance(ids.version_hash, str)


class TestDocumentFuzz:
    @given(obj=_JSON)
    @settings(max_examples=300)
    def test_strings_document_shape(self, obj: object) -> None:
        try:
            data = StringsData.from_dict(obj)
        except DocumentShapeError:
            event("outcome=shape_error")
            return
        assert all(isinstance(v, str) for v in data.strings.values())

    @given(obj=_JSON)
    @settings(max_examples=300)
    def test_packed_table_shape(self, obj: object) -> None:
        try:
            table = PackedStringsData.from_dict(obj)
        except DocumentShapeError:
            event("outcome=shape_error")
            return
        assert all(isinstance(v, str) for v in table.strings)
