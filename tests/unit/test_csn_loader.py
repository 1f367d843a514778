"""Tests for the CSN text → Definitions pipeline."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from csnql import load_definitions, load_definitions_file
from csnql.core.errors import (
    DeserializationError,
    JsonSyntaxError,
    StructuralError,
    TypeTagError,
)
from csnql.core.ir import Definitions, Entity, IntegerKind, Service, StringKind, UUIDKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_NO_ELEMENTS_CSN = textwrap.dedent("""\
    {"definitions": {
        "TestService": {
          "@source": "srv/service.cds",
          "kind": "service"
        },
        "TestService.TestEntity": {
          "kind": "entity"
        }
      },
      "meta": {
        "creator": "CDS Compiler v1.25.0"
      },
      "$version": "1.0"}
""")

_NO_DEFINITIONS_CSN = textwrap.dedent("""\
    {"meta": {
        "creator": "CDS Compiler v1.25.0"
      },
      "$version": "1.0"}
""")

_INVALID_JSON_CSN = textwrap.dedent("""\
    {"meta": -invalid-
        "creator": "CDS Compiler v1.25.0"
      },
      "$version": "1.0"}
""")


def _json_error_message(text: str) -> str:
    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        return str(e)
    raise AssertionError("text is valid JSON")


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestLoadDefinitions:
    def test_service_and_entity(self, bookshop_csn: str):
        definitions = load_definitions(bookshop_csn)

        assert len(definitions) == 2
        service, entity = definitions
        assert service == Service(name="TestService")
        assert isinstance(entity, Entity)
        assert entity.name == "TestService.TestEntity"
        assert [e.name for e in entity.elements] == ["ID", "name", "age"]

    def test_element_attributes(self, bookshop_csn: str):
        entity = load_definitions(bookshop_csn).get_entity("TestService.TestEntity")
        assert entity is not None

        id_element = entity.element("ID")
        assert id_element.key is True
        assert isinstance(id_element.kind, UUIDKind)
        assert id_element.kind.default is None

        name = entity.element("name")
        assert name.key is False
        assert isinstance(name.kind, StringKind)
        assert name.kind.default_value == "myDefaultName"
        assert name.kind.length is None

        age = entity.element("age")
        assert age.key is False
        assert isinstance(age.kind, IntegerKind)
        assert age.kind.default is None

    def test_definitions_from_str(self, bookshop_csn: str):
        assert Definitions.from_str(bookshop_csn) == load_definitions(bookshop_csn)

    def test_counts_only_services_and_entities(self, csn_fixtures_dir: Path):
        definitions = load_definitions_file(csn_fixtures_dir / "catalog.json")
        assert len(definitions) == 3
        assert [s.name for s in definitions.services] == ["CatalogService"]
        assert [e.name for e in definitions.entities] == [
            "CatalogService.Books",
            "CatalogService.Authors",
        ]
        assert definitions.get("CatalogService.Genre") is None

    def test_from_file(self, csn_fixtures_dir: Path, bookshop_csn: str):
        assert Definitions.from_file(csn_fixtures_dir / "bookshop.json") == load_definitions(
            bookshop_csn
        )

    def test_model_is_frozen(self, bookshop_csn: str):
        entity = load_definitions(bookshop_csn).entities[0]
        with pytest.raises(ValidationError):
            entity.name = "Other"  # type: ignore[misc]

    def test_dump_keeps_source_discriminants(self, bookshop_csn: str):
        dumped = load_definitions(bookshop_csn).model_dump(mode="json")
        service, entity = dumped["definitions"]
        assert service == {"kind": "service", "name": "TestService"}
        assert entity["kind"] == "entity"
        assert entity["elements"][0] == {
            "name": "ID",
            "key": True,
            "kind": {"type": "cds.UUID", "default": None},
        }
        assert entity["elements"][1]["kind"]["default"] == {"val": "myDefaultName"}


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestLoadDefinitionsFailures:
    def test_no_definitions(self):
        with pytest.raises(StructuralError) as exc_info:
            load_definitions(_NO_DEFINITIONS_CSN)
        assert exc_info.value.description == "Cannot find definitions"

    def test_no_elements(self):
        with pytest.raises(StructuralError) as exc_info:
            load_definitions(_NO_ELEMENTS_CSN)
        assert exc_info.value.description == "Cannot find elements"

    def test_invalid_json(self):
        with pytest.raises(JsonSyntaxError) as exc_info:
            load_definitions(_INVALID_JSON_CSN)
        assert exc_info.value.description == _json_error_message(_INVALID_JSON_CSN)
        assert "line 1 column 10" in exc_info.value.description
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_empty_text(self):
        with pytest.raises(JsonSyntaxError):
            load_definitions("")

    def test_top_level_array(self):
        with pytest.raises(StructuralError) as exc_info:
            load_definitions("[]")
        assert exc_info.value.description == "Cannot find definitions"

    def test_unknown_type_tag(self):
        csn = json.dumps(
            {
                "definitions": {
                    "E": {"kind": "entity", "elements": {"x": {"type": "cds.LargeBinary"}}}
                }
            }
        )
        with pytest.raises(TypeTagError) as exc_info:
            load_definitions(csn)
        assert "cds.LargeBinary" in exc_info.value.description

    @pytest.mark.parametrize(
        "csn",
        [
            "{",
            '{"meta": {}}',
            '{"definitions": {"E": {"kind": "entity"}}}',
            '{"definitions": {"E": {"kind": "entity", "elements": {"x": {}}}}}',
        ],
    )
    def test_all_failures_share_base_type(self, csn: str):
        with pytest.raises(DeserializationError):
            load_definitions(csn)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_constants_fail(self, constant: str):
        with pytest.raises(JsonSyntaxError) as exc_info:
            load_definitions('{"definitions": {}, "x": ' + constant + "}")
        assert constant in exc_info.value.description

    def test_deep_nesting_fails_as_syntax_error(self):
        csn = '{"definitions": {}, "x": ' + "[" * 100_000 + "]" * 100_000 + "}"
        with pytest.raises(JsonSyntaxError) as exc_info:
            load_definitions(csn)
        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_lone_surrogate_escape_fails(self):
        with pytest.raises(JsonSyntaxError, match="Invalid unicode escape"):
            load_definitions(r'{"definitions": {"\ud800": {"kind": "service"}}}')

    def test_surrogate_pair_escape_loads(self):
        definitions = load_definitions(r'{"definitions": {"\ud83d\ude00": {"kind": "service"}}}')
        assert definitions.services[0].name == "\U0001f600"

    def test_file_with_invalid_utf8_fails(self, tmp_path: Path):
        csn = tmp_path / "csn.json"
        csn.write_bytes(b'{"definitions": {"\xff": {}}}')
        with pytest.raises(JsonSyntaxError, match="Invalid UTF-8"):
            load_definitions_file(csn)
