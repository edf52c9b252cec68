#!/usr/bin/env python3

"""Unit tests for the struct/enum source extractor."""

import pytest

from struct_slot_layout.domain.models.layout import SourceParseError
from struct_slot_layout.domain.services.parsing import (
    compact_type,
    extract_definitions,
    strip_comments,
)


@pytest.mark.unit
class TestExtractDefinitions:
    """Test suite for extract_definitions."""

    def test_sample_source(self, sample_definitions):
        assert list(sample_definitions.structs) == ["Inner", "Outer", "Example"]
        assert sample_definitions.structs["Example"].fields == (
            ("a", "uint256"),
            ("b", "bytes4"),
            ("c", "bool"),
            ("d", "int88"),
            ("e", "uint256"),
        )
        assert sample_definitions.enums["Status"].variants == ("Pending", "Active", "Closed")
        assert sample_definitions.enum_variant_counts == {"Status": 3}

    def test_declaration_lines(self, sample_definitions):
        assert sample_definitions.enums["Status"].declaration_line == 4
        assert sample_definitions.structs["Inner"].declaration_line == 6

    def test_comments_are_ignored(self):
        source = """
        struct S {
            uint256 a; // trailing comment
            // bool commented;
            /* uint8 block;
               uint8 more; */
            bool b;
        }
        """

        definitions = extract_definitions(source)

        assert definitions.structs["S"].fields == (("a", "uint256"), ("b", "bool"))

    def test_single_line_struct(self):
        definitions = extract_definitions("struct P { uint128 x; uint128 y; }")

        assert definitions.structs["P"].fields == (("x", "uint128"), ("y", "uint128"))

    def test_multi_token_types(self):
        source = """
        struct Book {
            mapping ( address=>uint256 ) balances;
            mapping(address => mapping(uint256 => bool)) flags;
            address payable owner;
            uint8 [ 4 ] ids;
            Lib.Inner inner;
        }
        """

        fields = dict(extract_definitions(source).structs["Book"].fields)

        assert fields["balances"] == "mapping(address => uint256)"
        assert fields["flags"] == "mapping(address => mapping(uint256 => bool))"
        assert fields["owner"] == "address payable"
        assert fields["ids"] == "uint8[4]"
        assert fields["inner"] == "Lib.Inner"

    def test_surrounding_code_is_ignored(self):
        source = """
        pragma solidity ^0.8.0;
        import "./Other.sol";

        library LibDiamond {
            bytes32 constant POSITION = keccak256("diamond.storage");

            struct DiamondStorage {
                address owner;
                uint96 count;
            }

            function diamondStorage() internal pure returns (DiamondStorage storage ds) {
                bytes32 position = POSITION;
                assembly { ds.slot := position }
            }
        }
        """

        definitions = extract_definitions(source)

        assert list(definitions.structs) == ["DiamondStorage"]
        assert definitions.structs["DiamondStorage"].fields == (
            ("owner", "address"),
            ("count", "uint96"),
        )

    def test_empty_struct(self):
        assert extract_definitions("struct E {}").structs["E"].fields == ()

    def test_no_declarations(self):
        definitions = extract_definitions("contract C { uint256 x; }")

        assert definitions.structs == {}
        assert definitions.enums == {}

    def test_missing_semicolon(self):
        source = "struct S {\n    uint256 a;\n    bool b\n}"

        with pytest.raises(SourceParseError) as exc_info:
            extract_definitions(source)

        assert exc_info.value.line == 3

    def test_field_without_name(self):
        source = "struct S {\n    uint256 a;\n    uint256;\n}"

        with pytest.raises(SourceParseError) as exc_info:
            extract_definitions(source)

        assert exc_info.value.line == 3
        assert "uint256" in str(exc_info.value)

    def test_duplicate_struct(self):
        with pytest.raises(SourceParseError, match="Duplicate declaration"):
            extract_definitions("struct S { bool a; }\nstruct S { bool b; }")

    def test_duplicate_field(self):
        with pytest.raises(SourceParseError, match="Duplicate field"):
            extract_definitions("struct S { bool a; uint8 a; }")

    def test_invalid_enum_variant(self):
        with pytest.raises(SourceParseError):
            extract_definitions("enum E { A, B C }")

    def test_multiline_enum_with_trailing_comma(self):
        definitions = extract_definitions("enum E {\n    A,\n    B,\n}")

        assert definitions.enums["E"].variants == ("A", "B")


@pytest.mark.unit
def test_strip_comments_preserves_line_count():
    source = "a\n/* x\ny */\nb // c\n"

    stripped = strip_comments(source)

    assert stripped.count("\n") == source.count("\n")
    assert "x" not in stripped
    assert "c" not in stripped


@pytest.mark.unit
def test_compact_type():
    assert compact_type("mapping (address  =>  uint)") == "mapping(address => uint)"
    assert compact_type("uint256 [ ]") == "uint256[]"
