"""
Unit tests for the catalog vocabulary enums.
"""

import pytest

from crackmes.vocab import Arch, DifficultyLevel, Language, Platform, QualityLevel


class TestWireEnums:
    """Parsing and rendering of catalog strings."""

    @pytest.mark.parametrize("enum_cls", [Language, Arch, Platform])
    def test_parse_when_rendered_member_then_same_member(self, enum_cls):
        """Every member except OTHER survives render -> parse."""
        for member in enum_cls:
            if member is enum_cls.OTHER:
                continue
            assert enum_cls.parse(member.value) is member

    @pytest.mark.parametrize("enum_cls", [Language, Arch, Platform])
    def test_parse_when_unknown_string_then_other(self, enum_cls):
        """Strings the table doesn't know fall back to OTHER."""
        assert enum_cls.parse("Brainfuck") is enum_cls.OTHER
        assert enum_cls.parse("") is enum_cls.OTHER

    def test_parse_when_padded_then_trimmed(self):
        """Cell whitespace is ignored."""
        assert Language.parse("  C/C++\n") is Language.CCPP
        assert Arch.parse(" x86-64 ") is Arch.X86_64

    def test_parse_when_case_differs_then_other(self):
        """Matching is exact; the catalog spells arch names in mixed case."""
        assert Arch.parse("arm") is Arch.OTHER
        assert Arch.parse("java") is Arch.JAVA

    def test_str_when_member_then_wire_string(self):
        """str() gives the catalog spelling."""
        assert str(Platform.UNIX) == "Unix/linux etc."
        assert str(Language.BASIC) == "(Visual) Basic"


class TestBands:
    """Difficulty and quality bands."""

    def test_range_when_difficulty_bands_then_inclusive_pairs(self):
        """Bands map to overlapping inclusive ranges."""
        assert [level.range for level in DifficultyLevel] == [(1, 2), (2, 3), (3, 4), (4, 5)]

    def test_range_when_quality_bands_then_inclusive_pairs(self):
        assert QualityLevel.MINT.range == (4, 5)
        assert QualityLevel.POOR.range == (1, 2)

    def test_str_when_band_then_cli_name(self):
        assert [str(level) for level in QualityLevel] == ["poor", "flaky", "good", "mint"]
