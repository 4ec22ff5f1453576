"""Tests for heading vectors, naming, and parsing."""

import pytest

from roverctl.domain.types import (
    UNKNOWN_HEADING,
    Heading,
    as_direction,
    heading_name,
    parse_heading,
    parse_position,
)


class TestHeading:
    def test_canonical_vectors(self) -> None:
        assert Heading.NORTH.value == (0, 1)
        assert Heading.EAST.value == (1, 0)
        assert Heading.SOUTH.value == (0, -1)
        assert Heading.WEST.value == (-1, 0)

    def test_components(self) -> None:
        assert (Heading.WEST.dx, Heading.WEST.dy) == (-1, 0)


class TestHeadingName:
    @pytest.mark.parametrize("heading", list(Heading))
    def test_canonical_names(self, heading: Heading) -> None:
        assert heading_name(heading.value) == heading.name

    @pytest.mark.parametrize("vector", [(0, 0), (1, 1), (2, 0), (0, -2)])
    def test_non_canonical_is_unknown(self, vector: tuple[int, int]) -> None:
        assert heading_name(vector) == UNKNOWN_HEADING

    def test_list_input(self) -> None:
        assert heading_name([1, 0]) == "EAST"  # type: ignore[arg-type]


class TestParseHeading:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("north", Heading.NORTH),
            ("EAST", Heading.EAST),
            (" South ", Heading.SOUTH),
            ("w", Heading.WEST),
            ("N", Heading.NORTH),
        ],
    )
    def test_accepts_names_and_letters(self, text: str, expected: Heading) -> None:
        assert parse_heading(text) is expected

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown heading"):
            parse_heading("up")


class TestAsDirection:
    def test_heading(self) -> None:
        assert as_direction(Heading.SOUTH) == (0, -1)

    def test_raw_pair(self) -> None:
        assert as_direction((3, 4)) == (3, 4)


class TestParsePosition:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0,0", (0, 0)), ("3, -4", (3, -4)), ("(7,8)", (7, 8))],
    )
    def test_valid(self, text: str, expected: tuple[int, int]) -> None:
        assert parse_position(text) == expected

    @pytest.mark.parametrize("text", ["1", "1,2,3", "a,b", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_position(text)
