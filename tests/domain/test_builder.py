"""Tests for RoverBuilder accumulation and value-copy semantics."""

import pytest

from roverctl.domain.operations import move_backward, move_forward, rotate_left
from roverctl.domain.rover import RoverBuilder
from roverctl.domain.types import Heading
from tests.conftest import RejectAll, RejectCells


class TestRoverBuilder:
    def test_chaining_returns_builder(self) -> None:
        builder = RoverBuilder()
        assert builder.program_command("f", move_forward()) is builder
        assert builder.add_sensor(RejectAll()) is builder

    def test_last_registration_wins(self) -> None:
        rover = (
            RoverBuilder()
            .program_command("f", move_forward())
            .program_command("f", move_backward())
            .build()
        )
        rover.land((0, 0), Heading.NORTH)
        rover.execute("f")
        assert rover.state.position == (0, -1)

    def test_sensor_order_preserved(self) -> None:
        first, second = RejectCells(), RejectCells()
        rover = RoverBuilder().add_sensor(first).add_sensor(second).build()
        assert list(rover.sensors) == [first, second]

    @pytest.mark.parametrize("token", ["", "ff", 1])
    def test_rejects_non_single_character_tokens(self, token: object) -> None:
        with pytest.raises(ValueError, match="single character"):
            RoverBuilder().program_command(token, move_forward())  # type: ignore[arg-type]

    def test_later_mutations_do_not_leak(self) -> None:
        builder = RoverBuilder().program_command("f", move_forward())
        first = builder.build()
        builder.program_command("l", rotate_left()).add_sensor(RejectAll())
        second = builder.build()

        assert "l" not in first.operations
        assert len(first.sensors) == 0
        assert "l" in second.operations
        assert len(second.sensors) == 1

    def test_built_rovers_are_independent(self) -> None:
        builder = RoverBuilder().program_command("f", move_forward())
        a, b = builder.build(), builder.build()
        a.land((0, 0), Heading.NORTH)
        a.execute("ff")
        assert b.landed is False
        assert a.state.position == (0, 2)

    def test_empty_builder(self) -> None:
        rover = RoverBuilder().build()
        rover.land((0, 0), Heading.NORTH)
        rover.execute("f")
        assert str(rover) == "(0, 0) NORTH stopped"
