from cyoa.presentation.cli.config import CliConfig
from cyoa.presentation.cli.render import render_choices, render_room, wrap_text
from cyoa.services.play_session import RoomView


def test_wrap_text_respects_width_and_newlines() -> None:
    text = "one two three four five six\nseven"

    lines = wrap_text(text, 10)

    assert lines == ["one two", "three four", "five six", "seven"]
    assert all(len(line) <= 10 for line in lines)


def test_wrap_text_keeps_blank_lines_and_breaks_long_words() -> None:
    assert wrap_text("a\n\nb", 10) == ["a", "", "b"]
    assert wrap_text("abcdefghijkl", 5) == ["abcde", "fghij", "kl"]


def test_render_room_layout(monkeypatch, capsys) -> None:
    monkeypatch.delenv("CYOA_DEBUG", raising=False)
    view = RoomView(room_id="1", title="Hall", description="Dusty.\nQuiet.")

    render_room(view, CliConfig(display_width=20, line_char="-"))

    assert capsys.readouterr().out == (
        "--------------------\nHall\n\nDusty.\nQuiet.\n--------------------\n"
    )


def test_render_room_shows_id_in_debug(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CYOA_DEBUG", "1")
    render_room(RoomView(room_id="cellar", title="T", description="D"), CliConfig(display_width=20))
    assert "[cellar]" in capsys.readouterr().out


def test_render_choices_uses_zero_based_indices(capsys) -> None:
    render_choices(["Left", "Right"])
    assert capsys.readouterr().out == "0) Left\n1) Right\n"
