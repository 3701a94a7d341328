from pathlib import Path

from cyoa import main as entry
from cyoa.data.paths import get_stories_path
from cyoa.presentation.cli.config import CliConfig, load_config
from tests.helpers.story_fixtures import write_text


def test_validate_bundled_story(tmp_path: Path, capsys) -> None:
    story = get_stories_path() / "lantern_cave.story"

    code = entry.main(["--validate", "--config", str(tmp_path / "cfg.json"), str(story)])

    assert code == 0
    assert "Story graph validation summary: rooms=6 issues=0" in capsys.readouterr().out


def test_validate_reports_graph_errors(tmp_path: Path, capsys) -> None:
    story = write_text(tmp_path, "broken.story", "#!STORY\nR1: A\n;;;\n: Go -> nowhere\n")

    code = entry.main(["--validate", "--config", str(tmp_path / "cfg.json"), str(story)])

    assert code == 1
    assert "MISSING_ROOM_REF" in capsys.readouterr().out


def test_validate_reports_load_errors(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.story"

    code = entry.main(["--validate", "--config", str(tmp_path / "cfg.json"), str(missing)])

    assert code == 1
    assert f"Error reading file: {missing}" in capsys.readouterr().out


def test_validate_needs_a_path(tmp_path: Path) -> None:
    assert entry.main(["--validate", "--config", str(tmp_path / "cfg.json")]) == 2


def test_play_single_file_with_seed(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.delenv("CYOA_DEBUG", raising=False)
    story = write_text(tmp_path, "end.story", "#!STORY\nR1: Only\n;;;\n=(\n")

    code = entry.main(["--seed", "3", "--config", str(tmp_path / "cfg.json"), str(story)])

    assert code == 0
    assert "You failed to complete the adventure." in capsys.readouterr().out


def test_play_single_file_load_failure_exits_non_zero(tmp_path: Path, capsys) -> None:
    story = write_text(tmp_path, "bad.story", "#!STORY\nnonsense\n")

    code = entry.main(["--config", str(tmp_path / "cfg.json"), str(story)])

    assert code == 1
    assert "Error parsing file on line: 1: nonsense" in capsys.readouterr().out


def test_save_config_persists_seed_override(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "cfg.json"
    story = get_stories_path() / "lantern_cave.story"

    code = entry.main(
        ["--seed", "9", "--save-config", "--config", str(config_path), "--validate", str(story)]
    )

    assert code == 0
    assert load_config(config_path) == CliConfig(seed=9)


def test_config_is_untouched_without_save_flag(tmp_path: Path) -> None:
    config_path = tmp_path / "cfg.json"
    story = get_stories_path() / "lantern_cave.story"

    entry.main(["--seed", "9", "--config", str(config_path), "--validate", str(story)])

    assert not config_path.exists()
