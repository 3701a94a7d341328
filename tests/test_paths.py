from pathlib import Path

from cyoa.data import paths


def test_get_stories_path_base_path(tmp_path: Path) -> None:
    assert paths.get_stories_path(tmp_path) == tmp_path


def test_get_stories_path_source_repo_exists() -> None:
    stories_path = paths.get_stories_path()
    assert stories_path.name == "stories"
    assert (stories_path / "lantern_cave.story").is_file()


def test_resolve_story_path_prefers_existing_path(tmp_path: Path) -> None:
    story = tmp_path / "mine.story"
    story.write_text("#!STORY\n", encoding="utf-8")
    assert paths.resolve_story_path(str(story)) == str(story)


def test_resolve_story_path_falls_back_to_bundled(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    resolved = paths.resolve_story_path("lantern_cave.story")
    assert Path(resolved) == paths.get_stories_path() / "lantern_cave.story"


def test_resolve_story_path_keeps_unknown_names(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert paths.resolve_story_path("nowhere.story") == "nowhere.story"
