import pytest

from vsupdater.fsutils import (
    UpdaterError,
    check_temp_folder,
    clean_working_path,
    clear_temp,
    move_item,
    move_items,
    read_game_version,
)


def test_move_item_moves_file(tmp_path):
    source = tmp_path / "serverconfig.json"
    source.write_text("config")
    dest = tmp_path / "dest"
    dest.mkdir()

    result = move_item(source, dest)

    assert result == dest / "serverconfig.json"
    assert result.read_text() == "config"
    assert not source.exists()


def test_move_item_creates_destination(tmp_path):
    source = tmp_path / "Mods"
    source.mkdir()
    (source / "mod.zip").write_text("m")
    dest = tmp_path / "missing" / "deeper"

    move_item(source, dest)

    assert (dest / "Mods" / "mod.zip").read_text() == "m"


def test_move_item_replaces_existing_directory(tmp_path):
    source = tmp_path / "Mods"
    source.mkdir()
    (source / "new.txt").write_text("new")
    dest = tmp_path / "dest"
    (dest / "Mods").mkdir(parents=True)
    (dest / "Mods" / "old.txt").write_text("old")

    move_item(source, dest)

    assert sorted(p.name for p in (dest / "Mods").iterdir()) == ["new.txt"]


def test_move_item_replaces_existing_file(tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("fresh")
    dest = tmp_path / "dest"
    dest.mkdir()
    (dest / "a.txt").write_text("stale")

    move_item(source, dest)

    assert (dest / "a.txt").read_text() == "fresh"


def test_move_item_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        move_item(tmp_path / "nothing", tmp_path)


def test_move_item_invalid_source(tmp_path):
    with pytest.raises(UpdaterError, match="Invalid source path"):
        move_item(tmp_path / "..", tmp_path)


def test_move_items_moves_all(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    (source / "one").write_text("1")
    (source / "two").mkdir()
    dest = tmp_path / "dest"
    dest.mkdir()

    move_items(source, dest)

    assert sorted(p.name for p in dest.iterdir()) == ["one", "two"]
    assert list(source.iterdir()) == []


@pytest.mark.parametrize("missing", ["source", "destination"])
def test_move_items_requires_directories(tmp_path, missing):
    existing = tmp_path / "exists"
    existing.mkdir()
    absent = tmp_path / "absent"
    args = (absent, existing) if missing == "source" else (existing, absent)
    with pytest.raises(UpdaterError, match="Invalid path"):
        move_items(*args)


def test_read_game_version(tmp_path):
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "version-1.20.3.txt").write_text("")
    assert read_game_version(tmp_path) == "1.20.3.txt"


def test_read_game_version_ignores_other_files(tmp_path):
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "game").mkdir()
    (tmp_path / "assets" / "readme.txt").write_text("")
    assert read_game_version(tmp_path) is None


def test_read_game_version_without_assets(tmp_path):
    assert read_game_version(tmp_path) is None


def test_check_temp_folder_absent_does_not_ask(tmp_path):
    calls = []
    assert check_temp_folder(tmp_path, lambda: calls.append(1) or "y") is True
    assert calls == []


def test_check_temp_folder_yes_deletes(tmp_path, capsys):
    (tmp_path / ".temp").mkdir()
    (tmp_path / ".temp" / "x").write_text("x")

    assert check_temp_folder(tmp_path, lambda: " Y \n") is True
    assert not (tmp_path / ".temp").exists()
    assert "Do you want to delete it? (y,N): " in capsys.readouterr().out


def test_check_temp_folder_no_keeps(tmp_path):
    (tmp_path / ".temp").mkdir()
    assert check_temp_folder(tmp_path, lambda: "") is False
    assert (tmp_path / ".temp").is_dir()


def test_check_temp_folder_input_failure(tmp_path):
    (tmp_path / ".temp").mkdir()

    def broken():
        raise EOFError("closed")

    with pytest.raises(UpdaterError, match="Failed to read input"):
        check_temp_folder(tmp_path, broken)


def test_clean_working_path_keeps_temp_and_kept(tmp_path):
    (tmp_path / ".temp").mkdir()
    (tmp_path / ".temp" / "saved").write_text("s")
    (tmp_path / "updater").write_text("bin")
    (tmp_path / "VintagestoryServer").write_text("old")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "version-1.0.0.txt").write_text("")

    clean_working_path(tmp_path, keep=[tmp_path / "updater"])

    assert sorted(p.name for p in tmp_path.iterdir()) == [".temp", "updater"]
    assert (tmp_path / ".temp" / "saved").read_text() == "s"


def test_clean_working_path_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        clean_working_path(tmp_path / "absent", keep=[])


def test_clear_temp_restores_items(tmp_path):
    working = tmp_path / "game"
    working.mkdir()
    temp = working / ".temp"
    temp.mkdir()
    (temp / "serverconfig.json").write_text("cfg")
    (temp / "Mods").mkdir()

    clear_temp(temp, working)

    assert not temp.exists()
    assert (working / "serverconfig.json").read_text() == "cfg"
    assert (working / "Mods").is_dir()


def test_clear_temp_missing_temp(tmp_path):
    with pytest.raises(UpdaterError, match="Failed to move temp to working path"):
        clear_temp(tmp_path / ".temp", tmp_path)