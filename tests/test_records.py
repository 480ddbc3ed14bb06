from bankcore.records import restore_records, save_record, save_records


def test_save_and_restore_round_trip(tmp_path):
    path = tmp_path / "clients.txt"
    records = ["A1#//#Ann#//#10", "B2#//#Bob#//#20", ""]
    save_records(records, path)
    assert restore_records(path) == records


def test_save_records_overwrites(tmp_path):
    path = tmp_path / "users.txt"
    save_records(["one", "two", "three"], path)
    save_records(["four"], path)
    assert restore_records(path) == ["four"]


def test_save_record_writes_single_line(tmp_path):
    path = tmp_path / "single.txt"
    save_records(["old", "lines"], path)
    save_record("fresh", path)
    assert path.read_text(encoding="utf-8") == "fresh\n"
    assert restore_records(path) == ["fresh"]


def test_empty_records_make_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    save_records([], path)
    assert path.read_text(encoding="utf-8") == ""
    assert restore_records(path) == []


def test_restore_last_line_without_newline(tmp_path):
    path = tmp_path / "raw.txt"
    path.write_text("a\n\nb", encoding="utf-8")
    assert restore_records(path) == ["a", "", "b"]


def test_restore_missing_file_warns(tmp_path, capsys):
    path = tmp_path / "missing.txt"
    assert restore_records(path) == []
    assert capsys.readouterr().out == f"Warning: Unable to open file: {path}\n"


def test_save_to_unwritable_path_warns(tmp_path, capsys):
    path = tmp_path / "no_such_dir" / "file.txt"
    save_record("x", path)
    assert not path.exists()
    assert capsys.readouterr().out == f"Warning: Unable to open file: {path}\n"