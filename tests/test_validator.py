"""
Tests for init_config.validator
================================
Run with: pytest tests/test_validator.py -v
"""

from init_config.validator import (
    to_source_location_array,
    validate_file_location,
    validate_location,
)


def test_split_comma_separated_location():
    assert to_source_location_array("src, lib ,  bin") == ["src", "lib", "bin"]


def test_split_single_location():
    assert to_source_location_array("src") == ["src"]


def test_list_location_is_kept():
    assert to_source_location_array(["src", "lib"]) == ["src", "lib"]


def test_empty_string(location_dir):
    assert validate_location("", location_dir) == (
        "'' doesn't seem to exist - please try again"
    )


def test_empty_string_in_cwd(location_dir, monkeypatch):
    monkeypatch.chdir(location_dir)
    assert validate_location("") == "'' doesn't seem to exist - please try again"


def test_empty_segment_in_list(location_dir):
    assert validate_location("existing-folder, , another-existing-folder", location_dir) == (
        "'' doesn't seem to exist - please try again"
    )


def test_non_existing_folder(location_dir, monkeypatch):
    monkeypatch.chdir(location_dir)
    assert validate_location("non-existing-folder") == (
        "'non-existing-folder' doesn't seem to exist - please try again"
    )


def test_file_is_not_a_folder(location_dir, monkeypatch):
    monkeypatch.chdir(location_dir)
    assert validate_location("existing-file") == (
        "'existing-file' doesn't seem to be a folder - please try again"
    )


def test_existing_folder(location_dir, monkeypatch):
    monkeypatch.chdir(location_dir)
    assert validate_location("existing-folder") is True


def test_comma_separated_existing_folders(location_dir, monkeypatch):
    monkeypatch.chdir(location_dir)
    assert validate_location("existing-folder, another-existing-folder") is True


def test_first_failure_wins(location_dir, monkeypatch):
    monkeypatch.chdir(location_dir)
    assert validate_location(
        "existing-folder, non-existing-folder, another-existing-folder"
    ) == "'non-existing-folder' doesn't seem to exist - please try again"


def test_stops_at_first_failure(location_dir):
    assert validate_location("existing-file, non-existing-folder", location_dir) == (
        "'existing-file' doesn't seem to be a folder - please try again"
    )


def test_list_of_existing_folders(location_dir, monkeypatch):
    monkeypatch.chdir(location_dir)
    assert validate_location(["existing-folder", "another-existing-folder"]) is True


def test_list_with_missing_folder(location_dir):
    assert validate_location(["existing-folder", "gone"], location_dir) == (
        "'gone' doesn't seem to exist - please try again"
    )


def test_explicit_root_does_not_need_chdir(location_dir):
    assert validate_location("existing-folder", root=location_dir) is True


def test_absolute_path(location_dir, tmp_path_factory):
    elsewhere = tmp_path_factory.mktemp("elsewhere")
    assert validate_location(str(elsewhere), location_dir) is True


def test_nested_folder(location_dir):
    (location_dir / "existing-folder" / "nested").mkdir()
    assert validate_location("existing-folder/nested", location_dir) is True


def test_validation_is_idempotent(location_dir):
    first = validate_location("existing-folder, nope", location_dir)
    assert validate_location("existing-folder, nope", location_dir) == first


def test_file_location_exists(location_dir):
    assert validate_file_location("existing-file", location_dir) is True
    assert validate_file_location("./existing-folder", location_dir) is True


def test_file_location_missing(location_dir):
    assert validate_file_location("tsconfig.json", location_dir) == (
        "hmm, 'tsconfig.json' doesn't seem to exist - try again?"
    )
    assert validate_file_location("", location_dir) == (
        "hmm, '' doesn't seem to exist - try again?"
    )
