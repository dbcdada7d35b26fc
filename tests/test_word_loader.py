import pytest

from compound_words import DictionaryLoadError, load_words, normalize_word


def test_normalize_word():
    assert normalize_word("Dog\n") == "dog"
    assert normalize_word("cat's") == "cats"
    assert normalize_word("CAT-CHER\r\n") == "catcher"
    assert normalize_word("  \t") == ""
    assert normalize_word("123") == ""
    assert normalize_word("café") == "caf"


def test_load_words_sanitizes_and_sorts(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Dog\n\ncat's\n  \nCAT-CHER\r\n123\ndog\n", encoding="utf-8")

    assert load_words(path) == ["catcher", "cats", "dog", "dog"]


def test_load_words_accepts_str_path(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("b\na\n", encoding="utf-8")

    assert load_words(str(path)) == ["a", "b"]


def test_load_words_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    assert load_words(path) == []


def test_load_words_keeps_long_words(tmp_path):
    path = tmp_path / "words.txt"
    long_word = "a" * 1000
    path.write_text(long_word + "\nb\n", encoding="utf-8")

    assert load_words(path) == [long_word, "b"]


def test_load_words_ignores_undecodable_bytes(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"ca\xfft\ndog\n")

    assert load_words(path) == ["cat", "dog"]


def test_load_words_missing_file(tmp_path):
    with pytest.raises(DictionaryLoadError) as excinfo:
        load_words(tmp_path / "missing.txt")

    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_words_directory(tmp_path):
    with pytest.raises(DictionaryLoadError):
        load_words(tmp_path)
