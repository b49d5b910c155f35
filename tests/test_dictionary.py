import pytest

from learngo.dictionary import (
    Dictionary,
    DictionaryError,
    NotFoundError,
    WordDoesNotExistError,
    WordExistsError,
)


def test_search_known_word():
    dictionary = Dictionary({"test": "this is just a test"})
    assert dictionary.search("test") == "this is just a test"


def test_search_unknown_word():
    dictionary = Dictionary({"test": "this is just a test"})
    with pytest.raises(NotFoundError) as excinfo:
        dictionary.search("unknown")
    assert str(excinfo.value) == "could not find the word you are looking for"


def test_add_new_word():
    dictionary = Dictionary()
    dictionary.add("test", "this is just a test")
    assert dictionary.search("test") == "this is just a test"


def test_add_existing_word():
    dictionary = Dictionary({"test": "this is just a test"})
    with pytest.raises(WordExistsError) as excinfo:
        dictionary.add("test", "new test")
    assert str(excinfo.value) == "cannot add word because it already exists"
    assert dictionary.search("test") == "this is just a test"


def test_update_existing_word():
    dictionary = Dictionary({"test": "this is just a test"})
    dictionary.update("test", "new definition")
    assert dictionary.search("test") == "new definition"


def test_update_new_word():
    dictionary = Dictionary()
    with pytest.raises(WordDoesNotExistError) as excinfo:
        dictionary.update("test", "this is just a test")
    assert str(excinfo.value) == (
        "cannot perform operation on word because it does not exist"
    )
    assert "test" not in dictionary


def test_delete_existing_word():
    dictionary = Dictionary({"test": "test definition"})
    dictionary.delete("test")
    with pytest.raises(NotFoundError):
        dictionary.search("test")


def test_delete_non_existing_word():
    dictionary = Dictionary()
    with pytest.raises(WordDoesNotExistError):
        dictionary.delete("test")


@pytest.mark.parametrize(
    "operation",
    [
        lambda d: d.search("missing"),
        lambda d: d.add("test", "again"),
        lambda d: d.update("missing", "definition"),
        lambda d: d.delete("missing"),
    ],
)
def test_errors_caught_by_base_class(operation):
    dictionary = Dictionary({"test": "this is just a test"})
    with pytest.raises(DictionaryError):
        operation(dictionary)
    assert dictionary.search("test") == "this is just a test"