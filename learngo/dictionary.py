"""A word dictionary with explicit add, update and delete operations."""


class DictionaryError(Exception):
    """Base class for dictionary errors."""

    message = "dictionary error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NotFoundError(DictionaryError):
    """The word looked up is not in the dictionary."""

    message = "could not find the word you are looking for"


class WordExistsError(DictionaryError):
    """The word to add is already in the dictionary."""

    message = "cannot add word because it already exists"


class WordDoesNotExistError(DictionaryError):
    """The word to change or remove is not in the dictionary."""

    message = "cannot perform operation on word because it does not exist"


class Dictionary(dict[str, str]):
    """A mapping of words to their definitions."""

    def search(self, word: str) -> str:
        """Return the definition of word, or raise NotFoundError."""
        try:
            return self[word]
        except KeyError:
            raise NotFoundError() from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word; raise WordExistsError if it is already present."""
        if word in self:
            raise WordExistsError()
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Replace the definition of an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        self[word] = definition

    def delete(self, word: str) -> None:
        """Remove an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        del self[word]