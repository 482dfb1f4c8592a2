"""A word dictionary with add, update and delete rules."""

from __future__ import annotations


class DictionaryError(Exception):
    """Base class for dictionary errors."""

    message = "dictionary error"

    def __init__(self) -> None:
        super().__init__(self.message)


class WordNotFoundError(DictionaryError):
    message = "could not find the word you were looking for"


class WordExistsError(DictionaryError):
    message = "word already existed in dict"


class WordDoesNotExistError(DictionaryError):
    message = "word does not exist"


class Dictionary(dict):
    """Maps words to their definitions."""

    def search(self, word: str) -> str:
        """Return the definition of ``word``."""
        if word not in self:
            raise WordNotFoundError()
        return self[word]

    def add(self, word: str, definition: str) -> None:
        """Add a new word."""
        if word in self:
            raise WordExistsError()
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Change the definition of an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        self[word] = definition

    def delete(self, word: str) -> None:
        """Remove an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        del self[word]