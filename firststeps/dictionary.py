"""A word-to-definition dictionary."""


class DictionaryError(Exception):
    """Base class for dictionary errors."""


class WordNotFoundError(DictionaryError):
    """The searched word is missing."""


class WordAlreadyExistsError(DictionaryError):
    """The added word is already present."""


class WordDoesNotExistError(DictionaryError):
    """The updated word is not present."""


class Dictionary(dict):
    """Maps words to definitions."""

    def search(self, word: str) -> str:
        if word not in self:
            raise WordNotFoundError("word not found")
        return self[word]

    def add(self, word: str, definition: str) -> None:
        if word in self:
            raise WordAlreadyExistsError("word already exists")
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        if word not in self:
            raise WordDoesNotExistError("word doesnt exists")
        self[word] = definition

    def delete(self, word: str) -> None:
        self.pop(word, None)