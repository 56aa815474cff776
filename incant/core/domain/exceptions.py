# incant/core/domain/exceptions.py
from typing import Optional, Sequence, Tuple


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# --- Lookup Errors ---

class DialectNotFoundError(DomainError):
    """Raised when an operation names a dialect that is not loaded."""
    def __init__(self, dialect_id: str):
        self.dialect_id = dialect_id
        super().__init__(f"Dialect '{dialect_id}' is not loaded.")


# --- Build-time: Lexicon Table ---

class LexiconError(DomainError):
    """Raised while building a Lexicon Table."""


class MalformedSyllableError(LexiconError):
    """Raised when a syllable is not exactly one consonant followed by one vowel."""
    def __init__(self, text: str, dialect_id: Optional[str] = None):
        self.text = text
        self.dialect_id = dialect_id
        where = f" in dialect '{dialect_id}'" if dialect_id else ""
        super().__init__(f"Malformed syllable '{text}'{where}: expected one consonant followed by one vowel.")


class DuplicateSyllableError(LexiconError):
    """Raised when the same syllable is defined twice in one table build."""
    def __init__(self, dialect_id: str, syllable: str, first: str, second: str):
        self.dialect_id = dialect_id
        self.syllable = syllable
        self.first = first
        self.second = second
        super().__init__(
            f"Syllable '{syllable}' defined twice in dialect '{dialect_id}' ('{first}' and '{second}')."
        )


class LexiconSourceError(LexiconError):
    """Raised when tabular lexicon input has the wrong shape."""


# --- Build-time: Word Dictionary ---

class DictionaryError(DomainError):
    """Raised while building or validating a Word Dictionary."""


class EmptySequenceError(DictionaryError):
    def __init__(self, dialect_id: str):
        self.dialect_id = dialect_id
        super().__init__(f"Cannot register an empty word in dialect '{dialect_id}'.")


class UnknownSyllableError(DictionaryError):
    """Raised when a word uses a syllable the dialect's table leaves blank."""
    def __init__(self, dialect_id: str, syllable: str, word: str):
        self.dialect_id = dialect_id
        self.syllable = syllable
        self.word = word
        super().__init__(
            f"Word '{word}' uses syllable '{syllable}' which has no entry in dialect '{dialect_id}'."
        )


class DuplicateWordError(DictionaryError):
    def __init__(self, dialect_id: str, word: str):
        self.dialect_id = dialect_id
        self.word = word
        super().__init__(f"Word '{word}' is already registered in dialect '{dialect_id}'.")


class DictionarySealedError(DictionaryError):
    """Raised when registering into a dictionary that already passed validation."""
    def __init__(self, dialect_id: str):
        self.dialect_id = dialect_id
        super().__init__(f"Dictionary for dialect '{dialect_id}' is validated and can no longer change.")


class AmbiguousSegmentationError(DictionaryError):
    """
    Raised when a concatenation of words admits another partition into words.

    `words` is the offending pair, `alt_split` the alternate partition found
    for the same syllable stream.
    """
    def __init__(self, dialect_id: str, words: Tuple[str, str], alt_split: Sequence[str]):
        self.dialect_id = dialect_id
        self.words = tuple(words)
        self.alt_split = tuple(alt_split)
        super().__init__(
            f"Ambiguous segmentation in dialect '{dialect_id}': "
            f"{' + '.join(self.words)} can also be read as {' + '.join(self.alt_split)}."
        )


# --- Runtime: Decoding ---

class DecodeError(DomainError):
    """
    Raised when a phoneme stream cannot be decoded.
    Decoding of the stream stops at `position` (a phoneme offset).
    """
    kind = "decode_error"

    def __init__(self, position: int, message: str):
        self.position = position
        super().__init__(message)


class MalformedInputError(DecodeError):
    kind = "malformed_input"

    def __init__(self, position: int, char: str, reason: str = "not a phoneme"):
        self.char = char
        super().__init__(position, f"Malformed input at position {position}: {char!r} is {reason}.")


class UnknownWordError(DecodeError):
    kind = "unknown_word"

    def __init__(self, position: int, syllable: str):
        self.syllable = syllable
        super().__init__(position, f"No word matches syllable '{syllable}' at position {position}.")


class TruncatedWordError(DecodeError):
    kind = "truncated_word"

    def __init__(self, position: int, partial: str = ""):
        self.partial = partial
        super().__init__(position, f"Stream ends inside a word starting at position {position}.")


# --- Fatal ---

class EmissionTableError(RuntimeError):
    """
    Raised when a word meaning has no instruction mapping.
    This is a programming error in the emission table, not a runtime fault.
    """
    def __init__(self, dialect_id: str, meanings: Sequence[str]):
        self.dialect_id = dialect_id
        self.meanings = tuple(meanings)
        super().__init__(
            f"No instructions registered in dialect '{dialect_id}' for: {', '.join(self.meanings)}."
        )
