# Loader for the newline-delimited word list bundled as dictionary.txt.
# Any file with one word per line can be used in its place.

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..errors import DictionaryLoadError, InvalidArgumentError

WILDCARD = '*'

def wildcard_patterns(word):
    '''
    Returns the keys formed by blanking each position of `word` in turn.
    EAST -> ['*AST', 'E*ST', 'EA*T', 'EAS*']
    '''
    return [word[:i] + WILDCARD + word[i + 1:] for i in range(len(word))]

def build_pattern_index(words):
    '''
    Maps every wildcard pattern to the words sharing it, in word order.
    '''
    index = {}
    for word in words:
        for pattern in wildcard_patterns(word):
            index.setdefault(pattern, []).append(word)
    return index

class Dictionary(object):
    '''
    Immutable ordered set of equal-length uppercase words. Raises
    InvalidArgumentError if a word does not have `word_length` letters
    (the first word's length when not given).
    '''
    def __init__(self, words: Iterable[str], word_length: Optional[int] = None):
        seen = {}
        for word in words:
            seen.setdefault(word.strip().upper(), None)
        self._words: Tuple[str, ...] = tuple(w for w in seen if w)
        self._members = frozenset(self._words)
        if word_length is None:
            word_length = len(self._words[0]) if self._words else 0
        for word in self._words:
            if len(word) != word_length:
                raise InvalidArgumentError(f"Word {word} does not have {word_length} letters")
        self._word_length = word_length
        self._index: Optional[Dict[str, List[str]]] = None
    @property
    def words(self) -> Tuple[str, ...]:
        return self._words
    @property
    def word_length(self) -> int:
        return self._word_length
    @property
    def pattern_index(self) -> Dict[str, List[str]]:
        if self._index is None:
            self._index = build_pattern_index(self._words)
        return self._index
    def __contains__(self, word):
        return isinstance(word, str) and word.upper() in self._members
    def __len__(self):
        return len(self._words)
    def __iter__(self) -> Iterator[str]:
        return iter(self._words)
    def __getitem__(self, index):
        return self._words[index]
    def __repr__(self):
        return f"Dictionary({len(self._words)} words, length={self._word_length})"

_DATA_FILE = Path(__file__).parent / "dictionary.txt"

def load_dictionary(path: Union[str, Path, None] = None, word_length: int = 4) -> Dictionary:
    '''
    Reads a newline-delimited word list, keeping alphabetic lines of exactly
    `word_length` letters, upper-cased. Raises DictionaryLoadError if fewer
    than two words qualify.
    '''
    path = Path(path) if path is not None else _DATA_FILE
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    words = []
    with open(path) as f:
        for line in f:
            word = line.strip()
            if len(word) == word_length and word.isascii() and word.isalpha():
                words.append(word.upper())

    dictionary = Dictionary(words, word_length=word_length)
    if len(dictionary) < 2:
        raise DictionaryLoadError(
            f"Dictionary {path} does not contain enough {word_length}-letter words "
            f"(found {len(dictionary)}, requires at least 2)"
        )
    return dictionary
