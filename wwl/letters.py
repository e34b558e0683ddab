import collections

from .utils import remove_first

class LetterBag:
    """
    a multiset of letters

    letters are kept in the order they were given, consuming a letter removes
    its first occurrence. equality and hashing only look at the letter counts
    so two bags holding the same letters in a different order are the same bag.
    """

    def __init__(self, letters=()):
        self._letters = tuple(letters)

    @property
    def letters(self):
        return self._letters

    def __len__(self):
        return len(self._letters)

    def __iter__(self):
        return iter(self._letters)

    def __eq__(self, other):
        if not isinstance(other, LetterBag):
            return NotImplemented
        return collections.Counter(self._letters) == collections.Counter(other._letters)

    def __hash__(self):
        return hash(tuple(sorted(self._letters)))

    def __repr__(self):
        return f"LetterBag({''.join(self._letters)!r})"

    def contains(self, other):
        """
        True if every letter of other (duplicates included) is in this bag
        """
        return fits(other, self)

    def __sub__(self, other):
        return consume(other, self)

    def __add__(self, other):
        return LetterBag(self._letters + tuple(other))


def fits(word_chars, bag):
    """
    can word_chars be spelled with the letters in bag

    each character of the word uses up one letter so "happy" needs two p's
    """
    word_chars = tuple(word_chars)
    remaining = tuple(bag)

    # quick way out if the word is longer than the letters available
    if len(word_chars) > len(remaining):
        return False

    for c in word_chars:
        if c not in remaining:
            return False
        remaining = remove_first(remaining, c)

    return True

def consume(word_chars, bag):
    """
    return a new bag with the letters of word_chars taken out of bag

    only valid when fits(word_chars, bag), anything else is a bug in the caller
    """
    remaining = tuple(bag)

    for c in word_chars:
        assert c in remaining, f"can't take {c!r} from letters: {''.join(remaining)!r}"
        remaining = remove_first(remaining, c)

    return LetterBag(remaining)
