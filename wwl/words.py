import collections

import logging
logger = logging.getLogger(__name__)

from .letters import LetterBag, fits, consume
from .sentence import Sentence

class BaseWord(collections.namedtuple('BaseWord', ['word', 'chars', 'char_number'])):
    """
    a dictionary word along with its characters

    char_number is kept so we can reject words longer than the remaining
    letters without walking the whole word
    """

    __slots__ = ()

    @classmethod
    def from_word(cls, word):
        chars = tuple(word)
        return cls(word, chars, len(chars))

    def can_build_from(self, letters):
        if self.char_number > len(letters):
            return False

        return fits(self.chars, letters)

    def to_sentence(self, letters):
        """
        start a new sentence with only this word in it
        """
        return Sentence.start(self.word, consume(self.chars, letters))


def read_dict(dictpath, ignore_case=False):
    """
    yield every line of the dictionary file as a candidate word

    lines are only split on \\n and lose their line ending (\\n or \\r\\n),
    nothing else is cleaned up. an empty line is a (very short) word too
    """
    with dictpath.open(encoding='utf-8', newline='\n') as f:
        for line in f:
            if line.endswith('\n'):
                line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]

            if ignore_case:
                line = line.lower()

            yield line

def filter_words(dictionary, letters):
    """
    return the words of dictionary that can be built from letters, in dictionary order
    """
    letters = LetterBag(letters)
    found = []
    count = 0

    for word in dictionary:
        count += 1
        word = BaseWord.from_word(word)
        if word.can_build_from(letters):
            found.append(word)

    logger.debug(f"found {len(found)} base words in {count} dictionary words")
    return found
