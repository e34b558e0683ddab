from .letters import LetterBag

def canonical_order(words):
    """
    longest words first, words of the same length stay in the order they were added
    """
    return tuple(sorted(words, key=lambda word: -len(word)))

class Sentence:
    """
    words picked so far and the letters still available

    a sentence never changes, extending it or marking it exhausted
    returns a new sentence. words are always in canonical order and
    that tuple is what identifies a sentence.
    """

    def __init__(self, words, remaining_letters, exhausted=False):
        self._words     = canonical_order(words)
        self._remaining = LetterBag(remaining_letters)
        self._length    = sum([len(word) for word in self._words])
        self._exhausted = exhausted

    @classmethod
    def start(cls, word, remaining_letters):
        return cls([word], remaining_letters)

    @property
    def words(self):
        return self._words

    @property
    def key(self):
        """
        dedup key, two sentences with the same key are the same sentence
        """
        return self._words

    @property
    def remaining_letters(self):
        return self._remaining

    @property
    def length(self):
        """
        number of characters used by all the words
        """
        return self._length

    @property
    def exhausted(self):
        return self._exhausted

    @property
    def is_completed(self):
        return self._exhausted or not self._remaining

    def extend(self, word, remaining_letters):
        return Sentence(self._words + (word,), remaining_letters)

    def mark_exhausted(self):
        if self._exhausted:
            return self
        return Sentence(self._words, self._remaining, exhausted=True)

    def __eq__(self, other):
        if not isinstance(other, Sentence):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        state = 'exhausted' if self._exhausted else 'active'
        return f"Sentence({self.display(True)!r}, {state})"

    def display(self, with_unused=False):
        text = ' '.join(self._words)

        if with_unused and self._remaining:
            unused = ', '.join(self._remaining)
            text = f"{text} (unused letters: {unused})"

        return text
