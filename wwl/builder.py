import math
from concurrent.futures import ProcessPoolExecutor

import logging
logger = logging.getLogger(__name__)

from .letters import LetterBag, consume
from .signals import signals
from .words import filter_words

def expand_sentences(base_words, sentences):
    """
    return the next generation for the given sentences as {key: sentence}

    every sentence that can still grow is replaced by one new sentence per
    base word that fits its remaining letters. sentences that can't grow are
    carried over, marked exhausted, so they still count at the end.
    """
    expanded = {}

    for sentence in sentences:
        if sentence.is_completed:
            expanded[sentence.key] = sentence.mark_exhausted()
            continue

        remaining = sentence.remaining_letters
        logger.debug(f"\tsentence with {len(remaining)} remaining letters in progress")
        extended = False

        for word in base_words:
            if not word.can_build_from(remaining):
                continue

            more = sentence.extend(word.word, consume(word.chars, remaining))
            expanded.setdefault(more.key, more)
            extended = True

        if not extended:
            expanded[sentence.key] = sentence.mark_exhausted()

    return expanded

def chunks(items, n):
    """
    split items into at most n consecutive lists
    """
    size = math.ceil(len(items) / n) or 1
    return [items[i:i + size] for i in range(0, len(items), size)]

class SentenceBuilder:

    def __init__(self, base_words, letters, jobs=1):
        letters = LetterBag(letters)

        if not letters:
            raise ValueError("letters is empty")

        if jobs < 1:
            raise ValueError(f"invalid jobs: {jobs}, must be a positive integer")

        self.base_words = list(base_words)
        self.letters    = letters
        self.jobs       = jobs

    @property
    def length(self):
        return len(self.base_words)

    def seed(self):
        """
        the first generation, one sentence per base word
        """
        generation = {}

        for word in self.base_words:
            sentence = word.to_sentence(self.letters)
            generation.setdefault(sentence.key, sentence)

        signals.base_words_found.send(self, count=self.length, found=len(generation))
        return generation

    def expand(self, generation, executor=None):
        """
        return the generation following the given one, the given one is left untouched
        """
        sentences = list(generation.values())

        if executor is None or len(sentences) < 2:
            return expand_sentences(self.base_words, sentences)

        parts = chunks(sentences, self.jobs)
        expanded = {}

        for part in executor.map(expand_sentences, [self.base_words] * len(parts), parts):
            for key, sentence in part.items():
                expanded.setdefault(key, sentence)

        return expanded

    def _expand_all(self, generation, iterations, executor=None):
        for i in range(1, iterations + 1):
            logger.debug(f"expanding {len(generation)} sentences at iteration {i}")
            generation = self.expand(generation, executor)

            active = sum([1 for s in generation.values() if not s.is_completed])
            signals.generation_expanded.send(self, iteration=i, found=len(generation), active=active)

        return generation

    def build(self, sentence_len):
        """
        return the final generation of sentences with up to sentence_len words
        """
        if sentence_len < 1:
            raise ValueError(f"invalid sentence length: {sentence_len}, must be a positive integer")

        generation = self.seed()

        if self.jobs > 1 and sentence_len > 1:
            with ProcessPoolExecutor(max_workers=self.jobs) as executor:
                return self._expand_all(generation, sentence_len - 1, executor)

        return self._expand_all(generation, sentence_len - 1)

    @staticmethod
    def rank(generation):
        """
        longest sentences first, same length sentences in alphabetical order
        """
        if isinstance(generation, dict):
            generation = generation.values()

        # sentence.key is only there to make the order total when two
        # different word tuples join into the same text
        return sorted(generation, key=lambda s: (-s.length, s.display(), s.key))

    def sentences(self, sentence_len, with_unused=False, limit=None):
        """
        build, rank and render the sentences, at most limit of them
        """
        ranked = self.rank(self.build(sentence_len))

        if limit is not None:
            ranked = ranked[:limit]

        return [sentence.display(with_unused) for sentence in ranked]


def sentences_for_letters(dictionary, letters, sentence_len, with_unused=False, limit=None, jobs=1):
    """
    all sentences of sentence_len words spelled from letters, best first
    """
    if sentence_len < 1:
        raise ValueError(f"invalid sentence length: {sentence_len}, must be a positive integer")

    letters = LetterBag(letters)
    builder = SentenceBuilder(filter_words(dictionary, letters), letters, jobs=jobs)
    return builder.sentences(sentence_len, with_unused=with_unused, limit=limit)
