import pathlib

dictfile = pathlib.Path('/usr/share/dict/words')

import logging
logger = logging.getLogger(__name__)

from .letters import LetterBag, fits, consume
from .sentence import Sentence
from .words import BaseWord, read_dict, filter_words
from .builder import SentenceBuilder, sentences_for_letters
