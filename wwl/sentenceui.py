import pathlib

import click

from rich.console import Console
print = Console(color_system='truecolor', highlight=False).print

import logging
logger = logging.getLogger(__name__)

import wwl
from wwl.utils import dotdict
from wwl.words import read_dict, filter_words
from wwl.builder import SentenceBuilder
from wwl.signals import signals

def validate_letters(ctx, param, value):
    if not value:
        raise click.BadParameter("letters is empty")
    return value

class SentenceUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args    = args
        self.letters = args.letters.lower() if args.ignore_case else args.letters

        dictionary = read_dict(args.dict, args.ignore_case)
        base_words = filter_words(dictionary, self.letters)

        self.builder = SentenceBuilder(base_words, self.letters, jobs=args.jobs)

        if args.verbose:
            signals.base_words_found.connect(self.cb_seeded, sender=self.builder)
            signals.generation_expanded.connect(self.cb_generation, sender=self.builder)

    @property
    def sentence_len(self):
        return self.args.sentence_len

    def cb_seeded(self, sender, **kw):
        count = kw['count']
        found = kw['found']

        print(f"[dim]progress: {found} sentences started from {count} base words[/dim]")

    def cb_generation(self, sender, **kw):
        iteration = kw['iteration']
        found     = kw['found']
        active    = kw['active']

        print(f"[dim]progress: {found} sentences found, {active} in progress after iteration {iteration}[/dim]")

    def print_header(self):
        if self.sentence_len <= 1:
            return

        print(f"Found {self.builder.length} base words from the dictionary using the input letters {list(self.letters)}", markup=False, soft_wrap=True)
        print(f"Building sentences with {self.sentence_len} words, it might take a while depending on your settings...", soft_wrap=True)

    def print_sentences(self, sentences, total):
        print(f"[bold]Found {total} results -- listed sorted by length:[/bold]\n")

        for sentence in sentences:
            print(sentence, markup=False, soft_wrap=True)

    def run(self):
        self.print_header()

        ranked = self.builder.rank(self.builder.build(self.sentence_len))
        total = len(ranked)

        if self.args.limit is not None:
            ranked = ranked[:self.args.limit]

        self.print_sentences([s.display(self.args.unused) for s in ranked], total)


@click.command()
@click.option('-l', '--letters', required=True, callback=validate_letters, help="letters to use")
@click.option('--dict', default=wwl.dictfile, type=click.Path(exists=True, dir_okay=False, readable=True, path_type=pathlib.Path), help="dictionary file, one word per line")
@click.option('-w', '--words', 'sentence_len', required=True, type=click.IntRange(min=1), help="sentence length in words")
@click.option('--limit', default=None, type=click.IntRange(min=0), help="show at most this many sentences")
@click.option('--unused/--no-unused', default=True, help="show letters a sentence leaves unused")
@click.option('--ignore-case', is_flag=True, help="lower case letters and dictionary before searching")
@click.option('-j', '--jobs', default=1, type=click.IntRange(min=1), help="worker processes used to expand sentences")
@click.option('-v', '--verbose', is_flag=True, help="show progress while building sentences")
@click.pass_context
def cli(ctx, *_, **args):
    """
    make sentences out of a bag of letters

    every letter can be used at most once across the whole sentence. sentences
    using the most letters are listed first.
    """

    level = logging.DEBUG if args['verbose'] else logging.INFO
    logging.basicConfig(format="%(message)s", level=level)

    try:
        ui = SentenceUI(args)
        ui.run()
    except KeyboardInterrupt:
        pass
