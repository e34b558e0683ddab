from blinker import signal

class Signals:
    """
    progress notifications sent while building sentences

    handlers are called with the SentenceBuilder as sender plus keywords
    """

    base_words_found    = signal('base_words_found',    doc='called with count of base words and found sentences once seeded')
    generation_expanded = signal('generation_expanded', doc='called with iteration, found and active after each expansion')

signals = Signals()
