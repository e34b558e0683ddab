from wwl.letters import LetterBag
from wwl.words import BaseWord, read_dict, filter_words

def test_base_word_caches_chars():
    word = BaseWord.from_word('happy')

    assert word.word == 'happy'
    assert word.chars == ('h', 'a', 'p', 'p', 'y')
    assert word.char_number == 5

def test_base_word_can_build_from():
    word = BaseWord.from_word('happy')

    assert word.can_build_from(LetterBag('yppah'))
    assert not word.can_build_from(LetterBag('hapy'))

def test_to_sentence():
    sentence = BaseWord.from_word('can').to_sentence(LetterBag('cane'))

    assert sentence.words == ('can',)
    assert sentence.remaining_letters == LetterBag('e')
    assert sentence.length == 3
    assert not sentence.exhausted

def test_filter_keeps_dictionary_order(letters):
    found = filter_words(['this', 'zebra', 'you', 'run', 'can'], letters)
    assert [w.word for w in found] == ['this', 'you', 'run', 'can']

def test_filter_excludes_words_longer_than_letters():
    found = filter_words(['abcdef', 'abc'], 'abcde')
    assert [w.word for w in found] == ['abc']

def test_filter_keeps_empty_line():
    found = filter_words(['', 'xyz'], 'abc')
    assert [w.word for w in found] == ['']

def test_read_dict(dictfile):
    words = list(read_dict(dictfile))

    assert words[:4] == ['you', 'can', 'run', 'this']
    assert 'zebra' in words

def test_read_dict_ignore_case(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('You\nCAN\n\nrun\n')

    assert list(read_dict(path)) == ['You', 'CAN', '', 'run']
    assert list(read_dict(path, ignore_case=True)) == ['you', 'can', '', 'run']

def test_read_dict_only_splits_on_newline(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes('ab\x0ccd\nzz\r\nef\u2028gh\nlast'.encode('utf-8'))

    assert list(read_dict(path)) == ['ab\x0ccd', 'zz', 'ef\u2028gh', 'last']

def test_read_dict_line_with_separator_is_one_word(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes('ab\u2028cd\n'.encode('utf-8'))

    assert filter_words(read_dict(path), 'abcd') == []
