import pytest

@pytest.fixture
def letters():
    return 'youhouicanrunthis'

@pytest.fixture
def dictionary():
    return ['you', 'can', 'run', 'this']

@pytest.fixture
def dictfile(tmp_path, dictionary):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join(dictionary + ['thisisfartoolongforthebag', 'zebra']) + '\n')
    return path
