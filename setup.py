from setuptools import setup

# install with: pip install -e .[test]

setup(
    name='words-with-letters',
    version='0.1.0',
    packages=['wwl'],
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'words-with-letters = wwl.sentenceui:cli',
        ],
    },
)
