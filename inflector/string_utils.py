import re
from typing import Callable, Union

from unidecode import unidecode

DEFAULT_TRANSFORM = 'Any-Latin; Latin-ASCII; [\\u0080-\\u7fff] remove;'


def _to_ascii(string: str) -> str:
    return unidecode(string, errors='ignore')


TRANSFORMS = {
    DEFAULT_TRANSFORM:         _to_ascii,
    'Any-Latin; Latin-ASCII;': _to_ascii,
    'Any-Latin; Latin-ASCII':  _to_ascii,
    'Latin-ASCII':             _to_ascii,
}


def transliterate(string: str, transform: Union[str, Callable[[str], str]] = DEFAULT_TRANSFORM) -> str:
    """
    Replace non-ASCII characters with an ASCII approximation.

    :param string: The string to transliterate.
    :param transform: A transform ID from ``TRANSFORMS``, or a callable mapping
        a string to its transliteration. The transform IDs all go through
        ``unidecode``, which maps every script to Latin, strips the diacritics
        and drops the characters it has no mapping for.
    :return: The transliterated string.
    :raises ValueError: If ``transform`` is an unknown transform ID.
    """
    if callable(transform):
        return transform(string)
    try:
        transliterator = TRANSFORMS[transform]
    except KeyError:
        raise ValueError(f'Unknown transform "{transform}", expected one of {list(TRANSFORMS)}') from None
    return transliterator(string)


def _ucfirst(word: str) -> str:
    return word[:1].upper() + word[1:]


def _lcfirst(word: str) -> str:
    return word[:1].lower() + word[1:]


def _ucwords(string: str) -> str:
    # Unlike str.title(), only the first letter of each word is touched
    return re.sub(r'(^|\s)(\S)', lambda m: m.group(1) + m.group(2).upper(), string)


def camelize(word: str) -> str:
    """
    Convert an under_scored or dashed word to CamelCase.

    :param word: The word to convert (e.g. ``'red_bike'`` or ``'red-bike'``).
    :return: The CamelCase word (e.g. ``'RedBike'``).

    A backslash is kept as a namespace separator and the letter following it
    is upper cased: ``'my_name\\space'`` becomes ``'MyName\\Space'``.
    """
    word = re.sub(r'([a-z])([A-Z])', r'\1_\2', word)
    camelized = _ucwords(re.sub(r'[_-]', ' ', word.lower())).replace(' ', '')
    return re.sub(r'\\[a-z]', lambda m: m.group(0).upper(), camelized)


def camelback(word: str) -> str:
    """Convert an under_scored or dashed word to camelBack (e.g. ``'redBike'``)."""
    return _lcfirst(camelize(word))


def underscore(word: str) -> str:
    """
    Convert a CamelCase word to an under_scored one.

    :param word: The CamelCase word (e.g. ``'RedBike'``).
    :return: The under_scored word (e.g. ``'red_bike'``).
    """
    underscored = re.sub(r'(?<=\w)([A-Z])', r'_\1', word).replace('-', '_')
    return transliterate(underscored).lower()


def dasherize(word: str) -> str:
    return word.replace('_', '-')


def humanize(word: str, separator: str = '_') -> str:
    """
    Make an under_scored word human readable: the trailing ``_id`` is removed,
    separators become spaces and the first letter is upper cased.

    :param word: The word to convert (e.g. ``'red_bike_id'``).
    :param separator: The separator used in ``word``.
    :return: The human readable version (e.g. ``'Red bike'``).
    """
    word = re.sub(r'_id$', '', word)
    if separator:
        word = word.replace(separator, ' ')
    return _ucfirst(word)


def titleize(word: str, separator: str = '_') -> str:
    """Like ``humanize()``, but every word is capitalized (e.g. ``'Red Bike'``)."""
    return _ucwords(humanize(word, separator))


def slug(string: str, replacement: str = '-') -> str:
    """
    Convert a string to a slug.

    :param string: An arbitrary string.
    :param replacement: The string used in place of spaces.
    :return: The transliterated string, where each run of spaces and non word
        characters is replaced by ``replacement``.
    """
    spaced = re.sub(r'[^\w\s]', ' ', transliterate(string))
    return re.sub(r'\s+', lambda m: replacement, spaced.strip())


def parameterize(string: str, replacement: str = '-') -> str:
    """Like ``slug()``, but lower cased."""
    return slug(string, replacement).lower()
