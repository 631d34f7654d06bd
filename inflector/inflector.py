import re
from typing import Callable, Dict, Optional, Union

from .exceptions import InvalidLocaleSource, LocaleNotFound
from .locales import LOCALES
from .rules import PLURAL, SINGULAR, RuleStore, logger
from .string_utils import (camelback, camelize, dasherize, humanize, parameterize, slug, titleize, transliterate,
                           underscore)


DEFAULT_LOCALE = 'default'


def common_prefix(first: str, second: str) -> str:
    """
    Return the longest common leading substring of two words.

    The comparison is done on characters, not on their encoded bytes, so a
    multi-byte character is never split: ``common_prefix('carácter', 'caracteres')``
    is ``'car'``.
    """
    index = 0
    length = min(len(first), len(second))
    while index < length and first[index] == second[index]:
        index += 1
    return first[:index]


def _escape_replacement(text: str) -> str:
    return text.replace('\\', '\\\\')


class Inflector:
    """
    A registry of inflection rules, organized by locale.

    A new instance has no rules at all: call ``load()`` to register the
    rules of a locale, or add rules one by one with ``plural()``,
    ``singular()`` and ``irregular()``.

    Within a locale, the rules registered last are tried first, and the first
    rule matching a word is the only one applied.
    """

    def __init__(self, locales: Optional[Dict[str, Callable]] = None):
        self.store = RuleStore()
        self.locales = dict(LOCALES if locales is None else locales)

    def plural(self, pattern: str, replacement: str, locale: str = DEFAULT_LOCALE):
        """
        Add a pluralization rule.

        :param pattern: A regular expression, matched case-insensitively.
        :param replacement: The replacement template, ``\\1`` refers to the first group.
        :param locale: The locale where the rule applies.
        :raises InvalidRule: If the pattern is not a valid regular expression.
        """
        self.store.add_rule(PLURAL, pattern, replacement, locale)

    def singular(self, pattern: str, replacement: str, locale: str = DEFAULT_LOCALE):
        """
        Add a singularization rule.

        :param pattern: A regular expression, matched case-insensitively.
        :param replacement: The replacement template, ``\\1`` refers to the first group.
        :param locale: The locale where the rule applies.
        :raises InvalidRule: If the pattern is not a valid regular expression.
        """
        self.store.add_rule(SINGULAR, pattern, replacement, locale)

    def irregular(self, singular: Union[str, Dict[str, str]], plural: Optional[str] = None,
                  locale: str = DEFAULT_LOCALE):
        """
        Add an irregular word.

        :param singular: The singular form, or a dictionary of singular to plural forms.
        :param plural: The plural form. Must be omitted when ``singular`` is a dictionary.
        :param locale: The locale where the irregularity applies.
        :raises TypeError: If ``plural`` is missing for a string, or given with a dictionary.

        Four rules are derived from each pair. Given the common prefix of both
        forms, ``'pe'`` for ``'person'`` / ``'people'``:

        - singular ``(person)$`` -> ``\\1``
        - singular ``(pe)ople$`` -> ``\\1rson``
        - plural ``(people)$`` -> ``\\1``
        - plural ``(pe)rson$`` -> ``\\1ople``

        The suffix rules also match compound words, so ``'ContactPerson'``
        becomes ``'ContactPeople'``.
        """
        if isinstance(singular, dict):
            if plural is not None:
                raise TypeError('irregular() takes no plural form with a dictionary, pass the locale as locale=...')
            for s, p in singular.items():
                self.irregular(s, p, locale)
            return
        if plural is None:
            raise TypeError('irregular() requires a plural form when the singular form is a string')

        prefix = common_prefix(singular, plural)
        s_suffix = singular[len(prefix):]
        p_suffix = plural[len(prefix):]
        logger.debug('Irregular "%s" / "%s" for locale "%s": prefix "%s"', singular, plural, locale, prefix)

        self.singular(f'({re.escape(singular)})$', r'\g<1>', locale)
        self.singular(f'({re.escape(prefix)}){re.escape(p_suffix)}$', r'\g<1>' + _escape_replacement(s_suffix), locale)
        self.plural(f'({re.escape(plural)})$', r'\g<1>', locale)
        self.plural(f'({re.escape(prefix)}){re.escape(s_suffix)}$', r'\g<1>' + _escape_replacement(p_suffix), locale)

    def pluralize(self, word: str, locale: str = DEFAULT_LOCALE) -> str:
        """
        Change a word from singular to plural.

        :param word: The word in singular form.
        :param locale: The locale of the rules to use.
        :return: The word in plural form, or ``word`` itself when no rule matches.
        """
        return self.inflect(PLURAL, word, locale)

    def singularize(self, word: str, locale: str = DEFAULT_LOCALE) -> str:
        """
        Change a word from plural to singular.

        :param word: The word in plural form.
        :param locale: The locale of the rules to use.
        :return: The word in singular form, or ``word`` itself when no rule matches.
        """
        return self.inflect(SINGULAR, word, locale)

    def inflect(self, direction: str, word: str, locale: str = DEFAULT_LOCALE) -> str:
        if not word or not self.store.has_rules(direction, locale):
            return word
        for rule in self.store.rules(direction, locale):
            result, count = rule.apply(word)
            if count:
                return result
        return word

    def register_locale(self, name: str, bundle: Callable):
        """
        Make a locale bundle available to ``load()``.

        :param name: The name passed to ``load()``.
        :param bundle: A callable ``bundle(inflector, locale)`` registering the rules.
        :raises InvalidLocaleSource: If ``bundle`` is not callable.
        """
        if not callable(bundle):
            raise InvalidLocaleSource(f"Error, the bundle for the `'{name}'` locale is not callable.")
        self.locales[name] = bundle

    def load(self, locale: str = DEFAULT_LOCALE, source: Optional[Callable] = None):
        """
        Load the rules of a locale.

        :param locale: The locale to load the rules into.
        :param source: A callable ``source(inflector, locale)`` registering the
            rules. When omitted, the bundle registered with the locale name is used.
        :raises InvalidLocaleSource: If ``source`` is not callable.
        :raises LocaleNotFound: If there is no ``source`` and no bundle for ``locale``.

        Loading adds rules on top of the existing ones, use ``reset()`` first
        to start from a clean locale.
        """
        if source is None:
            source = self.locales.get(locale)
            if source is None:
                raise LocaleNotFound(f"Error, unable to load the `'{locale}'` locale.")
        elif not callable(source):
            raise InvalidLocaleSource(f"Error, unable to load the `'{locale}'` locale.")

        logger.debug('Loading inflection rules for locale "%s"', locale)
        source(self, locale)

    def reset(self, locale: Optional[str] = None):
        """
        Remove the rules of ``locale``, or of every locale when ``locale`` is ``None``.

        The default rules are not reloaded: call ``load()`` afterwards.
        """
        self.store.clear(locale)


default_inflector = Inflector()
default_inflector.load()


def plural(pattern: str, replacement: str, locale: str = DEFAULT_LOCALE):
    default_inflector.plural(pattern, replacement, locale)


def singular(pattern: str, replacement: str, locale: str = DEFAULT_LOCALE):
    default_inflector.singular(pattern, replacement, locale)


def irregular(singular: Union[str, Dict[str, str]], plural: Optional[str] = None, locale: str = DEFAULT_LOCALE):
    default_inflector.irregular(singular, plural, locale)


def pluralize(word: str, locale: str = DEFAULT_LOCALE) -> str:
    return default_inflector.pluralize(word, locale)


def singularize(word: str, locale: str = DEFAULT_LOCALE) -> str:
    return default_inflector.singularize(word, locale)


def register_locale(name: str, bundle: Callable):
    default_inflector.register_locale(name, bundle)


def load(locale: str = DEFAULT_LOCALE, source: Optional[Callable] = None):
    default_inflector.load(locale, source)


def reset(locale: Optional[str] = None):
    default_inflector.reset(locale)


__all__ = [
    'Inflector', 'DEFAULT_LOCALE', 'default_inflector', 'common_prefix',
    'plural', 'singular', 'irregular', 'pluralize', 'singularize', 'register_locale', 'load', 'reset',
    'transliterate', 'camelize', 'camelback', 'underscore', 'dasherize', 'humanize', 'titleize', 'slug',
    'parameterize',
]
