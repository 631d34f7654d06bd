import logging
import re
import threading
from typing import Dict, Optional, Set, Tuple

from .exceptions import InvalidRule

logger = logging.getLogger('Inflector')

PLURAL = 'plural'
SINGULAR = 'singular'
DIRECTIONS = (PLURAL, SINGULAR)


class Rule:
    """
    A compiled inflection rule.

    The pattern is always matched case-insensitively. The replacement is a
    ``re`` template and may reference the groups captured by the pattern.
    """

    __slots__ = ('pattern', 'replacement', 'regex')

    def __init__(self, pattern: str, replacement: str):
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise InvalidRule(f'Invalid inflection pattern "{pattern}": {e}') from e
        self.pattern = pattern
        self.replacement = replacement
        self.regex = regex

    def apply(self, word: str) -> Tuple[str, int]:
        return self.regex.subn(self.replacement, word)

    def __repr__(self):
        return f'Rule({self.pattern!r}, {self.replacement!r})'


class RuleStore:
    """
    Per-locale rule sets, one for each direction.

    Each rule set is kept as a tuple ordered from the most recently added
    rule to the oldest one. Writers replace the whole tuple under a lock, so
    readers can iterate a rule set without taking the lock.
    """

    def __init__(self):
        self._rules: Dict[str, Dict[str, Tuple[Rule, ...]]] = {direction: {} for direction in DIRECTIONS}
        self._lock = threading.Lock()

    def add_rule(self, direction: str, pattern: str, replacement: str, locale: str) -> Rule:
        """
        Insert a rule in front of the rules already registered for the
        locale and direction.

        :param direction: ``'plural'`` or ``'singular'``.
        :param pattern: The regular expression to match.
        :param replacement: The replacement template.
        :param locale: The locale the rule belongs to.
        :return: The new rule.
        :raises InvalidRule: If the pattern does not compile.

        A pattern that is already registered is dropped from its old position,
        so the new replacement wins and is tried first.
        """
        table = self._table(direction)
        rule = Rule(pattern, replacement)
        with self._lock:
            current = table.get(locale, ())
            table[locale] = (rule,) + tuple(r for r in current if r.pattern != pattern)
        logger.debug('Added %s rule %r -> %r for locale "%s"', direction, pattern, replacement, locale)
        return rule

    def rules(self, direction: str, locale: str) -> Tuple[Rule, ...]:
        return self._table(direction).get(locale, ())

    def has_rules(self, direction: str, locale: str) -> bool:
        return locale in self._table(direction)

    def locales(self) -> Set[str]:
        with self._lock:
            return {locale for table in self._rules.values() for locale in list(table)}

    def clear(self, locale: Optional[str] = None):
        with self._lock:
            for table in self._rules.values():
                if locale is None:
                    table.clear()
                else:
                    table.pop(locale, None)
        logger.debug('Cleared inflection rules for %s', f'locale "{locale}"' if locale is not None else 'all locales')

    def _table(self, direction: str) -> Dict[str, Tuple[Rule, ...]]:
        try:
            return self._rules[direction]
        except KeyError:
            raise ValueError(f'Unknown inflection direction "{direction}", expected one of {DIRECTIONS}') from None
