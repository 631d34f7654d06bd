from typing import Callable, Dict


def english(inflector, locale):
    inflector.singular(r'([^s])s$', r'\1', locale)
    inflector.plural(r'([^s])$', r'\1s', locale)

    inflector.singular(r'(x|z|s|ss|ch|sh)es$', r'\1', locale)
    inflector.plural(r'(x|z|ss|ch|sh)$', r'\1es', locale)

    inflector.singular(r'ies$', 'y', locale)
    inflector.plural(r'([^aeiouy]|qu)y$', r'\1ies', locale)

    inflector.plural(r'(meta|data)$', r'\1', locale)

    inflector.irregular({
        'child':       'children',
        'equipment':   'equipment',
        'information': 'information',
        'man':         'men',
        'news':        'news',
        'person':      'people',
        'woman':       'women',
    }, locale=locale)


def french(inflector, locale):
    inflector.singular(r's$', '', locale)
    inflector.plural(r'([^s])$', r'\1s', locale)

    inflector.plural(r'(eu|eau)$', r'\1x', locale)
    inflector.singular(r'(eu|eau)x$', r'\1', locale)

    inflector.plural(r'(x|z)$', r'\1', locale)

    inflector.irregular({
        'monsieur':     'messieurs',
        'madame':       'mesdames',
        'mademoiselle': 'mesdemoiselles',
    }, locale=locale)


def spanish(inflector, locale):
    inflector.singular(r's$', '', locale)
    inflector.plural(r'$', 's', locale)

    inflector.singular(r'es$', '', locale)
    inflector.plural(r'([^aeéiou])$', r'\1es', locale)

    inflector.singular(r'ces$', 'z', locale)
    inflector.plural(r'z$', 'ces', locale)

    inflector.singular(r'iones$', 'ión', locale)
    inflector.plural(r'ión$', 'iones', locale)

    inflector.irregular('carácter', 'caracteres', locale)


LOCALES: Dict[str, Callable] = {
    'default': english,
    'auto':    english,
    'en':      english,
    'fr':      french,
    'es':      spanish,
}
