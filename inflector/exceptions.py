class InflectorException(Exception):
    pass


class LocaleNotFound(InflectorException):
    pass


class InvalidLocaleSource(InflectorException):
    pass


class InvalidRule(InflectorException):
    pass
