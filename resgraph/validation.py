import logging
import re
from urllib.parse import urlsplit

__all__ = [
    'is_url',
    'Errors',
    'Validator',
    'PresenceValidator',
    'UrlValidator',
    'ValidationException',
    'InvalidUriException',
    'GraphMissingException']

L = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*$')
_WHITESPACE_RE = re.compile(r'\s')


class ValidationException(Exception):

    """ Raised when a resource fails validation

    Attributes
    ----------
    errors : Errors
        Every error found, not just the one that selected this exception type
    """

    def __init__(self, message, errors=None):
        super(ValidationException, self).__init__(message)
        self.errors = errors if errors is not None else Errors()


class InvalidUriException(ValidationException):

    """ Raised when a URI isn't URL-shaped """
    pass


class GraphMissingException(ValidationException):

    """ Raised when a resource has no graph to be stored in """
    pass


def is_url(value):
    """ Returns True if `value` is shaped like an absolute URL: a scheme, a
    network location and no whitespace
    """
    if value is None:
        return False
    s = str(value)
    if not s or _WHITESPACE_RE.search(s):
        return False
    try:
        parts = urlsplit(s)
    except ValueError:
        return False
    return bool(_SCHEME_RE.match(parts.scheme)) and bool(parts.netloc)


class Errors(object):

    """ Validation errors by attribute name """

    def __init__(self):
        self._messages = dict()

    def add(self, attribute, message):
        self._messages.setdefault(attribute, []).append(message)

    def __getitem__(self, attribute):
        return list(self._messages.get(attribute, ()))

    def __contains__(self, attribute):
        return attribute in self._messages

    def __iter__(self):
        return iter(self._messages)

    def __len__(self):
        return sum(len(v) for v in self._messages.values())

    def __bool__(self):
        return bool(self._messages)

    def clear(self):
        self._messages.clear()

    def full_messages(self):
        return ["{} {}".format(a, m)
                for a in self._messages
                for m in self._messages[a]]

    def __repr__(self):
        return "Errors({!r})".format(self._messages)


class Validator(object):

    """ Checks one attribute of a resource.

    Subclasses implement :meth:`check`, which returns an error message or
    `None`.

    Parameters
    ----------
    attribute : str
        The name of the attribute to check
    exception : type
        The :exc:`ValidationException` subclass raised by
        :meth:`Resource.validate <resgraph.resource.Resource.validate>` when
        this validator is the first to fail
    """

    exception = ValidationException

    def __init__(self, attribute, exception=None):
        self.attribute = attribute
        if exception is not None:
            self.exception = exception

    def check(self, value):
        raise NotImplementedError()

    def validate(self, resource, errors):
        """ Adds an error to `errors` if the attribute is bad. Returns True if
        it's fine.
        """
        message = self.check(getattr(resource, self.attribute, None))
        if message is None:
            return True
        L.debug("%r failed validation of %s: %s",
                resource, self.attribute, message)
        errors.add(self.attribute, message)
        return False

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.attribute)


class PresenceValidator(Validator):

    """ Fails for `None` and empty values """

    def check(self, value):
        if value is None or (hasattr(value, '__len__') and len(value) == 0):
            return "can't be blank"
        return None


class UrlValidator(Validator):

    """ Fails for values that aren't URL-shaped (see :func:`is_url`) """

    exception = InvalidUriException

    def check(self, value):
        if not is_url(value):
            return "is not a valid URL"
        return None
