import logging

from .constants import Namespace, PROGNAME

logger = logging.getLogger(PROGNAME)


def positive_int(value):
    """
    cast input to a non-negative integer

    Raises:
        TypeError: the input cannot be cast or is negative
    """
    try:
        value = int(value)
    except ValueError:
        raise TypeError('Must be a non-negative integer', value)
    if value < 0:
        raise TypeError('Must be a non-negative integer', value)
    return value


class WeakNamespace(Namespace):
    """
    Namespace where every attribute may be overridden by its environment variable equivalent
    """

    def is_env_overwritable(self, attr):
        return True
