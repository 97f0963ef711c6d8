#
# Configuration for classes that need outside values to parameterize their
# behavior. Classes inherit from Configureable and read their values from
# self.conf
import json
import logging

__all__ = ['Configuration', 'Configureable', 'BadConf']

L = logging.getLogger(__name__)


class BadConf(Exception):

    """ Raised when a configuration can't be applied """
    pass


class Configuration(object):

    """ A simple configuration object. Enables setting and getting key-value pairs"""

    def __init__(self, **kwargs):
        self._properties = kwargs

    def __setitem__(self, pname, value):
        self._properties[pname] = value

    def __getitem__(self, pname):
        return self._properties[pname]

    def __contains__(self, thing):
        return (thing in self._properties)

    @classmethod
    def open(cls, file_name):
        """ Open a configuration file and read it to build the internal state.

        Parameters
        ----------
        file_name : str
            The name of a configuration file encoded as JSON

        Returns
        -------
        Configuration
            a Configuration object with the configuration taken from the JSON file

        Raises
        ------
        BadConf
            If the file doesn't hold a JSON object
        """
        with open(file_name) as f:
            d = json.load(f)
        if not isinstance(d, dict):
            raise BadConf(
                "The configuration file {} must contain a JSON object".format(
                    file_name))
        c = cls()
        c.copy(d)
        c['configure.file_location'] = file_name
        L.debug("Opened configuration %s", file_name)
        return c

    def copy(self, other):
        """ Copy configuration values from a different object.

        Parameters
        ----------
        other : dict or Configuration
            A dict or Configuration object to copy the configuration from

        Returns
        -------
        self
        """
        if isinstance(other, Configuration):
            self._properties = dict(other._properties)
        elif isinstance(other, dict):
            for x in other:
                self[x] = other[x]
        return self

    def get(self, pname, default=None):
        """ Retrieve a configuration value.

        Parameters
        ----------
        pname : str
            The key of the value to return.
        default : object
            The value to return if there is no value corresponding to the given key

        Returns
        -------
        object
            The value corresponding to the key in pname or `default` if none is
            available and a default is provided.

        Raises
        ------
        KeyError
            If the given key has no associated value and no default is provided
        """
        if pname in self._properties:
            return self._properties[pname]
        elif default is not None:
            return default
        else:
            raise KeyError(pname)


class Configureable(object):

    """ An object which can be configured.

    A ``Configureable`` object can access a :class:`Configuration` object,
    ``Configureable.conf``, which is shared among all ``Configureable`` objects.

    The configuration variables which can affect the behavior of a class should
    be documented in the ``configuration_variables`` class variable. Each entry
    may carry a "description" of how the value is used within the object, a
    "type" (purely descriptive) and a "directly_configureable" indicator.
    """

    conf = Configuration()
    """ The configuration """

    configuration_variables = dict()

    @classmethod
    def setConf(cls, conf):
        cls.conf = conf
