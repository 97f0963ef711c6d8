import logging

import rdflib as R

from .configure import Configureable, BadConf
from .utils import FCN

__all__ = ['GraphRegistry', 'RegistryFrozenException']

L = logging.getLogger(__name__)


class RegistryFrozenException(Exception):

    """ Raised when a default graph is recorded after the registration phase
    has ended
    """

    def __init__(self, registry, cls):
        super(RegistryFrozenException, self).__init__(
            "Cannot set the default graph for {} on {!r}: the registry is"
            " frozen".format(cls.__name__, registry))
        self.registry = registry
        self.cls = cls


class GraphRegistry(Configureable):

    """ Holds the default graph for each resource class.

    A resource class records its default graph here when it is defined (or
    later, through :meth:`set_default_graph`). Lookups fall back through the
    class's method resolution order, so subclasses inherit the graph of their
    nearest ancestor that has one.

    Writes are expected only during start-up, before any instances are
    constructed. :meth:`freeze` marks the end of that phase; any write after it
    raises :exc:`RegistryFrozenException`.
    """

    instance = None

    configuration_variables = {
        "resource.default_graphs": {
            "description": "A mapping from fully-qualified resource class"
            " names to the URI of the default graph for that class. Applied by"
            " :meth:`GraphRegistry.configure`",
            "type": dict,
            "directly_configureable": True},
    }

    @classmethod
    def get_instance(cls):
        """ The process-wide registry used by classes that don't name their
        own ``graph_registry``
        """
        if cls.instance is None:
            cls.instance = cls()
        return cls.instance

    def __init__(self, name=None):
        self.name = name
        self._graphs = dict()
        self._classes = dict()
        self._frozen = False

    def register(self, cls):
        """ Record a resource class so that configuration can refer to it by
        name. Called when the class is defined.
        """
        L.debug("REGISTERING %s in %r", cls.__name__, self)
        self._classes[FCN(cls)] = cls

    def lookup_class(self, name):
        """ Returns the registered class with the given fully-qualified name

        Raises
        ------
        KeyError
            If no class is registered under `name`
        """
        return self._classes[name]

    @property
    def classes(self):
        return list(self._classes.values())

    def set_default_graph(self, cls, graph_uri):
        """ Record the default graph for `cls`. The last write wins.

        No validation is done here. An unusable graph URI is only reported when
        an instance of `cls` is validated.
        """
        if self._frozen:
            raise RegistryFrozenException(self, cls)
        if graph_uri is not None and not isinstance(graph_uri, R.URIRef):
            graph_uri = R.URIRef(str(graph_uri))
        L.debug("Setting the default graph for %s to %s",
                cls.__name__, graph_uri)
        self._graphs[cls] = graph_uri

    def get_default_graph(self, cls):
        """ The most specific default graph recorded for `cls` or one of its
        ancestors, or `None` if there isn't one
        """
        for klass in cls.__mro__:
            if klass in self._graphs:
                return self._graphs[klass]
        return None

    def recorded_graph(self, cls):
        """ The graph recorded directly on `cls`, ignoring its ancestors

        Raises
        ------
        KeyError
            If no graph is recorded for `cls` in this registry
        """
        return self._graphs[cls]

    def clear_default_graph(self, cls):
        """ Remove the graph recorded directly on `cls`, if any """
        if self._frozen:
            raise RegistryFrozenException(self, cls)
        self._graphs.pop(cls, None)

    def freeze(self):
        """ End the registration phase """
        L.debug("Freezing %r", self)
        self._frozen = True

    @property
    def frozen(self):
        return self._frozen

    def configure(self, conf=None):
        """ Apply the ``resource.default_graphs`` configuration value

        Parameters
        ----------
        conf : :class:`~resgraph.configure.Configuration`, optional
            Where to read the value from. Defaults to the shared configuration.

        Raises
        ------
        BadConf
            If the value isn't a mapping or names a class that isn't registered
        """
        if conf is None:
            conf = self.conf
        graphs = conf.get('resource.default_graphs', {})
        if not isinstance(graphs, dict):
            raise BadConf("resource.default_graphs must be a mapping from"
                          " class names to graph URIs")
        for class_name, graph_uri in graphs.items():
            try:
                cls = self.lookup_class(class_name)
            except KeyError:
                raise BadConf(
                    "resource.default_graphs names {}, which is not a"
                    " registered resource class".format(class_name))
            self.set_default_graph(cls, graph_uri)

    def __contains__(self, cls):
        return cls in self._graphs

    def __repr__(self):
        if self.name:
            return "GraphRegistry({!r})".format(self.name)
        return "GraphRegistry()"
