# -*- coding: utf-8 -*-

"""
Resources are domain objects stored as RDF triples. Each one is identified by
a URI and belongs to a graph, the named partition of the store that its triples
are written to.

A resource class declares its RDF type and default graph in its body::

    class Person(Resource):
        rdf_type = 'http://example.org/def/Person'
        graph_uri = 'http://example.org/graph/people'

Creating ``Person('http://example.org/id/me')`` checks the URI, allocates a
repository for the resource's triples and runs the class's initialize hooks
around the step that assigns the graph and the RDF type. Either a complete
resource comes back or the first error raised along the way propagates.

Two resources are equal when they have the same class and the same URI.
Resources sort by URI.

Notes:

- Default graphs should all be set before any resources are created. Call
  :meth:`GraphRegistry.freeze <resgraph.graphRegistry.GraphRegistry.freeze>`
  to enforce that.

- Graph URIs are not checked when they are set. A resource whose graph is
  missing fails :meth:`Resource.validate <resgraph.resource.Resource.validate>`.

Classes
-------
.. automodule:: resgraph.resource
.. automodule:: resgraph.resourceClass
.. automodule:: resgraph.graphRegistry
.. automodule:: resgraph.initialization
.. automodule:: resgraph.persistence
.. automodule:: resgraph.validation
.. automodule:: resgraph.configure
"""

import logging

from .configure import Configuration, Configureable
from .graphRegistry import GraphRegistry, RegistryFrozenException
from .initialization import (around_initialize,
                             before_initialize,
                             after_initialize,
                             HookChainException)
from .persistence import Persistence, PersistenceState
from .resource import Resource, ResourceException, UriMissingException
from .validation import (ValidationException,
                         InvalidUriException,
                         GraphMissingException)

__version__ = "0.1.0"

L = logging.getLogger(__name__)

__all__ = ['Resource',
           'GraphRegistry',
           'Persistence',
           'PersistenceState',
           'around_initialize',
           'before_initialize',
           'after_initialize',
           'ResourceException',
           'UriMissingException',
           'ValidationException',
           'InvalidUriException',
           'GraphMissingException',
           'HookChainException',
           'RegistryFrozenException',
           'setConf',
           'config',
           'loadConfig']


def config(key=None, value=None):
    if key is None:
        return Configureable.conf
    elif value is None:
        return Configureable.conf[key]
    else:
        Configureable.conf[key] = value


def loadConfig(f, registry=None):
    """ Load configuration from a JSON file and apply the default graphs in
    it

    Parameters
    ----------
    f : str
        The name of the configuration file
    registry : GraphRegistry, optional
        The registry to apply ``resource.default_graphs`` to. Defaults to the
        process-wide registry.
    """
    Configureable.setConf(Configuration.open(f))
    if registry is None:
        registry = GraphRegistry.get_instance()
    registry.configure(Configureable.conf)
    L.info("Loaded configuration from %s", f)
    return Configureable.conf


def setConf(conf):
    """ Set the configuration

    Parameters
    ----------
    conf : str, Configuration or dict
        The configuration to use.

        If a Configuration object is provided, then it's used as is. The
        contents of a dict are copied into a new Configuration. A string is
        taken as the name of a JSON file to read the configuration from.
    """
    if isinstance(conf, Configuration):
        Configureable.setConf(conf)
    elif isinstance(conf, dict):
        Configureable.setConf(Configuration().copy(conf))
    elif isinstance(conf, str):
        Configureable.setConf(Configuration.open(conf))
    else:
        raise TypeError("Can't make a configuration from {!r}".format(conf))
