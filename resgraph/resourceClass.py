import logging

import rdflib as R

from .graphRegistry import GraphRegistry
from .initialization import (collect_marked_hooks,
                             before_hook,
                             after_hook)

__all__ = ['ResourceClass']

L = logging.getLogger(__name__)

# Class-body declarations that are taken out of the class namespace and
# stored by the metaclass. Instances have properties with the same names.
CLASS_DECLARATIONS = ('graph_uri', 'rdf_type')


class ResourceClass(type):

    """A type for resource classes

    Reads the class-level declarations of a resource class when the class is
    defined:

    ``rdf_type``
        The RDF type written for each new instance. Inherited.
    ``graph_uri``
        The default graph for instances. Recorded in the class's graph
        registry, and inherited through it.
    ``graph_registry``
        The :class:`~resgraph.graphRegistry.GraphRegistry` to record the
        default graph in. Inherited. The process-wide registry is used if no
        class in the hierarchy names one.

    Methods marked with :func:`~resgraph.initialization.around_initialize`,
    :func:`~resgraph.initialization.before_initialize` or
    :func:`~resgraph.initialization.after_initialize` become initialize hooks.
    """

    def __new__(mcs, name, bases, dct):
        declared = dict()
        for k in CLASS_DECLARATIONS:
            if k in dct and not isinstance(dct[k], property):
                declared[k] = dct.pop(k)
        cls = super(ResourceClass, mcs).__new__(mcs, name, bases, dct)
        cls._declared = declared
        return cls

    def __init__(self, name, bases, dct):
        L.debug("INITIALIZING %s", name)
        super(ResourceClass, self).__init__(name, bases, dct)
        declared = self.__dict__['_declared']
        del self._declared

        if 'rdf_type' in declared:
            self.rdf_type = declared['rdf_type']

        self._own_initialize_hooks = collect_marked_hooks(dct)

        self.children = []
        self.parents = tuple(x for x in bases if isinstance(x, ResourceClass))
        for c in self.parents:
            c.add_child(self)

        registry = self.registry
        registry.register(self)
        if 'graph_uri' in declared:
            registry.set_default_graph(self, declared['graph_uri'])

    @property
    def registry(self):
        """ The graph registry this class records its default graph in """
        r = getattr(self, 'graph_registry', None)
        if r is None:
            r = GraphRegistry.get_instance()
        return r

    @property
    def rdf_type(self):
        return getattr(self, '_rdf_type', None)

    @rdf_type.setter
    def rdf_type(self, new_type):
        if new_type is not None and not isinstance(new_type, R.URIRef):
            new_type = R.URIRef(str(new_type))
        self._rdf_type = new_type

    @property
    def graph_uri(self):
        return self.default_graph()

    @graph_uri.setter
    def graph_uri(self, new_graph_uri):
        self.set_default_graph(new_graph_uri)

    def set_default_graph(self, graph_uri):
        """ Set the default graph for instances of this class and of
        subclasses that don't have their own
        """
        self.registry.set_default_graph(self, graph_uri)

    def default_graph(self):
        """ The default graph for instances of this class, or `None`

        Each class in the method resolution order is asked in turn, each in
        its own registry, so a subclass naming a different registry still
        inherits the graph of its base.
        """
        for klass in self.__mro__:
            if isinstance(klass, ResourceClass):
                registry = klass.registry
                if klass in registry:
                    return registry.recorded_graph(klass)
        return None

    def around_initialize(self, hook):
        """ Add an around hook, a callable taking the new object and
        ``proceed``. It runs inside all hooks added before it.

        Returns the hook so this can be used as a decorator.
        """
        self._own_initialize_hooks.append(hook)
        return hook

    def before_initialize(self, func):
        """ Add a callable taking the new object to run before the core
        initialization step
        """
        self._own_initialize_hooks.append(before_hook(func))
        return func

    def after_initialize(self, func):
        """ Add a callable taking the new object to run after the core
        initialization step
        """
        self._own_initialize_hooks.append(after_hook(func))
        return func

    def initialize_hooks(self):
        """ All initialize hooks for this class, outermost first.

        Hooks of base classes come before (and so wrap) those of subclasses. A
        method hook is included once even if subclasses mark an override of
        the method again. Marked methods of plain mixin classes count too.
        """
        res = []
        seen_methods = set()
        for klass in reversed(self.__mro__):
            if isinstance(klass, ResourceClass):
                hooks = klass.__dict__.get('_own_initialize_hooks', ())
            else:
                hooks = collect_marked_hooks(klass.__dict__)
            for hook in hooks:
                method_name = getattr(hook, 'method_name', None)
                if method_name is not None:
                    if method_name in seen_methods:
                        continue
                    seen_methods.add(method_name)
                res.append(hook)
        return res

    def type_matches(self, other):
        """ Class-level case matching.

        If `other` is a class, returns whether this class is `other` or one of
        its subclasses. Otherwise returns whether `other` is an instance of
        this class or of one of its subclasses.
        """
        if isinstance(other, type):
            return issubclass(self, other)
        else:
            return isinstance(other, self)

    def add_child(self, child):
        L.debug('adding child %s to %s', child.__name__, self.__name__)
        self.children.append(child)

    def descendants(self):
        """ The subclasses of this class, transitively """
        res = set()
        border = list(self.children)
        while border:
            c = border.pop()
            if c not in res:
                res.add(c)
                border.extend(c.children)
        return res
