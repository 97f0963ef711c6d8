import logging

import rdflib as R

from .resourceClass import ResourceClass
from .initialization import InitializationPipeline
from .persistence import PersistenceState
from .validation import (Errors,
                         PresenceValidator,
                         UrlValidator,
                         ValidationException,
                         InvalidUriException,
                         GraphMissingException,
                         is_url)

__all__ = ['Resource', 'ResourceException', 'UriMissingException']

L = logging.getLogger(__name__)


class ResourceException(Exception):
    pass


class UriMissingException(ResourceException):

    """ Raised when a resource is created without a URI """
    pass


class Resource(metaclass=ResourceClass):

    """
    A domain object stored in an RDF graph.

    A resource is identified by its class and its URI: two resources are equal
    when both match. It's stored in the graph named by its :attr:`graph_uri`,
    which defaults to the one declared on its class::

        class Person(Resource):
            rdf_type = 'http://example.org/def/Person'
            graph_uri = 'http://example.org/graph/people'

        me = Person('http://example.org/id/me')
        elsewhere = Person('http://example.org/id/me',
                           graph_uri='http://example.org/graph/other')

    Attributes
    ----------
    uri : rdflib.term.URIRef
        The identifier of this resource
    graph_uri : rdflib.term.URIRef or None
        The graph this resource is stored in. A resource without one can't be
        persisted, which :meth:`validate` reports.
    repository : rdflib.graph.Graph
        Triples about this resource, owned by this resource alone
    validators : tuple of Validator
        Checks run by :meth:`valid` and :meth:`validate`
    persistence : Persistence
        Reports whether a resource has been persisted or destroyed
    """

    graph_registry = None

    validators = (PresenceValidator('graph_uri',
                                    exception=GraphMissingException),
                  UrlValidator('uri'))

    persistence = PersistenceState()

    def __init__(self, uri, graph_uri=None, ignore_graph=False):
        """
        Parameters
        ----------
        uri : str or rdflib.term.URIRef
            The URI of the resource
        graph_uri : str or rdflib.term.URIRef, optional
            The graph to store the resource in. Overrides the default graph of
            the class.
        ignore_graph : bool
            If True, the default graph of the class isn't used. A graph
            given in `graph_uri` still is.

        Raises
        ------
        UriMissingException
            If `uri` is None
        InvalidUriException
            If `uri` isn't URL-shaped
        """
        if uri is None:
            raise UriMissingException('uri missing')
        if not is_url(uri):
            errors = Errors()
            errors.add('uri', "is not a valid URL")
            raise InvalidUriException(
                "{!r} is not a valid URI for {}".format(
                    str(uri), type(self).__name__), errors)

        self._uri = R.URIRef(str(uri))
        self._graph_uri = None
        self._new_record = True
        self.repository = self.new_repository()
        self.errors = Errors()

        def core(resource):
            resource._resolve_graph_uri(graph_uri, ignore_graph)
            resource.set_rdf_type()

        InitializationPipeline(type(self).initialize_hooks(), core).run(self)
        L.debug("Created %r", self)

    @classmethod
    def new_repository(cls):
        """ Returns an empty triple buffer for a new instance """
        return R.Graph()

    def _resolve_graph_uri(self, graph_uri, ignore_graph):
        if graph_uri is None and not ignore_graph:
            graph_uri = type(self).default_graph()
        if graph_uri is not None:
            self._graph_uri = R.URIRef(str(graph_uri))

    def set_rdf_type(self):
        """ Write the class's RDF type, if it has one """
        rdf_type = type(self).rdf_type
        if rdf_type is not None:
            self.rdf_type = rdf_type

    @property
    def uri(self):
        return self._uri

    @property
    def graph_uri(self):
        return self._graph_uri

    @property
    def rdf_type(self):
        """ The RDF type of this resource in its repository, or `None`.

        If there's more than one, an arbitrary one is returned.
        """
        return self.repository.value(self._uri, R.RDF.type)

    @rdf_type.setter
    def rdf_type(self, new_type):
        self.repository.set((self._uri, R.RDF.type, R.URIRef(str(new_type))))

    @property
    def new_record(self):
        return self._new_record

    @property
    def persisted(self):
        return self.persistence.persisted(self)

    @property
    def destroyed(self):
        return self.persistence.destroyed(self)

    @property
    def identity(self):
        """ A resource is absolutely identified by its class and URI """
        return (type(self), str(self._uri))

    def key(self):
        """ The key for the resource.

        Returns
        -------
        list of str or None
            A list holding the URI of the resource, or None if the resource is
            new
        """
        if self.persisted or self.destroyed:
            return [str(self._uri)]
        return None

    def to_list(self):
        return [self]

    def compare(self, other):
        """ Compares the URIs of this resource and `other` as strings.

        Returns a negative number, zero or a positive number. The result only
        orders resources of the same class: resources of different classes
        with the same URI compare as zero although they aren't equal.
        """
        a = str(self._uri)
        b = str(other.uri)
        return (a > b) - (a < b)

    def __eq__(self, other):
        if not isinstance(other, Resource):
            return NotImplemented
        return (type(self) is type(other) and
                str(self._uri) == str(other.uri))

    def __hash__(self):
        return hash(self.identity)

    def __lt__(self, other):
        if not isinstance(other, Resource):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Resource):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Resource):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Resource):
            return NotImplemented
        return self.compare(other) >= 0

    def matches(self, other):
        """ Case matching for an instance.

        If `other` is a class, returns whether the class of this resource is
        `other` or one of its subclasses. Otherwise returns ``self == other``.
        """
        if isinstance(other, type):
            return type(self).type_matches(other)
        return self == other

    def valid(self):
        """ Runs the validators and records what they find in :attr:`errors`

        Returns
        -------
        bool
            True if there were no errors
        """
        self.errors.clear()
        for v in self.validators:
            v.validate(self, self.errors)
        return not self.errors

    def validate(self):
        """ Runs the validators and raises if any fail

        Raises
        ------
        ValidationException
            The exception type of the first validator that failed. All of the
            errors are in its `errors` attribute.
        """
        if self.valid():
            return
        for v in self.validators:
            if v.attribute in self.errors:
                raise v.exception(
                    "{!r} is invalid: {}".format(
                        self, "; ".join(self.errors.full_messages())),
                    self.errors)
        raise ValidationException("{!r} is invalid".format(self), self.errors)

    def __str__(self):
        return str(self._uri)

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, str(self._uri))
