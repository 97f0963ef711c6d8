"""
The persistence state of resources.

A store that saves or deletes resources records the outcome through a
:class:`Persistence` object. Resources read their state back through the same
object, so a resource's :meth:`~resgraph.resource.Resource.key` always reflects
what the store last recorded.
"""
import logging

__all__ = ['Persistence', 'PersistenceState']

L = logging.getLogger(__name__)


class Persistence(object):

    """ What a resource needs to know from its store. An abstract base class. """

    def persisted(self, resource):
        """ Must return True if `resource` has been saved and not destroyed """
        raise NotImplementedError()

    def destroyed(self, resource):
        """ Must return True if `resource` has been removed from the store """
        raise NotImplementedError()


class PersistenceState(Persistence):

    """ Keeps the state in flags on the resource itself.

    A resource starts out as a new record. :meth:`mark_persisted` clears that,
    :meth:`mark_destroyed` sets the destroyed flag and :meth:`mark_new` puts a
    resource back into its initial state.
    """

    def persisted(self, resource):
        return not (resource.new_record or self.destroyed(resource))

    def destroyed(self, resource):
        return getattr(resource, '_destroyed', False)

    def mark_persisted(self, resource):
        L.debug("%r persisted", resource)
        resource._new_record = False

    def mark_destroyed(self, resource):
        L.debug("%r destroyed", resource)
        resource._destroyed = True

    def mark_new(self, resource):
        resource._new_record = True
        resource._destroyed = False
