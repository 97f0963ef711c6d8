#!/usr/bin/env python3

import logging

from resgraph import (Resource, GraphRegistry, around_initialize,
                      after_initialize, GraphMissingException)

logging.basicConfig(level=logging.DEBUG)


class Person(Resource):
    rdf_type = 'http://example.org/def/Person'
    graph_uri = 'http://swirrl.com/graph/people'

    @after_initialize
    def set_defaults(self):
        self.nickname = None


class Employee(Person):
    rdf_type = 'http://example.org/def/Employee'

    @around_initialize
    def timed(self, proceed):
        print("making", self.uri)
        proceed()
        print("made", self.uri, "in", self.graph_uri)


# All default graphs are set; nothing may change them from here on
GraphRegistry.get_instance().freeze()

me = Person('http://swirrl.com/ric.rdf#me')
print(me.graph_uri, me.rdf_type, me.new_record, me.key())

boss = Employee('http://swirrl.com/ric.rdf#boss',
                graph_uri='http://swirrl.com/graph/staff')
print(Person.type_matches(boss), boss.matches(Person), boss == me)

loose = Person('http://swirrl.com/ric.rdf#loose', ignore_graph=True)
try:
    loose.validate()
except GraphMissingException as e:
    print(e.errors.full_messages())

Person.persistence.mark_persisted(me)
print(me.key())
print(sorted([boss, me, loose]))
