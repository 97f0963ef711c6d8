import unittest

import rdflib as R

from resgraph.resource import Resource, UriMissingException
from resgraph.validation import InvalidUriException, ValidationException

from .base_test import _ResourceTest, PEOPLE_GRAPH, PERSON_TYPE


class InitializeTest(_ResourceTest):

    def test_uri_none(self):
        """ A URI of None is refused """
        with self.assertRaises(UriMissingException):
            self.Person(None)

    def test_uri_none_every_class(self):
        """ A URI of None is refused by subclasses as well """
        Employee = self.make_class('Employee', (self.Person,))
        Thing = self.make_class('Thing')
        for cls in (Employee, Thing):
            with self.assertRaises(UriMissingException):
                cls(None)

    def test_uri_not_a_url(self):
        with self.assertRaises(InvalidUriException) as cm:
            self.Person('not a uri')
        self.assertIn('uri', cm.exception.errors)

    def test_uri_without_host(self):
        with self.assertRaises(InvalidUriException):
            self.Person('foobar')

    def test_invalid_uri_is_a_validation_exception(self):
        with self.assertRaises(ValidationException):
            self.Person('')

    def test_sets_uri(self):
        person = self.Person('http://foobar')
        self.assertEqual(R.URIRef('http://foobar'), person.uri)

    def test_uri_round_trips_as_string(self):
        for u in ('http://swirrl.com/ric.rdf#me',
                  'https://example.org/a/b?c=d',
                  'urn://x/y'):
            self.assertEqual(u, str(self.Person(u).uri))

    def test_accepts_uriref(self):
        person = self.Person(R.URIRef('http://foobar'))
        self.assertEqual('http://foobar', str(person.uri))

    def test_graph_from_class(self):
        """ The graph URI comes from the class by default """
        person = self.Person('http://foobar')
        self.assertEqual(R.URIRef(PEOPLE_GRAPH), person.graph_uri)

    def test_graph_given(self):
        """ An explicit graph URI overrides the class default """
        person = self.Person('http://foobar', 'http://foobar/graph')
        self.assertEqual(R.URIRef('http://foobar/graph'), person.graph_uri)

    def test_graph_given_keyword(self):
        person = self.Person('http://swirrl.com/ric.rdf#me',
                             graph_uri='http://other/graph')
        self.assertEqual(R.URIRef('http://other/graph'), person.graph_uri)

    def test_ignore_graph(self):
        person = self.Person('http://foobar', ignore_graph=True)
        self.assertIsNone(person.graph_uri)

    def test_ignore_graph_keeps_given_graph(self):
        """ Only the class default is skipped, not a graph passed in """
        person = self.Person('http://foobar', graph_uri='http://explicit',
                             ignore_graph=True)
        self.assertEqual(R.URIRef('http://explicit'), person.graph_uri)

    def test_no_graph_anywhere(self):
        Thing = self.make_class('Thing')
        self.assertIsNone(Thing('http://foobar').graph_uri)

    def test_graph_uri_read_only(self):
        person = self.Person('http://foobar')
        with self.assertRaises(AttributeError):
            person.graph_uri = 'http://elsewhere'

    def test_uri_read_only(self):
        person = self.Person('http://foobar')
        with self.assertRaises(AttributeError):
            person.uri = 'http://elsewhere'

    def test_rdf_type_from_class(self):
        person = self.Person('http://foobar')
        self.assertEqual(R.URIRef(PERSON_TYPE), person.rdf_type)
        self.assertIn((person.uri, R.RDF.type, R.URIRef(PERSON_TYPE)),
                      person.repository)

    def test_no_rdf_type(self):
        Thing = self.make_class('Thing')
        thing = Thing('http://foobar')
        self.assertIsNone(thing.rdf_type)
        self.assertEqual(0, len(thing.repository))

    def test_rdf_type_inherited(self):
        Employee = self.make_class('Employee', (self.Person,))
        self.assertEqual(R.URIRef(PERSON_TYPE),
                         Employee('http://foobar').rdf_type)

    def test_set_rdf_type(self):
        person = self.Person('http://foobar')
        person.rdf_type = 'http://employee'
        self.assertEqual(R.URIRef('http://employee'), person.rdf_type)
        self.assertEqual(1, len(person.repository))

    def test_repository(self):
        """ Each resource gets its own graph """
        a = self.Person('http://foobar')
        b = self.Person('http://foobar')
        self.assertIsInstance(a.repository, R.Graph)
        self.assertIsNot(a.repository, b.repository)

    def test_new_record(self):
        self.assertTrue(self.Person('http://foobar').new_record)

    def test_example_person(self):
        self.Person.graph_uri = 'http://swirrl.com/graph/people'
        person = self.Person('http://swirrl.com/ric.rdf#me')
        self.assertEqual('http://swirrl.com/ric.rdf#me', str(person.uri))
        self.assertEqual('http://swirrl.com/graph/people',
                         str(person.graph_uri))
        self.assertTrue(person.new_record)
        self.assertIsNone(person.key())


class IdentityTest(_ResourceTest):

    def setUp(self):
        super(IdentityTest, self).setUp()
        self.Dog = self.make_class('Dog')

    def test_identity(self):
        person = self.Person('http://foobar')
        self.assertEqual((self.Person, 'http://foobar'), person.identity)

    def test_equal(self):
        a = self.Person('http://foobar')
        b = self.Person('http://foobar', 'http://foobar/graph')
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(0, a.compare(b))

    def test_not_equal_different_uri(self):
        self.assertNotEqual(self.Person('http://foobar'),
                            self.Person('http://foobaz'))

    def test_not_equal_different_class(self):
        """ The same URI in two classes makes two different resources """
        self.assertNotEqual(self.Person('http://foobar'),
                            self.Dog('http://foobar'))

    def test_not_equal_subclass(self):
        Employee = self.make_class('Employee', (self.Person,))
        a = self.Person('http://foobar')
        b = Employee('http://foobar')
        self.assertNotEqual(a, b)
        self.assertNotEqual(b, a)

    def test_not_equal_to_uri(self):
        self.assertNotEqual(self.Person('http://foobar'),
                            R.URIRef('http://foobar'))

    def test_set_membership(self):
        s = {self.Person('http://foobar'), self.Person('http://foobar'),
             self.Dog('http://foobar')}
        self.assertEqual(2, len(s))

    def test_ordering(self):
        people = [self.Person('http://c'),
                  self.Person('http://a'),
                  self.Person('http://b')]
        self.assertEqual(['http://a', 'http://b', 'http://c'],
                         [str(p.uri) for p in sorted(people)])

    def test_compare(self):
        a = self.Person('http://a')
        b = self.Person('http://b')
        self.assertLess(a.compare(b), 0)
        self.assertGreater(b.compare(a), 0)
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)

    def test_compare_across_classes(self):
        """ Resources of different classes are still ordered by URI """
        a = self.Person('http://foobar')
        b = self.Dog('http://foobar')
        self.assertEqual(0, a.compare(b))
        self.assertTrue(a <= b)
        self.assertNotEqual(a, b)

    def test_order_against_other_types(self):
        with self.assertRaises(TypeError):
            self.Person('http://a') < 'http://b'

    def test_to_list(self):
        person = self.Person('http://foobar')
        self.assertEqual([person], person.to_list())

    def test_str(self):
        self.assertEqual('http://foobar', str(self.Person('http://foobar')))

    def test_repr(self):
        self.assertEqual("Person('http://foobar')",
                         repr(self.Person('http://foobar')))


class KeyTest(_ResourceTest):

    def test_key_new(self):
        self.assertIsNone(self.Person('http://foobar').key())

    def test_key_persisted(self):
        person = self.Person('http://foobar')
        person.persistence.mark_persisted(person)
        self.assertEqual(['http://foobar'], person.key())

    def test_key_destroyed(self):
        person = self.Person('http://foobar')
        person.persistence.mark_destroyed(person)
        self.assertEqual(['http://foobar'], person.key())

    def test_key_follows_state(self):
        """ The key is worked out again on each call """
        person = self.Person('http://foobar')
        person.persistence.mark_persisted(person)
        self.assertIsNotNone(person.key())
        person.persistence.mark_new(person)
        self.assertIsNone(person.key())


class ResourceBaseTest(unittest.TestCase):

    def test_base_class_usable(self):
        r = Resource('http://foobar', ignore_graph=True)
        self.assertIsNone(r.graph_uri)
        self.assertIsNone(r.rdf_type)
