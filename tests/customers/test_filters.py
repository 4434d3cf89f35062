"""
Tests for the administrator customer search.
"""

import unittest

from apps.customers.filters import filter_customers
from apps.customers.schemas import Customer
from apps.customers.serializers import create_customer_from_api


class CustomerFilterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.customers = [
            Customer(id='1', first_name='Admin', last_name='User', email='admin@example.com', phone='+1 555 0100'),
            Customer(id='2', first_name='Jane', last_name='Doe', email='jane@example.com', phone='+1 555 0199'),
            Customer(id='3', first_name='John', last_name='Smith', email='JS@corp.io', phone='020 7946 0000'),
        ]

    def test_empty_search_returns_everyone(self) -> None:
        self.assertEqual(filter_customers(self.customers), self.customers)

    def test_name_and_email_are_case_insensitive(self) -> None:
        self.assertEqual([c.id for c in filter_customers(self.customers, 'JANE')], ['2'])
        self.assertEqual([c.id for c in filter_customers(self.customers, 'smith')], ['3'])
        self.assertEqual([c.id for c in filter_customers(self.customers, 'corp.IO')], ['3'])

    def test_phone_is_matched_literally(self) -> None:
        self.assertEqual([c.id for c in filter_customers(self.customers, '0199')], ['2'])
        self.assertEqual([c.id for c in filter_customers(self.customers, '555')], ['1', '2'])

    def test_order_is_preserved(self) -> None:
        self.assertEqual([c.id for c in filter_customers(self.customers, 'example')], ['1', '2'])

    def test_no_match(self) -> None:
        self.assertEqual(filter_customers(self.customers, 'zzz'), [])

    def test_numeric_wire_fields_are_searchable(self) -> None:
        customer = create_customer_from_api({
            'id': 4, 'firstName': 'Num', 'lastName': 'Eric', 'email': 'num@example.com', 'phone': 5551234,
        })

        self.assertEqual(customer.phone, '5551234')
        self.assertEqual(filter_customers([customer], '555'), [customer])
