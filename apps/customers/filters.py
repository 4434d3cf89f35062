"""
Customer list filtering for the administrator customers view.
"""

from collections.abc import Iterable

from .schemas import Customer


def customer_matches(customer: Customer, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return (
        needle in customer.first_name.lower()
        or needle in customer.last_name.lower()
        or needle in customer.email.lower()
        # phone numbers are matched literally
        or search in customer.phone
    )


def filter_customers(customers: Iterable[Customer], search: str = '') -> list[Customer]:
    """Customers whose name, email or phone contains ``search``, in original order"""
    return [customer for customer in customers if customer_matches(customer, search)]
