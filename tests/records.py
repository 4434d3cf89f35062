"""
Record store JSON payloads shared by the portal tests.
"""

ADMIN_CUSTOMER_RECORD = {
    'id': '1',
    'firstName': 'Admin',
    'lastName': 'User',
    'email': 'admin@example.com',
    'phone': '+1 555 000 0001',
    'createdAt': '2025-01-01T09:00:00.000Z',
}

CUSTOMER_RECORD = {
    'id': '2',
    'firstName': 'Jane',
    'lastName': 'Doe',
    'email': 'jane@example.com',
    'phone': '+1 555 000 0002',
    'createdAt': '2025-01-02T09:00:00.000Z',
}

TICKET_RECORD = {
    'id': '10',
    'customerId': '2',
    'title': 'Cannot log in',
    'description': 'Login page shows an error',
    'status': 'Open',
    'createdAt': '2025-01-03T09:00:00.000Z',
}


def ticket_record(ticket_id, customer_id='2', status='Open', title=None, description=''):
    return {
        'id': str(ticket_id),
        'customerId': str(customer_id),
        'title': title or f'Ticket {ticket_id}',
        'description': description,
        'status': status,
        'createdAt': '2025-01-03T09:00:00.000Z',
    }
