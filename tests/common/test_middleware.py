"""
Tests for request id tracing, security headers and the template context.
"""

import logging
from types import SimpleNamespace

from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase

from apps.common.context_processors import portal_context
from apps.common.logging import RequestIDFilter, get_request_context, get_request_id
from apps.common.middleware import RequestIDMiddleware, ServiceHeaderMiddleware
from apps.customers.schemas import Customer


class RequestIDMiddlewareTests(SimpleTestCase):
    def test_request_id_is_visible_to_logs_during_the_request(self):
        seen = {}

        def view(request):
            record = logging.LogRecord("apps", logging.INFO, __file__, 1, "msg", None, None)
            RequestIDFilter().filter(record)
            seen['record'] = record.request_id
            seen['meta'] = request.META['REQUEST_ID']
            return HttpResponse("ok")

        response = RequestIDMiddleware(view)(RequestFactory().get('/tickets/'))

        self.assertEqual(seen['record'], seen['meta'])
        self.assertEqual(response['X-Request-ID'], seen['meta'])

    def test_context_is_cleared_after_the_request(self):
        RequestIDMiddleware(lambda request: HttpResponse("ok"))(RequestFactory().get('/'))

        self.assertIsNone(get_request_id())
        self.assertEqual(get_request_context()['request_id'], '-')


class ResponseHeadersTests(SimpleTestCase):
    def test_service_header(self):
        response = ServiceHeaderMiddleware(lambda request: HttpResponse("ok"))(RequestFactory().get('/'))

        self.assertEqual(response['X-Service'], 'portal')

    def test_security_headers_come_from_django_middleware(self):
        response = self.client.get('/status/')

        self.assertEqual(response['X-Content-Type-Options'], 'nosniff')
        self.assertEqual(response['X-Frame-Options'], 'DENY')
        self.assertEqual(response['Referrer-Policy'], 'strict-origin-when-cross-origin')
        self.assertEqual(response['X-Service'], 'portal')


class PortalContextTests(SimpleTestCase):
    def test_anonymous(self):
        request = RequestFactory().get('/login/')
        request.portal_session = SimpleNamespace(is_authenticated=False)

        context = portal_context(request)

        self.assertFalse(context['user_is_authenticated'])
        self.assertFalse(context['is_admin'])

    def test_signed_in_admin(self):
        admin = Customer(id='1', first_name='Admin', last_name='User', email='admin@example.com')
        request = RequestFactory().get('/')
        request.portal_session = SimpleNamespace(is_authenticated=True, customer=admin, is_admin=True)

        context = portal_context(request)

        self.assertTrue(context['is_admin'])
        self.assertEqual(context['user_full_name'], 'Admin User')
        self.assertIs(context['current_customer'], admin)


class StatusEndpointTests(SimpleTestCase):
    def test_status_is_public_json(self):
        response = self.client.get('/status/')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'status': 'healthy', 'service': 'portal'})
        self.assertIn('X-Request-ID', response)
