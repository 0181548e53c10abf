from collections import namedtuple
from unittest import TestCase

from flask import Flask, json, request, make_response
from flask.testing import FlaskClient

from hyperagent.exceptions import TransportError
from hyperagent.transport import Transport

TransportResult = namedtuple('TransportResult', ('content', 'status_code', 'headers', 'url'))

Call = namedtuple('Call', ('method', 'href', 'data', 'headers'))

ENDPOINT = 'http://localhost/'

ROOT = {
    "_links": [
        {"name": "users", "href": "/users", "schema": {"href": "/schemas/users"}},
        {"name": "groups", "href": "/groups", "method": "get", "schema": {"href": "/schemas/groups"}}
    ]
}

USERS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-04/hyper-schema#",
    "links": [
        {"rel": "all", "href": "/users", "method": "GET"},
        {"rel": "search", "href": "/users", "method": "GET", "title": "Search users"},
        {"rel": "create", "href": "/users", "method": "POST"},
        {"rel": "self", "href": "/users/{id}", "method": "GET"}
    ]
}

GROUPS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-04/hyper-schema#",
    "defaultRelation": "instances",
    "links": [
        {"rel": "instances", "href": "/groups", "method": "GET"},
        {"rel": "members", "href": "/groups/{id}/members", "method": "GET"}
    ]
}


class ApiClient(FlaskClient):
    def open(self, *args, **kw):
        headers = kw.pop('headers', None) or {}
        return super(ApiClient, self).open(*args, headers=headers, **kw)


class FlaskTransport(Transport):
    """
    Sends agent requests to a Flask application through its test client and records every call.

    Hrefs listed in :attr:`failures` raise :class:`TransportError` instead of being sent.
    """

    def __init__(self, client):
        self.client = client
        self.calls = []
        self.failures = set()

    def send(self, method, url, data=None, **kwargs):
        headers = kwargs.get('headers')
        self.calls.append(Call(method.upper(), url, data, headers))

        if url in self.failures:
            raise TransportError('Connection refused', method=method, url=url)

        url = self.build_url(url)
        res = self.client.open(url, method=method.upper(), data=data, headers=headers)
        return TransportResult(res.get_data(), res.status_code, res.headers, url)

    def hrefs(self, method=None):
        return [call.href for call in self.calls if method is None or call.method == method]


class BaseTestCase(TestCase):
    """
    Serves JSON documents from a Flask application. GET requests return the document registered for the path;
    any other method echoes the method and decoded JSON body.
    """

    def setUp(self):
        self.documents = {}
        self.app = self.create_app()
        self.client = self.app.test_client()
        self.transport = FlaskTransport(self.client)

    def create_app(self):
        app = Flask(__name__)
        app.secret_key = 'XXX'
        app.test_client_class = ApiClient
        app.debug = True

        def document_view(path):
            if request.method != 'GET':
                return self._json_response({
                    'method': request.method,
                    'path': '/' + path,
                    'body': request.get_json(silent=True)
                }, 200)

            try:
                return self._json_response(self.documents['/' + path], 200)
            except KeyError:
                return self._json_response({'status': 404, 'message': 'Not Found'}, 404)

        methods = ['GET', 'PUT', 'POST', 'PATCH', 'DELETE']
        app.add_url_rule('/', 'document', document_view, defaults={'path': ''}, methods=methods)
        app.add_url_rule('/<path:path>', 'document', document_view, methods=methods)
        return app

    def _json_response(self, data, code):
        resp = make_response(json.dumps(data), code)
        resp.headers['Content-Type'] = 'application/json'
        return resp

    def serve(self, path, document):
        self.documents[path] = document

    def serve_api(self):
        self.serve('/', ROOT)
        self.serve('/schemas/users', USERS_SCHEMA)
        self.serve('/schemas/groups', GROUPS_SCHEMA)
        self.serve('/users', [{"name": "Ada"}, {"name": "Grace"}])
        self.serve('/users/1', {"name": "Ada"})
        self.serve('/groups', [{"name": "admins"}])
