import logging
from collections import OrderedDict, namedtuple

from hyperagent import signals
from hyperagent.codec import JSONCodec
from hyperagent.exceptions import NotFoundError, SchemaParseError
from hyperagent.relation import Relation
from hyperagent.resolver import RelationResolver
from hyperagent.response import Response
from hyperagent.schema import Schema, read_root_links
from hyperagent.transport import RequestsTransport
from hyperagent.utils import AttributeDict

logger = logging.getLogger(__name__)


class _Unloaded(object):
    def __repr__(self):
        return 'UNLOADED'


UNLOADED = _Unloaded()

Loaded = namedtuple('Loaded', ('relations', 'schemas'))


class Agent(object):
    """
    Entry point of the client. The agent discovers the relations of an API by loading its root document and the
    schemas the root links refer to, and dispatches requests by relation name.

    Nothing is fetched until a relation or schema is first needed. The root is then loaded exactly once and both
    the relation table and the schema cache are kept for the lifetime of the agent. The agent is not thread-safe;
    when sharing one between threads, serialize access to it.

    Usage example::

        agent = Agent('https://api.example.com/', setup=lambda t: t.session.headers.update(auth_headers))
        users = agent.request('users').data
        agent.request('users/search', {'name': 'Ada'})

    :param str endpoint: URL of the root document; relative hrefs are resolved against it
    :param transport: an optional :class:`hyperagent.transport.Transport`; defaults to a
        :class:`hyperagent.transport.RequestsTransport`
    :param codec: an optional codec; defaults to :class:`hyperagent.codec.JSONCodec`
    :param str links_property: property of the root document holding the list of links
    :param str default_relation: default relation name for schemas that do not declare one
    :param callable setup: called with the transport after construction, e.g. to add headers
    """

    def __init__(self,
                 endpoint,
                 transport=None,
                 codec=None,
                 links_property='_links',
                 default_relation='all',
                 setup=None):
        self.endpoint = endpoint
        self.transport = transport if transport is not None else RequestsTransport()
        self.transport.url_prefix = endpoint
        self.codec = codec if codec is not None else JSONCodec()
        self.config = AttributeDict(links_property=links_property,
                                    default_relation=str(default_relation))
        self._state = UNLOADED

        if setup is not None:
            setup(self.transport)

    def _loaded(self):
        if self._state is UNLOADED:
            self.load_root()
        return self._state

    @property
    def relations(self):
        """
        All top-level relations, keyed by name. Do not modify the returned mapping.
        """
        return self._loaded().relations

    @property
    def schemas(self):
        """
        All loaded schemas, keyed by the href they were requested with.
        """
        return self._loaded().schemas

    def relation(self, name):
        """
        Gets a top-level relation by name. A :class:`Relation` is returned as-is without loading anything.

        :param name: a relation name or a :class:`Relation`
        :raises NotFoundError: if there is no relation with this name
        """
        if isinstance(name, Relation):
            return name

        relations = self._loaded().relations
        try:
            return relations[name]
        except KeyError:
            raise NotFoundError(name) from None

    def schema(self, href):
        """
        Loads or gets a loaded schema by its href. Schemas should always be referred to by the same href, as the
        cache does not normalize references.

        :param href: a schema href, or a :class:`Relation` whose ``schema_href`` is used
        :raises SchemaParseError: if the schema document is malformed
        """
        if isinstance(href, Relation):
            return self.schema(href.schema_href)
        return self._fetch_schema(href, self._loaded().schemas)

    def _fetch_schema(self, href, schemas):
        if not href:
            raise SchemaParseError('Relation does not refer to a schema')

        if href in schemas:
            return schemas[href]

        logger.debug('Loading schema %s', href)
        res = self.transport.get(href)
        schema = Schema.read(self.load(res), href=href, default_relation=self.config.default_relation)
        schemas[href] = schema

        signals.schema_loaded.send(self, href=href, schema=schema)
        return schema

    def request(self, relation, body=None, uri_params=None, **kwargs):
        """
        Makes a request using the URL and method of a relation.

        :param relation: a relation name or a :class:`Relation`
        :param body: optional request body, encoded with the codec; ``None`` sends no body
        :param dict uri_params: values for the variables of a templated href
        :param kwargs: passed on to :meth:`Transport.send`
        :raises NotFoundError: if the relation does not exist; raised before any request is sent
        :return: a :class:`Response`
        """
        rel = self.relation(relation)
        data = self.dump(body)

        if data is not None:
            headers = dict(kwargs.pop('headers', None) or {})
            headers.setdefault('Content-Type', self.codec.content_type)
            kwargs['headers'] = headers

        signals.before_request.send(self, relation=rel, body=body)

        href = rel.expand(uri_params)
        logger.debug('Requesting %s: %s %s', rel.name, rel.method.upper(), href)
        res = self.transport.send(rel.method, href, data, **kwargs)
        response = Response(rel, res, self.load(res))

        signals.after_request.send(self, response=response)
        return response

    def needs_load(self):
        """
        Returns ``True`` as long as the root document has not been loaded.
        """
        return self._state is UNLOADED

    @property
    def is_loaded(self):
        return not self.needs_load()

    def load(self, res):
        """
        Decodes the body of a transport result.
        """
        return self.codec.decode(res.content)

    def dump(self, data):
        """
        Encodes a request body; ``None`` stays ``None``.
        """
        return self.codec.encode(data)

    def load_root(self):
        """
        Loads the root document and the schemas of its links, and builds the top-level relation table.

        The new state is only committed once everything has loaded; on failure the agent stays unloaded so that
        the next access tries again.
        """
        self._state = UNLOADED

        logger.debug('Loading root %s', self.endpoint)
        res = self.transport.get(self.endpoint)
        links = read_root_links(self.load(res), self.config.links_property, href=self.endpoint)

        schemas = OrderedDict()
        resolver = RelationResolver(lambda href: self._fetch_schema(href, schemas))
        relations = resolver.resolve(links)

        self._state = Loaded(relations, schemas)
        logger.debug('Loaded %d relations from %d schemas', len(relations), len(schemas))

        signals.root_loaded.send(self, relations=relations, schemas=schemas)

    def reset(self):
        """
        Forgets the loaded relations and schemas; the next access loads the root again.
        """
        self._state = UNLOADED

    def __repr__(self):
        if self.needs_load():
            return '<{} endpoint="{}" (unloaded)>'.format(self.__class__.__name__, self.endpoint)
        return '<{} endpoint="{}">'.format(self.__class__.__name__, self.endpoint)
