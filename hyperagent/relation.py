import weakref

from hyperagent.utils import expand_uri_template, uri_template_variables


class Relation(object):
    """
    A named, addressable action: the ``href`` (possibly a URI template) of a resource and the HTTP method
    used to act on it.

    Relations are immutable once constructed. The only state a relation gains afterwards is a weak
    back-reference to the :class:`hyperagent.schema.Schema` that declared it, set through :meth:`bind`.

    :param str name: relation name, unique within its schema
    :param str href: target URL or URI template, e.g. ``/users/{id}``
    :param str method: HTTP method; stored lower-case, defaults to ``get``
    :param str schema_href: optional reference to the schema describing the target resource
    :param str title: optional human readable title
    """

    def __init__(self, name, href, method='get', schema_href=None, title=None):
        self._name = name
        self._href = href
        self._method = (method or 'get').lower()
        self._schema_href = schema_href
        self._title = title
        self._schema = None

    @classmethod
    def from_link(cls, link):
        """
        Creates a relation from a link object, either a root link (``name``) or a hyper-schema link (``rel``).
        The referenced schema is read from ``schema.href`` or ``schema.$ref``.
        """
        schema = link.get('schema')
        schema_href = None
        if isinstance(schema, dict):
            schema_href = schema.get('href', schema.get('$ref'))

        return cls(link.get('name', link.get('rel')),
                   link['href'],
                   method=link.get('method'),
                   schema_href=schema_href,
                   title=link.get('title'))

    @classmethod
    def from_links(cls, links):
        return [cls.from_link(link) for link in links]

    @property
    def name(self):
        return self._name

    @property
    def href(self):
        return self._href

    @property
    def method(self):
        return self._method

    @property
    def schema_href(self):
        return self._schema_href

    @property
    def title(self):
        return self._title

    @property
    def schema(self):
        """
        The schema this relation was declared in, or ``None`` if it has not been resolved yet
        (or the schema is no longer alive).
        """
        if self._schema is None:
            return None
        return self._schema()

    @property
    def is_bound(self):
        return self._schema is not None

    def bind(self, schema):
        """
        Records ``schema`` as the owner of this relation. A relation can only ever be bound once; binding it
        to the same schema again is a no-op.

        :raises RuntimeError: if the relation is already bound to a different schema
        """
        if self._schema is None:
            self._schema = weakref.ref(schema)
        elif self._schema() is not schema:
            raise RuntimeError('{!r} is already bound to {!r}'
                               ' and does not support rebinding to {!r}'.format(self, self.schema, schema))
        return self

    @property
    def templated(self):
        return len(uri_template_variables(self._href)) > 0

    def expand(self, params=None):
        """
        Returns the href with any ``{variable}`` replaced by the matching value in ``params``.

        :param dict params:
        """
        return expand_uri_template(self._href, params)

    def __repr__(self):
        return '<{} {} {} {}>'.format(self.__class__.__name__, self._name, self._method.upper(), self._href)
