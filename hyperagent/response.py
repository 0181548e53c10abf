class Response(object):
    """
    The result of :meth:`hyperagent.Agent.request`.

    .. attribute:: relation

        The :class:`hyperagent.relation.Relation` that was requested.

    .. attribute:: raw

        The unmodified transport result.

    .. attribute:: data

        The decoded response body.
    """
    __slots__ = ('_relation', '_raw', '_data')

    def __init__(self, relation, raw, data):
        self._relation = relation
        self._raw = raw
        self._data = data

    @property
    def relation(self):
        return self._relation

    @property
    def raw(self):
        return self._raw

    @property
    def data(self):
        return self._data

    @property
    def status_code(self):
        return getattr(self._raw, 'status_code', None)

    @property
    def headers(self):
        return getattr(self._raw, 'headers', {})

    @property
    def url(self):
        return getattr(self._raw, 'url', None)

    def __repr__(self):
        return '<{} {} {}>'.format(self.__class__.__name__, self._relation.name, self.status_code)
