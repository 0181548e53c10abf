import logging
from urllib.parse import urljoin

import requests

from hyperagent.exceptions import TransportError

logger = logging.getLogger(__name__)


class Transport(object):
    """
    The HTTP collaborator of :class:`hyperagent.Agent`.

    Implementations perform the actual exchange and return a result exposing ``content`` (the raw body),
    ``status_code``, ``headers`` and ``url`` (the final URL). Status codes are never interpreted; failures of
    the exchange itself should be raised as :class:`hyperagent.exceptions.TransportError`.

    .. attribute:: url_prefix

        Base URL relative hrefs are resolved against. The agent sets this to its endpoint.
    """
    url_prefix = None

    def build_url(self, href):
        if self.url_prefix is None:
            return href
        return urljoin(self.url_prefix, href)

    def get(self, url, **kwargs):
        return self.send('get', url, **kwargs)

    def send(self, method, url, data=None, **kwargs):
        raise NotImplementedError()


class RequestsTransport(Transport):
    """
    Default transport using a :class:`requests.Session`.

    The session is available as :attr:`session` for adding headers or authentication before first use.

    :param requests.Session session: an optional pre-configured session
    :param timeout: optional timeout passed to every request unless overridden
    """

    def __init__(self, session=None, timeout=None):
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, method, url, data=None, **kwargs):
        url = self.build_url(url)
        if self.timeout is not None:
            kwargs.setdefault('timeout', self.timeout)

        logger.debug('%s %s', method.upper(), url)
        try:
            return self.session.request(method.upper(), url, data=data, **kwargs)
        except requests.RequestException as e:
            raise TransportError('{} {} failed: {}'.format(method.upper(), url, e),
                                 method=method,
                                 url=url) from e
