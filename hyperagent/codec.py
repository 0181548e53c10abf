import json

from hyperagent.exceptions import DecodeError


class JSONCodec(object):
    """
    Encodes request bodies and decodes response bodies as JSON.

    ``None`` encodes to ``None`` so that no body is sent at all, and an empty response body decodes to
    ``None``.
    """
    content_type = 'application/json'

    def __init__(self, **dumps_settings):
        self.dumps_settings = dumps_settings

    def encode(self, data):
        if data is None:
            return None
        return json.dumps(data, **self.dumps_settings).encode('utf-8')

    def decode(self, content):
        if content is None:
            return None
        if isinstance(content, bytes):
            try:
                content = content.decode('utf-8')
            except UnicodeDecodeError as e:
                raise DecodeError('Response body is not valid UTF-8', content=content) from e
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except ValueError as e:
            raise DecodeError('Response body is not valid JSON: {}'.format(e), content=content) from e
