class HyperAgentException(Exception):
    """
    Base class for all errors raised by the agent and its default collaborators.
    """

    def as_dict(self):
        return {
            'error': self.__class__.__name__,
            'message': str(self)
        }


class TransportError(HyperAgentException):
    """
    Raised by a transport when the HTTP exchange itself failed (connection errors, timeouts).
    Status codes are never turned into this error.
    """

    def __init__(self, message, method=None, url=None):
        super(TransportError, self).__init__(message)
        self.method = method
        self.url = url

    def as_dict(self):
        dct = super(TransportError, self).as_dict()
        dct['request'] = {
            'method': self.method,
            'url': self.url
        }
        return dct


class DecodeError(HyperAgentException, ValueError):

    def __init__(self, message, content=None):
        super(DecodeError, self).__init__(message)
        self.content = content


class SchemaParseError(HyperAgentException):
    """
    Raised when a fetched schema or root document does not describe its relations properly.

    :param str message:
    :param str href: reference of the offending document
    :param errors: an optional list of :class:`jsonschema.ValidationError`
    """

    def __init__(self, message, href=None, errors=None):
        super(SchemaParseError, self).__init__(message)
        self.href = href
        self.errors = list(errors or ())

    def _format_errors(self):
        for error in self.errors:
            yield {
                'validationOf': {error.validator: error.validator_value},
                'path': tuple(error.absolute_path),
                'message': error.message
            }

    def as_dict(self):
        dct = super(SchemaParseError, self).as_dict()
        dct['href'] = self.href
        dct['errors'] = list(self._format_errors())
        return dct


class NotFoundError(HyperAgentException, KeyError):

    def __init__(self, name):
        super(NotFoundError, self).__init__(name)
        self.name = name

    def __str__(self):
        return 'No relation named "{}"'.format(self.name)

    def as_dict(self):
        dct = super(NotFoundError, self).as_dict()
        dct['relation'] = self.name
        return dct
