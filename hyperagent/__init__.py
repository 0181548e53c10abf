from .agent import Agent
from .relation import Relation
from .schema import Schema
from .response import Response
from .exceptions import HyperAgentException, TransportError, DecodeError, SchemaParseError, NotFoundError

__all__ = (
    'Agent',
    'Relation',
    'Schema',
    'Response',
    'HyperAgentException',
    'TransportError',
    'DecodeError',
    'SchemaParseError',
    'NotFoundError',
    'codec',
    'transport',
    'signals',
    'resolver',
)
