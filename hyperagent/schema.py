from collections import OrderedDict

from jsonschema import Draft4Validator

from hyperagent.exceptions import SchemaParseError
from hyperagent.relation import Relation

_LINK_TARGET_SCHEMA = {
    "type": "object",
    "properties": {
        "href": {"type": "string"},
        "$ref": {"type": "string"}
    }
}

SCHEMA_LINK = {
    "type": "object",
    "properties": {
        "rel": {"type": "string", "minLength": 1},
        "name": {"type": "string", "minLength": 1},
        "href": {"type": "string"},
        "method": {"type": "string", "minLength": 1},
        "title": {"type": "string"},
        "schema": _LINK_TARGET_SCHEMA
    },
    "anyOf": [
        {"required": ["rel"]},
        {"required": ["name"]}
    ],
    "required": ["href", "method"]
}

SCHEMA_DOCUMENT = {
    "type": "object",
    "properties": {
        "defaultRelation": {"type": "string", "minLength": 1},
        "links": {
            "type": "array",
            "items": SCHEMA_LINK
        }
    },
    "required": ["links"]
}

ROOT_LINK = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "href": {"type": "string"},
        "method": {"type": "string", "minLength": 1},
        "title": {"type": "string"},
        "schema": _LINK_TARGET_SCHEMA
    },
    "required": ["name", "href"]
}

_schema_validator = Draft4Validator(SCHEMA_DOCUMENT)
_root_link_validator = Draft4Validator({"type": "array", "items": ROOT_LINK})


def _validate(validator, instance, message, href):
    errors = sorted(validator.iter_errors(instance), key=lambda error: [str(part) for part in error.absolute_path])
    if errors:
        raise SchemaParseError(message, href=href, errors=errors)
    return instance


def read_root_links(document, links_property='_links', href=None):
    """
    Reads the list of root-level relations from a root document.

    :param dict document: decoded root document
    :param str links_property: name of the property holding the list of links
    :param str href: reference of the document, used in error reports
    :raises SchemaParseError: if the property is missing or any link lacks a name or href
    :return: a list of :class:`Relation` in document order
    """
    if not isinstance(document, dict) or links_property not in document:
        raise SchemaParseError('Root document has no "{}" property'.format(links_property), href=href)

    links = _validate(_root_link_validator,
                      document[links_property],
                      'Root document contains malformed links',
                      href)
    return Relation.from_links(links)


class Schema(object):
    """
    A set of named relations, one of which is the default relation, i.e. the canonical top-level action of
    the resource the schema describes (usually the collection, ``all``).

    Schemas are parsed once with :meth:`read` and cached by the agent under the exact href they were
    requested with.

    :param relations: an ordered mapping of relation names to :class:`Relation` objects
    :param str default_relation: name of the default relation
    :param str href: reference the schema was loaded from
    """

    def __init__(self, relations, default_relation, href=None):
        self.href = href
        self.relations = relations
        self.default_relation = default_relation

        if default_relation not in relations:
            raise SchemaParseError('Schema does not declare its default relation "{}"'.format(default_relation),
                                   href=href)

    @classmethod
    def read(cls, document, href=None, default_relation='all'):
        """
        Parses a schema document.

        The default relation is taken from the document's ``defaultRelation`` property and falls back to
        ``default_relation``.

        :param dict document: decoded schema document
        :param str href: reference the document was loaded from
        :param str default_relation: fallback default relation name
        :raises SchemaParseError: if the document is malformed or lacks its default relation
        """
        _validate(_schema_validator, document, 'Schema document is malformed', href)

        relations = OrderedDict()
        for relation in Relation.from_links(document['links']):
            if relation.name in relations:
                raise SchemaParseError('Schema declares relation "{}" more than once'.format(relation.name),
                                       href=href)
            relations[relation.name] = relation

        return cls(relations, document.get('defaultRelation', default_relation), href=href)

    @property
    def default(self):
        return self.relations[self.default_relation]

    def __getitem__(self, name):
        return self.relations[name]

    def __contains__(self, name):
        return name in self.relations

    def __iter__(self):
        return iter(self.relations)

    def __len__(self):
        return len(self.relations)

    def __repr__(self):
        return '<{} {} default={}>'.format(self.__class__.__name__, self.href, self.default_relation)
