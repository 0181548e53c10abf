import logging
from collections import OrderedDict

logger = logging.getLogger(__name__)


class RelationResolver(object):
    """
    Derives the top-level relation table from the links of a root document.

    Every root link refers to a schema. The schema's default relation becomes the top-level relation under
    the root link's name. Any other relation of that schema that targets the same href as the default one
    (e.g. a search over the same collection) is added under the compound name ``{root name}/{relation name}``.

    :param fetch_schema: a callable returning the :class:`hyperagent.schema.Schema` for a schema href
    """

    def __init__(self, fetch_schema):
        self.fetch_schema = fetch_schema

    def resolve(self, links, relations=None):
        """
        :param links: root-level :class:`hyperagent.relation.Relation` objects in document order
        :param relations: an optional mapping to fill; a new ordered mapping is created otherwise
        :return: the mapping of relation names to relations
        """
        if relations is None:
            relations = OrderedDict()

        for link in links:
            schema = self.fetch_schema(link.schema_href)
            root_relation = schema.default.bind(schema)
            self._add(relations, link.name, root_relation)

            for key, schema_relation in schema.relations.items():
                schema_relation.bind(schema)
                if key == schema.default_relation or schema_relation.href != root_relation.href:
                    continue
                self._add(relations, '{}/{}'.format(link.name, key), schema_relation)

        return relations

    @staticmethod
    def _add(relations, name, relation):
        previous = relations.get(name)
        if previous is not None and previous is not relation:
            logger.warning('Relation "%s" (%s) replaces earlier relation %r', name, relation.href, previous)
        relations[name] = relation
