import logging
from rdflib import Graph, URIRef
from rdflib.namespace import RDF
from rdflib.term import Node

from .constants import FORMAT_MAP
from .exceptions import GraphParseError, MissingContentTypeError

logger = logging.getLogger(__name__)


def _term(value):
    """Coerce a string to a URIRef; rdflib terms and None pass through."""
    if value is None or isinstance(value, Node):
        return value
    return URIRef(value)


class ParsedGraph(object):
    """Query wrapper around an rdflib Graph."""
    def __init__(self, graph=None):
        self.graph = graph if graph is not None else Graph()

    def __len__(self):
        return len(self.graph)

    def __iter__(self):
        return iter(self.graph)

    def add(self, subject, predicate, obj):
        self.graph.add((_term(subject), _term(predicate), _term(obj)))

    def find_type_uris(self, node):
        """Returns a dict whose keys are the rdf:type URIs of the node."""
        return {str(rdf_type): True
                for rdf_type in self.graph.objects(_term(node), RDF.type)}

    def statements_matching(self, subject=None, predicate=None, obj=None):
        return list(self.graph.triples(
            (_term(subject), _term(predicate), _term(obj))
            ))

    def each(self, subject=None, predicate=None, obj=None):
        """Returns the nodes in the first wildcard position of every
        statement matching the pattern."""
        if subject is None:
            position = 0
        elif predicate is None:
            position = 1
        elif obj is None:
            position = 2
        else:
            return []
        return [statement[position] for statement in
                self.statements_matching(subject, predicate, obj)]

    def serialize(self, content_type="text/turtle"):
        return self.graph.serialize(
            format=FORMAT_MAP.get(content_type, content_type)
            )


class RDFLibEngine(object):
    """Parses RDF source text into ParsedGraph objects using rdflib."""
    def graph(self):
        return ParsedGraph()

    def parse(self, source, base_uri, content_type):
        if not content_type:
            raise MissingContentTypeError(
                "Cannot parse {0} without a Content-Type".format(base_uri)
                )
        rdf_format = FORMAT_MAP.get(content_type, content_type)
        logger.debug("Parsing {0} as {1}".format(base_uri, rdf_format))
        # rdflib raises BadSyntax, PluginException, SAX or JSON errors
        try:
            graph = Graph().parse(
                data=source or "", publicID=base_uri, format=rdf_format
                )
        except Exception as e:
            raise GraphParseError(
                "Cannot parse {0} as {1}: {2}".format(base_uri, rdf_format, e)
                ) from e
        return ParsedGraph(graph)


def parse_graph(engine, base_url, source, content_type):
    """Parses text source of the given content type into a graph."""
    return engine.parse(source, base_url, content_type)


def parse_links(graph, subject=None, predicate=None, obj=None):
    """Returns the deduplicated object URIs of the matching statements."""
    links = {}
    for _, _, o in graph.statements_matching(subject, predicate, obj):
        if isinstance(o, URIRef):
            links[str(o)] = True
    return list(links)


def append_graph(to_graph, from_graph):
    for s, p, o in from_graph.statements_matching():
        to_graph.add(s, p, o)


def graph_from_statements(engine, statements):
    graph = engine.graph()
    for s, p, o in statements:
        graph.add(s, p, o)
    return graph


def serialize_statements(statements):
    """Serializes statements as N-Triples, one per line."""
    return "\n".join(
        " ".join(term.n3() for term in statement) + " ."
        for statement in statements
        )
