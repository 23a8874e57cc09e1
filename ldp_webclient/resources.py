import logging
from rdflib import URIRef
from rdflib.namespace import RDF

from .constants import CONTAINER_TYPES, LDP_CONTAINS
from .exceptions import MissingContentTypeError
from .graph import parse_links

logger = logging.getLogger(__name__)


class Resource(object):
    """An LDP resource, optionally initialized from a GET response.

    :param engine: graph engine used to parse the response body
    :param uri: URI of the resource; replaced by the response URL (which is
        absolute and redirect aware) when a response is given
    :param response: optional :class:`~ldp_webclient.response.Response`
    """
    def __init__(self, engine, uri, response=None):
        self.engine = engine
        self.uri = uri
        self.name = None
        self.types = []
        self.parsed_graph = None
        self.response = response

        if response is not None:
            if response.url != uri:
                self.uri = response.url
            self.init_from_response(response)
        self.init_name()

    def __repr__(self):
        return "<{0} {1}>".format(type(self).__name__, self.uri)

    def init_name(self):
        """Short name: the last path segment, skipping a trailing slash."""
        if not self.uri:
            return
        fragments = self.uri.split("/")
        self.name = fragments.pop()
        if not self.name and fragments:
            self.name = fragments.pop()

    def init_from_response(self, response):
        if not response.content_type():
            raise MissingContentTypeError(
                "Cannot parse {0} without a Content-Type header".format(
                    self.uri)
                )
        self.parsed_graph = response.parsed_graph()
        self.types = list(self.parsed_graph.find_type_uris(self.uri))

    def is_container(self):
        return False

    def is_type(self, rdf_class):
        return rdf_class in self.types


class Container(Resource):
    """An LDP container and the resources it contains.

    Children are extracted from the ``ldp:contains`` statements of the parsed
    graph. ``containers`` and ``resources`` are keyed by absolute URI;
    ``contents_uris`` lists every child in the order it was extracted.
    """
    def __init__(self, engine, uri, response=None):
        self.containers = {}
        self.contents_uris = []
        self.resources = {}
        Resource.__init__(self, engine, uri, response)

        if self.parsed_graph is not None:
            self.append_from_graph(self.parsed_graph)

    def append_from_graph(self, parsed_graph):
        """Adds the contents listed in a graph to this container.

        May be called repeatedly (e.g. once per page of a paged container);
        every call adds to the existing contents.
        """
        self.types = list(parsed_graph.find_type_uris(self.uri))

        batch = sorted(parse_links(parsed_graph, None, LDP_CONTAINS))
        self.contents_uris.extend(batch)

        contents = set(self.contents_uris)
        for rdf_class in CONTAINER_TYPES:
            for node in parsed_graph.each(None, RDF.type, URIRef(rdf_class)):
                uri = str(node)
                # skip the link to this container itself
                if uri == self.uri or uri not in contents:
                    continue
                if uri not in self.containers:
                    container = Container(self.engine, uri)
                    container.types = list(parsed_graph.find_type_uris(node))
                    self.containers[uri] = container
                    # typed as a container by a later page
                    self.resources.pop(uri, None)

        for uri in batch:
            if uri == self.uri or uri in self.containers:
                continue
            resource = Resource(self.engine, uri)
            resource.types = list(parsed_graph.find_type_uris(uri))
            self.resources[uri] = resource

        logger.debug("{0}: {1} containers, {2} resources".format(
            self.uri, len(self.containers), len(self.resources)))

    def find_by_type(self, rdf_class):
        """Returns the contained resources and containers of a given type."""
        matches = [c for c in self.containers.values() if c.is_type(rdf_class)]
        matches.extend(
            r for r in self.resources.values() if r.is_type(rdf_class)
            )
        return matches

    def is_container(self):
        return True

    def is_empty(self):
        return len(self.contents_uris) == 0
