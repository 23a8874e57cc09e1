import logging

from .constants import CONTAINER_TYPES
from .exceptions import MissingContentTypeError
from .graph import parse_graph
from .resources import Container, Resource
from .utils import absolute_url, hostname, parent_url, \
    parse_allowed_methods, parse_link_header

logger = logging.getLogger(__name__)


class Response(object):
    """Wraps a completed HTTP response and adds the LDP-specific fields
    parsed from its headers (links, allowed verbs, ACL and meta resources).

    :param engine: graph engine used to parse the body
    :param transport: a completed :class:`requests.Response`
    :param method: HTTP verb of the original request
    """
    def __init__(self, engine=None, transport=None, method=None):
        self.engine = engine
        self.transport = transport
        self.graph = None
        self.resource = None
        self.link_headers = {}
        self.allowed_methods = {}
        self.acl = None
        self.meta = None
        self.url = None
        self.user = ""
        self.websocket = ""

        if transport is None:
            self.method = None
            self.types = []
            return

        self.method = method.lower() if method else ""

        self.link_headers = parse_link_header(self.header("Link"))
        acl = self.link_headers.get("acl")
        self.acl = acl[0] if acl else None
        meta = self.link_headers.get("meta") or \
            self.link_headers.get("describedBy")
        self.meta = meta[0] if meta else None
        self.types = self.type_link_headers()

        self.allowed_methods = self.parse_allowed_methods(self.method)

        location = self.header("Location")
        if location:
            self.url = absolute_url(hostname(transport.url or ""), location)
        else:
            self.url = transport.url

        self.user = self.header("User") or ""
        self.websocket = self.header("Updates-Via") or ""

        if self.method == "get":
            if self.is_container():
                self.resource = Container(self.engine, self.url, self)
            else:
                self.resource = Resource(self.engine, self.url, self)

    def __repr__(self):
        return "<Response {0} {1}>".format(self.method, self.url)

    def header(self, name):
        return self.transport.headers.get(name)

    def acl_absolute_url(self):
        """Absolute URL of the ACL resource, or None."""
        if not self.acl:
            return None
        return self.resolve_related_url(self.acl)

    def meta_absolute_url(self):
        """Absolute URL of the .meta (describedBy) resource, or None."""
        if not self.meta:
            return None
        return self.resolve_related_url(self.meta)

    def resolve_related_url(self, related):
        if not self.url:
            return None
        return absolute_url(parent_url(self.url), related)

    def content_type(self):
        """The Content-Type, without parameters such as charset."""
        if self.transport is None:
            return None
        content_type = self.header("Content-Type")
        if not content_type:
            return None
        return content_type.split(";")[0].strip()

    def exists(self):
        """True for 2xx and 3xx responses."""
        return self.transport is not None and \
            200 <= self.transport.status_code < 400

    def is_container(self):
        return any(self.is_type(rdf_class) for rdf_class in CONTAINER_TYPES)

    def is_logged_in(self):
        return bool(self.user)

    def is_type(self, rdf_class):
        return rdf_class in self.types

    def parse_allowed_methods(self, method):
        # a GET is not a preflight request
        if method == "get":
            return {}
        return parse_allowed_methods(self.header("Allow"),
                                     self.header("Accept-Patch"))

    def parsed_graph(self):
        """Parses the body on first use and caches the graph."""
        if self.graph is None:
            content_type = self.content_type()
            if not content_type:
                raise MissingContentTypeError(
                    "Cannot parse {0} without a Content-Type header".format(
                        self.url)
                    )
            self.graph = parse_graph(self.engine, self.url, self.raw(),
                                     content_type)
            logger.debug("Parsed {0} triples from {1}".format(
                len(self.graph), self.url))
        return self.graph

    def raw(self):
        """The body text, or None."""
        if self.transport is None:
            return None
        return self.transport.text

    def type_link_headers(self):
        """Deduplicated list of rel="type" link targets."""
        types = self.link_headers.get("type")
        if not isinstance(types, list):
            return []
        return list(dict.fromkeys(types))
