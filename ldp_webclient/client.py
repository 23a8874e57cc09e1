import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

import requests

from .constants import DEFAULT_MIME_TYPE, LDP_BASIC_CONTAINER, \
    LDP_RESOURCE, SPARQL_UPDATE
from .exceptions import HttpError, TransportError
from .graph import RDFLibEngine
from .model import Config
from .response import Response
from .utils import compose_patch_query

logger = logging.getLogger(__name__)

# result of loading one location in load_parsed_graphs(); value is None
# if the load failed
LoadedGraph = namedtuple("LoadedGraph", ["uri", "value"])


class WebClient(object):
    """Performs LDP operations (CRUD) and wraps the results in
    :class:`~ldp_webclient.response.Response` objects.

    :param engine: graph engine for parsing bodies (rdflib by default)
    :param config: :class:`~ldp_webclient.model.Config`
    :param auth: optional (username, password) tuple
    :param session: optional :class:`requests.Session`
    """
    def __init__(self, engine=None, config=None, auth=None, session=None):
        self.engine = engine or RDFLibEngine()
        self.config = config or Config()
        self.session = session or requests.Session()
        if auth is not None:
            self.session.auth = auth

    def create_response(self, transport, method):
        return Response(self.engine, transport, method)

    def request(self, url, method, headers=None, data=None):
        """Sends a request and returns the wrapped response.

        Raises :class:`HttpError` for any non-2xx status and
        :class:`TransportError` if no response was received.
        """
        logger.debug("{0} {1}".format(method, url))
        try:
            transport = self.session.request(
                method, url, headers=headers or {}, data=data,
                timeout=self.config.timeout, verify=self.config.verify_ssl
                )
        except requests.RequestException as e:
            raise TransportError(
                "{0} {1} failed: {2}".format(method, url, e)
                ) from e

        logger.debug("{0} {1} -> {2} {3}".format(
            method, url, transport.status_code, transport.reason))
        if not 200 <= transport.status_code < 300:
            raise HttpError(transport.status_code, transport.reason,
                            transport)
        return self.create_response(transport, method)

    def get(self, url, headers=None):
        headers = dict(headers or {})
        # If no explicit Accept: header specified, set one
        headers.setdefault("Accept", self.config.accept)
        return self.request(url, "GET", headers)

    def head(self, url):
        return self.request(url, "HEAD")

    def options(self, url):
        """OPTIONS request, useful for discovering server capabilities
        (Accept-Patch, Updates-Via)."""
        return self.request(url, "OPTIONS")

    def delete(self, url):
        return self.request(url, "DELETE")

    def put(self, url, data, mime_type=None, headers=None):
        headers = dict(headers or {})
        headers["Content-Type"] = \
            mime_type or self.config.mime_type or DEFAULT_MIME_TYPE
        return self.request(url, "PUT", headers, data)

    def post(self, url, data=None, slug=None, is_container=False,
             mime_type=None):
        """Creates a new resource or container in the container at url."""
        if is_container:
            resource_type = LDP_BASIC_CONTAINER
            # containers are always created from turtle
            mime_type = DEFAULT_MIME_TYPE
        else:
            resource_type = LDP_RESOURCE
            mime_type = mime_type or self.config.mime_type

        headers = {"Link": '<{0}>; rel="type"'.format(resource_type),
                   "Content-Type": mime_type}
        if slug:
            headers["Slug"] = slug
        return self.request(url, "POST", headers, data)

    def create_container(self, parent_url, name, data=None):
        return self.post(parent_url, data, name, is_container=True)

    def patch(self, url, to_delete=None, to_insert=None, headers=None):
        """Edits an RDF resource with a SPARQL Update built from lists of
        statements to delete and insert."""
        headers = dict(headers or {})
        headers["Content-Type"] = SPARQL_UPDATE
        data = compose_patch_query(to_delete, to_insert)
        return self.request(url, "PATCH", headers, data)

    def exists(self, url):
        try:
            return self.head(url).exists()
        except HttpError:
            return False

    def load_parsed_graphs(self, locations):
        """Loads and parses several graphs concurrently.

        Returns a list of LoadedGraph in the order of ``locations``. A
        location that fails to load or parse gets a ``None`` value; it
        does not affect the others.
        """
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            return list(executor.map(self._load_parsed_graph, locations))

    def _load_parsed_graph(self, location):
        try:
            response = self.get(location)
            # response.url differs from location if redirected
            return LoadedGraph(response.url, response.parsed_graph())
        except Exception as e:
            logger.warning("Unable to load graph {0}: {1}".format(
                location, e))
            return LoadedGraph(location, None)
