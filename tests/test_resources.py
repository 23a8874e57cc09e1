import pytest
from conftest import CONTAINER_LINK, make_transport
from ldp_webclient.exceptions import MissingContentTypeError
from ldp_webclient.resources import Container, Resource
from ldp_webclient.response import Response

SETTINGS = "https://localhost:8443/settings/"
PRIVATE_TYPE_INDEX = "http://www.w3.org/ns/solid/terms#PrivateTypeIndex"


def sample_response(engine, body, headers=None):
    if headers is None:
        headers = {"Content-Type": "text/turtle"}
    transport = make_transport(url=SETTINGS, headers=headers, body=body)
    return Response(engine, transport, "GET")


def test_resource_name(engine):
    assert Resource(engine, "https://example.com/a/b.ttl").name == "b.ttl"
    assert Resource(engine, "https://example.com/a/").name == "a"
    assert Resource(engine, None).name is None


def test_resource_without_response(engine):
    resource = Resource(engine, "https://example.com/a")
    assert resource.types == []
    assert resource.parsed_graph is None
    assert resource.response is None
    assert not resource.is_container()
    assert not resource.is_type("http://www.w3.org/ns/ldp#Resource")


def test_resource_from_response(engine):
    body = '<> a <http://www.w3.org/ns/ldp#RDFSource> .'
    transport = make_transport(url="https://example.com/doc.ttl",
                               headers={"Content-Type": "text/turtle"},
                               body=body)
    response = Response(engine, transport, "GET")
    resource = Resource(engine, "doc.ttl", response)
    assert resource.uri == "https://example.com/doc.ttl"
    assert resource.name == "doc.ttl"
    assert resource.is_type("http://www.w3.org/ns/ldp#RDFSource")
    # no normalization of the class URI
    assert not resource.is_type("http://www.w3.org/ns/ldp#RDFSource/")
    assert resource.parsed_graph is response.parsed_graph()


def test_resource_requires_content_type(engine):
    response = Response(engine, make_transport(url=SETTINGS), "HEAD")
    with pytest.raises(MissingContentTypeError):
        Container(engine, SETTINGS, response)
    with pytest.raises(MissingContentTypeError):
        sample_response(engine, "", headers={})


def test_empty_container(engine):
    container = Container(engine, SETTINGS, sample_response(engine, ""))
    assert container.is_empty()
    assert container.is_container()
    assert len(container.parsed_graph) == 0
    assert container.contents_uris == []
    assert container.containers == {}
    assert container.resources == {}


def test_container_from_parsed_response(engine, container_source):
    response = sample_response(engine, container_source)
    container = Container(engine, "/settings/", response)
    assert not container.is_empty()
    assert container.response is response
    assert container.name == "settings"
    # the relative uri is replaced by the absolute one of the response
    assert container.uri == SETTINGS
    assert sorted(container.types) == [
        "http://www.w3.org/ns/ldp#BasicContainer",
        "http://www.w3.org/ns/ldp#Container"
    ]

    assert container.contents_uris == [
        SETTINGS + "ajax-loader.gif",
        SETTINGS + "index.html",
        SETTINGS + "prefs.ttl",
        SETTINGS + "privateTypeIndex.ttl",
        SETTINGS + "publicTypeIndex.ttl",
        SETTINGS + "testcontainer/"
    ]

    assert len(container.containers) == 1
    test_container = container.containers[SETTINGS + "testcontainer/"]
    assert isinstance(test_container, Container)
    assert test_container.name == "testcontainer"
    assert test_container.response is None
    assert sorted(test_container.types) == [
        "http://www.w3.org/ns/ldp#BasicContainer",
        "http://www.w3.org/ns/ldp#Container",
        "http://www.w3.org/ns/ldp#Resource"
    ]

    assert len(container.resources) == 5
    test_resource = container.resources[SETTINGS + "privateTypeIndex.ttl"]
    assert not test_resource.is_container()
    assert sorted(test_resource.types) == [
        "http://www.w3.org/ns/ldp#Resource",
        PRIVATE_TYPE_INDEX
    ]
    assert test_resource.name == "privateTypeIndex.ttl"

    matches = container.find_by_type(PRIVATE_TYPE_INDEX)
    assert len(matches) == 1
    assert matches[0].name == "privateTypeIndex.ttl"


def test_container_contents_are_partitioned(engine, container_source):
    container = Container(engine, SETTINGS,
                          sample_response(engine, container_source))
    containers = set(container.containers)
    resources = set(container.resources)
    assert not containers & resources
    assert containers | resources == set(container.contents_uris)
    assert sorted(containers | resources) == container.contents_uris


def test_find_by_type_matches_containers_and_resources(engine,
                                                       container_source):
    container = Container(engine, SETTINGS,
                          sample_response(engine, container_source))
    matches = container.find_by_type("http://www.w3.org/ns/ldp#Resource")
    assert {match.uri for match in matches} == {
        SETTINGS + "ajax-loader.gif",
        SETTINGS + "index.html",
        SETTINGS + "prefs.ttl",
        SETTINGS + "privateTypeIndex.ttl",
        SETTINGS + "publicTypeIndex.ttl",
        SETTINGS + "testcontainer/"
    }
    assert container.find_by_type("http://example.com/Unknown") == []


def test_self_link_is_not_a_child(engine):
    body = '@prefix ldp: <http://www.w3.org/ns/ldp#>.\n' \
           '<> a ldp:Container; ldp:contains <>, <child.ttl>.'
    container = Container(engine, SETTINGS, sample_response(engine, body))
    assert SETTINGS not in container.containers
    assert SETTINGS not in container.resources
    assert list(container.resources) == [SETTINGS + "child.ttl"]


def test_append_from_graph_is_cumulative(engine):
    page1 = '@prefix ldp: <http://www.w3.org/ns/ldp#>.\n' \
            '<> a ldp:Container; ldp:contains <c.ttl>, <a.ttl>, <sub/>.\n' \
            '<sub/> a ldp:Container.'
    page2 = '@prefix ldp: <http://www.w3.org/ns/ldp#>.\n' \
            '<> a ldp:Container; ldp:contains <b.ttl>.'
    container = Container(engine, SETTINGS, sample_response(engine, page1))
    container.append_from_graph(engine.parse(page2, SETTINGS, "text/turtle"))

    assert container.contents_uris == [
        SETTINGS + "a.ttl", SETTINGS + "c.ttl", SETTINGS + "sub/",
        SETTINGS + "b.ttl"
    ]
    assert set(container.containers) == {SETTINGS + "sub/"}
    assert set(container.resources) == {
        SETTINGS + "a.ttl", SETTINGS + "b.ttl", SETTINGS + "c.ttl"
    }


def test_get_response_builds_container(engine, container_source):
    headers = {"Content-Type": "text/turtle; charset=UTF-8",
               "Link": CONTAINER_LINK}
    response = sample_response(engine, container_source, headers)
    assert isinstance(response.resource, Container)
    assert response.resource.response is response
    assert len(response.resource.resources) == 5


def test_get_response_builds_resource(engine):
    response = sample_response(engine, "")
    assert type(response.resource) is Resource
    assert response.resource.uri == SETTINGS


def test_later_page_can_type_a_listed_resource_as_container(engine):
    page1 = '@prefix ldp: <http://www.w3.org/ns/ldp#>.\n' \
            '<> a ldp:Container; ldp:contains <x/>, <a.ttl>.'
    page2 = '@prefix ldp: <http://www.w3.org/ns/ldp#>.\n' \
            '<> a ldp:Container; ldp:contains <b.ttl>.\n' \
            '<x/> a ldp:Container.'
    container = Container(engine, SETTINGS, sample_response(engine, page1))
    assert SETTINGS + "x/" in container.resources

    container.append_from_graph(engine.parse(page2, SETTINGS, "text/turtle"))
    assert isinstance(container.containers[SETTINGS + "x/"], Container)
    assert SETTINGS + "x/" not in container.resources
    containers = set(container.containers)
    resources = set(container.resources)
    assert not containers & resources
    assert containers | resources == set(container.contents_uris)
