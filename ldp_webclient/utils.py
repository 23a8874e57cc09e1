import re
from .constants import SPARQL_UPDATE

# RFC 5988 token: any char except separators and whitespace
_TOKEN = r'[^\(\)<>@,;:"\/\[\]\?={} \t]+'
_PARAM = _TOKEN + r'=((' + _TOKEN + r')|("[^"]*"))'

LINK_EXP = re.compile(r'<[^>]*>\s*(\s*;\s*' + _PARAM + r')*(,|$)')
PARAM_EXP = re.compile(_PARAM)


def parse_link_header(header):
    """Parse the value of a Link header into a dict of relation -> URIs.

    Example::

        >>> parse_link_header('<r.acl>; rel="acl", <r.meta>; rel="meta"')
        {'acl': ['r.acl'], 'meta': ['r.meta']}

    A relation's list is re-sorted every time it grows past one entry, so
    relations with several targets always come back in lexicographic order.
    """
    if not header:
        return {}

    rels = {}
    for match in LINK_EXP.finditer(header):
        href, _, params = match.group(0).partition(">")
        href = href[1:]
        for param in PARAM_EXP.finditer(params):
            name, _, value = param.group(0).partition("=")
            if name.lower() != "rel":
                continue
            # rel="a b" names two relations for the same target
            for rel in re.sub(r"[\"']", "", value).split():
                targets = rels.setdefault(rel, [])
                targets.append(href)
                if len(targets) > 1:
                    targets.sort()
    return rels


def absolute_url(base_url, path_url):
    """Join a base URL and a relative path, or pass an absolute URL
    through unchanged."""
    if path_url and not path_url.startswith("http"):
        if base_url.endswith("/"):
            base_url = base_url[:-1]
        if path_url.startswith("/"):
            path_url = path_url[1:]
        return base_url + "/" + path_url
    return path_url


def hostname(url):
    """Returns the scheme and authority of a URL, e.g.
    'https://example.com/dir/' -> 'https://example.com'."""
    fragments = url.split("//", 1)
    protocol = None
    if len(fragments) == 2:
        protocol, host = fragments
    else:
        host = url

    segment = host.split("/")[0]
    result = protocol + "//" + segment if protocol else segment

    # protocol-relative url
    if url.startswith("//"):
        result = "//" + result
    return result


def parent_url(url):
    """'https://example.com/resource' -> 'https://example.com/'"""
    return url[:url.rfind("/") + 1]


def parse_allowed_methods(allow_header=None, accept_patch_header=None):
    """Returns a dict of the (lowercase) verbs the server allows."""
    allowed = {}

    if allow_header:
        for verb in allow_header.split(","):
            verb = verb.strip().lower()
            if verb:
                allowed[verb] = True

    if accept_patch_header and SPARQL_UPDATE in accept_patch_header:
        allowed["patch"] = True

    return allowed


def statement_to_nt(statement, exclude_dot=False):
    """Render a statement as an N-Triples string. Strings pass through."""
    if not isinstance(statement, str):
        statement = " ".join(term.n3() for term in statement) + " ."

    if exclude_dot and statement.endswith("."):
        statement = statement[:-1]
    return statement


def compose_patch_query(to_delete=None, to_insert=None):
    """Compose a SPARQL Update body for a PATCH request."""
    query = ""

    if to_delete:
        statements = [statement_to_nt(st, exclude_dot=True).rstrip()
                      for st in to_delete]
        query += "DELETE DATA { " + " . ".join(statements) + " . };\n"

    if to_insert:
        statements = [statement_to_nt(st, exclude_dot=True).rstrip()
                      for st in to_insert]
        query += "INSERT DATA { " + " . ".join(statements) + " . };\n"

    return query
