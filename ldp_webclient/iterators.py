import logging
from .exceptions import LDPClientError

logger = logging.getLogger(__name__)


class ContainerWalker:
    """Walk a tree of LDP containers depth-first.

    Yields ``(depth, resource)`` pairs in listing order. Every container is
    fetched and its child containers are walked in turn; child resources are
    yielded from their parent's listing without being fetched. A child
    container that cannot be fetched or parsed is skipped; a failure on the
    root is raised.
    """
    def __init__(self, client, root, max_depth=None):
        self.client = client
        self.max_depth = max_depth
        # (depth, url, resource); resource is None until fetched
        self.to_check = [(0, root, None)]

    def __iter__(self):
        return self

    def __next__(self):
        while self.to_check:
            depth, url, current = self.to_check.pop()
            if current is not None:
                return depth, current

            try:
                current = self.client.get(url).resource
            except LDPClientError as e:
                if depth == 0:
                    raise
                logger.warning("Skipping {0}: {1}".format(url, e))
                continue

            if current.is_container() and self._descend(depth):
                for uri in reversed(current.contents_uris):
                    if uri in current.containers:
                        self.to_check.append((depth + 1, uri, None))
                    elif uri in current.resources:
                        self.to_check.append(
                            (depth + 1, uri, current.resources[uri]))
            return depth, current
        raise StopIteration()

    def _descend(self, depth):
        return self.max_depth is None or depth < self.max_depth
