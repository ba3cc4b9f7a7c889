"""Exception types raised by merkle-graph."""


class MerkleGraphError(Exception):
    pass


class MalformedTreeError(MerkleGraphError, ValueError):
    """Input tree does not have the ``{text, children}`` shape."""


class MissingContainerError(MerkleGraphError, LookupError):
    """No container was available to draw into."""
