# graphkit/services/exceptions.py

class GraphError(Exception):
    """Base class for caller errors raised by graphkit."""
    pass

class TraversalError(GraphError):
    """Raised when a traversal is started without a valid root node."""
    pass

class LayoutError(GraphError):
    """Raised when an unknown layout type is requested."""
    pass

class FilterParseError(GraphError):
    """Raised when filter query has invalid syntax."""
    pass

class FilterTypeError(GraphError):
    """Raised when the query value is incompatible with the field type."""
    pass
