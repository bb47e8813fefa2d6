"""
Exceptions raised by the pattern matching package
"""

from typing import Any, Dict, Optional


class GraphMatchError(Exception):
    """Base class for all graph matching errors"""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class VertexRangeError(GraphMatchError, ValueError):
    """A vertex id (or array length) does not fit the graph"""

    def __init__(self, message: str, vertex: int = None, size: int = None):
        details: Dict[str, Any] = {}
        if vertex is not None:
            details["vertex"] = vertex
        if size is not None:
            details["size"] = size
        super().__init__(message, "VERTEX_RANGE", details)


class InverseNotBuiltError(GraphMatchError):
    """parents() called on a graph built without inverse adjacency"""

    def __init__(self, graph_name: str):
        super().__init__(f"Graph '{graph_name}' has no inverse adjacency (build it with inverse=True)",
                         "NO_INVERSE", {"graph": graph_name})


class UnsupportedOperationError(GraphMatchError, NotImplementedError):
    """The matcher does not provide the requested capability"""

    def __init__(self, operation: str, matcher: str):
        super().__init__(f"{matcher} does not support {operation}()",
                         "UNSUPPORTED_OPERATION",
                         {"operation": operation, "matcher": matcher})


class MatchCancelled(GraphMatchError):
    """Raised when a cooperative stop check fires between passes"""

    def __init__(self, passes: int):
        super().__init__(f"Matching cancelled after {passes} passes",
                         "CANCELLED", {"passes": passes})
