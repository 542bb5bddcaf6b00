"""Exception hierarchy for kubeutil."""


class KubeUtilError(Exception):
    """Base exception for all kubeutil errors."""


class QuantityParseError(KubeUtilError, ValueError):
    """Raised when a resource quantity token cannot be parsed."""

    def __init__(self, token: str, kind: str) -> None:
        super().__init__(f"Invalid {kind} quantity: {token!r}")
        self.token = token
        self.kind = kind


class RowParseError(KubeUtilError, ValueError):
    """Raised when a fetched kubectl line has an unexpected shape."""


class KubectlError(KubeUtilError, RuntimeError):
    """Raised when a kubectl invocation fails."""
