"""Exceptions raised while handling a portrait prompt request."""

from __future__ import annotations


class PromptraitsError(Exception):
    """Base error carrying a user-facing message and optional diagnostics."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class MethodNotAllowed(PromptraitsError):
    status_code = 405

    def __init__(self, method: str | None = None) -> None:
        super().__init__("Método no permitido")
        self.method = method


class InvalidRequest(PromptraitsError, ValueError):
    status_code = 400


class UpstreamFailure(PromptraitsError):
    """The Gemini call raised, timed out, or returned no text."""

    status_code = 500

    def __init__(self, details: str) -> None:
        super().__init__("Fallo interno del servidor al procesar la IA.", details)
