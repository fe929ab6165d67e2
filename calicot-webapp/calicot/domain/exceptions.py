"""Errors raised by the store adapters."""


class DocumentNotFoundError(LookupError):
    """Raised when no document exists under the requested id."""

    def __init__(self, document_id: str, container_name: str = "") -> None:
        self.document_id = document_id
        self.container_name = container_name
        location = f" in {container_name}" if container_name else ""
        super().__init__(f"Document {document_id} not found{location}")
