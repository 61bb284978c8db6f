"""HTTP client for the document-indexing service."""

from indexconsole.client.api import IndexServiceClient, index_path

__all__ = ["IndexServiceClient", "index_path"]
