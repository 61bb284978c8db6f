"""IndexConsole - Console for a remote document-indexing service.

Keeps a local view of the service's indexes in sync across create, list,
delete, inspect and upload operations.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
