"""Internal modules for Catalog SDK.

These are not intended for direct use in application code.

Modules:
    auth - Credential state and refresh coalescing
    chunking - Batch splitting
    http - Transport and response-to-error mapping
    ids - Identifier validation
    pagination - Pagination window normalization
    resources - Resource clients
"""
