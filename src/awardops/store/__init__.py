"""Content store access.

Per the layering of this service:
- session: HTTP transport bound to one StoreConfig, raises StoreError
- repo: typed collection reads/writes returning domain models
"""
