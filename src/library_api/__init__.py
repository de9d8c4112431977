"""Library API.

REST service for the books owned by an author: creation, upsert via PUT,
JSON Patch partial updates and hypermedia links on every returned resource.
"""

__version__ = "0.1.0"
