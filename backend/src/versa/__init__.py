"""Backend for the versa serverless CRUD API."""

__version__ = "0.1.0"
