"""HTTP request/response state for BDD step definitions."""

__version__ = "0.1.0"
