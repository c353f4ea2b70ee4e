"""Custom exceptions for docc2md."""


class Docc2mdError(Exception):
    """Base exception for docc2md operations."""


class ParseError(Docc2mdError):
    """Documentation payload could not be decoded into a document tree."""
