from __future__ import annotations


class SocialNetworkError(Exception):
    """Base class for input problems that stop a build."""


class MalformedRecord(SocialNetworkError):
    """An expected delimiter was missing from the input text."""


class UnrecognizedAttribute(SocialNetworkError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"{title!r} is not a recognized user attribute")


class EmptyAttributeValue(SocialNetworkError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"attribute {title!r} has an empty value")


class InvalidIdentifier(SocialNetworkError):
    """A user id that is not an unsigned integer, or does not fit the collection."""


class EmptyCollection(SocialNetworkError):
    def __init__(self, message: str = "cannot build a social network from zero users"):
        super().__init__(message)


class InvalidAccess(RuntimeError):
    """Accessor used on an invalid record or with an out-of-range id.

    Not a SocialNetworkError: reaching this is a bug in the caller, not bad input.
    """
