"""
GraphQL error types surfaced to clients
"""

from graphql import GraphQLError

BAD_USER_INPUT = "BAD_USER_INPUT"


class BadUserInputError(GraphQLError):
    """Client supplied arguments that the operation rejects.

    Rendered in the response ``errors`` list with ``extensions.code`` set to
    ``BAD_USER_INPUT``.
    """

    def __init__(self, message: str):
        super().__init__(message, extensions={"code": BAD_USER_INPUT})
