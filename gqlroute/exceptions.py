class GraphQLRouteError(Exception):
    pass


class MalformedRequest(GraphQLRouteError):
    """
    The HTTP payload could not be decoded into a GraphQL request.
    The underlying codec or validation error is always chained as __cause__.
    """

    def __init__(self, message: str = "GraphQL request could not be parsed."):
        super().__init__(message)
