"""Error taxonomy shared by the service layer and the HTTP boundary."""


class RepoManagerError(Exception):
    """Base class for classified failures.

    ``status_code`` and ``error`` describe how the HTTP layer reports the
    failure; the service layer never inspects them.
    """

    status_code: int = 500
    error: str = "Internal Server Error"


class AuthenticationError(RepoManagerError):
    """The token was rejected or the session is not authenticated."""

    status_code = 401
    error = "Authentication Failed"


class MissingCredentialError(AuthenticationError):
    """No access token was configured."""


class NotFoundError(RepoManagerError):
    """The requested repository does not exist for the authenticated user."""

    status_code = 404
    error = "Not Found"


class RemoteFetchError(RepoManagerError):
    """A read against the remote API failed."""

    status_code = 502
    error = "Remote Fetch Failed"


class RemoteMutationError(RepoManagerError):
    """A write against the remote API failed."""

    status_code = 502
    error = "Remote Mutation Failed"


class InvalidRequestError(RepoManagerError):
    status_code = 400
    error = "Bad Request"
