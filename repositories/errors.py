from requests import HTTPError, RequestException, Response


class BackendError(HTTPError):
    """Non-2xx answer from the employees backend.

    ``message`` holds the ``message`` or ``error`` field of the JSON body when
    the backend sent one, ``None`` otherwise.
    """

    def __init__(self, status: int, message: str | None, response: Response | None = None) -> None:
        super().__init__(f'Backend responded with status {status}: {message}', response=response)
        self.status = status
        self.message = message


class MalformedResponseError(RequestException):
    """2xx answer whose body does not have the expected shape."""
