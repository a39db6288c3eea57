"""Maps transport failures to short messages that can be shown to the shopper."""

import requests

SERVER_ERROR_MESSAGE = "Server error. Please try again."
NETWORK_ERROR_MESSAGE = "Network error. Check internet connection."
GENERIC_ERROR_MESSAGE = "Something went wrong."


def handle_error(error: Exception) -> str:
    """Returns a user-facing message for an exception raised while calling a remote API."""
    if isinstance(error, requests.exceptions.RequestException):
        if error.response is not None:
            return SERVER_ERROR_MESSAGE
        if error.request is not None or isinstance(
            error, (requests.exceptions.ConnectionError, requests.exceptions.Timeout)
        ):
            return NETWORK_ERROR_MESSAGE
    return GENERIC_ERROR_MESSAGE
