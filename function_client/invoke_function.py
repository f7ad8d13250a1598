# invoke_function.py
import logging
import sys

import requests

from function_client.config import Settings, load_env_file, load_settings
from function_client.errors import (
    ConfigurationError,
    FunctionClientError,
    NoResponseError,
    ResponseError,
    SetupError,
    TokenAcquisitionError,
)
from function_client.logging_config import configure_logging
from function_client.result import Err, Ok, Result
from function_client.token_client import TokenClient

logger = logging.getLogger(__name__)

PAYLOAD = "John Doe"


def invoke_function(settings: Settings, token: str, session: requests.Session) -> Result[str]:
    """
    POST the fixed payload to the function with the bearer token.
    Building the request and sending it are kept apart so a malformed URL or
    header is reported as a setup error, not as a missing response.
    """
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "text/plain",
    }

    try:
        prepared = session.prepare_request(
            requests.Request("POST", settings.function_url, data=PAYLOAD.encode("utf-8"), headers=headers)
        )
    except (requests.RequestException, ValueError) as e:
        return Err(SetupError(str(e)))

    logger.info("Invoking function at %s", settings.function_url)
    try:
        send_kwargs = session.merge_environment_settings(prepared.url, {}, None, None, None)
        r = session.send(prepared, **send_kwargs)
    except (requests.exceptions.InvalidURL, requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidHeader) as e:
        return Err(SetupError(str(e)))
    except requests.RequestException as e:
        return Err(NoResponseError(str(e)))

    if 200 <= r.status_code < 300:
        return Ok(r.text)
    return Err(ResponseError(r.status_code, r.text))


def report(error: FunctionClientError) -> None:
    """Log a failed run with enough context to tell the failure kinds apart."""
    if isinstance(error, ConfigurationError):
        logger.error("%s", error)
    elif isinstance(error, TokenAcquisitionError):
        logger.error("Token acquisition failed: %s", error)
    elif isinstance(error, ResponseError):
        logger.error("Error response: %s %s", error.status_code, error.body)
    elif isinstance(error, NoResponseError):
        logger.error("No response received: %s", error)
    elif isinstance(error, SetupError):
        logger.error("Error setting up request: %s", error)
    else:
        logger.error("Unexpected error: %s", error)


def run(settings: Settings, session: requests.Session) -> int:
    # 1) Get token
    token_result = TokenClient(settings, session).fetch_token()
    if isinstance(token_result, Err):
        report(token_result.error)
        return 1

    # 2) Call the function
    result = invoke_function(settings, token_result.value.access_token, session)
    if isinstance(result, Err):
        report(result.error)
        return 1

    print(result.value)
    return 0


def main() -> int:
    # LOG_LEVEL may come from .env, so load it before logging is set up
    load_env_file()
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        report(e)
        return 1

    with requests.Session() as s:
        return run(settings, s)


if __name__ == "__main__":
    sys.exit(main())
