import logging
import sys

import requests

from function_client.config import load_env_file, load_settings
from function_client.errors import ConfigurationError, TokenAcquisitionError
from function_client.logging_config import configure_logging
from function_client.token_client import TokenClient

logger = logging.getLogger(__name__)


def main() -> int:
    # LOG_LEVEL may come from .env, so load it before logging is set up
    load_env_file()
    configure_logging()
    try:
        settings = load_settings()
        with requests.Session() as s:
            token = TokenClient(settings, s).get_token()
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1
    except TokenAcquisitionError as e:
        logger.error("Token acquisition failed: %s", e)
        return 1

    print("=== Access Token ===")
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
