import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from function_client.errors import ConfigurationError

AUTHORITY_HOST = "https://login.microsoftonline.com"

REQUIRED_VARS = ("CLIENT_ID", "CLIENT_SECRET", "TENANT_ID", "FUNCTION_URL")


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigurationError(name)
    return value


@dataclass(frozen=True)
class Settings:
    # --- App registration ---
    client_id: str
    client_secret: str = field(repr=False)
    tenant_id: str

    # --- Target ---
    function_url: str

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the process environment (or the given mapping).
        Raises ConfigurationError naming the first variable that is unset or empty.
        """
        env = os.environ if environ is None else environ
        values = {name: _require(env, name) for name in REQUIRED_VARS}
        return cls(
            client_id=values["CLIENT_ID"],
            client_secret=values["CLIENT_SECRET"],
            tenant_id=values["TENANT_ID"],
            function_url=values["FUNCTION_URL"],
        )

    # --- Convenience URLs ---
    @property
    def token_url(self) -> str:
        return f"{AUTHORITY_HOST}/{self.tenant_id}/oauth2/v2.0/token"

    @property
    def scope(self) -> str:
        return f"api://{self.client_id}/.default"


def load_env_file() -> None:
    # .env values never override variables already set in the environment
    load_dotenv(find_dotenv(usecwd=True))


def load_settings() -> Settings:
    load_env_file()
    return Settings.from_env()
