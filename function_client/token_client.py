import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from function_client.config import Settings
from function_client.errors import TokenAcquisitionError
from function_client.result import Err, Ok, Result

logger = logging.getLogger(__name__)

TOKEN_TYPE_DEFAULT = "Bearer"


@dataclass(frozen=True)
class Token:
    access_token: str = field(repr=False)
    token_type: str = TOKEN_TYPE_DEFAULT
    expires_in: Optional[int] = None


class TokenClient:
    """
    Client-credentials exchange against the Microsoft identity platform v2.0
    token endpoint. One POST per call: nothing is cached, nothing is retried.
    """

    def __init__(self, settings: Settings, session: requests.Session):
        self.settings = settings
        self.session = session

    def _form(self) -> Dict[str, str]:
        return {
            "grant_type": "client_credentials",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "scope": self.settings.scope,
        }

    def fetch_token(self) -> Result[Token]:
        url = self.settings.token_url
        logger.info("Requesting token from %s", url)

        try:
            resp = self.session.post(
                url,
                data=self._form(),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except requests.RequestException as e:
            return Err(TokenAcquisitionError(f"Failed to reach token endpoint: {e}"))

        if not 200 <= resp.status_code < 300:
            # Surface some context without dumping everything
            return Err(TokenAcquisitionError(
                f"Token endpoint returned {resp.status_code}. "
                f"URL={url}. Response snippet: {resp.text[:400]}",
                status_code=resp.status_code,
                body=resp.text,
            ))

        try:
            data: Any = resp.json()
        except ValueError:
            return Err(TokenAcquisitionError(
                "Token response was not JSON.",
                status_code=resp.status_code,
                body=resp.text,
            ))

        if not isinstance(data, dict):
            return Err(TokenAcquisitionError(
                f"Token response was not a JSON object: {type(data).__name__}",
                status_code=resp.status_code,
                body=resp.text,
            ))

        access_token = data.get("access_token")
        if not access_token or not isinstance(access_token, str):
            return Err(TokenAcquisitionError(
                f"access_token not found in response. Keys present: {list(data.keys())}",
                status_code=resp.status_code,
                body=resp.text,
            ))

        expires_in = data.get("expires_in")
        try:
            expires_in = int(expires_in) if expires_in is not None else None
        except (TypeError, ValueError):
            return Err(TokenAcquisitionError(
                f"expires_in is not a number: {expires_in!r}",
                status_code=resp.status_code,
                body=resp.text,
            ))

        token = Token(
            access_token=access_token,
            token_type=data.get("token_type") or TOKEN_TYPE_DEFAULT,
            expires_in=expires_in,
        )
        logger.info("Token acquired (type=%s, expires_in=%s)", token.token_type, token.expires_in)
        return Ok(token)

    def get_token(self) -> str:
        """Return the access token string, raising TokenAcquisitionError on failure."""
        result = self.fetch_token()
        if isinstance(result, Err):
            raise result.error
        return result.value.access_token
