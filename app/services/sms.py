import httpx
import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class SmsConfig(BaseModel):
    """Twilio credentials and sender number."""
    model_config = ConfigDict(frozen=True)

    account_sid: str = ""
    auth_token: str = ""
    from_number: str = ""
    api_url: str = "https://api.twilio.com"


class TwilioSmsSender:
    """Client for the Twilio Messages REST API (form-encoded, JSON responses)"""

    def __init__(self, config: SmsConfig, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        self.config = config
        self.client = client
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(
            self.config.account_sid
            and self.config.auth_token
            and self.config.from_number
        )

    @property
    def messages_url(self) -> str:
        base_url = self.config.api_url.rstrip("/")
        return f"{base_url}/2010-04-01/Accounts/{self.config.account_sid}/Messages.json"

    async def send_sms(self, to: str, body: str) -> Optional[str]:
        """Send a text message. Returns the Twilio message SID.

        Raises RuntimeError when credentials are missing and httpx.HTTPError
        on transport failures or non-2xx responses.
        """
        if not self.is_configured():
            raise RuntimeError("SMS is not configured")

        if self.client is not None:
            response = await self._post(self.client, to, body)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await self._post(client, to, body)

        response.raise_for_status()
        sid = response.json().get("sid")
        logger.info(f"SMS queued to {to} (sid={sid})")
        return sid

    async def _post(self, client: httpx.AsyncClient, to: str, body: str) -> httpx.Response:
        return await client.post(
            self.messages_url,
            data={"Body": body, "From": self.config.from_number, "To": to},
            auth=(self.config.account_sid, self.config.auth_token),
        )
