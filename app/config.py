from pydantic_settings import BaseSettings
from functools import lru_cache

from app.services.sms import SmsConfig


class Settings(BaseSettings):
    # Database
    database_url: str
    sql_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Twilio (SMS notifications)
    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_phone_number: str = ""  # Sender number, E.164
    twilio_api_url: str = "https://api.twilio.com"

    class Config:
        env_file = ".env"

    def sms_config(self) -> SmsConfig:
        return SmsConfig(
            account_sid=self.twilio_account_sid,
            auth_token=self.twilio_auth_token,
            from_number=self.twilio_phone_number,
            api_url=self.twilio_api_url,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
