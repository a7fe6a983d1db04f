"""Service configuration loaded from environment variables.

The Google service-account credentials are exposed as an explicit
SheetsCredentials object so the sheet source receives them by injection
instead of reading the environment itself.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from src.suites.errors import ConfigurationError


class SheetsCredentials(BaseModel):
    """Everything needed to open the schedule spreadsheet read-only."""

    spreadsheet_id: str
    client_email: str
    private_key: str

    @property
    def private_key_pem(self) -> str:
        """Private key with escaped newlines (as stored in .env files) restored."""
        return self.private_key.replace("\\n", "\n")


class SuitesConfig(BaseSettings):
    """Service configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Google Sheets access (service account)
    google_sheet_id: str = Field(
        default="",
        description="ID of the spreadsheet holding the monthly suite tabs",
    )
    google_client_email: str = Field(
        default="",
        description="Service account e-mail with read access to the spreadsheet",
    )
    google_private_key: str = Field(
        default="",
        description="Service account private key, newlines escaped as \\n",
    )

    # Upstream read behaviour
    fetch_attempts: int = Field(
        default=2,
        ge=1,
        description="Attempts per tab read when the Sheets API fails transiently",
    )
    fetch_wait_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Fixed wait between tab read attempts",
    )

    # Placeholder progress values for occupied suites; false reports null
    placeholder_progress: bool = Field(
        default=True,
        description="Fill progress of occupied suites with a random 20-99 value",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def credentials(self) -> SheetsCredentials:
        """Build the injected credentials object.

        Raises:
            ConfigurationError: If any of the three Google settings is empty.
        """
        missing = [
            name
            for name, value in (
                ("GOOGLE_SHEET_ID", self.google_sheet_id),
                ("GOOGLE_CLIENT_EMAIL", self.google_client_email),
                ("GOOGLE_PRIVATE_KEY", self.google_private_key),
            )
            if not value.strip()
        ]
        if missing:
            raise ConfigurationError(
                f"Missing Google Sheets configuration: {', '.join(missing)}"
            )
        return SheetsCredentials(
            spreadsheet_id=self.google_sheet_id.strip(),
            client_email=self.google_client_email.strip(),
            private_key=self.google_private_key,
        )


# Singleton pattern
_config: SuitesConfig | None = None


def get_config() -> SuitesConfig:
    """Get the service configuration singleton.

    Returns:
        SuitesConfig: Service configuration instance
    """
    global _config
    if _config is None:
        _config = SuitesConfig()
    return _config
