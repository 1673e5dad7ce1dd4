"""HTTP client infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class HttpClientSettings(InfrastructureSettings):
    """Settings for the client used to fetch shell resources.

    Environment Variables:
        SITE_ORIGIN: Origin the resource paths are resolved against
        HTTP_TIMEOUT_SECONDS: Per-request timeout (default: 10)
        HTTP_USER_AGENT: User-Agent header sent with every request
    """

    origin: str = Field(default="http://localhost:8000", alias="SITE_ORIGIN")
    timeout_seconds: float = Field(default=10, alias="HTTP_TIMEOUT_SECONDS")
    user_agent: str = Field(default="Site-Shell-Loader/1.0", alias="HTTP_USER_AGENT")
