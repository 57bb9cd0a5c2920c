"""Settings shared by every service client."""

from pydantic import BaseModel, Field

DEFAULT_ENTRY_POINT = "https://api.xmltime.com/"
DEFAULT_RETURN_FORMAT = "xml"
DEFAULT_VERBOSE_TIME = 0
DEFAULT_VERSION = 2
DEFAULT_LANGUAGE = "en"


class ServiceSettings(BaseModel):
    """Base service configuration composed into each service client."""

    entry_point: str = Field(default=DEFAULT_ENTRY_POINT, min_length=1, description="Service base URL")
    language: str = Field(default=DEFAULT_LANGUAGE, min_length=1, description="Language for returned texts")
    version: int = Field(default=DEFAULT_VERSION, ge=1, description="Service protocol version")
    output_format: str = Field(default=DEFAULT_RETURN_FORMAT, description="Payload format; only xml is parsed")
    verbose_time: int = Field(default=DEFAULT_VERBOSE_TIME, ge=0, le=1, description="1 = structured time elements")
    timeout_seconds: float = Field(default=20.0, gt=0, description="Timeout per request (seconds)")
    user_agent: str = Field(default="dstlist/0.1", min_length=1, description="User-Agent header")
