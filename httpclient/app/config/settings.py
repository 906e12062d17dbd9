from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from httpclient.app.constants import DEFAULT_HTTP_VERSION, DEFAULT_METHOD, DEFAULT_PORT


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Builder defaults apply only when a ClientSettings is handed to Builder explicitly.
    default_port: int = Field(DEFAULT_PORT, ge=0, le=65535, validation_alias="HTTP_CLIENT_DEFAULT_PORT")
    default_http_version: str = Field(DEFAULT_HTTP_VERSION, validation_alias="HTTP_CLIENT_DEFAULT_HTTP_VERSION")
    default_method: str = Field(DEFAULT_METHOD, validation_alias="HTTP_CLIENT_DEFAULT_METHOD")

    transport_backend: str = Field("socket", validation_alias="HTTP_CLIENT_TRANSPORT_BACKEND")
    recv_buffer_size: int = Field(4096, gt=0, validation_alias="HTTP_CLIENT_RECV_BUFFER_SIZE")
    # None keeps sockets fully blocking (OS default connect timeout, no read deadline).
    socket_timeout_seconds: float | None = Field(
        None,
        gt=0,
        validation_alias="HTTP_CLIENT_SOCKET_TIMEOUT_SECONDS",
    )
