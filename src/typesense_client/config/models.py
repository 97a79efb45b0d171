"""Connection configuration models.

A client talks to one Typesense node, reached through ``protocol://host:port``
and authenticated with the ``X-TYPESENSE-API-KEY`` header.
"""

from pydantic import BaseModel, Field, field_validator


class Node(BaseModel):
    """A Typesense node address.

    Attributes:
        host: Host name or IP address
        port: Port, kept as text as it is only ever rendered into a URL
        protocol: ``http`` or ``https``
    """

    host: str = Field(..., min_length=1)
    port: str = Field(..., min_length=1)
    protocol: str = Field(default="http", min_length=1)

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
    }

    @field_validator("port", mode="before")
    @classmethod
    def _port_as_text(cls, value):
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"


class ClientConfig(BaseModel):
    """Configuration for TypesenseClient.

    Only the first node is used; the others are accepted so a cluster
    configuration can be shared with other tools.

    Attributes:
        nodes: Nodes of the cluster
        api_key: Admin or scoped API key
        connection_timeout_seconds: Timeout applied to every request
    """

    nodes: list[Node] = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1)
    connection_timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}

    @property
    def base_url(self) -> str:
        return self.nodes[0].url
