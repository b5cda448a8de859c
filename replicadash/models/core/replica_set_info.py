"""Replica set view models.

Field aliases match the camelCase document served to the dashboard.
"""

from datetime import datetime

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class ServicePortInfo(BaseModel):
    """A single port exposed by a service."""

    model_config = ConfigDict(frozen=True)

    port: int
    protocol: str = "TCP"


class EndpointInfo(BaseModel):
    """Internal or external endpoint of a service targeting a replica set.

    External endpoints have no namespace and serialize as {host, ports}.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    namespace: str | None = None
    ports: list[ServicePortInfo] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def serialize_endpoint(self, handler: SerializerFunctionWrapHandler) -> dict:
        data = handler(self)
        if self.namespace is None:
            data.pop("namespace", None)
        return data


class ReplicaSetPodInfo(BaseModel):
    """Aggregate information about pods belonging to a replica set."""

    model_config = ConfigDict(frozen=True)

    # Declared by the controller status, not by the pod scan.
    current: int = 0
    desired: int = 0
    running: int = 0
    waiting: int = 0
    failed: int = 0


class ReplicaSetInfo(BaseModel):
    """Replica set plus zero or more services that target it."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    namespace: str
    description: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    pods: ReplicaSetPodInfo = Field(default_factory=ReplicaSetPodInfo)
    container_images: list[str] = Field(default_factory=list, alias="containerImages")
    creation_time: datetime | None = Field(default=None, alias="creationTime")
    internal_endpoints: list[EndpointInfo] = Field(
        default_factory=list, alias="internalEndpoints"
    )
    external_endpoints: list[EndpointInfo] = Field(
        default_factory=list, alias="externalEndpoints"
    )


class ReplicaSetList(BaseModel):
    """Replica sets in the cluster, in the order they were listed."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    replica_sets: list[ReplicaSetInfo] = Field(
        default_factory=list, alias="replicaSets"
    )

    def to_document(self) -> dict:
        """Serialize to the flat camelCase document."""
        return self.model_dump(mode="json", by_alias=True)
