"""Report rendering for replica set lists."""

from __future__ import annotations

import json

import yaml
from rich.table import Table

from replicadash.constants.enums import OutputFormat
from replicadash.models.core.replica_set_info import EndpointInfo, ReplicaSetList


def render_json(replica_set_list: ReplicaSetList) -> str:
    """Serialize the list as an indented JSON document."""
    return json.dumps(replica_set_list.to_document(), indent=2)


def render_yaml(replica_set_list: ReplicaSetList) -> str:
    """Serialize the list as a YAML document."""
    return yaml.safe_dump(replica_set_list.to_document(), sort_keys=False)


def _format_endpoint(endpoint: EndpointInfo) -> str:
    host = f"{endpoint.host}.{endpoint.namespace}" if endpoint.namespace else endpoint.host
    ports = ",".join(f"{p.port}/{p.protocol}" for p in endpoint.ports)
    return f"{host}:{ports}" if ports else host


def render_table(replica_set_list: ReplicaSetList) -> Table:
    """Build a rich table with one row per replica set."""
    table = Table(title="Replica Sets")

    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Namespace", style="magenta")
    table.add_column("Pods", justify="right")
    table.add_column("Running", style="green", justify="right")
    table.add_column("Waiting", style="yellow", justify="right")
    table.add_column("Failed", style="red", justify="right")
    table.add_column("Images")
    table.add_column("Internal Endpoints")
    table.add_column("External Endpoints")

    for replica_set in replica_set_list.replica_sets:
        pods = replica_set.pods
        table.add_row(
            replica_set.name,
            replica_set.namespace,
            f"{pods.current}/{pods.desired}",
            str(pods.running),
            str(pods.waiting),
            str(pods.failed),
            "\n".join(replica_set.container_images),
            "\n".join(_format_endpoint(e) for e in replica_set.internal_endpoints),
            "\n".join(_format_endpoint(e) for e in replica_set.external_endpoints),
        )

    return table


def render(replica_set_list: ReplicaSetList, output_format: OutputFormat) -> str | Table:
    """Render the list in the requested format."""
    if output_format == OutputFormat.JSON:
        return render_json(replica_set_list)
    if output_format == OutputFormat.YAML:
        return render_yaml(replica_set_list)
    return render_table(replica_set_list)
