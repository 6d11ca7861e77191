"""
Example records for demos and tests.

Builds a small service inventory: a Service with an embedded Metadata
member, a nested Owner, a list of Endpoints and a mapping of regions to
Endpoint lists.
"""
import datetime
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from recordmap.fields import embed, tag


@dataclass
class Metadata:
    created_by: str = ""
    created_at: datetime.datetime = datetime.datetime.min


@dataclass
class Owner:
    name: str
    email: str = tag("email,omitempty", default="")


@dataclass
class Endpoint:
    host: str = tag("host")
    port: int = tag("port")
    tls: bool = tag("tls,omitempty", default=False)


@dataclass
class Service:
    metadata: Metadata = embed(",flatten", default_factory=Metadata)
    name: str = tag("service", default="")
    owner: Optional[Owner] = None
    endpoints: List[Endpoint] = field(default_factory=list)
    regions: Dict[str, List[Endpoint]] = field(default_factory=dict)
    labels: Dict[str, str] = tag("labels,omitempty", default_factory=dict)
    replicas: int = tag("replicas,string", default=1)
    _token: str = ""


def build_example_service(replicas: int = 2) -> Service:
    created = datetime.datetime(2024, 1, 15, 9, 30)
    primary = Endpoint(host="api.internal", port=443, tls=True)
    fallback = Endpoint(host="api-backup.internal", port=8080)

    return Service(
        metadata=Metadata(created_by="platform", created_at=created),
        name="inventory",
        owner=Owner(name="Platform Team"),
        endpoints=[primary, fallback],
        regions={"eu-west": [primary], "us-east": [fallback]},
        replicas=replicas,
        _token="not-for-output",
    )
