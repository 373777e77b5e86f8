#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
Service catalog model and endpoint discovery.
"""

from dataclasses import dataclass
from typing import Iterable
from typing import Tuple

from oslo_log import log

from autotopology import exceptions

LOG = log.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEndpoint(object):
    """Endpoint of a catalog entry, published for one region and interface."""

    region: str
    interface: str
    url: str
    id: str = ""
    region_id: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogEndpoint":
        return cls(
            region=data.get("region") or data.get("region_id") or "",
            interface=data.get("interface", ""),
            url=data["url"],
            id=data.get("id", ""),
            region_id=data.get("region_id", ""),
        )


@dataclass(frozen=True)
class CatalogEntry(object):
    """Metadata of an OpenStack service and its endpoints."""

    service_type: str
    name: str = ""
    id: str = ""
    endpoints: Tuple[CatalogEndpoint, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogEntry":
        return cls(
            service_type=data["type"],
            name=data.get("name", ""),
            id=data.get("id", ""),
            endpoints=tuple(
                CatalogEndpoint.from_dict(endpoint)
                for endpoint in data.get("endpoints") or []
            ),
        )


def parse_catalog(raw_catalog, source="service catalog") -> Tuple[CatalogEntry, ...]:
    """Build the catalog entries from the decoded JSON list.

    :param raw_catalog: The "catalog" value of an Identity response.
    :param source: Where the catalog came from, used in error messages.
    :raises DecodeError: if the catalog or one of its entries is malformed
    """
    if not isinstance(raw_catalog, list):
        raise exceptions.DecodeError(
            url=source, reason=f"catalog is {type(raw_catalog).__name__}, not a list"
        )
    try:
        return tuple(CatalogEntry.from_dict(entry) for entry in raw_catalog)
    except (KeyError, TypeError, AttributeError) as e:
        raise exceptions.DecodeError(
            url=source, reason=f"malformed catalog entry: {e!r}"
        ) from e


def find_endpoint(
    catalog: Iterable[CatalogEntry],
    service_type: str,
    region_name: str,
    interface: str,
) -> CatalogEndpoint:
    """Find the endpoint of a service for a region and interface.

    The first entry of the requested service type is selected, then the
    first of its endpoints matching both region and interface. Catalog
    order decides between duplicates.

    :param catalog: The service catalog entries.
    :param service_type: The service type, e.g. "network".
    :param region_name: The region the endpoint is published in.
    :param interface: The endpoint interface (public, internal or admin).
    :raises ServiceNotFound: if no entry has the service type
    :raises EndpointNotFound: if the entry has no matching endpoint
    """
    service_entry = None
    for entry in catalog:
        if entry.service_type == service_type:
            service_entry = entry
            break
    if service_entry is None:
        raise exceptions.ServiceNotFound(service_type=service_type)

    for endpoint in service_entry.endpoints:
        if endpoint.region == region_name and endpoint.interface == interface:
            LOG.debug(
                "Using %s endpoint of %s in region %s: %s",
                interface,
                service_entry.name or service_type,
                region_name,
                endpoint.url,
            )
            return endpoint

    raise exceptions.EndpointNotFound(
        service_name=service_entry.name or service_type,
        interface=interface,
        region_name=region_name,
    )
