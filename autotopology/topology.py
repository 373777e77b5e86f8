#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
Auto allocated topology data source and resource.
"""

from dataclasses import dataclass

from oslo_log import log

from autotopology import consts
from autotopology import exceptions
from autotopology import project

LOG = log.getLogger(__name__)


@dataclass(frozen=True)
class TopologyRequest(object):
    """Attributes the caller may set on the auto allocated topology."""

    project_id: str = ""
    project_name: str = ""
    region_name: str = ""


def _get_project_id(client, request):
    project_id = project.resolve_project_id(
        request.project_id, request.project_name, client
    )
    if not project_id:
        raise exceptions.ProjectUnresolved(
            reason="no project given and the credential is unscoped"
        )
    return project_id


def read_topology(client, request):
    """Get the auto allocated topology of a project, creating it if needed.

    :param client: An authenticated client.
    :type client: autotopology.drivers.openstack.sdk_platform.OpenStackClient
    :param request: The requested attributes.
    :type request: TopologyRequest
    :return: The computed attributes of the topology.
    :rtype: dict
    """
    region_name = project.resolve_region_name(request.region_name, client)
    network_client = client.network(region_name)
    project_id = _get_project_id(client, request)

    topology = network_client.get_auto_allocated_topology(project_id)
    network_name = network_client.get_network_name(topology.network_id)
    LOG.info(
        "Auto allocated topology of project %s is network %s (%s)",
        project_id,
        network_name,
        topology.network_id,
    )
    return {
        consts.TOPOLOGY_ID_ATTRIBUTE: topology.network_id,
        consts.TOPOLOGY_NAME_ATTRIBUTE: network_name,
        consts.PROJECT_ID_ATTRIBUTE: topology.project_id,
        consts.REGION_NAME_ATTRIBUTE: region_name,
    }


def delete_topology(client, request):
    """Delete the auto allocated topology of a project."""
    region_name = project.resolve_region_name(request.region_name, client)
    network_client = client.network(region_name)
    project_id = _get_project_id(client, request)
    network_client.delete_auto_allocated_topology(project_id)


class TopologyDataSource(object):
    """Get the auto allocated topology of a project."""

    description = "Use this data source to get the auto allocated topology of current project"

    def read(self, client, request):
        return read_topology(client, request)


class TopologyResource(TopologyDataSource):
    """Auto allocated topology managed as a resource.

    The topology is created on first read, so create and update are
    reads as well.
    """

    def create(self, client, request):
        return self.read(client, request)

    def update(self, client, request):
        return self.read(client, request)

    def delete(self, client, request):
        delete_topology(client, request)


class ResourceRegistry(object):
    """Handlers of the resources and data sources, by type name.

    Built once at start-up by build_registry() and handed to whatever
    needs to dispatch on a type name.
    """

    def __init__(self):
        self._resources = {}
        self._data_sources = {}

    def register_resource(self, name, handler):
        self._resources[name] = handler

    def register_data_source(self, name, handler):
        self._data_sources[name] = handler

    def get_resource(self, name):
        try:
            return self._resources[name]
        except KeyError:
            raise exceptions.HandlerNotFound(kind="resource", name=name)

    def get_data_source(self, name):
        try:
            return self._data_sources[name]
        except KeyError:
            raise exceptions.HandlerNotFound(kind="data source", name=name)

    @property
    def resource_names(self):
        return sorted(self._resources)

    @property
    def data_source_names(self):
        return sorted(self._data_sources)


def build_registry():
    registry = ResourceRegistry()
    registry.register_data_source(
        consts.AUTO_ALLOCATED_TOPOLOGY_TYPE, TopologyDataSource()
    )
    registry.register_resource(consts.AUTO_ALLOCATED_TOPOLOGY_TYPE, TopologyResource())
    return registry
