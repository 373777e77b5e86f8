#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

from dataclasses import dataclass

from oslo_log import log

from autotopology import consts
from autotopology.drivers import base
from autotopology import exceptions
from autotopology import httpclient
from autotopology import utils

LOG = log.getLogger(__name__)


@dataclass(frozen=True)
class AutoAllocatedTopology(object):
    """Network (and related entities) created by the auto allocated
    topology extension for a project."""

    network_id: str
    project_id: str


class NetworkClient(base.DriverBase):
    """Network V2 driver bound to one endpoint of the service catalog.

    The token and its metadata are copies of the ones of the client that
    created it.

    :param base_url: The network endpoint URL.
    :type base_url: str
    :param token: The token sent in the X-Auth-Token header.
    :type token: str
    :param token_metadata: The metadata of the token.
    :type token_metadata: autotopology.token.TokenMetadata
    """

    def __init__(self, base_url, token, token_metadata, transport=None):
        super(NetworkClient, self).__init__(transport)
        self.base_url = base_url
        self.token = token
        self.token_metadata = token_metadata.copy()

    def request(self, method, path, ok_codes, json=None):
        """Send an authenticated request to the network endpoint.

        :param ok_codes: The status codes treated as success.
        :raises HTTPStatusError: with the response body, on other codes
        """
        url = utils.join_url(self.base_url, path)
        headers = {consts.HEADER_AUTH_TOKEN: self.token}
        return self._request(method, url, headers=headers, json=json, ok_codes=ok_codes)

    # https://docs.openstack.org/api-ref/network/v2/#show-auto-allocated-topology-details
    def get_auto_allocated_topology(self, project_id):
        """Get (or create if not exists) the auto allocated topology of a project."""
        path = f"/v2.0/auto-allocated-topology/{project_id}"
        url = utils.join_url(self.base_url, path)
        response = self.request("GET", path, ok_codes=(200,))
        body = httpclient.get_json(response, url)
        try:
            topology = body.get("auto_allocated_topology")
            network_id = topology.get("id") if topology else None
        except AttributeError as e:
            raise exceptions.DecodeError(url=url, reason=repr(e)) from e
        if not network_id:
            LOG.error("No auto allocated topology returned for project %s", project_id)
            raise exceptions.TopologyNotFound(project_id=project_id)
        return AutoAllocatedTopology(network_id=network_id, project_id=project_id)

    # https://docs.openstack.org/api-ref/network/v2/#delete-the-auto-allocated-topology
    def delete_auto_allocated_topology(self, project_id):
        """Delete the auto allocated topology of a project."""
        path = f"/v2.0/auto-allocated-topology/{project_id}"
        response = self.request("DELETE", path, ok_codes=(200, 204))
        httpclient.drain(response)
        LOG.info("Deleted auto allocated topology of project %s", project_id)

    def get_network_name(self, network_id):
        """Look up the name of a network."""
        path = f"/v2.0/networks/{network_id}"
        url = utils.join_url(self.base_url, path)
        response = self.request("GET", path, ok_codes=(200,))
        body = httpclient.get_json(response, url)
        try:
            network = body["network"]
            name = network.get("name", "") if network else None
        except (KeyError, TypeError, AttributeError) as e:
            raise exceptions.DecodeError(url=url, reason=repr(e)) from e
        if not network:
            raise exceptions.NetworkNotFound(network_id=network_id)
        return name
