#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
OpenStack Driver
"""

from oslo_log import log

from autotopology import catalog
from autotopology import consts
from autotopology.drivers.openstack.identity_v3 import IdentityClient
from autotopology.drivers.openstack.network_v2 import NetworkClient
from autotopology import exceptions
from autotopology import httpclient

LOG = log.getLogger(__name__)


class OpenStackClient(object):
    """Base client for the OpenStack APIs of one application credential.

    The client starts unauthenticated. auth() moves it to authenticated,
    storing the token, its metadata and the service catalog together;
    there is no way back and auth() is not re-entrant. An instance is
    meant for a single owner: it is not safe to call auth() while other
    threads use the client or the service clients it handed out.

    :param transport: The transport shared by the service clients.
    :type transport: autotopology.httpclient.RetryingTransport
    :param identity_client: The Identity v3 driver.
    :type identity_client: IdentityClient
    """

    def __init__(self, transport=None, identity_client=None):
        self.transport = transport or httpclient.RetryingTransport()
        self.identity_client = identity_client or IdentityClient(self.transport)
        self._credential = None
        self._token = None
        self._token_metadata = None
        self._catalog = ()

    @property
    def is_authenticated(self):
        return bool(self._token)

    @property
    def token_metadata(self):
        if self._token_metadata is None:
            return None
        return self._token_metadata.copy()

    @property
    def service_catalog(self):
        return self._catalog

    def auth(self, credential):
        """Authenticate with the Identity API using an application credential.

        Either every field (token, metadata, catalog) is set or, when any
        step fails, none of them is.

        :param credential: The application credential.
        :type credential: autotopology.credential.Credential
        :raises StateError: if the client is already authenticated
        """
        if self.is_authenticated:
            raise exceptions.StateError(reason="client is already authenticated")

        subject_token, metadata = self.identity_client.obtain_token(credential)
        entries = self.identity_client.get_catalog(credential.auth_url, subject_token)

        self._credential = credential
        self._token_metadata = metadata
        self._catalog = tuple(entries)
        self._token = subject_token
        LOG.info(
            "Authenticated to %s, %d services in catalog",
            credential.auth_url,
            len(self._catalog),
        )

    def _require_token(self):
        if not self.is_authenticated:
            raise exceptions.StateError(reason="token not set")

    def network(self, region_name=""):
        """Return a NetworkClient for a region.

        If region_name is empty, the region of the application credential
        is used.

        :raises StateError: if the client is not authenticated
        :raises NotFoundError: if the catalog has no matching endpoint
        """
        self._require_token()
        if not region_name:
            region_name = self._credential.region_name
        endpoint = catalog.find_endpoint(
            self._catalog,
            consts.SERVICE_TYPE_NETWORK,
            region_name,
            self._credential.interface,
        )
        return NetworkClient(
            endpoint.url,
            self._token,
            self._token_metadata,
            transport=self.transport,
        )

    def current_project(self):
        """Return the (id, name) of the project the token is scoped to.

        Both are empty for an unscoped credential or an unauthenticated
        client.
        """
        if self._token_metadata is None:
            return "", ""
        return self._token_metadata.project_id, self._token_metadata.project_name

    def current_region(self):
        """Return the region of the application credential, may be empty."""
        if self._credential is None:
            return ""
        return self._credential.region_name

    def lookup_project_by_name(self, project_name):
        """Look up the ID of a project by its name.

        The first project, among all the pages of the user's projects,
        whose name is exactly project_name wins.

        :raises StateError: if the client is not authenticated
        :raises ProjectNotFound: if no project has that name
        """
        self._require_token()
        projects = self.identity_client.list_user_projects(
            self._credential.auth_url, self._token, self._token_metadata.user_id
        )
        for project in projects:
            try:
                if project.get("name") == project_name:
                    # return the first found
                    return project["id"]
            except (KeyError, TypeError, AttributeError) as e:
                raise exceptions.DecodeError(
                    url=self._credential.auth_url, reason=repr(e)
                ) from e
        raise exceptions.ProjectNotFound(project=project_name)
