#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

from oslo_log import log

LOG = log.getLogger(__name__)


def resolve_project_id(project_id, project_name, client):
    """Look up the project ID using the following hierarchy:

    - project_id if the caller specified it, returned unchanged
    - project_name if the caller specified it, looked up among the
      projects of the user
    - current project associated with the credential, which may not
      exist (e.g. unscoped credential), in which case "" is returned

    :param client: An authenticated client.
    :type client: autotopology.drivers.openstack.sdk_platform.OpenStackClient
    :raises ProjectNotFound: if project_name matches no project
    """
    if project_id:
        return project_id
    if project_name:
        LOG.debug("Looking up project %s by name", project_name)
        return client.lookup_project_by_name(project_name)
    current_project_id, current_project_name = client.current_project()
    if not current_project_id:
        LOG.warning("Credential is not scoped to a project")
    else:
        LOG.debug(
            "Using project %s (%s) of the credential",
            current_project_name,
            current_project_id,
        )
    return current_project_id


def resolve_region_name(region_name, client):
    """Look up the region name using the following hierarchy:

    - region_name if the caller specified it
    - current region name associated with the credential, which may
      not exist
    """
    if region_name:
        return region_name
    return client.current_region()
