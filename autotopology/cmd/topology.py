#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
CLI interface for the auto allocated topology of a project.
"""

import os
import sys

from oslo_config import cfg
from oslo_log import log as logging
from oslo_serialization import jsonutils

from autotopology.common import config
from autotopology import consts
from autotopology.credential import Credential
from autotopology.drivers.openstack.sdk_platform import OpenStackClient
from autotopology import exceptions
from autotopology import topology

config.register_options()
CONF = cfg.CONF
LOG = logging.getLogger(__name__)


def load_credential(environ=None):
    """Credential from the OS_* variables, else from the [openstack] group."""
    if environ is None:
        environ = os.environ
    if environ.get(consts.ENV_AUTH_URL):
        return Credential.from_env(environ)
    return Credential.from_conf(CONF)


def build_request():
    return topology.TopologyRequest(
        project_id=CONF.command.project_id or "",
        project_name=CONF.command.project_name or "",
        region_name=CONF.command.region_name or "",
    )


def do_show(registry, client):
    """Print the auto allocated topology, creating it if needed."""
    handler = registry.get_data_source(consts.AUTO_ALLOCATED_TOPOLOGY_TYPE)
    result = handler.read(client, build_request())
    print(jsonutils.dumps(result, indent=4, sort_keys=True))


def do_delete(registry, client):
    """Delete the auto allocated topology."""
    handler = registry.get_resource(consts.AUTO_ALLOCATED_TOPOLOGY_TYPE)
    handler.delete(client, build_request())


def add_command_parsers(subparsers):
    for name, func in (("show", do_show), ("delete", do_delete)):
        parser = subparsers.add_parser(name)
        parser.set_defaults(func=func)
        parser.add_argument("--project-id", default="")
        parser.add_argument("--project-name", default="")
        parser.add_argument("--region-name", default="")


command_opt = cfg.SubCommandOpt(
    "command",
    title="Commands",
    help="Show available commands.",
    handler=add_command_parsers,
)


def main():
    logging.register_options(CONF)
    CONF.register_cli_opt(command_opt)
    try:
        CONF(sys.argv[1:], project="autotopology", prog="autotopology")
    except RuntimeError as e:
        sys.exit("ERROR: %s" % e)
    logging.setup(CONF, "autotopology")

    registry = topology.build_registry()
    try:
        client = OpenStackClient()
        client.auth(load_credential())
        CONF.command.func(registry, client)
    except exceptions.AutoTopologyException as e:
        LOG.debug("Command %s failed", CONF.command.name, exc_info=True)
        sys.exit("ERROR: %s" % e)


if __name__ == "__main__":
    main()
