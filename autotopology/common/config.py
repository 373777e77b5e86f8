#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
File to store all the configurations
"""
from oslo_config import cfg

from autotopology import consts

# Application credential used when the OS_* environment variables are
# not exported, mirrors the fields of an .openrc file
openstack_opts = [
    cfg.StrOpt("auth_url", help="Identity v3 authorization url"),
    cfg.StrOpt("application_credential_id", help="ID of the application credential"),
    cfg.StrOpt(
        "application_credential_secret",
        secret=True,
        help="Secret of the application credential",
    ),
    cfg.StrOpt(
        "region_name",
        default="",
        help="Region used when no region is requested explicitly",
    ),
    cfg.StrOpt(
        "interface",
        default=consts.KS_ENDPOINT_DEFAULT,
        choices=consts.KS_ENDPOINT_INTERFACES,
        help="Endpoint interface selected from the service catalog",
    ),
]

openstack_group = cfg.OptGroup(name="openstack", title="OpenStack Credentials")


def list_opts():
    yield openstack_group.name, openstack_opts


def register_options(conf=cfg.CONF):
    for group, opts in list_opts():
        conf.register_opts(opts, group=group)
