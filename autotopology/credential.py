#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

from dataclasses import dataclass
from dataclasses import field
import os

from oslo_log import log

from autotopology.common.i18n import _
from autotopology import consts
from autotopology import exceptions

LOG = log.getLogger(__name__)

# Checked in this order, the first missing one is reported
REQUIRED_FIELDS = (
    "auth_url",
    "application_credential_id",
    "application_credential_secret",
    "interface",
)


@dataclass(frozen=True)
class Credential(object):
    """Application credential of an OpenStack Identity v3 endpoint.

    :param auth_url: The Identity v3 authentication URL.
    :param application_credential_id: The ID of the application credential.
    :param application_credential_secret: The secret of the application
        credential.
    :param region_name: The default region, may be empty.
    :param interface: The endpoint interface (public, internal or admin).
    """

    auth_url: str = ""
    application_credential_id: str = ""
    application_credential_secret: str = field(default="", repr=False)
    region_name: str = ""
    interface: str = ""

    def validate(self):
        """Check every required field is populated.

        :raises ConfigError: naming the first missing or invalid field
        """
        for field_name in REQUIRED_FIELDS:
            if not getattr(self, field_name):
                raise exceptions.ConfigError(
                    field=field_name, reason=_("value is required")
                )
        if self.interface not in consts.KS_ENDPOINT_INTERFACES:
            raise exceptions.ConfigError(
                field="interface",
                reason=_("%(value)s is not one of %(choices)s")
                % {
                    "value": self.interface,
                    "choices": ", ".join(consts.KS_ENDPOINT_INTERFACES),
                },
            )
        return self

    @classmethod
    def from_env(cls, environ=None):
        """Load the credential from the variables of an .openrc file."""
        if environ is None:
            environ = os.environ

        auth_type = environ.get(consts.ENV_AUTH_TYPE)
        if auth_type and auth_type != consts.AUTH_TYPE_APPLICATION_CREDENTIAL:
            raise exceptions.ConfigError(
                field=consts.ENV_AUTH_TYPE,
                reason=_("only %s is supported")
                % consts.AUTH_TYPE_APPLICATION_CREDENTIAL,
            )
        api_version = environ.get(consts.ENV_IDENTITY_API_VERSION)
        if api_version and api_version != consts.IDENTITY_API_VERSION:
            raise exceptions.ConfigError(
                field=consts.ENV_IDENTITY_API_VERSION,
                reason=_("only identity API version %s is supported")
                % consts.IDENTITY_API_VERSION,
            )

        credential = cls(
            auth_url=environ.get(consts.ENV_AUTH_URL, ""),
            application_credential_id=environ.get(
                consts.ENV_APPLICATION_CREDENTIAL_ID, ""
            ),
            application_credential_secret=environ.get(
                consts.ENV_APPLICATION_CREDENTIAL_SECRET, ""
            ),
            region_name=environ.get(consts.ENV_REGION_NAME, ""),
            interface=environ.get(consts.ENV_INTERFACE, ""),
        )
        LOG.debug("Loaded application credential from environment: %s", credential)
        return credential.validate()

    @classmethod
    def from_conf(cls, conf):
        """Load the credential from the [openstack] configuration group."""
        group = conf.openstack
        credential = cls(
            auth_url=group.auth_url or "",
            application_credential_id=group.application_credential_id or "",
            application_credential_secret=group.application_credential_secret or "",
            region_name=group.region_name or "",
            interface=group.interface or "",
        )
        LOG.debug("Loaded application credential from configuration: %s", credential)
        return credential.validate()
