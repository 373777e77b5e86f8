#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
Auto topology base exception handling.
"""

from oslo_utils import excutils

from autotopology.common.i18n import _


class AutoTopologyException(Exception):
    """Base Auto Topology Exception.

    To correctly use this class, inherit from it and define
    a 'message' property. That message will get printf'd
    with the keyword arguments provided to the constructor.
    """

    message = _("An unknown exception occurred.")

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        try:
            super(AutoTopologyException, self).__init__(self.message % kwargs)
            self.msg = self.message % kwargs
        except Exception:
            with excutils.save_and_reraise_exception() as ctxt:
                if not self.use_fatal_exceptions():
                    ctxt.reraise = False
                    # at least get the core message out if something happened
                    super(AutoTopologyException, self).__init__(self.message)
                    self.msg = self.message

    def use_fatal_exceptions(self):
        return False


class ConfigError(AutoTopologyException):
    message = _("Invalid credential field %(field)s: %(reason)s")

    def __init__(self, field, reason):
        self.field = field
        super(ConfigError, self).__init__(field=field, reason=reason)


class TransportError(AutoTopologyException):
    message = _("Request to %(url)s failed: %(reason)s")


class ConnectTimeout(TransportError):
    message = _("Request to %(url)s timed out")


class ConnectFailure(TransportError):
    message = _("Unable to establish connection to %(url)s: %(reason)s")


class HTTPStatusError(AutoTopologyException):
    message = _("%(url)s failed with status code: %(status)d %(body)s")

    def __init__(self, status, url, body=""):
        self.status = status
        self.url = url
        self.body = body
        super(HTTPStatusError, self).__init__(status=status, url=url, body=body)


class ProtocolError(AutoTopologyException):
    message = _("Unexpected response from %(url)s: %(reason)s")


class DecodeError(AutoTopologyException):
    message = _("Unable to decode response from %(url)s: %(reason)s")


class NotFoundError(AutoTopologyException):
    message = _("Requested resource could not be found")


class ServiceNotFound(NotFoundError):
    message = _("service type %(service_type)s not found in catalog")


class EndpointNotFound(NotFoundError):
    message = _(
        "service catalog for %(service_name)s does not have %(interface)s "
        "endpoint for region %(region_name)s"
    )


class ProjectNotFound(NotFoundError):
    message = _("Project %(project)s not found")


class ProjectUnresolved(NotFoundError):
    message = _("Cannot obtain project ID: %(reason)s")


class TopologyNotFound(NotFoundError):
    message = _("Auto allocated topology of project %(project_id)s not found")


class NetworkNotFound(NotFoundError):
    message = _("Network %(network_id)s not found")


class HandlerNotFound(NotFoundError):
    message = _("No %(kind)s registered with name %(name)s")


class EmptyResultError(AutoTopologyException):
    message = _("%(resource)s returned by %(url)s is empty")


class StateError(AutoTopologyException):
    message = _("Invalid client state: %(reason)s")
