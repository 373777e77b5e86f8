#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
Base class for all OpenStack REST drivers.
"""

import abc

from autotopology import httpclient


class DriverBase(object, metaclass=abc.ABCMeta):
    """Base class for all drivers.

    :param transport: The transport the requests are sent with, a new
        RetryingTransport when not given.
    :type transport: autotopology.httpclient.RetryingTransport
    """

    def __init__(self, transport=None):
        self.transport = transport or httpclient.RetryingTransport()

    def _request(self, method, url, headers=None, json=None, ok_codes=None):
        response = self.transport.execute(method, url, headers=headers, json=json)
        return httpclient.check_response(response, url, ok_codes)
