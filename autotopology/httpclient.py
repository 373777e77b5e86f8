#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

import time

from oslo_log import log
import requests
import retrying

from autotopology import consts
from autotopology import exceptions

LOG = log.getLogger(__name__)


def is_error_response(response):
    return response.status_code >= consts.HTTP_ERROR_STATUS


class RetryingTransport(object):
    """Send HTTP requests with a bounded number of attempts.

    A response with an error status (>= 400) is retried until the last
    attempt, whose response is handed back for the caller to classify.
    Connection failures and timeouts are raised right away without any
    retry. The wait after every error response, the last one included,
    grows linearly with the index of the failed attempt i (0-indexed):
    backoff_millis * i.

    The transport keeps no state between calls.

    :param max_attempts: Maximum number of attempts per request.
    :type max_attempts: int
    :param backoff_millis: Backoff step between attempts, in milliseconds.
    :type backoff_millis: int
    :param timeout: Timeout of every attempt, in seconds.
    :type timeout: int
    """

    def __init__(
        self,
        max_attempts=consts.HTTP_MAX_ATTEMPTS,
        backoff_millis=consts.HTTP_RETRY_BACKOFF_MILLIS,
        timeout=consts.HTTP_REQUEST_TIMEOUT,
    ):
        self.max_attempts = max_attempts
        self.backoff_millis = backoff_millis
        self.timeout = timeout

    def execute(self, method, url, headers=None, data=None, json=None):
        """Send the request, retrying error responses.

        :return: The response of the first successful attempt, or the
            response of the last attempt.
        :rtype: requests.Response
        :raises TransportError: if the request could not be sent
        """
        retry = retrying.Retrying(
            retry_on_result=is_error_response,
            retry_on_exception=lambda ex: False,
            stop_max_attempt_number=self.max_attempts,
            wait_func=self._backoff,
        )
        try:
            return retry.call(self._send, method, url, headers, data, json)
        except retrying.RetryError as e:
            # retrying stops without waiting after the last attempt
            time.sleep(self._backoff(self.max_attempts, 0) / 1000.0)
            response = e.last_attempt.value
            LOG.warning(
                "%s %s still failing with %d after %d attempts",
                method,
                url,
                response.status_code,
                self.max_attempts,
            )
            return response

    def _backoff(self, attempt_number, _delay_since_first_attempt_ms):
        # attempt_number counts from 1, the backoff from attempt index 0
        wait = self.backoff_millis * (attempt_number - 1)
        LOG.warning(
            "Error response, waiting %d ms (Attempt %s/%s)",
            wait,
            attempt_number,
            self.max_attempts,
        )
        return wait

    def _send(self, method, url, headers, data, json):
        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                data=data,
                json=json,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise exceptions.ConnectTimeout(url=url) from e
        except requests.exceptions.ConnectionError as e:
            raise exceptions.ConnectFailure(url=url, reason=e) from e
        except requests.exceptions.RequestException as e:
            raise exceptions.TransportError(url=url, reason=e) from e
        LOG.debug("HTTP %s %s %d", method, url, response.status_code)
        return response


def drain(response):
    """Read the whole body of a response so the connection is released."""
    return response.text


def check_response(response, url, ok_codes=None):
    """Raise HTTPStatusError unless the response status is acceptable.

    :param ok_codes: The accepted status codes, any 2xx when not given.
    """
    status = response.status_code
    if ok_codes is None:
        accepted = 200 <= status < 300
    else:
        accepted = status in ok_codes
    if accepted:
        return response
    body = drain(response)
    LOG.error("%s failed with RC: %d", url, status)
    raise exceptions.HTTPStatusError(status=status, url=url, body=body)


def get_json(response, url):
    """Decode the JSON body of a response.

    :raises DecodeError: if the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise exceptions.DecodeError(url=url, reason=e) from e
