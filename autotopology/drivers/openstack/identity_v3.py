#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

from oslo_log import log

from autotopology.catalog import parse_catalog
from autotopology import consts
from autotopology.drivers import base
from autotopology import exceptions
from autotopology import httpclient
from autotopology import token as ks_token
from autotopology import utils

LOG = log.getLogger(__name__)


class IdentityClient(base.DriverBase):
    """Identity V3 driver for application credential authentication.

    :param transport: The transport the requests are sent with.
    :type transport: autotopology.httpclient.RetryingTransport
    """

    # obtain a token using an application credential
    # https://docs.openstack.org/api-ref/identity/v3/#authenticating-with-an-application-credential
    def obtain_token(self, credential):
        """Exchange an application credential for a token.

        :param credential: The application credential.
        :type credential: autotopology.credential.Credential
        :return: The token and its metadata.
        :rtype: tuple
        :raises ConfigError: if the credential is incomplete
        :raises HTTPStatusError: if the token is not issued
        :raises ProtocolError: if the response has no X-Subject-Token header
        :raises DecodeError: if the response body is not a token
        """
        credential.validate()
        url = utils.join_url(credential.auth_url, "auth", "tokens")
        payload = {
            "auth": {
                "identity": {
                    "methods": [consts.AUTH_METHOD_APPLICATION_CREDENTIAL],
                    "application_credential": {
                        "id": credential.application_credential_id,
                        "secret": credential.application_credential_secret,
                    },
                }
            }
        }
        LOG.debug(
            "Requesting token from %s with application credential %s",
            url,
            credential.application_credential_id,
        )
        response = self._request("POST", url, json=payload)
        subject_token, metadata = ks_token.CreatedToken(response, url).extract()
        LOG.info(
            "Obtained token for user %s, project %s, expires at %s",
            metadata.user_name,
            metadata.project_name or "<unscoped>",
            metadata.expires_at,
        )
        return subject_token, metadata

    def validate_token(self, auth_url, auth_token, subject_token=None):
        """Look up a token and its metadata.

        :param auth_token: The token authorizing the call.
        :param subject_token: The token to look up, auth_token by default.
        :return: The token and its metadata.
        :rtype: tuple
        """
        url = utils.join_url(auth_url, "auth", "tokens")
        headers = {
            consts.HEADER_AUTH_TOKEN: auth_token,
            consts.HEADER_SUBJECT_TOKEN: subject_token or auth_token,
        }
        response = self._request("GET", url, headers=headers)
        return ks_token.RetrievedToken(response, url).extract()

    def get_catalog(self, auth_url, auth_token):
        """Get the service catalog of a token.

        :return: The catalog entries, in catalog order.
        :rtype: tuple
        :raises EmptyResultError: if the catalog has no entry
        """
        url = utils.join_url(auth_url, "auth", "catalog")
        response = self._request(
            "GET", url, headers={consts.HEADER_AUTH_TOKEN: auth_token}
        )
        body = httpclient.get_json(response, url)
        if not isinstance(body, dict) or "catalog" not in body:
            raise exceptions.DecodeError(url=url, reason="no catalog in response")
        entries = parse_catalog(body["catalog"], source=url)
        if not entries:
            raise exceptions.EmptyResultError(resource="Service catalog", url=url)
        LOG.debug("Service catalog of %s has %d entries", url, len(entries))
        return entries

    # https://docs.openstack.org/api-ref/identity/v3/#list-projects-for-user
    def list_user_projects(self, auth_url, auth_token, user_id):
        """List every project the user has access to.

        All pages are fetched, following the "next" link, before the
        projects are returned. An error on any page aborts the listing.

        :return: The project documents of all pages.
        :rtype: list
        :raises ProtocolError: if user_id is empty
        """
        if not user_id:
            raise exceptions.ProtocolError(url=auth_url, reason="token has no user ID")
        url = utils.join_url(auth_url, "users", user_id, "projects")
        headers = {consts.HEADER_AUTH_TOKEN: auth_token}
        projects = []
        visited = set()
        while url and url not in visited:
            visited.add(url)
            response = self._request("GET", url, headers=headers)
            body = httpclient.get_json(response, url)
            try:
                projects.extend(body["projects"])
                url = (body.get("links") or {}).get("next")
            except (KeyError, TypeError, AttributeError) as e:
                raise exceptions.DecodeError(url=url, reason=repr(e)) from e
        LOG.debug("User %s has access to %d projects", user_id, len(projects))
        return projects
