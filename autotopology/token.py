#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

"""
Identity v3 token results.

A token is either freshly created (POST /auth/tokens) or looked up
(GET /auth/tokens). Both responses carry the token in the
X-Subject-Token header and its metadata under the "token" key of the
body, so both are handled through the TokenResult interface.
"""

import abc
import copy
from dataclasses import dataclass
import datetime
from typing import Optional
from typing import Tuple

from oslo_log import log
from oslo_utils import timeutils

from autotopology.catalog import CatalogEntry
from autotopology.catalog import parse_catalog
from autotopology import consts
from autotopology import exceptions
from autotopology import httpclient

LOG = log.getLogger(__name__)


def _parse_time(value):
    if not value:
        return None
    return timeutils.normalize_time(timeutils.parse_isotime(value))


@dataclass(frozen=True)
class TokenMetadata(object):
    """Data returned in the body of a token response."""

    issued_at: Optional[datetime.datetime] = None
    expires_at: Optional[datetime.datetime] = None
    user_id: str = ""
    user_name: str = ""
    project_id: str = ""
    project_name: str = ""
    project_domain_id: str = ""
    catalog: Tuple[CatalogEntry, ...] = ()
    methods: Tuple[str, ...] = ()
    roles: Tuple[str, ...] = ()
    audit_ids: Tuple[str, ...] = ()
    is_domain: bool = False

    @classmethod
    def from_dict(cls, token: dict) -> "TokenMetadata":
        user = token.get("user") or {}
        # An unscoped token has no project
        project = token.get("project") or {}
        return cls(
            issued_at=_parse_time(token.get("issued_at")),
            expires_at=_parse_time(token.get("expires_at")),
            user_id=user.get("id", ""),
            user_name=user.get("name", ""),
            project_id=project.get("id", ""),
            project_name=project.get("name", ""),
            project_domain_id=(project.get("domain") or {}).get("id", ""),
            catalog=parse_catalog(token.get("catalog") or []),
            methods=tuple(token.get("methods") or ()),
            roles=tuple(role["name"] for role in token.get("roles") or ()),
            audit_ids=tuple(token.get("audit_ids") or ()),
            is_domain=bool(token.get("is_domain", False)),
        )

    def is_expired(self):
        if self.expires_at is None:
            return False
        return timeutils.is_soon(self.expires_at, 0)

    def copy(self):
        return copy.deepcopy(self)


class TokenResult(object, metaclass=abc.ABCMeta):
    """Response of an Identity v3 token call.

    :param response: The HTTP response, already checked for success.
    :type response: requests.Response
    :param url: The URL the response came from.
    :type url: str
    """

    kind = None
    operation = None

    def __init__(self, response, url):
        self.response = response
        self.url = url

    def extract_token(self) -> str:
        """Return the token carried by the X-Subject-Token header.

        :raises ProtocolError: if the header is absent or empty
        """
        token = self.response.headers.get(consts.HEADER_SUBJECT_TOKEN)
        if not token:
            raise exceptions.ProtocolError(url=self.url, reason="token not in header")
        return token

    def extract_metadata(self) -> TokenMetadata:
        """Decode the token metadata from the response body.

        :raises DecodeError: if the body is not a token document
        """
        body = httpclient.get_json(self.response, self.url)
        try:
            metadata = TokenMetadata.from_dict(body["token"])
        except exceptions.DecodeError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise exceptions.DecodeError(url=self.url, reason=repr(e)) from e
        LOG.debug(
            "%s token for user %s, project %s, expires at %s",
            self.operation,
            metadata.user_name,
            metadata.project_name,
            metadata.expires_at,
        )
        return metadata

    def extract(self):
        """Return the (token, metadata) pair, token first."""
        token = self.extract_token()
        return token, self.extract_metadata()


class CreatedToken(TokenResult):
    """Token issued by POST /auth/tokens."""

    kind = consts.TOKEN_CREATED
    operation = "Created"


class RetrievedToken(TokenResult):
    """Token looked up by GET /auth/tokens."""

    kind = consts.TOKEN_RETRIEVED
    operation = "Retrieved"
