#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

from urllib import parse


def join_url(base_url, *parts):
    """Append path segments to a URL, keeping any path the base already has.

    join_url("https://keystone:5000/v3/", "/auth/tokens") returns
    "https://keystone:5000/v3/auth/tokens".
    """
    scheme, netloc, path, query, fragment = parse.urlsplit(base_url)
    segments = [path.rstrip("/")]
    segments.extend(str(part).strip("/") for part in parts if part)
    return parse.urlunsplit((scheme, netloc, "/".join(segments), query, fragment))
