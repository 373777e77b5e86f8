#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

import copy
import json

import requests

from autotopology.credential import Credential

FAKE_AUTH_URL = "https://keystone.example:5000/v3"
FAKE_NETWORK_URL = "https://net.example"
FAKE_TOKEN = "gAAAAABfake-token"
FAKE_APP_CRED_ID = "6cb5fa6a13184e6fab65ba2108adf50c"
FAKE_APP_CRED_SECRET = "glance-secret"
FAKE_USER_ID = "423f19a4ac1e4f48bbb4180756e6eb6c"
FAKE_PROJECT_ID = "a6944d763bf64ee6a275f1263fae0352"
FAKE_PROJECT_NAME = "demo"
FAKE_NETWORK_ID = "8f2d4a2c-3b0e-4a1d-9c1c-8d5f6f0e1a2b"
REGION_ONE = "RegionOne"
REGION_TWO = "RegionTwo"

CATALOG = [
    {
        "id": "0f3d9f1e",
        "type": "identity",
        "name": "keystone",
        "endpoints": [
            {
                "id": "e1",
                "interface": "public",
                "region": REGION_ONE,
                "region_id": REGION_ONE,
                "url": FAKE_AUTH_URL,
            }
        ],
    },
    {
        "id": "9a8b7c6d",
        "type": "network",
        "name": "neutron",
        "endpoints": [
            {
                "id": "e2",
                "interface": "internal",
                "region": REGION_ONE,
                "region_id": REGION_ONE,
                "url": "http://net.internal:9696",
            },
            {
                "id": "e3",
                "interface": "public",
                "region": REGION_ONE,
                "region_id": REGION_ONE,
                "url": FAKE_NETWORK_URL,
            },
        ],
    },
]

TOKEN_BODY = {
    "token": {
        "methods": ["application_credential"],
        "is_domain": False,
        "issued_at": "2026-10-18T10:00:00.000000Z",
        "expires_at": "2026-10-18T11:00:00.000000Z",
        "audit_ids": ["3T2dc1CGQxyJsHdDu1xkcw"],
        "roles": [{"id": "51cc68287d524c759f47c811e6463340", "name": "member"}],
        "user": {
            "id": FAKE_USER_ID,
            "name": "demo-user",
            "domain": {"id": "default", "name": "Default"},
            "password_expires_at": None,
        },
        "project": {
            "id": FAKE_PROJECT_ID,
            "name": FAKE_PROJECT_NAME,
            "domain": {"id": "default", "name": "Default"},
        },
        "catalog": CATALOG,
        "application_credential_restricted": True,
    }
}


def create_response(status_code=200, body=None, headers=None, url=None):
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body if isinstance(body, bytes) else body.encode()
    else:
        response._content = json.dumps(body).encode()
    response.headers.update(headers or {})
    response.url = url
    return response


def create_token_response(token=FAKE_TOKEN, body=None, status_code=201):
    headers = {"X-Subject-Token": token} if token else {}
    if body is None:
        body = token_body()
    return create_response(status_code, body, headers)


def create_catalog_response(catalog=None):
    if catalog is None:
        catalog = copy.deepcopy(CATALOG)
    return create_response(
        200, {"catalog": catalog, "links": {"self": FAKE_AUTH_URL + "/auth/catalog"}}
    )


def token_body(unscoped=False):
    body = copy.deepcopy(TOKEN_BODY)
    if unscoped:
        del body["token"]["project"]
        del body["token"]["catalog"]
    return body


def create_credential(**kwargs):
    values = {
        "auth_url": FAKE_AUTH_URL,
        "application_credential_id": FAKE_APP_CRED_ID,
        "application_credential_secret": FAKE_APP_CRED_SECRET,
        "region_name": REGION_ONE,
        "interface": "public",
    }
    values.update(kwargs)
    return Credential(**values)
