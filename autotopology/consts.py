#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

KS_ENDPOINT_ADMIN = "admin"
KS_ENDPOINT_INTERNAL = "internal"
KS_ENDPOINT_PUBLIC = "public"
KS_ENDPOINT_DEFAULT = KS_ENDPOINT_PUBLIC
KS_ENDPOINT_INTERFACES = (
    KS_ENDPOINT_PUBLIC,
    KS_ENDPOINT_INTERNAL,
    KS_ENDPOINT_ADMIN,
)

SERVICE_TYPE_NETWORK = "network"

# Identity v3 application credential authentication
AUTH_METHOD_APPLICATION_CREDENTIAL = "application_credential"
AUTH_TYPE_APPLICATION_CREDENTIAL = "v3applicationcredential"
IDENTITY_API_VERSION = "3"

HEADER_AUTH_TOKEN = "X-Auth-Token"
HEADER_SUBJECT_TOKEN = "X-Subject-Token"

# Token result kinds
TOKEN_CREATED = "created"
TOKEN_RETRIEVED = "retrieved"

# HTTP transport
HTTP_MAX_ATTEMPTS = 3
HTTP_RETRY_BACKOFF_MILLIS = 500
HTTP_REQUEST_TIMEOUT = 5
HTTP_ERROR_STATUS = 400

# .openrc environment variables of an application credential
ENV_AUTH_URL = "OS_AUTH_URL"
ENV_APPLICATION_CREDENTIAL_ID = "OS_APPLICATION_CREDENTIAL_ID"
ENV_APPLICATION_CREDENTIAL_SECRET = "OS_APPLICATION_CREDENTIAL_SECRET"
ENV_REGION_NAME = "OS_REGION_NAME"
ENV_INTERFACE = "OS_INTERFACE"
ENV_AUTH_TYPE = "OS_AUTH_TYPE"
ENV_IDENTITY_API_VERSION = "OS_IDENTITY_API_VERSION"

# Auto allocated topology
AUTO_ALLOCATED_TOPOLOGY_TYPE = "openstack-auto-topology_auto_allocated_topology"
TOPOLOGY_ID_ATTRIBUTE = "id"
TOPOLOGY_NAME_ATTRIBUTE = "name"
PROJECT_ID_ATTRIBUTE = "project_id"
REGION_NAME_ATTRIBUTE = "region_name"
