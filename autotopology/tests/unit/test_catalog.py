#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

import copy

from autotopology import catalog
from autotopology import exceptions
from autotopology.tests import base
from autotopology.tests import utils


class TestFindEndpoint(base.AutoTopologyTestCase):

    def setUp(self):
        super(TestFindEndpoint, self).setUp()
        self.catalog = catalog.parse_catalog(copy.deepcopy(utils.CATALOG))

    def test_single_network_endpoint(self):
        entries = catalog.parse_catalog(
            [
                {
                    "type": "network",
                    "endpoints": [
                        {
                            "region": "RegionOne",
                            "interface": "public",
                            "url": "https://net.example",
                        }
                    ],
                }
            ]
        )

        endpoint = catalog.find_endpoint(entries, "network", "RegionOne", "public")
        self.assertEqual("https://net.example", endpoint.url)

        self.assertRaises(
            exceptions.NotFoundError,
            catalog.find_endpoint,
            entries,
            "network",
            "RegionTwo",
            "public",
        )

    def test_interface_must_match(self):
        public = catalog.find_endpoint(self.catalog, "network", "RegionOne", "public")
        internal = catalog.find_endpoint(
            self.catalog, "network", "RegionOne", "internal"
        )

        self.assertEqual(utils.FAKE_NETWORK_URL, public.url)
        self.assertEqual("http://net.internal:9696", internal.url)
        self.assertRaises(
            exceptions.EndpointNotFound,
            catalog.find_endpoint,
            self.catalog,
            "network",
            "RegionOne",
            "admin",
        )

    def test_service_type_not_found(self):
        exc = self.assertRaises(
            exceptions.ServiceNotFound,
            catalog.find_endpoint,
            self.catalog,
            "compute",
            "RegionOne",
            "public",
        )
        self.assertIsInstance(exc, exceptions.NotFoundError)
        self.assertIn("compute", str(exc))

    def test_no_endpoint_for_region_is_distinct_error(self):
        exc = self.assertRaises(
            exceptions.EndpointNotFound,
            catalog.find_endpoint,
            self.catalog,
            "network",
            "RegionTwo",
            "public",
        )
        self.assertIsInstance(exc, exceptions.NotFoundError)
        self.assertNotIsInstance(exc, exceptions.ServiceNotFound)
        self.assertIn("RegionTwo", str(exc))

    def test_first_matching_entry_and_endpoint_win(self):
        raw = [
            {
                "type": "network",
                "name": "first",
                "endpoints": [
                    {"region": "R", "interface": "public", "url": "http://a"},
                    {"region": "R", "interface": "public", "url": "http://b"},
                ],
            },
            {
                "type": "network",
                "name": "second",
                "endpoints": [
                    {"region": "R", "interface": "public", "url": "http://c"},
                ],
            },
        ]
        entries = catalog.parse_catalog(raw)

        for _ in range(3):
            endpoint = catalog.find_endpoint(entries, "network", "R", "public")
            self.assertEqual("http://a", endpoint.url)

    def test_first_entry_without_match_is_not_skipped(self):
        raw = [
            {"type": "network", "name": "first", "endpoints": []},
            {
                "type": "network",
                "name": "second",
                "endpoints": [
                    {"region": "R", "interface": "public", "url": "http://c"},
                ],
            },
        ]
        entries = catalog.parse_catalog(raw)

        self.assertRaises(
            exceptions.EndpointNotFound,
            catalog.find_endpoint,
            entries,
            "network",
            "R",
            "public",
        )

    def test_no_partial_region_match(self):
        entries = catalog.parse_catalog(
            [
                {
                    "type": "network",
                    "endpoints": [
                        {"region": "RegionOne", "interface": "internal", "url": "x"}
                    ],
                }
            ]
        )
        self.assertRaises(
            exceptions.EndpointNotFound,
            catalog.find_endpoint,
            entries,
            "network",
            "RegionOne",
            "public",
        )

    def test_empty_catalog(self):
        self.assertRaises(
            exceptions.ServiceNotFound,
            catalog.find_endpoint,
            (),
            "network",
            "RegionOne",
            "public",
        )


class TestParseCatalog(base.AutoTopologyTestCase):

    def test_region_falls_back_to_region_id(self):
        entries = catalog.parse_catalog(
            [
                {
                    "type": "network",
                    "endpoints": [
                        {"region_id": "RegionOne", "interface": "public", "url": "x"}
                    ],
                }
            ]
        )
        self.assertEqual("RegionOne", entries[0].endpoints[0].region)

    def test_not_a_list(self):
        self.assertRaises(
            exceptions.DecodeError, catalog.parse_catalog, {"type": "network"}
        )

    def test_entry_without_type(self):
        self.assertRaises(
            exceptions.DecodeError, catalog.parse_catalog, [{"name": "neutron"}]
        )

    def test_endpoint_without_url(self):
        self.assertRaises(
            exceptions.DecodeError,
            catalog.parse_catalog,
            [{"type": "network", "endpoints": [{"region": "R"}]}],
        )
