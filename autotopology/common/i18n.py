#
# Copyright (c) 2026 The openstack-auto-topology Authors
#
# SPDX-License-Identifier: Apache-2.0
#

import oslo_i18n

_translators = oslo_i18n.TranslatorFactory(domain="autotopology")

# The primary translation function using the well-known name "_"
_ = _translators.primary
