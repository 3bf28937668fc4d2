# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

from genro_htmltag import defaults_registry


@pytest.fixture(autouse=True)
def reset_global_defaults():
    """Reset the global defaults registry around each test.

    Global defaults are process-wide, so a test that sets them would
    otherwise leak its baseline into the following tests.
    """
    defaults_registry.clear_all()
    yield
    defaults_registry.clear_all()
