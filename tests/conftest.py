"""Shared test fixtures."""

from __future__ import annotations

import pytest

from illusions import IllusionOneSpec, IllusionTwoSpec


@pytest.fixture
def out_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def squares_spec() -> IllusionOneSpec:
    return IllusionOneSpec("squares")


@pytest.fixture
def braids_spec() -> IllusionTwoSpec:
    return IllusionTwoSpec("braids")
