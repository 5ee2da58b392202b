"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from src.api.suite_api import SuiteApi
from src.api.suite_builder import SuiteBuilder
from src.models.config import BrowserConfig, ProjectConfig
from src.models.suite import Suite


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def project_config() -> ProjectConfig:
    """Create a test project configuration with three browsers."""
    return ProjectConfig(
        root_url="https://example.com",
        tolerance=2.5,
        browsers={
            "chrome": BrowserConfig(desired_capabilities={"browserName": "chrome"}),
            "firefox": BrowserConfig(desired_capabilities={"browserName": "firefox"}),
            "safari": BrowserConfig(desired_capabilities={"browserName": "safari"}),
        },
    )


@pytest.fixture
def temp_config_file(project_config: ProjectConfig, tmp_path: Path) -> Path:
    """Create a temporary config file."""
    config_file = tmp_path / "qa-config.json"
    project_config.save(config_file)
    return config_file


# ============================================================================
# Suite Fixtures
# ============================================================================


@pytest.fixture
def root_suite() -> Suite:
    """An empty root suite."""
    return Suite.create_root()


@pytest.fixture
def suite(root_suite: Suite) -> Suite:
    """A top-level suite running in three browsers."""
    suite = Suite.create("header", root_suite)
    suite.browsers = ["chrome", "firefox", "safari"]
    root_suite.add_child(suite)
    return suite


@pytest.fixture
def builder(suite: Suite) -> SuiteBuilder:
    """A builder for the header suite."""
    return SuiteBuilder(suite)


@pytest.fixture
def api(root_suite: Suite) -> SuiteApi:
    """A suite API over the root suite with three browsers and no tolerance."""
    return SuiteApi(root_suite, ["chrome", "firefox", "safari"], file="suites/header.py")


@pytest.fixture
def suite_file(tmp_path: Path) -> Path:
    """Write a small suite-definition file."""
    path = tmp_path / "qa-suites" / "header.py"
    path.parent.mkdir(parents=True)
    path.write_text(
        "import re\n"
        "\n"
        "qa.suite('header', lambda suite: (\n"
        "    suite.set_url('/')\n"
        "    .set_capture_elements('.header')\n"
        "    .only.not_in(re.compile('saf'))\n"
        "    .capture('plain')\n"
        "    .capture('hovered', lambda actions, find: actions.mouse_move(find('.menu')))\n"
        "))\n"
    )
    return path
