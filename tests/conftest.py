"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def html_dir(tmp_path: Path) -> Path:
  """Directory holding an index and an error page."""
  (tmp_path / "index.html").write_text("<h1>Hello</h1>", encoding="utf-8")
  (tmp_path / "error.html").write_text("<h1>Not found</h1>", encoding="utf-8")
  return tmp_path
