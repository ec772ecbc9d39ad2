"""Tests for the issued certificate lookup."""

from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from static_website_cdn.app import lookup_existing_certificate, stack_name_for
from static_website_cdn.certificate_lookup import find_issued_certificate
from static_website_cdn.config import WebsiteConfig


def _acm_client(*pages: list[dict[str, Any]]) -> MagicMock:
  client = MagicMock()
  client.get_paginator.return_value.paginate.return_value = [
    {"CertificateSummaryList": summaries} for summaries in pages
  ]
  return client


def _summary(
  arn: str, domain: str, issued_day: int, sans: list[str] | None = None
) -> dict[str, Any]:
  summary: dict[str, Any] = {
    "CertificateArn": arn,
    "DomainName": domain,
    "IssuedAt": datetime(2024, 1, issued_day, tzinfo=timezone.utc),
  }
  if sans is not None:
    summary["SubjectAlternativeNameSummaries"] = [domain, *sans]
  return summary


class TestFindIssuedCertificate:
  """Test find_issued_certificate."""

  def test_returns_matching_arn(self) -> None:
    client = _acm_client([_summary("arn:one", "example.com", 1)])

    assert find_issued_certificate("example.com", client=client) == "arn:one"
    client.get_paginator.assert_called_once_with("list_certificates")
    client.get_paginator.return_value.paginate.assert_called_once_with(
      CertificateStatuses=["ISSUED"]
    )

  def test_most_recent_wins_across_pages(self) -> None:
    client = _acm_client(
      [_summary("arn:old", "example.com", 1), _summary("arn:other", "other.com", 9)],
      [_summary("arn:new", "example.com", 5)],
    )

    assert find_issued_certificate("example.com", client=client) == "arn:new"

  def test_domain_match_is_exact(self) -> None:
    client = _acm_client(
      [
        _summary("arn:wildcard", "*.example.com", 1),
        _summary("arn:sub", "www.example.com", 2),
      ]
    )

    assert find_issued_certificate("example.com", client=client) is None

  def test_domain_match_ignores_case(self) -> None:
    client = _acm_client([_summary("arn:one", "Example.COM", 1)])

    assert find_issued_certificate("example.com", client=client) == "arn:one"

  def test_no_certificates(self) -> None:
    assert find_issued_certificate("example.com", client=_acm_client([])) is None

  def test_client_error_propagates(self) -> None:
    client = MagicMock()
    client.get_paginator.return_value.paginate.side_effect = ClientError(
      {"Error": {"Code": "AccessDeniedException", "Message": "denied"}},
      "ListCertificates",
    )

    with pytest.raises(ClientError):
      find_issued_certificate("example.com", client=client)

  def test_creates_client_in_region(self) -> None:
    with patch("static_website_cdn.certificate_lookup.boto3") as mock_boto3:
      mock_boto3.client.return_value = _acm_client([])
      find_issued_certificate("example.com")

    mock_boto3.client.assert_called_once_with("acm", region_name="us-east-1")


  def test_skips_certificate_missing_alias(self) -> None:
    """A certificate that does not cover every alias is not selected."""
    client = _acm_client(
      [
        _summary("arn:apex-only", "example.com", 5, sans=[]),
        _summary("arn:with-www", "example.com", 1, sans=["www.example.com"]),
      ]
    )

    arn = find_issued_certificate(
      "example.com",
      client=client,
      required_names=["example.com", "www.example.com"],
    )

    assert arn == "arn:with-www"

  def test_wildcard_covers_alias(self) -> None:
    client = _acm_client(
      [_summary("arn:wild", "example.com", 1, sans=["*.example.com"])]
    )

    arn = find_issued_certificate(
      "example.com", client=client, required_names=["WWW.example.com"]
    )

    assert arn == "arn:wild"

  def test_wildcard_covers_one_level_only(self) -> None:
    client = _acm_client(
      [_summary("arn:wild", "example.com", 1, sans=["*.example.com"])]
    )

    arn = find_issued_certificate(
      "example.com", client=client, required_names=["a.b.example.com"]
    )

    assert arn is None

  def test_describes_certificate_with_many_names(self) -> None:
    summary = _summary("arn:big", "example.com", 1, sans=[])
    summary["HasAdditionalSubjectAlternativeNames"] = True
    client = _acm_client([summary])
    client.describe_certificate.return_value = {
      "Certificate": {
        "SubjectAlternativeNames": ["example.com", "shop.example.com"],
      }
    }

    arn = find_issued_certificate(
      "example.com", client=client, required_names=["shop.example.com"]
    )

    assert arn == "arn:big"
    client.describe_certificate.assert_called_once_with(CertificateArn="arn:big")


class TestLookupExistingCertificate:
  """Test the app-level lookup decision."""

  def test_looks_up_certificate_domain(self) -> None:
    website = WebsiteConfig(
      bucket_name="example-site", certificate_domain="example.com"
    )

    with patch(
      "static_website_cdn.app.find_issued_certificate", return_value="arn:found"
    ) as mock_find:
      assert lookup_existing_certificate(website) == "arn:found"

    mock_find.assert_called_once_with(
      "example.com", region="us-east-1", required_names=[]
    )

  def test_skipped_when_arn_provided(self) -> None:
    website = WebsiteConfig(
      bucket_name="example-site",
      certificate_domain="example.com",
      certificate_arn="arn:provided",
    )

    with patch("static_website_cdn.app.find_issued_certificate") as mock_find:
      assert lookup_existing_certificate(website) is None

    mock_find.assert_not_called()

  def test_skipped_when_disabled(self) -> None:
    website = WebsiteConfig(
      bucket_name="example-site",
      certificate_domain="example.com",
      lookup_certificate=False,
    )

    with patch("static_website_cdn.app.find_issued_certificate") as mock_find:
      assert lookup_existing_certificate(website) is None

    mock_find.assert_not_called()

  def test_skipped_without_domain(self) -> None:
    website = WebsiteConfig(bucket_name="example-site")

    with patch("static_website_cdn.app.find_issued_certificate") as mock_find:
      assert lookup_existing_certificate(website) is None

    mock_find.assert_not_called()

  def test_stack_name(self) -> None:
    website = WebsiteConfig(bucket_name="www.example.com")

    assert stack_name_for(website) == "StaticWebsite-www-example-com"

  def test_aliases_passed_as_required_names(self) -> None:
    website = WebsiteConfig(
      bucket_name="example-site",
      certificate_domain="example.com",
      aliases=["example.com", "www.example.com"],
    )

    with patch(
      "static_website_cdn.app.find_issued_certificate", return_value=None
    ) as mock_find:
      assert lookup_existing_certificate(website) is None

    mock_find.assert_called_once_with(
      "example.com",
      region="us-east-1",
      required_names=["example.com", "www.example.com"],
    )
