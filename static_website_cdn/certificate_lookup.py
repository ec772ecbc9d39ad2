"""Synth-time lookup of already issued ACM certificates."""

from typing import Any

import boto3

# CloudFront only accepts certificates from this region
CLOUDFRONT_CERTIFICATE_REGION = "us-east-1"


def find_issued_certificate(
  domain: str,
  region: str = CLOUDFRONT_CERTIFICATE_REGION,
  client: Any | None = None,
  required_names: list[str] | None = None,
) -> str | None:
  """Find the ARN of an issued ACM certificate for a domain.

  Args:
    domain: Primary domain name of the certificate (exact match)
    region: AWS region to search
    client: Optional ACM client, created with boto3 when omitted
    required_names: Host names the certificate must also cover, such as
      the distribution aliases

  Returns:
    ARN of the most recently issued matching certificate, or None
  """
  acm = client or boto3.client("acm", region_name=region)
  paginator = acm.get_paginator("list_certificates")
  required = {name.lower() for name in (required_names or [])}

  matches: list[dict[str, Any]] = []
  for page in paginator.paginate(CertificateStatuses=["ISSUED"]):
    for summary in page.get("CertificateSummaryList", []):
      if summary.get("DomainName", "").lower() != domain.lower():
        continue
      if required and not _covers(_certificate_names(acm, summary), required):
        continue
      matches.append(summary)

  if not matches:
    return None

  newest = max(matches, key=_issued_sort_key)
  return str(newest["CertificateArn"])


def _certificate_names(acm: Any, summary: dict[str, Any]) -> set[str]:
  names = [summary["DomainName"], *summary.get("SubjectAlternativeNameSummaries", [])]
  # Summaries list at most 100 names
  if summary.get("HasAdditionalSubjectAlternativeNames"):
    detail = acm.describe_certificate(CertificateArn=summary["CertificateArn"])
    names.extend(detail["Certificate"].get("SubjectAlternativeNames", []))
  return {name.lower() for name in names}


def _covers(names: set[str], required: set[str]) -> bool:
  """Check every required host against exact and one-level wildcard names."""
  for host in required:
    if host in names:
      continue
    _, _, parent = host.partition(".")
    if not parent or f"*.{parent}" not in names:
      return False
  return True


def _issued_sort_key(summary: dict[str, Any]) -> float:
  issued = summary.get("IssuedAt") or summary.get("CreatedAt")
  return issued.timestamp() if issued is not None else 0.0
