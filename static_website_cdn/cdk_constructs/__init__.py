"""CDK constructs for static website infrastructure."""

from .certificate import (
  CertificateSelection,
  CertificateSource,
  SiteCertificate,
  resolve_certificate,
)
from .distribution import CloudFrontDistribution
from .documents import SiteDocuments
from .static_site import StaticWebsiteConstruct
from .storage import StorageBucket

__all__ = [
  "CertificateSelection",
  "CertificateSource",
  "CloudFrontDistribution",
  "SiteCertificate",
  "SiteDocuments",
  "StaticWebsiteConstruct",
  "StorageBucket",
  "resolve_certificate",
]
