"""ACM certificate selection for the CloudFront distribution."""

from dataclasses import dataclass
from enum import Enum

from aws_cdk import RemovalPolicy
from aws_cdk import aws_certificatemanager as acm
from constructs import Construct


class CertificateSource(str, Enum):
  """Where the distribution certificate comes from."""

  PROVIDED = "provided"
  LOOKUP = "lookup"
  CREATED = "created"
  NONE = "none"


@dataclass(frozen=True)
class CertificateSelection:
  """Outcome of the certificate precedence rules."""

  source: CertificateSource
  arn: str | None = None
  validated: bool = False


def resolve_certificate(
  provided_arn: str | None,
  found_arn: str | None,
  create: bool,
) -> CertificateSelection:
  """Pick the certificate: provided ARN, then looked-up ARN, then a new one.

  A newly created certificate is never treated as validated, so the
  distribution keeps the default CloudFront certificate until a later
  deployment finds it issued.
  """
  if provided_arn:
    return CertificateSelection(CertificateSource.PROVIDED, provided_arn, True)
  if found_arn:
    return CertificateSelection(CertificateSource.LOOKUP, found_arn, True)
  if create:
    return CertificateSelection(CertificateSource.CREATED)
  return CertificateSelection(CertificateSource.NONE)


class SiteCertificate(Construct):
  """ACM certificate imported by ARN or created for the website domain."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str | None,
    aliases: list[str] | None = None,
    certificate_arn: str | None = None,
    existing_certificate_arn: str | None = None,
    create_certificate: bool = False,
  ) -> None:
    super().__init__(scope, id)

    self.selection = resolve_certificate(
      certificate_arn, existing_certificate_arn, create_certificate
    )
    self.certificate: acm.ICertificate | None = None
    self.created_certificate: acm.Certificate | None = None

    # Kept in the template after a lookup finds it issued
    if create_certificate and not certificate_arn:
      if not domain_name:
        raise ValueError("domain_name is required to create a certificate")
      sans = [a for a in (aliases or []) if a != domain_name]
      # Validation records are managed outside this stack
      self.created_certificate = acm.Certificate(
        self,
        "Certificate",
        domain_name=domain_name,
        subject_alternative_names=sans or None,
        validation=acm.CertificateValidation.from_dns(),
      )
      self.created_certificate.apply_removal_policy(RemovalPolicy.RETAIN)

    if self.selection.arn:
      self.certificate = acm.Certificate.from_certificate_arn(
        self, "ImportedCertificate", self.selection.arn
      )
    elif self.created_certificate is not None:
      self.certificate = self.created_certificate

  @property
  def validated(self) -> bool:
    return self.selection.validated

  @property
  def certificate_arn(self) -> str | None:
    """ARN of the selected certificate, a token for a created one."""
    if self.certificate is None:
      return None
    return self.certificate.certificate_arn
