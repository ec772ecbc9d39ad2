"""Main composite construct for an S3 website behind CloudFront."""

from pathlib import Path

from aws_cdk import CfnOutput, RemovalPolicy
from constructs import Construct

from .certificate import SiteCertificate
from .distribution import CloudFrontDistribution
from .documents import SiteDocuments
from .storage import StorageBucket


class StaticWebsiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - S3 bucket with website hosting, encryption and a public-read policy
  - (Optional) index and error pages uploaded from local files
  - (Optional) ACM certificate, imported by ARN or newly created
  - CloudFront distribution fronting the S3 website endpoint
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    index_document: str = "index.html",
    error_document: str = "error.html",
    index_html_path: Path | None = None,
    error_html_path: Path | None = None,
    certificate_domain: str | None = None,
    certificate_arn: str | None = None,
    existing_certificate_arn: str | None = None,
    create_certificate: bool = False,
    cloudfront_enabled: bool = True,
    aliases: list[str] | None = None,
    static_path_pattern: str = "/static/*",
    price_class: str = "PriceClass_100",
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.storage = StorageBucket(
      self,
      "Storage",
      bucket_name=bucket_name,
      index_document=index_document,
      error_document=error_document,
      removal_policy=removal_policy,
    )
    bucket = self.storage.bucket

    self.documents = SiteDocuments(
      self,
      "Documents",
      bucket=bucket,
      index_document=index_document,
      error_document=error_document,
      index_html_path=index_html_path,
      error_html_path=error_html_path,
    )

    self.certificate = SiteCertificate(
      self,
      "Certificate",
      domain_name=certificate_domain,
      aliases=aliases,
      certificate_arn=certificate_arn,
      existing_certificate_arn=existing_certificate_arn,
      create_certificate=create_certificate,
    )

    distribution_aliases = list(aliases or [])
    if not distribution_aliases and certificate_domain:
      distribution_aliases = [certificate_domain]

    self.distribution = CloudFrontDistribution(
      self,
      "Cdn",
      bucket=bucket,
      certificate=self.certificate.certificate,
      certificate_validated=self.certificate.validated,
      aliases=distribution_aliases,
      enabled=cloudfront_enabled,
      default_root_object=index_document,
      static_path_pattern=static_path_pattern,
      price_class=price_class,
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "WebsiteUrl",
      value=bucket.bucket_website_url,
      description="S3 website endpoint URL",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "CertificateSource",
      value=self.certificate.selection.source.value,
      description="Where the distribution certificate comes from",
    )
    CfnOutput(
      self,
      "CertificateValidated",
      value=str(self.certificate.validated).lower(),
      description="Whether the distribution serves the ACM certificate",
    )
    if self.certificate.certificate_arn:
      CfnOutput(
        self,
        "CertificateArn",
        value=self.certificate.certificate_arn,
        description="ACM certificate ARN",
      )
