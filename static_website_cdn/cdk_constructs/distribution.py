"""CloudFront distribution for static website."""

from typing import Any

from aws_cdk import Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

PRICE_CLASSES = {
  "PriceClass_100": cloudfront.PriceClass.PRICE_CLASS_100,
  "PriceClass_200": cloudfront.PriceClass.PRICE_CLASS_200,
  "PriceClass_All": cloudfront.PriceClass.PRICE_CLASS_ALL,
}


class CloudFrontDistribution(Construct):
  """CloudFront distribution with S3 static website origin.

  The distribution has two cache behaviors: the default one for pages and
  a long-lived one for static assets under ``static_path_pattern``. The
  certificate and aliases are only attached when the certificate is known
  to be validated; otherwise viewers get the default CloudFront certificate
  on the distribution domain.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate | None = None,
    certificate_validated: bool = False,
    aliases: list[str] | None = None,
    enabled: bool = True,
    default_root_object: str = "index.html",
    static_path_pattern: str = "/static/*",
    price_class: str = "PriceClass_100",
  ) -> None:
    super().__init__(scope, id)

    if price_class not in PRICE_CLASSES:
      raise ValueError(
        f"Unknown price class {price_class!r}, expected one of {sorted(PRICE_CLASSES)}"
      )

    origin = origins.S3StaticWebsiteOrigin(bucket)

    self.page_cache_policy = cloudfront.CachePolicy(
      self,
      "PageCachePolicy",
      comment="Website pages",
      default_ttl=Duration.hours(1),
      max_ttl=Duration.days(1),
      min_ttl=Duration.seconds(0),
      enable_accept_encoding_gzip=True,
      enable_accept_encoding_brotli=True,
    )

    viewer_certificate: dict[str, Any] = {}
    self.aliases: list[str] = []
    if certificate is not None and certificate_validated:
      self.aliases = list(aliases or [])
      if not self.aliases:
        raise ValueError("A validated certificate needs at least one alias")
      viewer_certificate = {
        "certificate": certificate,
        "domain_names": self.aliases,
        "ssl_support_method": cloudfront.SSLMethod.SNI,
        "minimum_protocol_version": cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
      }

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      enabled=enabled,
      default_behavior=cloudfront.BehaviorOptions(
        origin=origin,
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
        cache_policy=self.page_cache_policy,
        compress=True,
      ),
      additional_behaviors={
        static_path_pattern: cloudfront.BehaviorOptions(
          origin=origin,
          viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
          allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
          cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD_OPTIONS,
          cache_policy=cloudfront.CachePolicy.CACHING_OPTIMIZED,
          compress=True,
        ),
      },
      default_root_object=default_root_object,
      price_class=PRICE_CLASSES[price_class],
      **viewer_certificate,
    )
