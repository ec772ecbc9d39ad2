"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from static_website_cdn.cdk_constructs import StaticWebsiteConstruct
from static_website_cdn.config import WebsiteConfig


class StaticWebsiteStack(cdk.Stack):
  """Stack for a single S3 website and its CloudFront distribution."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    website_config: WebsiteConfig,
    existing_certificate_arn: str | None = None,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.website = StaticWebsiteConstruct(
      self,
      "Website",
      bucket_name=website_config.bucket_name,
      index_document=website_config.index_document,
      error_document=website_config.error_document,
      index_html_path=website_config.index_html_path,
      error_html_path=website_config.error_html_path,
      certificate_domain=website_config.certificate_domain,
      certificate_arn=website_config.certificate_arn,
      existing_certificate_arn=existing_certificate_arn,
      create_certificate=website_config.create_certificate,
      cloudfront_enabled=website_config.cloudfront_enabled,
      aliases=website_config.aliases,
      static_path_pattern=website_config.static_path_pattern,
      price_class=website_config.price_class,
      removal_policy=website_config.removal_policy,
    )

    cdk.Tags.of(self).add("Project", "static-website-cdn")
    for key, value in website_config.tags.items():
      cdk.Tags.of(self).add(key, value)
