#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_website_cdn.certificate_lookup import (
  CLOUDFRONT_CERTIFICATE_REGION,
  find_issued_certificate,
)
from static_website_cdn.config import Config, WebsiteConfig
from static_website_cdn.stacks.website_stack import StaticWebsiteStack

TRUTHY = {"1", "true", "yes", "on"}


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(website: WebsiteConfig) -> str:
  return f"StaticWebsite-{website.bucket_name.replace('.', '-')}"


def lookup_existing_certificate(website: WebsiteConfig) -> str | None:
  """Find an issued certificate when the website has no explicit ARN."""
  if website.certificate_arn or not website.lookup_certificate:
    return None
  if not website.certificate_domain:
    return None

  arn = find_issued_certificate(
    website.certificate_domain,
    region=CLOUDFRONT_CERTIFICATE_REGION,
    required_names=website.aliases,
  )
  if arn:
    print(
      f"Using issued certificate for {website.certificate_domain}: {arn}",
      file=sys.stderr,
    )
  else:
    print(
      f"No issued certificate found for {website.certificate_domain} "
      f"covering {website.aliases or [website.certificate_domain]}",
      file=sys.stderr,
    )
  return arn


def main(app: cdk.App | None = None) -> cdk.App:
  """Create CDK app with a stack for each configured website."""
  app = app or cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "websites.yaml"
  config = Config.from_yaml(Path(config_path))

  skip_lookup = (
    str(app.node.try_get_context("skip_certificate_lookup") or "").lower() in TRUTHY
  )

  # Get account ID from credentials
  account_id = get_account_id()

  for website in config.websites:
    existing_arn = None if skip_lookup else lookup_existing_certificate(website)
    StaticWebsiteStack(
      app,
      stack_name_for(website),
      website_config=website,
      existing_certificate_arn=existing_arn,
      env=cdk.Environment(
        account=account_id,
        region=website.region,
      ),
      description=f"S3 website and CloudFront distribution for {website.bucket_name}",
    )

  app.synth()
  return app


if __name__ == "__main__":
  main()
