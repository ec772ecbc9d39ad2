"""Configuration loader for static website deployments."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}

TRUE_STRINGS = {"true", "yes", "on", "1"}
FALSE_STRINGS = {"false", "no", "off", "0"}


@dataclass
class WebsiteConfig:
  """Configuration for a single S3 website behind CloudFront."""

  bucket_name: str
  tags: dict[str, str] = field(default_factory=dict)
  index_document: str = "index.html"
  error_document: str = "error.html"
  index_html_path: Path | None = None
  error_html_path: Path | None = None
  certificate_domain: str | None = None
  certificate_arn: str | None = None
  create_certificate: bool = False
  lookup_certificate: bool = True
  cloudfront_enabled: bool = True
  aliases: list[str] = field(default_factory=list)
  static_path_pattern: str = "/static/*"
  price_class: str = "PriceClass_100"
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  region: str = "us-east-1"

  def __post_init__(self) -> None:
    if not self.bucket_name:
      raise ValueError("bucket_name is required")
    if self.create_certificate and not self.certificate_domain:
      raise ValueError(
        f"{self.bucket_name}: create_certificate requires certificate_domain"
      )
    # A certificate attached to CloudFront must come with at least one alias
    if self.certificate_arn and not (self.aliases or self.certificate_domain):
      raise ValueError(
        f"{self.bucket_name}: certificate_arn requires aliases or certificate_domain"
      )


@dataclass
class Config:
  """Multi-website configuration."""

  websites: list[WebsiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "websites.yaml") -> "Config":
    """Load configuration from YAML file."""
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults") or {}
    websites: list[WebsiteConfig] = []

    for website_data in data.get("websites") or []:
      website_data = website_data or {}
      merged = {**defaults, **website_data}
      # Tags merge key by key so a website can add to the shared set
      merged["tags"] = {
        **(defaults.get("tags") or {}),
        **(website_data.get("tags") or {}),
      }

      removal_policy_str = str(merged.pop("removal_policy", "retain"))
      removal_policy = REMOVAL_POLICIES.get(
        removal_policy_str.lower(), RemovalPolicy.RETAIN
      )

      aliases = merged.get("aliases") or []
      if isinstance(aliases, str):
        aliases = [aliases]

      websites.append(
        WebsiteConfig(
          bucket_name=merged.get("bucket_name", ""),
          tags={str(k): str(v) for k, v in merged["tags"].items()},
          index_document=merged.get("index_document", "index.html"),
          error_document=merged.get("error_document", "error.html"),
          index_html_path=_resolve_path(path.parent, merged.get("index_html_path")),
          error_html_path=_resolve_path(path.parent, merged.get("error_html_path")),
          certificate_domain=merged.get("certificate_domain"),
          certificate_arn=merged.get("certificate_arn"),
          create_certificate=_as_bool(merged, "create_certificate", False),
          lookup_certificate=_as_bool(merged, "lookup_certificate", True),
          cloudfront_enabled=_as_bool(merged, "cloudfront_enabled", True),
          aliases=list(aliases),
          static_path_pattern=merged.get("static_path_pattern", "/static/*"),
          price_class=merged.get("price_class", "PriceClass_100"),
          removal_policy=removal_policy,
          region=merged.get("region", "us-east-1"),
        )
      )

    return cls(websites=websites)


def _resolve_path(base: Path, value: str | None) -> Path | None:
  """Resolve an HTML path relative to the directory of the config file."""
  if not value:
    return None
  candidate = Path(value).expanduser()
  return candidate if candidate.is_absolute() else base / candidate


def _as_bool(data: dict[str, Any], key: str, default: bool) -> bool:
  """Read a flag, accepting YAML booleans and their quoted spellings."""
  value = data.get(key)
  if value is None:
    return default
  if isinstance(value, bool):
    return value
  if isinstance(value, str) and value.strip().lower() in TRUE_STRINGS | FALSE_STRINGS:
    return value.strip().lower() in TRUE_STRINGS
  raise ValueError(f"{key} must be true or false, got {value!r}")
