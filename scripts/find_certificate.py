#!/usr/bin/env python3
"""Show which issued ACM certificate a website deployment would pick up."""

import argparse
import json
import sys
from pathlib import Path

from botocore.exceptions import BotoCoreError, ClientError

sys.path.insert(0, str(Path(__file__).parent.parent))

from static_website_cdn.certificate_lookup import (  # noqa: E402
  CLOUDFRONT_CERTIFICATE_REGION,
  find_issued_certificate,
)


def main(argv: list[str] | None = None) -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Find the issued ACM certificate for a domain"
  )
  parser.add_argument(
    "domain",
    help="Certificate domain (e.g., example.com)",
  )
  parser.add_argument(
    "--region",
    default=CLOUDFRONT_CERTIFICATE_REGION,
    help=f"AWS region (default: {CLOUDFRONT_CERTIFICATE_REGION})",
  )
  parser.add_argument(
    "--name",
    action="append",
    default=[],
    dest="names",
    help="Host name the certificate must also cover (repeatable)",
  )
  parser.add_argument(
    "--format",
    choices=["text", "json"],
    default="text",
    help="Output format (default: text)",
  )

  args = parser.parse_args(argv)

  try:
    arn = find_issued_certificate(
      args.domain, args.region, required_names=args.names
    )
  except (BotoCoreError, ClientError) as e:
    print(f"Error listing certificates: {e}", file=sys.stderr)
    sys.exit(1)

  if arn is None:
    print(f"No issued certificate found for {args.domain}", file=sys.stderr)
    sys.exit(1)

  if args.format == "json":
    print(json.dumps({"domain": args.domain, "certificate_arn": arn}, indent=2))
  else:
    print(arn)


if __name__ == "__main__":
  main()
