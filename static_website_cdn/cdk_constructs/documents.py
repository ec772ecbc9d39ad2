"""Upload of the website's HTML documents."""

from pathlib import Path

from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteDocuments(Construct):
  """Deploys local index and error pages to the website bucket.

  Only the documents with a configured path are uploaded. Existing objects
  in the bucket are left alone.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    index_document: str = "index.html",
    error_document: str = "error.html",
    index_html_path: Path | None = None,
    error_html_path: Path | None = None,
  ) -> None:
    super().__init__(scope, id)

    documents = {
      index_document: index_html_path,
      error_document: error_html_path,
    }
    sources = [
      s3_deploy.Source.data(key, _read_html(path))
      for key, path in documents.items()
      if path is not None
    ]

    self.deployment: s3_deploy.BucketDeployment | None = None
    if sources:
      self.deployment = s3_deploy.BucketDeployment(
        self,
        "Deployment",
        sources=sources,
        destination_bucket=bucket,
        content_type="text/html",
        prune=False,
      )


def _read_html(path: Path) -> str:
  path = Path(path)
  if not path.is_file():
    raise FileNotFoundError(f"HTML document not found: {path}")
  return path.read_text(encoding="utf-8")
