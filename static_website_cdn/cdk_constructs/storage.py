"""S3 bucket for static website hosting."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct


class StorageBucket(Construct):
  """Encrypted S3 bucket with website hosting and public read access."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    index_document: str = "index.html",
    error_document: str = "error.html",
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document=index_document,
      website_error_document=error_document,
      encryption=s3.BucketEncryption.S3_MANAGED,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=False,
        ignore_public_acls=False,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )

    # Website endpoints only serve objects readable by anonymous users
    self.bucket.add_to_resource_policy(
      iam.PolicyStatement(
        sid="PublicReadGetObject",
        actions=["s3:GetObject"],
        resources=[self.bucket.arn_for_objects("*")],
        principals=[iam.AnyPrincipal()],
      )
    )
