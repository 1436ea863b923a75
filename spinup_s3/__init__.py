"""CloudFront website distributions, configuration, API errors and Cyberduck bookmarks for S3 sites."""

__version__ = "0.1.0"
__all__ = ["apierror", "cloudfront", "config", "duck"]