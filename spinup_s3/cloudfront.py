"""CloudFront distributions for S3-hosted websites."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from .apierror import ApiError, ErrorCode, err_code
from .config import Account, Domain

log = logging.getLogger(__name__)

_PAGE_SIZE = "100"


def _invalid_input() -> ApiError:
    return ApiError(ErrorCode.BAD_REQUEST, "invalid input")


@dataclass
class CloudFront:
    """Operations on CloudFront distributions through a CloudFront API client.

    ``service`` is any object exposing the CloudFront API operations
    (``create_distribution_with_tags``, ``get_distribution_config``,
    ``update_distribution``, ``delete_distribution``, ``tag_resource``,
    ``list_distributions``, ``create_invalidation`` and
    ``list_tags_for_resource``) taking keyword arguments and returning dicts.
    Failures raised by the client are translated into ``ApiError``.
    """

    service: Any
    domains: dict[str, Domain] = field(default_factory=dict)
    website_endpoint: str = ""

    @classmethod
    def from_account(cls, service: Any, account: Account) -> CloudFront:
        """Build a CloudFront wrapper from an account's configuration."""
        return cls(
            service=service,
            domains=account.domains,
            website_endpoint=f"s3-website-{account.region}.amazonaws.com",
        )

    def website_domain(self, name: str) -> Domain:
        """Return the configured domain that the website ``name`` belongs to."""
        log.info("validating website name %s", name)
        if not name:
            raise ValueError("website cannot be empty")
        parts = name.split(".", 1)
        if len(parts) < 2:
            raise ValueError("invalid website length, not enough parts")
        log.info("split website name into parts: %s", parts)
        try:
            return self.domains[parts[1]]
        except KeyError:
            raise ValueError("domain not found for website") from None

    def default_website_distribution_config(self, name: str) -> dict[str, Any]:
        """Generate the distribution configuration serving the S3 website ``name``."""
        domain = self.website_domain(name)
        config = {
            "Aliases": {"Items": [name], "Quantity": 1},
            "DefaultCacheBehavior": {
                "ForwardedValues": {
                    "Cookies": {"Forward": "none"},
                    "QueryString": False,
                },
                "MinTTL": 0,
                "DefaultTTL": 3600,
                "TargetOriginId": name,
                "TrustedSigners": {"Enabled": False, "Quantity": 0},
                "ViewerProtocolPolicy": "redirect-to-https",
            },
            "CallerReference": str(uuid.uuid4()),
            "Comment": name,
            "DefaultRootObject": "index.html",
            "Enabled": True,
            "Origins": {
                "Items": [
                    {
                        "DomainName": f"{name}.{self.website_endpoint}",
                        "Id": name,
                        "CustomOriginConfig": {
                            "HTTPPort": 80,
                            "HTTPSPort": 443,
                            "OriginProtocolPolicy": "http-only",
                        },
                    }
                ],
                "Quantity": 1,
            },
            "PriceClass": "PriceClass_100",
            "ViewerCertificate": {
                "ACMCertificateArn": domain.cert_arn,
                "MinimumProtocolVersion": "TLSv1.1_2016",
                "SSLSupportMethod": "sni-only",
            },
        }
        log.debug("Generated Distribution Config: %s", config)
        return config

    def create_distribution(self, distribution: dict[str, Any] | None, tags: dict[str, Any] | None) -> Any:
        """Create a distribution with tags and return the new distribution."""
        if distribution is None or tags is None:
            raise _invalid_input()
        try:
            out = self.service.create_distribution_with_tags(
                DistributionConfigWithTags={"DistributionConfig": distribution, "Tags": tags}
            )
        except Exception as err:
            raise err_code("failed to create cloudfront distribution", err) from err
        return out.get("Distribution")

    def _current_config(self, distribution_id: str) -> dict[str, Any]:
        try:
            return self.service.get_distribution_config(Id=distribution_id)
        except Exception as err:
            raise err_code(
                f"failed to get details about cloudfront distribution Id: {distribution_id}", err
            ) from err

    def disable_distribution(self, distribution_id: str) -> Any:
        """Disable a distribution and return its updated state."""
        if not distribution_id:
            raise _invalid_input()
        log.info("disabling cloudfront distributions Id: %s", distribution_id)
        current = self._current_config(distribution_id)
        config = current["DistributionConfig"]
        config["Enabled"] = False
        try:
            out = self.service.update_distribution(
                DistributionConfig=config,
                IfMatch=current.get("ETag"),
                Id=distribution_id,
            )
        except Exception as err:
            raise err_code(f"failed to disable cloudfront distribution Id:{distribution_id}", err) from err
        return out.get("Distribution")

    def delete_distribution(self, distribution_id: str) -> None:
        """Delete a distribution, using its most recent ETag."""
        if not distribution_id:
            raise _invalid_input()
        log.info("deleting cloudfront distributions Id: %s", distribution_id)
        current = self._current_config(distribution_id)
        try:
            self.service.delete_distribution(IfMatch=current.get("ETag"), Id=distribution_id)
        except Exception as err:
            raise err_code(f"failed to delete cloudfront distribution Id:{distribution_id}", err) from err

    def tag_distribution(self, arn: str, tags: dict[str, Any]) -> None:
        """Apply tags to the distribution with the given ARN."""
        if not arn:
            raise _invalid_input()
        log.info("tagging cloudfront distributions ARN: %s", arn)
        try:
            self.service.tag_resource(Resource=arn, Tags=tags)
        except Exception as err:
            raise err_code(f"failed to tag cloudfront distribution ARN:{arn}", err) from err

    def _pages(self) -> Iterator[dict[str, Any]]:
        marker: str | None = None
        while True:
            request: dict[str, Any] = {"MaxItems": _PAGE_SIZE}
            if marker is not None:
                request["Marker"] = marker
            try:
                output = self.service.list_distributions(**request)
            except Exception as err:
                raise err_code("failed to list cloudfront distributions", err) from err
            page = output.get("DistributionList") or {}
            yield page
            if not page.get("IsTruncated"):
                return
            marker = page.get("NextMarker", page.get("Marker"))

    def _summaries(self) -> Iterator[dict[str, Any]]:
        for page in self._pages():
            yield from page.get("Items") or []

    def list_distributions(self) -> list[dict[str, Any]]:
        """Return the summaries of all distributions."""
        log.info("listing cloudfront distributions")
        return list(self._summaries())

    def list_distributions_with_filter(self, predicate: Callable[[dict[str, Any]], bool]) -> list[dict[str, Any]]:
        """Return the summaries of all distributions for which ``predicate`` is true."""
        log.info("listing cloudfront distributions")
        distributions = [item for item in self._summaries() if predicate(item)]
        log.debug("returning cloudfront distributions list: %s", distributions)
        return distributions

    def get_distribution_by_name(self, name: str) -> dict[str, Any]:
        """Find the distribution that has ``name`` among its aliases."""
        log.info("searching for cloudfront distribution %s", name)
        for dist in self._summaries():
            aliases = (dist.get("Aliases") or {}).get("Items") or []
            if name in aliases:
                return dist
        raise ApiError(ErrorCode.NOT_FOUND, f"cloudfront distribution not found with name {name}")

    def invalidate_cache(self, distribution_id: str, paths: Iterable[str]) -> Any:
        """Submit a cache invalidation for ``paths`` on a distribution."""
        paths = list(paths)
        if not distribution_id or not paths:
            raise _invalid_input()
        log.info("invalidating paths %s for cloudfront distribution Id: %s", ",".join(paths), distribution_id)
        try:
            out = self.service.create_invalidation(
                DistributionId=distribution_id,
                InvalidationBatch={
                    "CallerReference": str(uuid.uuid4()),
                    "Paths": {"Items": paths, "Quantity": len(paths)},
                },
            )
        except Exception as err:
            raise err_code("failed to invalidate cloudfront distributions", err) from err
        log.debug("got cache invalidation output %s", out)
        return out

    def list_tags(self, arn: str) -> list[dict[str, Any]]:
        """Return the tags on the resource with the given ARN."""
        if not arn:
            raise _invalid_input()
        log.debug("listing tags for cloudfront resource %s", arn)
        try:
            out = self.service.list_tags_for_resource(Resource=arn)
        except Exception as err:
            raise err_code("failed to list tags cloudfront distributions", err) from err
        log.debug("got tags list output for resource %s: %s", arn, out)
        return list((out.get("Tags") or {}).get("Items") or [])