# spinup_s3

Helpers for running S3-backed websites behind CloudFront: reading the service
configuration, building and managing CloudFront distributions, mapping service
errors onto API error categories, and producing Cyberduck bookmarks for buckets.
The package uses only the standard library.

## Modules

### `spinup_s3.config`

`read_config(stream)` reads the first JSON document from a text or binary
stream and returns a `Config`. JSON keys are matched to fields without regard
to case or underscores, so `listenAddress`, `ListenAddress` and
`listen_address` all fill `Config.listen_address`. Missing keys keep their
defaults. Malformed JSON or values of the wrong type raise `ValueError`.

The configuration is held in dataclasses:

- `Config`: `listen_address`, `account`, `accounts_map`, `token`, `log_level`,
  `version`, `org`
- `Account`: `endpoint`, `region`, `akid`, `secret`, `external_id`, `role`,
  `default_s3_bucket_actions`, `default_s3_object_actions`,
  `default_cloudfront_distribution_actions`, `access_log`, `domains`,
  `cleaner` (`None` when not configured)
- `AccessLog`: `bucket`, `prefix`; `get_bucket(account_id)` returns the bucket
  name with the first `{account_id}` placeholder replaced
- `Domain`: `cert_arn`, `hosted_zone_id`
- `Cleaner`: `interval`, `max_splay`
- `Version`: `version`, `version_prerelease`, `build_stamp`, `git_hash`

### `spinup_s3.cloudfront`

`CloudFront` works on top of a client object you supply as `service`. The
client must offer the CloudFront operations `create_distribution_with_tags`,
`get_distribution_config`, `update_distribution`, `delete_distribution`,
`tag_resource`, `list_distributions`, `create_invalidation` and
`list_tags_for_resource`, taking keyword arguments and returning dicts.

- `CloudFront.from_account(service, account)` takes the domains from an
  `Account` and sets the website endpoint to
  `s3-website-<region>.amazonaws.com`.
- `website_domain(name)` splits the website name at its first dot and returns
  the configured `Domain` for the remainder; it raises `ValueError` for an
  empty name, a name without a dot, or an unknown domain.
- `default_website_distribution_config(name)` returns a distribution
  configuration dict: the name as alias, comment and origin id, the S3 website
  endpoint as a custom HTTP-only origin, `index.html` as root object,
  redirect to HTTPS, `PriceClass_100`, the domain's certificate with SNI and
  TLSv1.1_2016, and a fresh random caller reference.
- `create_distribution(distribution, tags)`, `disable_distribution(distribution_id)`,
  `delete_distribution(distribution_id)` and `tag_distribution(arn, tags)`
  change distributions; disabling and deleting fetch the current ETag first.
- `list_distributions()` and `list_distributions_with_filter(predicate)` page
  through all distributions 100 at a time.
- `get_distribution_by_name(name)` returns the distribution summary whose
  aliases contain `name`.
- `invalidate_cache(distribution_id, paths)` submits an invalidation batch.
- `list_tags(arn)` returns the tag items of a resource (an empty list if none).

Empty or missing inputs raise `ApiError` with `ErrorCode.BAD_REQUEST`; a name
not found by `get_distribution_by_name` raises `ApiError` with
`ErrorCode.NOT_FOUND`. Exceptions raised by the client are passed through
`err_code`.

### `spinup_s3.apierror`

- `ErrorCode`: `BAD_REQUEST`, `FORBIDDEN`, `NOT_FOUND`, `CONFLICT`,
  `LIMIT_EXCEEDED`, `INTERNAL_ERROR`, `SERVICE_UNAVAILABLE`.
- `ApiError(code, message, cause=None)`: the exception raised by the package.
- `AwsError(code, message="")`: a service error identified by its CloudFront
  error code, such as `NoSuchDistribution`.
- `err_code(msg, err)`: follows `err`'s chain of causes; if it ends in an
  `AwsError`, its code is mapped to forbidden, limit exceeded, conflict, bad
  request or not found. Unknown service codes become bad request with the
  service message appended. Any other exception becomes an internal error.

### `spinup_s3.duck`

- `default_duck(name, path)` builds a `DotDuck` bookmark for bucket `name`
  on `s3.amazonaws.com:443`; a `path` other than `/` is appended to the path
  and nickname with its leading and trailing slash removed.
- `DotDuck.generate()` renders the bookmark as an XML property list, as bytes,
  indented with two spaces.

## Example

```python
import io

from spinup_s3.config import read_config
from spinup_s3.duck import default_duck

config = read_config(io.StringIO(
    '{"account": {"region": "us-east-1",'
    ' "domains": {"example.com": {"certArn": "arn:aws:acm::000000000000:certificate/placeholder"}}}}'
))
print(config.account.domains["example.com"].cert_arn)

bookmark = default_duck("www.example.com", "/site/").generate()
```

With a CloudFront client object `client` as described above:

```python
from spinup_s3.cloudfront import CloudFront

cf = CloudFront.from_account(client, config.account)
dist_config = cf.default_website_distribution_config("www.example.com")
```

## What the package does not do

- It does not create CloudFront clients, sessions or credentials; the caller
  provides the client, and the `akid`, `secret`, `role` and `external_id`
  settings are only read, not used.
- Only exceptions that are, or are caused by, an `AwsError` get a specific
  error category; other client exceptions are reported as internal errors.
- It has no HTTP API server and no command-line program.