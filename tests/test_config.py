import io

import pytest

from spinup_s3.config import (
    AccessLog,
    Account,
    Cleaner,
    Config,
    Domain,
    Version,
    read_config,
)

TEST_CONFIG = """{
    "listenAddress": ":8000",
    "account": {
      "region": "us-east-1",
        "akid": "key1",
        "secret": "secret",
        "defaultS3BucketActions": [
            "s3:abc123",
            "s3:xyz456"
        ],
        "defaultS3ObjectActions": [
            "s3:*"
        ],
        "defaultCloudfrontDistributionActions": [
            "cloudfront:ListInvalidations",
            "cloudfront:CreateInvalidation"
        ],
        "accessLog": {
            "bucket": "foobucket",
            "prefix": "spinup"
        },
        "domains": {
            "example.com": {
                "certArn": "arn:123456789:thingy",
                "hostedZoneId": "AABBCCDDEEFF"
            }
        },
        "cleaner": {
            "interval": "300s",
            "maxSplay": "60s"
        }
    },
    "token": "token",
    "logLevel": "info",
    "org": "test"
}"""

TEST_CONFIG_2 = """{
    "listenAddress": ":8000",
    "account": {
        "region": "us-west-1",
        "akid": "key2",
        "secret": "secret"
    },
    "token": "token",
    "logLevel": "info",
    "org": "test"
}"""

BROKEN_CONFIG = '{ "foobar": { "baz": "biz" }'


def test_read_full_config():
    expected = Config(
        listen_address=":8000",
        account=Account(
            region="us-east-1",
            akid="key1",
            secret="secret",
            default_s3_bucket_actions=["s3:abc123", "s3:xyz456"],
            default_s3_object_actions=["s3:*"],
            default_cloudfront_distribution_actions=[
                "cloudfront:ListInvalidations",
                "cloudfront:CreateInvalidation",
            ],
            access_log=AccessLog(bucket="foobucket", prefix="spinup"),
            domains={
                "example.com": Domain(
                    cert_arn="arn:123456789:thingy", hosted_zone_id="AABBCCDDEEFF"
                )
            },
            cleaner=Cleaner(interval="300s", max_splay="60s"),
        ),
        token="token",
        log_level="info",
        org="test",
    )
    assert read_config(io.StringIO(TEST_CONFIG)) == expected


def test_read_minimal_config():
    expected = Config(
        listen_address=":8000",
        account=Account(region="us-west-1", akid="key2", secret="secret"),
        token="token",
        log_level="info",
        org="test",
    )
    actual = read_config(io.StringIO(TEST_CONFIG_2))
    assert actual == expected
    assert actual.account.cleaner is None
    assert actual.account.domains == {}


def test_read_config_from_bytes():
    actual = read_config(io.BytesIO(TEST_CONFIG_2.encode()))
    assert actual.account.region == "us-west-1"


def test_read_version_and_accounts_map():
    document = (
        '{"version": {"version": "1.2.3", "versionPrerelease": "rc1",'
        ' "buildStamp": "now", "gitHash": "abc"},'
        ' "accountsMap": {"spinup": "123"}}'
    )
    actual = read_config(io.StringIO(document))
    assert actual.version == Version(
        version="1.2.3", version_prerelease="rc1", build_stamp="now", git_hash="abc"
    )
    assert actual.accounts_map == {"spinup": "123"}


def test_broken_config_raises():
    with pytest.raises(ValueError, match="unable to decode JSON message"):
        read_config(io.StringIO(BROKEN_CONFIG))


def test_wrong_type_raises():
    with pytest.raises(ValueError):
        read_config(io.StringIO('{"listenAddress": 8000}'))


@pytest.mark.parametrize(
    "bucket, account_id, expected",
    [
        ("foo-{account_id}-logs", "123456789", "foo-123456789-logs"),
        ("bar-[what_id]-logs", "632623623", "bar-[what_id]-logs"),
    ],
)
def test_access_log_get_bucket(bucket, account_id, expected):
    assert AccessLog(bucket=bucket, prefix="foo").get_bucket(account_id) == expected


def test_get_bucket_replaces_only_first_placeholder():
    log = AccessLog(bucket="{account_id}-{account_id}")
    assert log.get_bucket("42") == "42-{account_id}"