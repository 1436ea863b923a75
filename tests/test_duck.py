import plistlib

import pytest

from spinup_s3.duck import DotDuck, default_duck


@pytest.mark.parametrize(
    "name, path, expected",
    [
        (
            "test",
            "/",
            DotDuck(
                protocol="s3",
                provider="iterate GmbH",
                nickname="Spinup - test",
                hostname="s3.amazonaws.com",
                port="443",
                path="/test",
                web_url="s3://test/",
            ),
        ),
        (
            "foobar",
            "/test/",
            DotDuck(
                protocol="s3",
                provider="iterate GmbH",
                nickname="Spinup - foobar/test",
                hostname="s3.amazonaws.com",
                port="443",
                path="/foobar/test",
                web_url="s3://foobar/",
            ),
        ),
    ],
)
def test_default_duck(name, path, expected):
    assert default_duck(name, path) == expected


def test_generate_round_trips():
    duck = default_duck("foobar", "/test/")
    parsed = plistlib.loads(duck.generate())
    assert parsed == {
        "Protocol": "s3",
        "Provider": "iterate GmbH",
        "Nickname": "Spinup - foobar/test",
        "Hostname": "s3.amazonaws.com",
        "Port": "443",
        "Path": "/foobar/test",
        "Web URL": "s3://foobar/",
    }


def test_generate_keeps_field_order():
    parsed = plistlib.loads(default_duck("test", "/").generate())
    assert list(parsed) == [
        "Protocol",
        "Provider",
        "Nickname",
        "Hostname",
        "Port",
        "Path",
        "Web URL",
    ]


def test_generate_indents_with_two_spaces():
    output = default_duck("test", "/").generate()
    assert b"\t" not in output
    assert b"\n  <key>Protocol</key>\n  <string>s3</string>\n" in output
    assert output.startswith(b"<?xml")


def test_generate_empty_bookmark():
    parsed = plistlib.loads(DotDuck().generate())
    assert parsed["Web URL"] == ""
    assert len(parsed) == 7