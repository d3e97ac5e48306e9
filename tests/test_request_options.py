import dataclasses

import pytest

from pytpcontrol import ClientIdentity, Credentials, OptionsBuilder, prepend_slash
from pytpcontrol.request_options import FORM_CONTENT_TYPE, RequestOptions

from .conftest import HOST


def test_identity_accepts_long_key_names():
    identity = ClientIdentity.from_mapping({"username": "u", "password": "p"}, HOST)
    assert identity.credentials == Credentials("u", "p")
    assert identity.host == HOST


def test_identity_short_keys_take_precedence():
    identity = ClientIdentity.from_mapping(
        {"username": "long", "user": "short", "password": "long", "pass": "short"}, HOST
    )
    assert identity.user == "short"
    assert identity.password == "short"


def test_identity_is_immutable():
    identity = ClientIdentity.from_mapping({"user": "u", "pass": "p"}, HOST)
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.user = "other"


@pytest.mark.parametrize(
    "endpoint", ["configuration.xml", "command.xml", "status.xml", "valuespace.xml", "getxml"]
)
def test_build_options_defaults(builder, endpoint):
    options = builder.build_options(endpoint)
    assert options.url == f"http://{HOST}/{endpoint}"
    assert options.method == "GET"
    assert options.headers == {"Content-Type": "text/xml"}
    assert options.auth == ("admin", "secret")
    assert options.params is None
    assert options.body is None


def test_method_override_wins(builder):
    assert builder.build_options("status.xml", method="POST").method == "POST"


def test_headers_override_replaces_defaults(builder):
    options = builder.build_options("status.xml", headers={"Accept": "text/xml"})
    assert options.headers == {"Accept": "text/xml"}
    assert "Content-Type" not in options.headers


def test_auth_override(builder):
    options = builder.build_options("status.xml", auth=Credentials("other", "pw"))
    assert options.auth == ("other", "pw")


def test_query_is_another_name_for_params(builder):
    options = builder.build_options("getxml", query={"location": "/Status"})
    assert options.params == {"location": "/Status"}
    assert options.query == options.params


def test_query_and_params_together_are_rejected(builder):
    with pytest.raises(TypeError):
        builder.build_options("getxml", query={"a": "1"}, params={"b": "2"})


def test_unknown_override_field_is_rejected(builder):
    with pytest.raises(TypeError):
        builder.build_options("status.xml", qs={"a": "b"})


def test_merge_does_not_touch_original():
    base = RequestOptions(
        method="GET", url="http://x/y", auth=Credentials("u", "p"), headers={"A": "1"}
    )
    merged = base.merge(headers={"B": "2"})
    assert base.headers == {"A": "1"}
    assert merged.headers == {"B": "2"}


def test_malformed_endpoint_is_not_validated(builder):
    assert builder.build_options("a b//c").url == f"http://{HOST}/a b//c"


def test_last_options_tracks_latest_build(builder):
    assert builder.last_options is None
    builder.build_options("status.xml")
    second = builder.build_options("command.xml")
    assert builder.last_options is second


def test_get_xml_options_prepends_slash(builder):
    options = builder.get_xml_options("Status/Audio")
    assert options.params == {"location": "/Status/Audio"}
    assert options.url.endswith("/getxml")
    assert options.method == "GET"


def test_get_xml_options_requires_xpath(builder):
    with pytest.raises(ValueError, match="XPath parameter is not defined"):
        builder.get_xml_options("")
    assert builder.last_options is None


def test_put_xml_options(builder):
    options = builder.put_xml_options("<Command/>")
    assert options.method == "POST"
    assert options.body == "<Command/>"
    assert options.url == f"http://{HOST}/putxml"
    assert options.headers == {"Content-Type": "text/xml"}


def test_put_xml_with_form_options(builder):
    options = builder.put_xml_with_form_options("<Command/>")
    assert options.method == "POST"
    assert options.params == {"xmldoc": "<Command/>"}
    assert options.headers == {"Content-Type": FORM_CONTENT_TYPE}
    assert options.body is None


@pytest.mark.parametrize("document", ["", None])
def test_put_xml_requires_document(builder, document):
    with pytest.raises(ValueError, match="xmlDocument parameter not defined"):
        builder.put_xml_options(document)
    with pytest.raises(ValueError):
        builder.put_xml_with_form_options(document)


@pytest.mark.parametrize("path", ["a/b", "/a/b"])
def test_prepend_slash_is_idempotent(path):
    once = prepend_slash(path)
    assert once == "/a/b"
    assert prepend_slash(once) == once


def test_builder_exposes_identity():
    builder = OptionsBuilder({"user": "u", "pass": "p"}, "codec.local")
    assert builder.credentials == ("u", "p")
    assert builder.host == "codec.local"
