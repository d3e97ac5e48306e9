"""
Request options for the TelePresence HTTP/XML API.

Every call to the device is described by a RequestOptions value built from the
client identity and an endpoint name. Callers may override any top level field;
overrides replace the default field wholesale and are never deep-merged.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, NamedTuple, Optional

_LOGGER = logging.getLogger(__name__)

# Device endpoints
CONFIGURATION_ENDPOINT = "configuration.xml"
COMMAND_ENDPOINT = "command.xml"
STATUS_ENDPOINT = "status.xml"
VALUESPACE_ENDPOINT = "valuespace.xml"
GETXML_ENDPOINT = "getxml"
PUTXML_ENDPOINT = "putxml"
FORMPUTXML_ENDPOINT = "formputxml"

XML_CONTENT_TYPE = "text/xml"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

PATH_SEPARATOR = "/"


def prepend_slash(path):
    """Return path with a leading separator, adding one only if missing."""
    if path.startswith(PATH_SEPARATOR):
        return path
    return PATH_SEPARATOR + path


class Credentials(NamedTuple):
    """Basic auth pair. Usable as-is for the ``auth`` argument of requests."""

    user: str
    password: str


@dataclass(frozen=True)
class ClientIdentity:
    """Who we are and which device we talk to."""

    user: str
    password: str
    host: str

    @classmethod
    def from_mapping(cls, credentials: Mapping[str, str], host: str) -> "ClientIdentity":
        """
        Build an identity from a credentials mapping.

        Args:
            credentials: Mapping with ``username`` or ``user`` and ``password`` or
                ``pass``. ``user``/``pass`` take precedence over the long names.
            host: Device address (IP or hostname, optionally with ``:port``)
        """
        return cls(
            user=credentials.get("user") or credentials.get("username"),
            password=credentials.get("pass") or credentials.get("password"),
            host=host,
        )

    @property
    def credentials(self) -> Credentials:
        return Credentials(self.user, self.password)

    @property
    def base_url(self) -> str:
        return "http://" + self.host


@dataclass(frozen=True)
class RequestOptions:
    """A single HTTP call to the device."""

    method: str
    url: str
    auth: Credentials
    headers: Dict[str, str] = field(default_factory=dict)
    params: Optional[Dict[str, str]] = None
    body: Optional[str] = None

    def merge(self, **override: Any) -> "RequestOptions":
        """
        Return a copy with the given fields replaced.

        The merge is shallow: ``headers={"Accept": "text/xml"}`` replaces the
        whole headers dict, dropping the default Content-Type. Pass a complete
        headers dict to keep it. ``query`` is accepted as another name for
        ``params``. Unknown field names raise TypeError.
        """
        if "query" in override:
            if "params" in override:
                raise TypeError("Pass either query or params, not both")
            override["params"] = override.pop("query")
        return dataclasses.replace(self, **override)

    @property
    def query(self):
        return self.params


class OptionsBuilder:
    """
    Builds RequestOptions for one client identity.

    The most recently built options are kept on ``last_options`` for
    inspection. It is plain instance state: when calls overlap on the same
    instance (threads, concurrent tasks) the value seen is whichever call
    wrote last.
    """

    def __init__(self, credentials, host):
        self._identity = ClientIdentity.from_mapping(credentials, host)
        self._options = None

    @property
    def credentials(self):
        return self._identity.credentials

    @property
    def host(self):
        return self._identity.host

    @property
    def last_options(self):
        return self._options

    def default_options(self, endpoint):
        return RequestOptions(
            method="GET",
            url=f"{self._identity.base_url}/{endpoint}",
            auth=self._identity.credentials,
            headers={"Content-Type": XML_CONTENT_TYPE},
        )

    def build_options(self, endpoint, **override):
        """Build options for endpoint, replacing any default field given in override.

        Example:
            builder.build_options("putxml", method="POST", body="<Command/>")
        """
        options = self.default_options(endpoint).merge(**override)
        _LOGGER.debug("Built %s request for %s", options.method, options.url)
        self._options = options
        return options

    def configuration_options(self):
        return self.build_options(CONFIGURATION_ENDPOINT)

    def commands_options(self):
        return self.build_options(COMMAND_ENDPOINT)

    def status_options(self):
        return self.build_options(STATUS_ENDPOINT)

    def valuespace_options(self):
        return self.build_options(VALUESPACE_ENDPOINT)

    def get_xml_options(self, xpath):
        if not xpath:
            raise ValueError("XPath parameter is not defined")
        return self.build_options(
            GETXML_ENDPOINT, params={"location": prepend_slash(xpath)}
        )

    def put_xml_options(self, xml_document):
        if not xml_document:
            raise ValueError("xmlDocument parameter not defined")
        return self.build_options(PUTXML_ENDPOINT, method="POST", body=xml_document)

    def put_xml_with_form_options(self, xml_document):
        if not xml_document:
            raise ValueError("xmlDocument parameter not defined")
        return self.build_options(
            FORMPUTXML_ENDPOINT,
            method="POST",
            params={"xmldoc": xml_document},
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )
