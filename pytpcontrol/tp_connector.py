import logging

import aiohttp
import requests

from .feedback import (
    FeedbackSubscription,
    build_deregister_document,
    build_register_document,
)
from .request_options import OptionsBuilder

_LOGGER = logging.getLogger(__name__)


def _encode_body(body):
    if body is None:
        return None
    return body.encode("utf-8")


class TpConnector:
    """
    Blocking client for the TelePresence HTTP/XML API.

    Every method builds a RequestOptions value, issues a single HTTP request
    and returns the ``requests.Response`` as is. Responses are not parsed and
    failed requests are not retried.

    Example:
        codec = TpConnector("192.168.1.20", {"username": "admin", "password": "secret"})
        codec.get_status().text
    """

    def __init__(self, host, credentials, timeout=None):
        self._builder = OptionsBuilder(credentials, host)
        self.timeout = timeout

    @property
    def credentials(self):
        return self._builder.credentials

    @property
    def host(self):
        return self._builder.host

    @property
    def last_options(self):
        """Options of the most recent call (not safe across threads)."""
        return self._builder.last_options

    def build_options(self, endpoint, **override):
        return self._builder.build_options(endpoint, **override)

    def get_configuration(self):
        return self.send_request(self._builder.configuration_options())

    def get_commands(self):
        return self.send_request(self._builder.commands_options())

    def get_status(self):
        return self.send_request(self._builder.status_options())

    def get_valuespace(self):
        return self.send_request(self._builder.valuespace_options())

    def get_xml(self, xpath):
        """Read part of the object model, e.g. ``get_xml("Status/Audio/Volume")``."""
        return self.send_request(self._builder.get_xml_options(xpath))

    def put_xml(self, xml_document):
        """POST a raw XML command or configuration document."""
        return self.send_request(self._builder.put_xml_options(xml_document))

    def put_xml_with_form(self, xml_document):
        """POST an XML document as the ``xmldoc`` form parameter."""
        return self.send_request(self._builder.put_xml_with_form_options(xml_document))

    def set_http_feedback(self, server_url, expressions=(), feedback_slot=None, format="xml"):
        """Register server_url to receive feedback for expressions.

        Args:
            server_url (str): URL the device will POST events to
            expressions (list): 1 to 15 object model paths, e.g. "/Status/Call"
            feedback_slot (int): Slot to use (1-4)
            format (str): "xml" or "json", case-insensitive

        Raises:
            ValueError: If any parameter is missing or out of range. Nothing
                is sent in that case.
        """
        subscription = FeedbackSubscription(
            server_url=server_url,
            expressions=expressions,
            feedback_slot=feedback_slot,
            format=format,
        )
        return self.put_xml(build_register_document(subscription))

    def unset_http_feedback(self, feedback_slot):
        """Deregister feedback_slot (1-4)."""
        return self.put_xml(build_deregister_document(feedback_slot))

    def send_request(self, options):
        _LOGGER.debug("Sending %s %s", options.method, options.url)
        return requests.request(
            options.method,
            options.url,
            headers=options.headers,
            auth=options.auth,
            params=options.params,
            data=_encode_body(options.body),
            timeout=self.timeout,
        )


class TpAsyncConnector:
    """
    asyncio client for the TelePresence HTTP/XML API.

    Same operations as TpConnector. Results are ``aiohttp.ClientResponse``
    objects whose body has already been read, so ``await response.text()``
    works after the call returns.
    """

    def __init__(self, host, credentials, session=None, timeout=None):
        self._builder = OptionsBuilder(credentials, host)
        self._session = session
        self.timeout = timeout

    async def close_session(self):
        """close session"""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def resurect_session(self):
        if self._session is None:
            self._session = aiohttp.ClientSession()

    @property
    def credentials(self):
        return self._builder.credentials

    @property
    def host(self):
        return self._builder.host

    @property
    def last_options(self):
        """Options of the most recent call.

        Concurrent tasks on the same connector overwrite each other here.
        """
        return self._builder.last_options

    def build_options(self, endpoint, **override):
        return self._builder.build_options(endpoint, **override)

    async def get_configuration(self):
        return await self.send_request(self._builder.configuration_options())

    async def get_commands(self):
        return await self.send_request(self._builder.commands_options())

    async def get_status(self):
        return await self.send_request(self._builder.status_options())

    async def get_valuespace(self):
        return await self.send_request(self._builder.valuespace_options())

    async def get_xml(self, xpath):
        return await self.send_request(self._builder.get_xml_options(xpath))

    async def put_xml(self, xml_document):
        return await self.send_request(self._builder.put_xml_options(xml_document))

    async def put_xml_with_form(self, xml_document):
        return await self.send_request(
            self._builder.put_xml_with_form_options(xml_document)
        )

    async def set_http_feedback(self, server_url, expressions=(), feedback_slot=None, format="xml"):
        """Register server_url for feedback. See TpConnector.set_http_feedback."""
        subscription = FeedbackSubscription(
            server_url=server_url,
            expressions=expressions,
            feedback_slot=feedback_slot,
            format=format,
        )
        return await self.put_xml(build_register_document(subscription))

    async def unset_http_feedback(self, feedback_slot):
        return await self.put_xml(build_deregister_document(feedback_slot))

    async def send_request(self, options):
        kwargs = {
            "headers": options.headers,
            "auth": aiohttp.BasicAuth(options.auth.user, options.auth.password),
            "params": options.params,
            "data": _encode_body(options.body),
        }
        if self.timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        _LOGGER.debug("Sending %s %s", options.method, options.url)
        await self.resurect_session()
        async with self._session.request(options.method, options.url, **kwargs) as response:
            await response.read()

        return response
