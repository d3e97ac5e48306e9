"""
HTTP feedback registration commands.

The device pushes events to up to four registered server URLs ("feedback
slots"). Each registration lists up to fifteen expressions, i.e. object model
paths to watch. This module validates registration parameters and renders the
XML command documents the device expects on its putxml endpoint.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .request_options import prepend_slash

_LOGGER = logging.getLogger(__name__)

FEEDBACK_SLOT_MIN = 1
FEEDBACK_SLOT_MAX = 4
MAX_EXPRESSIONS = 15
FEEDBACK_FORMATS = ["xml", "json"]


@dataclass
class FeedbackSubscription:
    """Parameters of an HttpFeedback Register command."""

    server_url: str
    expressions: Sequence[str] = field(default_factory=list)
    feedback_slot: Optional[int] = None
    format: str = "xml"

    def validate(self):
        validate_subscription(self)


def _is_slot_number(value):
    # bool is an int subclass but never a valid slot
    return isinstance(value, int) and not isinstance(value, bool)


def validate_subscription(subscription):
    """Check a subscription, raising ValueError on the first broken rule.

    Rules are checked in this order: server URL present, slot present and
    integer, slot within 1-4, format xml or json (any case), expressions
    given as a list of path strings, 1 to 15 expressions.
    """
    if not subscription.server_url or not _is_slot_number(subscription.feedback_slot):
        _reject("One or more required parameters are not defined")
    if not FEEDBACK_SLOT_MIN <= subscription.feedback_slot <= FEEDBACK_SLOT_MAX:
        _reject("feedbackSlot must be an integer between 1 - 4")
    fmt = subscription.format
    if not isinstance(fmt, str) or fmt.lower() not in FEEDBACK_FORMATS:
        _reject("Format must be JSON or XML")
    if not _is_path_list(subscription.expressions):
        _reject("Expressions must be a list of path strings")
    if len(subscription.expressions) == 0:
        _reject("No feedback expressions are defined")
    if len(subscription.expressions) > MAX_EXPRESSIONS:
        _reject("Length of expressions cannot be greater than 15")


def _is_path_list(value):
    # a bare string is a Sequence too, and would split into one path per character
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return all(isinstance(path, str) for path in value)


def _reject(message):
    _LOGGER.debug("Rejected feedback parameters: %s", message)
    raise ValueError(message)


def _http_feedback_command(action):
    root = ET.Element("Command")
    http_feedback = ET.SubElement(root, "HttpFeedback")
    command = ET.SubElement(http_feedback, action, {"command": "True"})
    return root, command


def _text_element(parent, tag, text, attrib=None):
    element = ET.SubElement(parent, tag, attrib or {})
    element.text = str(text)
    return element


def _expression_elements(parent, expressions):
    """Append one Expression element per path, numbered from 1 in input order."""
    for item, expression in enumerate(expressions, start=1):
        _text_element(parent, "Expression", prepend_slash(expression), {"item": str(item)})


def build_register_document(subscription):
    """Validate subscription and render its Register command.

    Returns:
        str: ``<Command><HttpFeedback><Register command="True">...`` with
        FeedbackSlot, Format, ServerUrl and Expression children in that order.
        Format is written as supplied, without changing its case.
    """
    validate_subscription(subscription)

    root, register = _http_feedback_command("Register")
    _text_element(register, "FeedbackSlot", subscription.feedback_slot)
    _text_element(register, "Format", subscription.format)
    _text_element(register, "ServerUrl", subscription.server_url)
    _expression_elements(register, subscription.expressions)

    _LOGGER.debug(
        "Rendered feedback registration for slot %s with %d expressions",
        subscription.feedback_slot,
        len(subscription.expressions),
    )
    return ET.tostring(root, encoding="unicode")


def build_deregister_document(feedback_slot):
    """Render the Deregister command for feedback_slot (1-4)."""
    if not _is_slot_number(feedback_slot) or not (
        FEEDBACK_SLOT_MIN <= feedback_slot <= FEEDBACK_SLOT_MAX
    ):
        _reject("Not a valid feedback slot")

    root, deregister = _http_feedback_command("Deregister")
    _text_element(deregister, "FeedbackSlot", feedback_slot)

    _LOGGER.debug("Rendered feedback deregistration for slot %s", feedback_slot)
    return ET.tostring(root, encoding="unicode")
