from .tp_connector import TpConnector, TpAsyncConnector
from .request_options import (
    ClientIdentity,
    Credentials,
    OptionsBuilder,
    RequestOptions,
    prepend_slash,
)
from .feedback import (
    FeedbackSubscription,
    build_deregister_document,
    build_register_document,
)

__version__ = "0.1"
