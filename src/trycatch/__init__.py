import contextlib
import logging

from .config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV, ENV_ENABLED, LOGGER_NAME

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package
    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == ENV_ENABLED:
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == ENV_ENABLED:
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

from .containers import from_container, to_container  # noqa: E402
from .errors import TryCatchError, UnwrapError  # noqa: E402
from .result import Failure, Result, Success  # noqa: E402
from .wrappers import try_catch, try_catch_sync  # noqa: E402

__all__: list[str] = [
    "Failure",
    "Result",
    "Success",
    "TryCatchError",
    "UnwrapError",
    "from_container",
    "to_container",
    "try_catch",
    "try_catch_sync",
]
