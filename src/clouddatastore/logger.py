"""Python logging facilities use the built-in logging module.

Upon import, the clouddatastore package sets a placeholder "NullHandler" to block
propagation of log messages to the `handler of last resort
<https://docs.python.org/3/howto/logging.html#what-happens-if-no-configuration-is-provided>`__
(and to `sys.stderr`).

If you want to see logging output on `sys.stderr`, attach a
`logging.StreamHandler` to the 'clouddatastore' logger.

Example::

    character_stream = logging.StreamHandler()
    # Optional: Set log level.
    logging.getLogger('clouddatastore').setLevel(logging.DEBUG)
    character_stream.setLevel(logging.DEBUG)
    # Optional: create formatter and add to character stream handler
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    character_stream.setFormatter(formatter)
    # add handler to logger
    logging.getLogger('clouddatastore').addHandler(character_stream)

The ``python -m clouddatastore.protobuild`` command does this for you when given
``--log-level``. See :py:func:`configure_console_logging`.

Refer to submodule documentation for hierarchical loggers to allow
granular control of log handling (e.g. ``logging.getLogger('clouddatastore.protobuild')``).
"""

__all__ = ["configure_console_logging", "logger"]

# Import system facilities
from logging import DEBUG
from logging import Formatter
from logging import getLogger
from logging import NullHandler
from logging import StreamHandler

# Define `logger` attribute that is used by submodules to create sub-loggers.
logger = getLogger("clouddatastore")
# By default, prevent clouddatastore logs from propagating to the root logger (and to sys.stderr)
# if the user does not take action to handle logging.
logger.addHandler(NullHandler(level=DEBUG))


def configure_console_logging(level: str):
    """Attach a character stream handler to the package logger at *level*.

    *level* is a level name, such as ``"DEBUG"``.
    """
    character_stream = StreamHandler()
    logger.setLevel(level)
    character_stream.setLevel(level)
    formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    character_stream.setFormatter(formatter)
    logger.addHandler(character_stream)
    return character_stream
