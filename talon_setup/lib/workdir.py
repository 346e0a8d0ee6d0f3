from __future__ import annotations

import logging
import tempfile
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


@contextmanager
def scoped_workdir(prefix: str = "talon-setup-") -> Iterator[str]:
    """Temporary download directory, removed on every exit path.

    Commands get it as their cwd; the process working directory never changes.
    """

    with tempfile.TemporaryDirectory(prefix=prefix) as d:
        logger.debug("Created work dir %s", d)
        try:
            yield d
        finally:
            logger.debug("Removing work dir %s", d)
