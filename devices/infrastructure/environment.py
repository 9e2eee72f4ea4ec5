"""
Host environment signal collection.
"""

import locale
import logging
import os
import platform
from datetime import datetime

from devices.domain.fingerprint import EnvironmentSignals

logger = logging.getLogger(__name__)


def _language() -> str:
    try:
        language = locale.getlocale()[0]
    except ValueError:
        language = None
    return language or os.environ.get("LANG", "")


def collect_environment_signals() -> EnvironmentSignals:
    """
    Collect environment signals from the host this process runs on.

    The platform description and node name stand in for a user agent.
    Screen geometry is unknown on a headless host and reported as 0.

    Returns:
        EnvironmentSignals for the current host
    """
    user_agent = (
        f"{platform.system()}/{platform.release()} "
        f"({platform.machine()}; {platform.node()})"
    )
    signals = EnvironmentSignals(
        user_agent=user_agent,
        language=_language(),
        hardware_concurrency=os.cpu_count() or 0,
        timezone=datetime.now().astimezone().tzname() or "",
    )
    logger.debug("Collected environment signals: %s", signals)
    return signals
