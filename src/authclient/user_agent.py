# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""SDK User-Agent string sent with every request."""

import platform
import sys
from functools import lru_cache

SDK_NAME = "authclient-python"
SDK_VERSION = "1.0.0"


@lru_cache(maxsize=1)
def default_user_agent() -> str:
    """Build ``authclient-python/<version> python/<x.y.z> <system>/<release>``."""
    python_version = ".".join(str(part) for part in sys.version_info[:3])
    system = platform.system().lower() or "unknown"
    release = platform.release() or "unknown"
    return f"{SDK_NAME}/{SDK_VERSION} python/{python_version} {system}/{release}"


__all__ = ["SDK_NAME", "SDK_VERSION", "default_user_agent"]
