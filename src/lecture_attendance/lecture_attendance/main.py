from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_DATA_FILE
from .shell.controller import AttendanceShell

logger = logging.getLogger(__name__)


def resolve_log_level(settings) -> str:
    # DEBUG=1 always wins over LOG_LEVEL
    if bool(getattr(settings, "DEBUG", False)):
        return "DEBUG"
    return str(getattr(settings, "LOG_LEVEL", "WARNING"))


def create_shell(**shell_kwargs) -> AttendanceShell:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    data_file = getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE)
    group_records = bool(getattr(settings, "GROUP_RECORDS_ON_LOAD", False))

    logging.basicConfig(
        level=resolve_log_level(settings),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("settings=%s data_file=%s group_records=%s", settings_module, data_file, group_records)

    container = build_container(data_file=data_file, group_records=group_records)
    return AttendanceShell(container.roster_service, **shell_kwargs)


def main() -> None:
    create_shell().run()
