# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Redacting logger helpers and per-step log files.

Every message goes to the module logger. Messages tagged with a step id
are also appended to ``<log base>/<step_id>/<step_id>.log`` while that
step's outputs are being processed.
"""

import logging
import re
import traceback
from pathlib import Path
from typing import Dict, Optional

_log_base = Path("/var/log/step_executor")
_step_loggers: Dict[str, logging.Logger] = {}

_REDACTIONS = (
    (re.compile(r"\b(?:\d{1,3}\.){3}\d{1,3}\b"), "<REDACTED_IP>"),
    (re.compile(
        r"(?i)((?:password|passwd|secret|secret_key|access_key|api_key|token)"
        r"\s*[=:]\s*)[^\s,;\"']+"
    ), r"\1<REDACTED>"),
    (re.compile(r"\b[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}\b"), "<REDACTED_EMAIL>"),
)

SECTION_SEPARATOR = "-" * 80


def redact(message: str) -> str:
    """Mask IP addresses, credentials and email addresses in a message."""
    for pattern, replacement in _REDACTIONS:
        message = pattern.sub(replacement, message)
    return message


def set_log_base(log_base: Path) -> None:
    """Set the directory that holds per-step log directories."""
    global _log_base  # pylint: disable=global-statement
    _log_base = log_base


def create_step_log_file(step_id: str) -> Optional[Path]:
    """Open the log file of a step and attach a logger to it.

    The step id must already be validated as a single path component.

    Returns:
        The log file path, or ``None`` if it could not be created.
    """
    if step_id in _step_loggers:
        return Path(_step_loggers[step_id].handlers[0].baseFilename)

    log_file = _log_base / step_id / f"{step_id}.log"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), mode="a")
    except OSError as exc:
        logging.getLogger(__name__).warning(
            "Cannot open log file for step %s: %s", step_id, exc
        )
        return None

    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    step_logger = logging.getLogger(f"step_executor.step.{step_id}")
    step_logger.setLevel(logging.DEBUG)
    step_logger.propagate = False
    step_logger.addHandler(handler)
    _step_loggers[step_id] = step_logger
    return log_file


def remove_step_logger(step_id: str) -> None:
    """Close the log file of a step; unknown ids are ignored."""
    step_logger = _step_loggers.pop(step_id, None)
    if step_logger is None:
        return
    for handler in list(step_logger.handlers):
        handler.close()
        step_logger.removeHandler(handler)


def log_secure_info(
    level: str,
    message: str,
    identifier: Optional[str] = None,
    step_id: Optional[str] = None,
    exc_info: bool = False,
    end_section: bool = False,
) -> None:
    """Log a redacted message.

    Args:
        level: Logger method name such as ``'info'`` or ``'warning'``;
            anything unknown logs at info.
        message: Text to log.
        identifier: Opaque id, shortened to its first 8 characters.
        step_id: Also write to this step's log file, if one is open.
        exc_info: Append the traceback of the exception being handled.
        end_section: Follow the entry with a separator in the step log.
    """
    text = f"{message}: {identifier[:8]}..." if identifier else message
    if exc_info:
        text = f"{text}\n{traceback.format_exc().rstrip()}"
    text = redact(text)

    module_logger = logging.getLogger(__name__)
    getattr(module_logger, level, module_logger.info)(text)

    step_logger = _step_loggers.get(step_id) if step_id else None
    if step_logger is not None:
        getattr(step_logger, level, step_logger.info)(text)
        if end_section:
            step_logger.info(SECTION_SEPARATOR)
