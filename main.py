"""Entry point for the ChronoSpan age studio CLI.

Run with:
    python main.py

The script configures structured logging, prompts for a birth date and a
reference date, validates both, and prints the age report.  When
``MODEL_ARN`` is configured it also offers one follow-up question to the
assistant.
"""

import datetime
import json
import logging
import os
import sys

from chronospan import compute_age, render_report
from chronospan.config import settings

logger: logging.Logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output (CloudWatch-friendly).
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _prompt_date(label: str, default: datetime.date) -> datetime.date:
    """Ask for a date, falling back to ``default`` on blank input.

    Exits with code 1 when the input is not a valid YYYY-MM-DD date.
    """
    raw = input(f"{label} (YYYY-MM-DD, blank for {default.isoformat()}): ").strip()
    if not raw:
        return default
    try:
        return datetime.date.fromisoformat(raw)
    except ValueError:
        print(
            f"Error: '{raw}' is not a valid date. "
            "Please use the format YYYY-MM-DD (e.g. 1990-05-15)."
        )
        sys.exit(1)


def _ask_assistant(birth_date: datetime.date, reference_date: datetime.date) -> None:
    """Offer one follow-up question to the assistant.

    ``invoke_with_audit`` writes the audit record for the call.
    """
    question = input("Ask the assistant about your milestones (blank to skip): ").strip()
    if not question:
        return

    from chronospan.agent import create_agent, invoke_with_audit

    agent = create_agent()
    prompt = (
        f"My birthdate is {birth_date.isoformat()} and the reference date is "
        f"{reference_date.isoformat()}. {question}"
    )
    invoke_with_audit(agent, prompt)


def run() -> None:
    """Configure logging, read both dates, and print the age report.

    Exits with code 1 on an invalid date so that callers (shell scripts,
    Docker health checks, etc.) can detect failure cleanly.  A birth date
    after the reference date is not an error: the report shows its
    placeholders, as it would for any incomplete input.
    """
    _configure_logging()

    print("Welcome to ChronoSpan Age Studio!")
    birth_date = _prompt_date("Birth date", settings.default_birth_date)
    reference_date = _prompt_date("Reference date", datetime.date.today())

    breakdown = compute_age(birth_date, reference_date)
    print(render_report(breakdown))
    logger.info("report_rendered", extra={"valid_input": breakdown is not None})

    if breakdown is not None and settings.assistant_enabled:
        _ask_assistant(birth_date, reference_date)


if __name__ == "__main__":
    run()
