import os
import re
import logging
import logging.handlers
import sys
from pathlib import Path


class PersonalDataFilter(logging.Filter):
    """Mask student contact data (e-mails, phone numbers) in log records"""

    SENSITIVE_PATTERNS = [
        (re.compile(r'[\w.+-]+@[\w-]+\.[\w.-]+'), '[EMAIL]'),
        # Phone numbers such as 555-0101, +54 11 5555 0101
        (re.compile(r'(?<![\d-])(?:\+\d{1,3}[\s-]?)?(?:\d{2,4}[\s-]){1,3}\d{4}(?![\d-])'), '[PHONE]'),
        (re.compile(r'(medical_?info|allergies|injuries|conditions)["\s]*[:=]["\s]*[^,}]+', re.IGNORECASE), r'\1: [HIDDEN]'),
    ]

    def filter(self, record):
        if hasattr(record, 'msg'):
            msg = record.getMessage() if record.args else str(record.msg)
            for pattern, replacement in self.SENSITIVE_PATTERNS:
                msg = pattern.sub(replacement, msg)
            record.msg = msg
            record.args = None
        return True


def setup_logging():
    """Configure application logging based on environment variables"""

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    sql_log_level = os.getenv("SQL_LOG_LEVEL", "WARNING").upper()
    log_format = os.getenv("LOG_FORMAT", "text").lower()

    # Resolve default log file within <repo>/logs/studio.log regardless of CWD
    default_log_path = Path(__file__).resolve().parents[2] / "logs" / "studio.log"
    log_file_path = os.getenv("LOG_FILE_PATH", str(default_log_path))
    enable_pii_filter = os.getenv("ENABLE_PII_FILTER", "false").lower() == "true"

    log_dir = Path(log_file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    if log_format == "json":
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"module": "%(name)s", "message": "%(message)s", '
            '"line": %(lineno)d, "function": "%(funcName)s"}'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level, logging.INFO))
    console_handler.setFormatter(formatter)

    pii_filter = PersonalDataFilter()
    if enable_pii_filter:
        console_handler.addFilter(pii_filter)

    root_logger.addHandler(console_handler)

    # File handler with rotation
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(getattr(logging, log_level, logging.INFO))
    file_handler.setFormatter(formatter)

    if enable_pii_filter:
        file_handler.addFilter(pii_filter)

    root_logger.addHandler(file_handler)

    sql_logger = logging.getLogger('sqlalchemy.engine')
    sql_logger.setLevel(getattr(logging, sql_log_level, logging.WARNING))

    app_logger = logging.getLogger('studio')
    app_logger.setLevel(getattr(logging, log_level, logging.INFO))

    root_logger.info(
        "Logging initialized level=%s sql=%s file=%s",
        log_level,
        sql_log_level,
        log_file_path,
    )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name"""
    return logging.getLogger(f"studio.{name}")
