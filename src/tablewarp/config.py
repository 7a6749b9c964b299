"""Runtime settings read from the environment"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class TableSettings:
    """Formatting and CLI settings"""
    json_indent: int = 4            # JSON pretty-print indent
    xml_indent: int = 2             # spaces per XML nesting level
    log_level: str = 'WARNING'      # CLI default log level
    http_timeout: int = 60          # seconds, for remote sources

    @classmethod
    def from_env(cls) -> 'TableSettings':
        return cls(
            json_indent=int(os.getenv('TABLEWARP_JSON_INDENT', '4')),
            xml_indent=int(os.getenv('TABLEWARP_XML_INDENT', '2')),
            log_level=os.getenv('TABLEWARP_LOG_LEVEL', 'WARNING').upper(),
            http_timeout=int(os.getenv('TABLEWARP_HTTP_TIMEOUT', '60')),
        )


def get_settings() -> TableSettings:
    """Settings from the current environment."""
    return TableSettings.from_env()
