"""Configuration management for Pingdom Exporter"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings


VERSION = "0.3.0"


class Config(BaseSettings):
    """Configuration class with Pydantic validation and environment-based settings"""

    # Web settings
    listen_address: str = Field(default=":8000", description="Address to listen on for web interface and telemetry")
    metrics_path: str = Field(default="/metrics", description="Path under which to expose metrics")

    # Pingdom account, passed through to the API client untouched
    pingdom_username: str = Field(..., min_length=1, description="Username for the Pingdom account")
    pingdom_password: str = Field(..., min_length=1, description="Password for the Pingdom account")
    pingdom_api_key: str = Field(..., min_length=1, description="Pingdom API key")
    pingdom_base_url: str = Field(default="https://api.pingdom.com/api/2.0", description="Pingdom API base URL")
    pingdom_timeout: float = Field(default=60.0, gt=0, description="Pingdom API request timeout in seconds")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_format: Literal["json", "console"] = Field(default="json", description="Log output format")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")

    # Service settings
    service_name: str = Field(default="pingdom_exporter", description="Service name")
    service_version: str = Field(default=VERSION, description="Service version")

    enable_request_logging: bool = Field(default=False, description="Enable HTTP request logging")
    enable_process_metrics: bool = Field(default=True, description="Export process and platform metrics")

    class Config:
        env_prefix = ""
        case_sensitive = False

    @validator('log_level', pre=True)
    def normalize_log_level(cls, v):
        """Accept log levels in any case"""
        if isinstance(v, str):
            return v.upper()
        return v

    @validator('listen_address')
    def validate_listen_address(cls, v):
        """Validate host:port form, host may be empty"""
        host, sep, port = v.rpartition(':')
        if not sep:
            raise ValueError(f"listen address must be host:port, got {v!r}")
        if not port.isdigit() or not 0 < int(port) <= 65535:
            raise ValueError(f"invalid port in listen address {v!r}")
        if host.startswith('[') != host.endswith(']'):
            raise ValueError(f"unbalanced brackets in listen address {v!r}")
        return v

    @validator('metrics_path')
    def validate_metrics_path(cls, v):
        """Metrics path must be absolute and distinct from the index page"""
        if not v.startswith('/'):
            raise ValueError("metrics path must start with '/'")
        if v == '/':
            raise ValueError("metrics path cannot be '/'")
        return v

    @property
    def listen_host(self) -> str:
        """Host part of listen_address, all interfaces when empty"""
        host = self.listen_address.rpartition(':')[0]
        if host.startswith('[') and host.endswith(']'):
            host = host[1:-1]
        return host or "0.0.0.0"

    @property
    def listen_port(self) -> int:
        """Port part of listen_address"""
        return int(self.listen_address.rpartition(':')[2])
