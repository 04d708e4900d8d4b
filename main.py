#!/usr/bin/env python3
"""Main entry point for Pingdom Exporter"""
import platform
import sys
import click
import uvicorn
from config import Config, VERSION
from app.server import MetricsServer
from collectors.pingdom import PingdomCollector
from metrics.registry import MetricsRegistry
from upstream.client import PingdomClient
from logging_config import setup_structured_logging, get_logger, log_server_startup, log_error


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--web.listen-address", "listen_address", default=":8000", show_default=True,
              help="Address to listen on for web interface and telemetry.")
@click.option("--web.metrics-path", "metrics_path", default="/metrics", show_default=True,
              help="Path under which to expose metrics.")
@click.option("--log.level", "log_level", default="INFO", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
              help="Only log messages with the given severity or above.")
@click.option("--log.format", "log_format", default="json", show_default=True,
              type=click.Choice(["json", "console"]), help="Log output format.")
@click.option("--log.file", "log_file", default=None, type=click.Path(dir_okay=False),
              help="Also write logs to this file.")
@click.version_option(VERSION, prog_name="pingdom_exporter")
@click.pass_context
def cli(ctx, **options):
    """Prometheus exporter for Pingdom checks"""
    ctx.obj = options


@cli.command()
@click.argument("username")
@click.argument("password")
@click.argument("api_key")
@click.pass_obj
def server(options, username, password, api_key):
    """Serve metrics for the Pingdom account USERNAME / PASSWORD / API_KEY."""
    try:
        # Load configuration
        config = Config(
            pingdom_username=username,
            pingdom_password=password,
            pingdom_api_key=api_key,
            **{key: value for key, value in options.items() if value is not None}
        )

        # Setup structured logging
        setup_structured_logging(config)
        logger = get_logger(__name__)

        # Log startup
        log_server_startup(logger, config)
        logger.info(
            "Build context",
            python_implementation=platform.python_implementation(),
            platform=platform.platform(),
            event_type="build_context"
        )

        with PingdomClient(
            username,
            password,
            api_key,
            base_url=config.pingdom_base_url,
            timeout=config.pingdom_timeout
        ) as client:
            registry = MetricsRegistry(config)
            registry.register_collector(PingdomCollector(client))

            app = MetricsServer(config, registry).get_app()

            logger.info("Listening on " + config.listen_address, event_type="server_listen")

            # Run server
            uvicorn.run(
                app,
                host=config.listen_host,
                port=config.listen_port,
                log_config=None  # We handle logging ourselves
            )

    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main", "phase": "startup"})
        sys.exit(1)


if __name__ == '__main__':
    cli()
