"""FastAPI server setup and routes"""
import time
from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse
from config import Config
from metrics.registry import MetricsRegistry
from middleware.request_logging import RequestLoggingMiddleware
from logging_config import get_logger


logger = get_logger(__name__)


class MetricsServer:
    """FastAPI server exposing the registry to Prometheus"""

    def __init__(self, config: Config, registry: MetricsRegistry):
        self.config = config
        self.registry = registry
        self.start_time = time.time()
        self.app = FastAPI(
            title="Pingdom Exporter",
            version=config.service_version,
            docs_url=None,
            redoc_url=None,
            openapi_url=None
        )

        if self.config.enable_request_logging:
            self.app.add_middleware(RequestLoggingMiddleware)

        self._setup_routes()

    def _setup_routes(self):
        """Setup FastAPI routes"""

        # Plain def: the upstream fetch blocks, so this runs in the threadpool
        @self.app.get(self.config.metrics_path, response_class=Response)
        def get_metrics(request: Request):
            """Scrape Pingdom and serve the result in Prometheus format"""
            content, content_type = self.registry.generate(request.headers.get("accept"))
            return Response(content, media_type=content_type)

        @self.app.get('/health')
        def health_check():
            """Liveness check, does not contact Pingdom"""
            return {
                "status": "healthy",
                "service": self.config.service_name,
                "version": self.config.service_version,
                "uptime_seconds": round(time.time() - self.start_time, 1)
            }

        @self.app.get('/', response_class=HTMLResponse)
        def index():
            """Web interface"""
            return self._generate_html_interface()

    def _generate_html_interface(self) -> str:
        """Generate HTML interface"""
        return f"""<html>
<head><title>Pingdom Exporter</title></head>
<body>
<h1>Pingdom Exporter</h1>
<p><a href='{self.config.metrics_path}'>Metrics</a></p>
</body>
</html>
"""

    def get_app(self) -> FastAPI:
        """Get the FastAPI application"""
        return self.app
