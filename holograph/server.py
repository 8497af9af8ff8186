"""Development server for Holograph.

Serves the generated style guide for local authoring:
- ``serve`` builds once and serves the destination directory.
- ``live`` rebuilds the whole style guide before answering every page
  request, so a browser refresh always shows the current sources.

Requests are handled one at a time, so two builds never run concurrently.

Key classes:
- LiveServer: Builds the style guide and runs the HTTP server.
- _LiveHandler: HTTP request handler that rebuilds before serving pages.
"""

from __future__ import annotations

import functools
import posixpath
from collections.abc import Callable
from http.server import HTTPServer, SimpleHTTPRequestHandler
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from .build import BuildResult, build_site
from .errors import HolographError
from .protocols import Logger


def transform_request_uri(request_uri: str) -> str:
    """Map a request URI to the name of a generated page.

    URIs may look like ``/docs/index.php/buttons.html``; the ``index.php/``
    segment, the query string and the leading directories are dropped.

    Args:
        request_uri: Raw request path.

    Returns:
        Page filename, ``index.html`` for the site root.
    """
    request = urlsplit(request_uri).path.replace("index.php/", "").lstrip("/")
    if posixpath.basename(request) == "index.php":
        request = request.replace("index.php", "index.html")
    return posixpath.basename(request) or "index.html"


def is_page_request(request_uri: str) -> bool:
    """Check whether a request asks for a generated page rather than an asset."""
    path = urlsplit(request_uri).path
    return path.endswith(("/", ".html", "index.php")) or path == ""


class _LiveHandler(SimpleHTTPRequestHandler):
    """HTTP request handler serving the destination directory.

    Attributes:
        rebuild: Callable run before each page request; None to serve the
            files as they are.
    """

    rebuild = None

    def end_headers(self):
        self.send_header("Cache-Control", "no-cache, no-store, must-revalidate")
        super().end_headers()

    def list_directory(self, path):  # pragma: no cover
        self.send_error(404, "File not found")
        return None

    def send_head(self):
        if not is_page_request(self.path):
            return super().send_head()

        if self.rebuild is not None:
            try:
                self.rebuild()
            except HolographError as exc:
                self.send_error(500, "Build failed", str(exc))
                return None

        self.path = "/" + transform_request_uri(self.path)
        return super().send_head()


class LiveServer:
    """Development server for the generated style guide.

    Attributes:
        project_root: Root directory of the project.
        config: Site configuration.
        logger: Receives build and server messages.
        output_dir: Directory being served.
        port: Port for the HTTP server.
        rebuild: Rebuild before every page request.
        config_loader: Optional callable returning a fresh configuration.
    """

    def __init__(
        self,
        project_root: Path,
        config: dict[str, Any],
        logger: Logger,
        port: int | None = None,
        rebuild: bool = True,
        config_loader: Callable[[], dict[str, Any]] | None = None,
    ):
        """Initialize the development server.

        Args:
            project_root: Root directory of the project.
            config: Merged configuration.
            logger: Receives build and server messages.
            port: Optional override for the configured port.
            rebuild: Rebuild before every page request (``live``) instead of
                only once at start-up (``serve``).
            config_loader: Re-reads the configuration before each rebuild,
                so edits to the config file apply without a restart.
        """
        self.project_root = project_root
        self.config = config
        self.logger = logger
        self.output_dir = project_root / config["destination"]
        self.port = int(port or config.get("port") or 3232)
        self.rebuild = rebuild
        self.config_loader = config_loader

    def build(self) -> BuildResult:
        """Run one full, blocking build.

        In live mode the configuration is loaded again first.
        """
        if self.rebuild and self.config_loader is not None:
            self.config = self.config_loader()
        return build_site(self.project_root, self.config, self.logger)

    def handler_class(self) -> type[_LiveHandler]:
        """Create the request handler class bound to this server."""
        rebuild = staticmethod(self.build) if self.rebuild else None
        return type("_LiveHandlerWithBuild", (_LiveHandler,), {"rebuild": rebuild})

    def start(self) -> None:  # pragma: no cover
        self.build()
        handler = functools.partial(self.handler_class(), directory=str(self.output_dir))
        httpd = HTTPServer(("", self.port), handler)
        mode = "live" if self.rebuild else "static"
        self.logger.notice(
            f"Serving {self.output_dir} ({mode}) at http://localhost:{self.port}"
        )
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            pass
        finally:
            httpd.server_close()
