from http.server import SimpleHTTPRequestHandler

from holograph.config import merge_config
from holograph.errors import ConfigError
from holograph.logger import MemoryLogger
from holograph.server import LiveServer, _LiveHandler, is_page_request, transform_request_uri


def make_handler(handler_cls, path):
    handler = handler_cls.__new__(handler_cls)
    handler.path = path
    return handler


def test_transform_request_uri():
    assert transform_request_uri("/") == "index.html"
    assert transform_request_uri("") == "index.html"
    assert transform_request_uri("/buttons.html") == "buttons.html"
    assert transform_request_uri("/docs/index.php/forms.html") == "forms.html"
    assert transform_request_uri("/docs/index.php") == "index.html"
    assert transform_request_uri("/forms.html?x=1") == "forms.html"


def test_is_page_request():
    assert is_page_request("/")
    assert is_page_request("/forms.html")
    assert is_page_request("/docs/index.php")
    assert not is_page_request("/static/css/doc.css")
    assert not is_page_request("/build/css/screen.css?v=2")


def test_live_server_port(tmp_path):
    config = merge_config()
    assert LiveServer(tmp_path, config, MemoryLogger()).port == 3232
    assert LiveServer(tmp_path, config, MemoryLogger(), port=8080).port == 8080
    assert LiveServer(tmp_path, config, MemoryLogger()).output_dir == tmp_path / "docs"


def test_handler_rebuilds_before_each_page(monkeypatch, tmp_path):
    server = LiveServer(tmp_path, merge_config(), MemoryLogger())
    builds = []
    monkeypatch.setattr(server, "build", lambda: builds.append("build"))
    handler_cls = server.handler_class()

    served = []
    monkeypatch.setattr(SimpleHTTPRequestHandler, "send_head", lambda self: served.append(self.path))

    make_handler(handler_cls, "/docs/index.php/buttons.html").send_head()
    make_handler(handler_cls, "/").send_head()
    make_handler(handler_cls, "/static/css/doc.css").send_head()

    assert builds == ["build", "build"]
    assert served == ["/buttons.html", "/index.html", "/static/css/doc.css"]


def test_handler_without_rebuild(monkeypatch, tmp_path):
    server = LiveServer(tmp_path, merge_config(), MemoryLogger(), rebuild=False)
    builds = []
    monkeypatch.setattr(server, "build", lambda: builds.append("build"))
    handler_cls = server.handler_class()
    monkeypatch.setattr(SimpleHTTPRequestHandler, "send_head", lambda self: None)

    make_handler(handler_cls, "/index.html").send_head()

    assert handler_cls.rebuild is None
    assert builds == []


def test_handler_reports_build_failure(monkeypatch):
    def failing_build():
        raise ConfigError("Unknown preprocessor 'sass'")

    handler_cls = type("H", (_LiveHandler,), {"rebuild": staticmethod(failing_build)})
    handler = make_handler(handler_cls, "/index.html")
    errors = []
    handler.send_error = lambda code, message=None, explain=None: errors.append((code, explain))

    assert handler.send_head() is None
    assert errors == [(500, "Unknown preprocessor 'sass'")]


def test_live_build_reloads_config(monkeypatch, tmp_path):
    configs = iter([merge_config({"title": "First"}), merge_config({"title": "Second"})])
    seen = []
    monkeypatch.setattr(
        "holograph.server.build_site",
        lambda root, config, logger: seen.append(config["title"]),
    )
    server = LiveServer(
        tmp_path, merge_config(), MemoryLogger(), config_loader=lambda: next(configs)
    )

    server.build()
    server.build()

    assert seen == ["First", "Second"]


def test_serve_build_keeps_startup_config(monkeypatch, tmp_path):
    seen = []
    monkeypatch.setattr(
        "holograph.server.build_site",
        lambda root, config, logger: seen.append(config["title"]),
    )
    server = LiveServer(
        tmp_path,
        merge_config({"title": "Startup"}),
        MemoryLogger(),
        rebuild=False,
        config_loader=lambda: merge_config({"title": "Edited"}),
    )

    server.build()

    assert seen == ["Startup"]


def test_live_config_error_becomes_server_error(tmp_path):
    def broken_config():
        raise ConfigError("Config file 'holograph.yml' must contain a mapping")

    server = LiveServer(tmp_path, merge_config(), MemoryLogger(), config_loader=broken_config)
    handler = make_handler(server.handler_class(), "/index.html")
    errors = []
    handler.send_error = lambda code, message=None, explain=None: errors.append((code, explain))

    assert handler.send_head() is None
    assert errors == [(500, "Config file 'holograph.yml' must contain a mapping")]
