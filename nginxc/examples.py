"""Demo configuration: one static host and one reverse-proxied API host."""

from __future__ import annotations

from .document import Document, new_document
from .nodes import Clause, Location

PROXY_UPSTREAM = "http://127.0.0.1:3000"


def _proxy(location: Location) -> None:
    (
        location.add_directive("proxy_pass", PROXY_UPSTREAM)
        .add_directive("proxy_http_version", "1.1")
        .add_directive("proxy_set_header", "Upgrade $http_upgrade")
        .add_directive("proxy_set_header", "Connection 'upgrade'")
        .add_directive("proxy_set_header", "X-Forwarded-For $remote_addr")
    )


def _static_server(server: Clause) -> None:
    (
        server.add_directive("listen", "80")
        .add_directive("server_name", "example.com")
        .add_directive("client_max_body_size", "50M")
        .add_directive("root", "/home/ascari/example.com")
        .add_location("/", lambda loc: loc.add_directive("index", "index.html"))
    )


def _api_server(server: Clause) -> None:
    (
        server.add_directive("listen", "80")
        .add_directive("server_name", "api.example.com")
        .add_directive("client_max_body_size", "50M")
        .add_location("/", _proxy)
        .add_location("/objects", _proxy)
    )


def _http(http: Clause) -> None:
    (
        http.add_directive("sendfile", "on")
        .add_directive("tcp_nopush", "on")
        .add_directive("tcp_nodelay", "on")
        .add_directive("keepalive_timeout", 65)
        .add_directive("types_hash_max_size", 2048)
        .add_directive("include", "/etc/nginx/mime.types")
        .add_directive("default_type", "application/octet-stream")
        .add_directive("access_log", "/var/log/nginx/access.log")
        .add_directive("error_log", "/var/log/nginx/error.log")
        .add_directive("gzip", "on")
        .add_directive("gzip_disable", "msie6")
        .add_clause("server", _static_server)
        .add_clause("server", _api_server)
    )


def build_example_config(filename: str | None = None) -> Document:
    return (
        new_document(filename)
        .dir("user", "ascari")
        .dir("worker_processes", "4")
        .dir("pid", "/run/nginx.pid")
        .cl("events", lambda cl: cl.add_directive("worker_connections", 768))
        .add_clause("http", _http)
    )


__all__ = ["build_example_config"]
