"""Tests for the demo configuration and the CLI."""

import generator
from nginxc import ConfigFormatter, Location, build_example_config

PROXY_BLOCK = """\
      proxy_pass http://127.0.0.1:3000;
      proxy_http_version 1.1;
      proxy_set_header Upgrade $http_upgrade;
      proxy_set_header Connection 'upgrade';
      proxy_set_header X-Forwarded-For $remote_addr;
"""

EXPECTED = (
    """\
user ascari;
worker_processes 4;
pid /run/nginx.pid;

events {
  worker_connections 768;
}

http {
  sendfile on;
  tcp_nopush on;
  tcp_nodelay on;
  keepalive_timeout 65;
  types_hash_max_size 2048;
  include /etc/nginx/mime.types;
  default_type application/octet-stream;
  access_log /var/log/nginx/access.log;
  error_log /var/log/nginx/error.log;
  gzip on;
  gzip_disable msie6;

  server {
    listen 80;
    server_name example.com;
    client_max_body_size 50M;
    root /home/ascari/example.com;
    location / {
      index index.html;
    }
  }

  server {
    listen 80;
    server_name api.example.com;
    client_max_body_size 50M;
    location / {
"""
    + PROXY_BLOCK
    + """\
    }
    location /objects {
"""
    + PROXY_BLOCK
    + """\
    }
  }
}
"""
)


def test_example_renders_expected_config():
    assert ConfigFormatter().format_document(build_example_config()) == EXPECTED


def test_example_to_text_keeps_body_form():
    assert build_example_config().to_text() == EXPECTED.rstrip("\n")


def test_example_structure():
    doc = build_example_config("nginx.conf")
    assert doc.filename == "nginx.conf"
    http = doc.entries[-1]
    servers = [entry for entry in http.entries if entry.name == "server"]
    assert len(servers) == 2
    locations = [entry for entry in servers[1].entries if isinstance(entry, Location)]
    assert [loc.path for loc in locations] == ["/", "/objects"]
    assert all(loc.depth == 3 for loc in locations)


def test_cli_prints_config(capsys):
    generator.main([])
    assert capsys.readouterr().out == EXPECTED


def test_cli_writes_config(tmp_path, capsys):
    destination = tmp_path / "out" / "nginx.conf"
    generator.main(["-o", str(destination), "--quiet"])
    assert destination.read_text(encoding="utf-8") == EXPECTED
    assert "Wrote" in capsys.readouterr().out


def test_cli_indent_width(capsys):
    generator.main(["--indent-width", "4"])
    assert "\n    worker_connections 768;\n" in capsys.readouterr().out
