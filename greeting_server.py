#!/usr/bin/env python3
from http.server import HTTPServer, BaseHTTPRequestHandler
from socketserver import ThreadingMixIn
from urllib.parse import urlsplit
import sys

HOST = "0.0.0.0"
PORT = 3000

GREETING = "GitHub Actions CI/CD Project Running"
MODIFIED_GREETING = "My Modification - " + GREETING


class GreetingHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def do_GET(self):
        if self.request_path() != "/":
            self.send_error(404)
            return

        body = self.server.greeting.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def request_path(self):
        # self.path has a leading "//" collapsed, so route on the raw target
        target = self.requestline.split()[1]
        if target.startswith("/"):
            return target.split("?", 1)[0]
        return urlsplit(target).path

    # Only GET / is routed
    def not_found(self):
        self.send_error(404)

    def __getattr__(self, name):
        if name.startswith("do_"):
            return self.not_found
        raise AttributeError(name)

    def log_message(self, format, *args):
        print(f"[{self.server.server_address[1]}] {format % args}", file=sys.stderr)


class GreetingServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True
    allow_reuse_address = True

    def __init__(self, server_address, greeting):
        self.greeting = greeting
        super().__init__(server_address, GreetingHandler)


def make_server(greeting, host=HOST, port=PORT):
    """
    Bind a listener serving `greeting` on GET /.

    Raises OSError when the port cannot be bound. Port 0 picks a free one.
    """
    return GreetingServer((host, port), greeting)


def start(greeting, host=HOST, port=PORT):
    """Bind, announce on stdout, then serve until the process dies."""
    server = make_server(greeting, host, port)
    print(f"Server running on port {server.server_address[1]}", flush=True)
    server.serve_forever()
