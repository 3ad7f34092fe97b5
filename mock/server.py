"""Mock alumni portal auth backend."""
import argparse
import json
import logging
import secrets
import socketserver
import threading
from http.server import BaseHTTPRequestHandler

# Configure logging - show important messages only
logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)

REGISTER_FIELDS = (
    "name",
    "fatherName",
    "course",
    "department",
    "registrationNumber",
    "passingYear",
    "password",
)


class UserRegistry:
    """In-memory members keyed by registration number."""

    def __init__(self):
        self._users = {}
        self._lock = threading.Lock()

    def register(self, data):
        with self._lock:
            reg_no = data["registrationNumber"]
            if reg_no in self._users:
                return False
            self._users[reg_no] = dict(data)
            return True

    def authenticate(self, reg_no, password):
        with self._lock:
            user = self._users.get(reg_no)
            if user and user["password"] == password:
                return user
            return None


class MockAuthHandler(BaseHTTPRequestHandler):
    """Handler for the login and register endpoints."""

    registry = None

    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)

    def _send_json(self, status, content):
        body = json.dumps(content).encode('utf-8')
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _read_json(self):
        content_length = int(self.headers.get('Content-Length', 0))
        if content_length <= 0:
            return {}
        return json.loads(self.rfile.read(content_length).decode('utf-8'))

    def do_POST(self):
        """Route POST requests."""
        try:
            data = self._read_json()
        except json.JSONDecodeError:
            self._send_json(400, {"success": False, "message": "Invalid JSON body"})
            return

        if self.path == "/api/auth/login":
            self._handle_login(data)
        elif self.path == "/api/auth/register":
            self._handle_register(data)
        else:
            self._send_json(404, {"success": False, "message": "Not found"})

    def _handle_login(self, data):
        user = self.registry.authenticate(
            data.get("registrationNumber"),
            data.get("password")
        )
        if user is None:
            logger.info("Rejected login for %s", data.get("registrationNumber"))
            self._send_json(401, {"success": False, "message": "Invalid registration number or password"})
            return

        logger.info("Login for %s", user["registrationNumber"])
        self._send_json(200, {
            "success": True,
            "token": secrets.token_hex(16),
            "user": {"name": user["name"]},
            "redirectUrl": "dashboard.html"
        })

    def _handle_register(self, data):
        if "confirmPassword" in data:
            self._send_json(400, {"success": False, "message": "Unexpected field: confirmPassword"})
            return

        missing = [name for name in REGISTER_FIELDS if not data.get(name)]
        if missing:
            self._send_json(400, {"success": False, "message": f"Missing fields: {', '.join(missing)}"})
            return

        if not self.registry.register(data):
            self._send_json(409, {"success": False, "message": "Registration number already exists"})
            return

        logger.info("Registered %s", data["registrationNumber"])
        self._send_json(201, {"success": True, "message": "Registered"})


class ThreadingHTTPServer(socketserver.ThreadingMixIn, socketserver.TCPServer):
    allow_reuse_address = True
    daemon_threads = True


def create_server(host="127.0.0.1", port=8001, registry=None):
    """Build a server with its own user registry; port 0 picks a free port."""
    handler = type("BoundMockAuthHandler", (MockAuthHandler,), {
        "registry": registry or UserRegistry()
    })
    return ThreadingHTTPServer((host, port), handler)


def main():
    parser = argparse.ArgumentParser(description="Mock alumni portal auth backend")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8001)
    args = parser.parse_args()

    with create_server(args.host, args.port) as httpd:
        logger.info("Mock auth backend on http://%s:%d", args.host, args.port)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")


if __name__ == "__main__":
    main()
