import asyncio
import json
import logging
import socket
import tempfile
import threading
import unittest
from pathlib import Path

from websockets.datastructures import Headers
from websockets.http11 import Request
from websockets.sync.client import connect

from server import UIServer, UIServerConfig


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class UIServerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        self.ui_root = Path(temp_dir.name)
        self.index = self.ui_root / "index.html"
        self.index.write_text("<html>timer</html>", encoding="utf-8")
        (self.ui_root / "app.js").write_text("console.log('ok');", encoding="utf-8")

    def _server(self, **kwargs) -> UIServer:
        config = UIServerConfig(
            host="127.0.0.1",
            port=kwargs.pop("port", 8765),
            index_file=str(self.index),
        )
        return UIServer(config, logger=logging.getLogger("test.ui_server"), **kwargs)


class UIServerRoutingTests(UIServerTestCase):
    def _get(self, server: UIServer, path: str):
        return asyncio.run(server._process_request(None, Request(path, Headers())))

    def test_index_and_healthz(self) -> None:
        server = self._server()

        index = self._get(server, "/")
        self.assertEqual(200, index.status_code)
        self.assertEqual("OK", index.reason_phrase)
        self.assertIn("text/html", index.headers["Content-Type"])
        self.assertEqual(b"<html>timer</html>", index.body)
        self.assertEqual(b"<html>timer</html>", self._get(server, "/index.html").body)

        health = self._get(server, "/healthz")
        self.assertEqual(200, health.status_code)
        self.assertEqual(b"ok\n", health.body)

    def test_static_assets_are_served_from_index_directory(self) -> None:
        response = self._get(self._server(), "/app.js")

        self.assertEqual(200, response.status_code)
        self.assertIn("javascript", response.headers["Content-Type"])
        self.assertEqual("no-store", response.headers["Cache-Control"])

    def test_unknown_path_is_not_found(self) -> None:
        server = self._server()
        missing = self._get(server, "/missing.css")
        self.assertEqual(404, missing.status_code)
        self.assertEqual("Not Found", missing.reason_phrase)
        self.assertEqual(str(len(missing.body)), missing.headers["Content-Length"])
        self.assertEqual(404, self._get(server, "/../index.html").status_code)

    def test_websocket_path_is_left_to_handshake(self) -> None:
        self.assertIsNone(self._get(self._server(), "/ws"))


class UIServerMessageTests(UIServerTestCase):
    def test_dispatch_routes_text_and_bytes_to_handler(self) -> None:
        received: list[str] = []
        server = self._server(message_handler=received.append)

        server._dispatch_message('{"command": "stop"}')
        server._dispatch_message(b'{"command": "delete"}')

        self.assertEqual(['{"command": "stop"}', '{"command": "delete"}'], received)

    def test_handler_failure_is_logged(self) -> None:
        def broken(message: str) -> None:
            raise RuntimeError("boom")

        server = self._server(message_handler=broken)
        with self.assertLogs("test.ui_server", level="ERROR"):
            server._dispatch_message("{}")

    def test_publish_before_start_keeps_latest_timer_view(self) -> None:
        server = self._server()
        server.publish("timer", display="00:05")
        server.publish("error", message="ignored")

        snapshot = server._sticky_events.snapshot()
        self.assertEqual(1, len(snapshot))
        self.assertEqual("00:05", json.loads(snapshot[0])["display"])

    def test_call_in_loop_requires_running_server(self) -> None:
        with self.assertRaises(RuntimeError):
            self._server().call_in_loop(lambda: None)


class UIServerWebsocketTests(UIServerTestCase):
    def test_client_receives_hello_and_latest_view_and_can_send_commands(self) -> None:
        received: list[str] = []
        got_message = threading.Event()

        def handler(message: str) -> None:
            received.append(message)
            got_message.set()

        port = _free_port()
        server = self._server(port=port, message_handler=handler)
        server.start()
        self.addCleanup(server.stop)

        self.assertTrue(server.is_running)
        self.assertEqual("loop", server.call_in_loop(lambda: "loop"))
        server.publish("timer", display="01:00")

        with connect(f"ws://127.0.0.1:{port}/ws", open_timeout=5) as websocket:
            hello = json.loads(websocket.recv(timeout=5))
            sticky = json.loads(websocket.recv(timeout=5))
            websocket.send('{"command": "start"}')
            self.assertTrue(got_message.wait(5))

        self.assertEqual("hello", hello["type"])
        self.assertEqual("timer", sticky["type"])
        self.assertEqual("01:00", sticky["display"])
        self.assertEqual(['{"command": "start"}'], received)

        server.stop()
        self.assertFalse(server.is_running)


if __name__ == "__main__":
    unittest.main()
