"""
Vercel Python Function for annealing schedule generation.

This endpoint handles POST requests to /api/schedule/generate and returns a
kiln firing/annealing schedule for the submitted glass and geometry.
"""

from http.server import BaseHTTPRequestHandler
import json
import sys
from pathlib import Path
from uuid import uuid4

# Add the _python directory to the Python path for importing annealing module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from annealing.scheduler import ScheduleGenerator
from annealing.types import ScheduleValidationError
from schedule_api import build_request, result_to_dict, validate_request

MAX_BODY_SIZE = 64 * 1024  # 64KB max request body


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for schedule generation."""
        try:
            content_length = int(self.headers.get("Content-Length", 0))
            if content_length > MAX_BODY_SIZE:
                self._send_json_response(413, {"error": "Request body too large"})
                return

            body = self.rfile.read(content_length)
            data = json.loads(body)

            validation_error = validate_request(data)
            if validation_error:
                self._send_json_response(400, {"error": validation_error})
                return

            result = ScheduleGenerator().generate_schedule(build_request(data))

            self._send_json_response(
                200, {"id": str(uuid4()), "schedule": result_to_dict(result)}
            )

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except ScheduleValidationError as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            self._send_json_response(
                500, {"error": f"Schedule generation failed: {str(e)}"}
            )

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
