#!/usr/bin/env python3
"""
Generate an annealing schedule from a JSON request file.

Usage: python3 generate_schedule.py <request_file.json>

Reads a schedule request (same body as the HTTP endpoint) and writes the
generated schedule as JSON to stdout.
"""

import json
import sys

from annealing.scheduler import ScheduleGenerator
from annealing.types import ScheduleValidationError
from schedule_api import build_request, result_to_dict, validate_request


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(json.dumps({"error": "Usage: generate_schedule.py <request_file.json>"}))
        return 1

    request_file = args[0]

    try:
        with open(request_file) as f:
            data = json.load(f)

        validation_error = validate_request(data)
        if validation_error:
            print(json.dumps({"error": validation_error}))
            return 1

        result = ScheduleGenerator().generate_schedule(build_request(data))
        print(json.dumps(result_to_dict(result)))
        return 0

    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
    except ScheduleValidationError as e:
        print(json.dumps({"error": str(e)}))
    return 1


if __name__ == "__main__":
    sys.exit(main())
