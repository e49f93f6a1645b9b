from __future__ import annotations

import json
import os
import sys

from fastapi.testclient import TestClient

# Ensure skillmatch/ is importable when running as a script.
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from skillmatch.main import app  # noqa: E402


def main() -> int:
    client = TestClient(app)

    # 1) /health/
    r = client.get("/health/")
    print("GET /health/ ->", r.status_code)
    if r.status_code != 200:
        return 1

    # 2) fetch the sample body and send it back to /analyze
    r2 = client.get("/api/v1/analyze/example")
    print("GET /api/v1/analyze/example ->", r2.status_code)
    if r2.status_code != 200:
        return 1
    example = r2.json()

    r3 = client.post("/api/v1/analyze", content=json.dumps(example))
    print("\nPOST /api/v1/analyze ->", r3.status_code)
    print(json.dumps(r3.json(), indent=2, ensure_ascii=False))
    if r3.status_code != 200:
        return 1

    # 3) error paths
    r4 = client.post("/api/v1/analyze", content="{")
    print("\nPOST /api/v1/analyze (malformed) ->", r4.status_code, r4.json().get("detail"))
    r5 = client.post("/api/v1/analyze", content="{}")
    print("POST /api/v1/analyze (empty object) ->", r5.status_code, r5.json().get("detail"))
    if r4.status_code != 400 or r5.status_code != 422:
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
