# shark_server/api/utils/logger.py
import json
from datetime import datetime, timezone
from typing import Any, Optional

# Basic structured logging function
def write_log(entry: dict, stream: str = "default"):
    entry = dict(entry)
    entry.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    entry.setdefault("stream", stream)
    print(json.dumps(entry, ensure_ascii=False, default=str), flush=True)

def log_person_event(event: str, person_id: Optional[int], stream: str = "store", **extra: Any) -> bool:
    """
    Audit helper for record-level events (lookups, misses, updates).
    Extra keyword arguments are merged into the entry as-is.
    """
    entry = {"event": event, "person_id": person_id}
    entry.update(extra)
    write_log(entry, stream=stream)
    return True

def log_graphql_request(data: Any, success: bool, remote_addr: Optional[str] = None) -> bool:
    if not isinstance(data, dict):
        write_log({"event": "graphql_request", "success": success, "reason": "body is not a JSON object"}, stream="http")
        return False
    write_log({
        "event": "graphql_request",
        "operation": data.get("operationName"),
        "has_variables": bool(data.get("variables")),
        "success": success,
        "remote_addr": remote_addr
    }, stream="http")
    return True
