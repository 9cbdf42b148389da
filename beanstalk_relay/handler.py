from .constants import DEBUG_MODE
from .controller import process_event


def lambda_handler(event, context):
    if DEBUG_MODE:
        print(f"[DEBUG] Lambda event: {str(event)[:500]}")
    payload = process_event(event)
    return {"ok": payload is not None}
