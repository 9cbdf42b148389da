import json

import requests

from .constants import SLACK_WEBHOOK_URL, DEBUG_MODE, HTTP_TIMEOUT_SECONDS


def send_slack_payload(payload, webhook_url=None):
    # Slack incoming webhook aceita o JSON num único campo form-encoded "payload"
    data = {"payload": json.dumps(payload)}

    resp = requests.post(webhook_url or SLACK_WEBHOOK_URL, data=data, timeout=HTTP_TIMEOUT_SECONDS)
    if DEBUG_MODE:
        try:
            print(f"[DEBUG] Slack response: {resp.status_code}")
            if resp.status_code != 200:
                print(f"[DEBUG] Response content: {resp.text}")
        except Exception:
            pass
    return resp


def confirm_sns_subscription(subscribe_url):
    resp = requests.get(subscribe_url, timeout=HTTP_TIMEOUT_SECONDS)
    if DEBUG_MODE:
        print(f"[DEBUG] SNS subscription confirmation: {resp.status_code}")
    return resp
