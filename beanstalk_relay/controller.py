from flask import Flask, request
import json

from .constants import DEBUG_MODE, SNS_AUTO_CONFIRM
from .beanstalk import beanstalk_client
from .formatters import build_slack_payload
from .parsing import parse_message, extract_sns_message
from .services import send_slack_payload, confirm_sns_subscription
from .utils import get_key, is_sns_subscribe_url


def relay_notification(text, lookup=None, send=None):
    """Executa parse -> classificação -> enriquecimento -> formatação -> envio.

    Retorna o payload enviado, ou ``None`` quando a mensagem não pôde ser
    interpretada (nesse caso nada é enviado).
    """
    lookup = lookup or beanstalk_client
    send = send or send_slack_payload

    record = parse_message(text)
    if record is None:
        if DEBUG_MODE:
            print("[DEBUG] Notificação ignorada: corpo da mensagem não reconhecido")
        return None

    if DEBUG_MODE:
        print(f"[DEBUG] {record.application_name}/{record.environment_name} severidade={record.severity.value}")

    environment_info = lookup.describe_environment(record.application_name, record.environment_name)
    payload = build_slack_payload(record, environment_info)

    resp = send(payload)
    if DEBUG_MODE and resp is not None:
        print(f"[DEBUG] Sent {record.severity.value} notification, status: {getattr(resp, 'status_code', None)}")
    return payload


def process_event(event, lookup=None, send=None):
    text = extract_sns_message(event)
    if text is None:
        if DEBUG_MODE:
            print(f"[DEBUG] Envelope sem records: {str(event)[:200]}")
        return None
    return relay_notification(text, lookup=lookup, send=send)


def create_app():
    app = Flask(__name__)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'beanstalk-slack-relay'}, 200

    @app.route('/sns', methods=['POST'])
    def sns():
        # SNS entrega com Content-Type text/plain, então não dá para usar request.json
        raw = request.get_data(as_text=True)
        try:
            data = json.loads(raw)
        except ValueError:
            return 'Error: invalid JSON body', 400
        if not isinstance(data, dict):
            return 'Error: invalid JSON body', 400

        if DEBUG_MODE:
            print(f"[DEBUG] Received data: {data}")

        try:
            if get_key(data, 'Records') is not None:
                payload = process_event(data)
                return ('', 200) if payload else ('', 204)
            return handle_sns_delivery(data)
        except Exception as e:
            if DEBUG_MODE:
                print(f"[ERROR] {str(e)}")
            return f'Error: {str(e)}', 500

    def handle_sns_delivery(data):
        message_type = data.get('Type') or request.headers.get('x-amz-sns-message-type', '')

        if message_type == 'SubscriptionConfirmation':
            subscribe_url = data.get('SubscribeURL')
            if SNS_AUTO_CONFIRM and is_sns_subscribe_url(subscribe_url):
                confirm_sns_subscription(subscribe_url)
                return '', 200
            if DEBUG_MODE:
                print(f"[DEBUG] Confirmação de assinatura ignorada: {data.get('TopicArn')} ({subscribe_url!r})")
            return '', 204

        if message_type == 'Notification':
            payload = relay_notification(data.get('Message'))
            return ('', 200) if payload else ('', 204)

        if DEBUG_MODE:
            print(f"[DEBUG] Tipo de mensagem SNS não tratado: {message_type!r}")
        return '', 204

    return app
