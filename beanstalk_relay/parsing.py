import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .constants import DEBUG_MODE, MESSAGE_LABELS, TIMESTAMP_FORMAT
from .detection import Severity, get_severity
from .utils import _is_meaningful, get_key

# Ordem fixa dos campos; trocar a ordem no corpo da mensagem quebra o match.
MESSAGE_PATTERN = re.compile(
    r"Timestamp:\s(?P<timestamp>.*?)\n"
    r".*?Message:\s(?P<message>.*?)\n"
    r".*?Environment:\s(?P<environment>.*?)\n"
    r".*?Application:\s(?P<application>.*?)\n"
    r".*?Environment URL:\s(?P<environment_url>.*?)\n",
    re.DOTALL,
)


@dataclass(frozen=True)
class NotificationRecord:
    timestamp: datetime
    message: str
    environment_name: str
    application_name: str
    environment_url: str

    @property
    def severity(self) -> Severity:
        # recalculado a cada leitura, nunca armazenado
        return get_severity(self.message)


def parse_timestamp(value: str) -> Optional[datetime]:
    value = value.strip()
    try:
        parsed = datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return None
    # strptime ignora o dia da semana e aceita números sem zero à esquerda
    if parsed.strftime(TIMESTAMP_FORMAT) != value:
        return None
    return parsed.replace(tzinfo=timezone.utc)


def parse_message(text) -> Optional[NotificationRecord]:
    """Extrai os cinco campos do corpo da notificação do Beanstalk.

    Retorna ``None`` quando o texto não segue o formato esperado ou quando o
    timestamp não está no formato ``Wed Jan 02 15:04:05 UTC 2019``.
    """
    if not isinstance(text, str):
        return None

    match = MESSAGE_PATTERN.search(text)
    if not match:
        if DEBUG_MODE:
            print(f"[DEBUG] Mensagem fora do formato esperado: {text[:200]!r}")
        return None

    fields = {name: value.strip() for name, value in match.groupdict().items()}
    if not all(_is_meaningful(value) for value in fields.values()):
        if DEBUG_MODE:
            print(f"[DEBUG] Campos vazios na mensagem: {fields}")
        return None

    timestamp = parse_timestamp(fields['timestamp'])
    if timestamp is None:
        if DEBUG_MODE:
            print(f"[DEBUG] Timestamp inválido: {fields['timestamp']!r}")
        return None

    return NotificationRecord(
        timestamp=timestamp,
        message=fields['message'],
        environment_name=fields['environment'],
        application_name=fields['application'],
        environment_url=fields['environment_url'],
    )


def render_message(record: NotificationRecord) -> str:
    values = (
        record.timestamp.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT),
        record.message,
        record.environment_name,
        record.application_name,
        record.environment_url,
    )
    return "".join(f"{label}: {value}\n" for label, value in zip(MESSAGE_LABELS, values))


def extract_sns_message(event) -> Optional[str]:
    """Primeiro passo da decodificação: envelope SNS -> texto bruto.

    Apenas o primeiro record é consumido.
    """
    if isinstance(event, (str, bytes)):
        try:
            event = json.loads(event)
        except ValueError:
            return None

    records = get_key(event, 'Records')
    if not records or not isinstance(records, list):
        return None

    sns = get_key(records[0], 'Sns')
    message = get_key(sns, 'Message')
    if not isinstance(message, str):
        return None
    return message
