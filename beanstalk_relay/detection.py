"""Classificação de severidade das notificações do Elastic Beanstalk.

As tabelas abaixo são comparadas literalmente (case-sensitive) contra o texto
da mensagem. A ordem de avaliação é Danger, Warning, Info; sem nenhum match o
resultado é Good.
"""
from enum import Enum


class Severity(Enum):
    INFO = "Info"
    GOOD = "Good"
    WARNING = "Warning"
    DANGER = "Danger"

    @property
    def color(self) -> str:
        return self.value.lower()


DANGER_MESSAGES = (
    " but with errors",
    " to RED",
    " to Degraded",
    " to Severe",
    "During an aborted deployment",
    "Failed to deploy",
    "has a dependent object",
    "is not authorized to perform",
    "Pending to Degraded",
    "Stack deletion failed",
    "Unsuccessful command execution",
    "You do not have permission",
    "Your quota allows for 0 more running instance",
)

WARNING_MESSAGES = (
    " to YELLOW",
    " to Warning",
    " aborted operation",
    "Degraded to Info",
    "Deleting SNS topic",
    "is currently running under desired capacity",
    "Ok to Info",
    "Ok to Warning",
    "Pending Initialization",
    "Rollback of environment",
)

INFO_MESSAGES = (
    "Adding instance",
    "Removed instance",
)

SEVERITY_RULES = (
    (Severity.DANGER, DANGER_MESSAGES),
    (Severity.WARNING, WARNING_MESSAGES),
    (Severity.INFO, INFO_MESSAGES),
)


def get_severity(message: str) -> Severity:
    if not message:
        return Severity.GOOD
    for severity, triggers in SEVERITY_RULES:
        if any(trigger in message for trigger in triggers):
            return severity
    return Severity.GOOD
