from .constants import BEANSTALK_CONSOLE_URL, SLACK_CHANNEL, SLACK_USERNAME
from .utils import format_timestamp


def build_application_link(application, console_url=BEANSTALK_CONSOLE_URL):
    return f"<{console_url}#/application/overview?applicationName={application}|{application}>"


def build_environment_link(application, environment, environment_id, console_url=BEANSTALK_CONSOLE_URL):
    return (
        f"<{console_url}#/environment/dashboard?applicationName={application}"
        f"&environmentId={environment_id}|{environment}>"
    )


def build_slack_payload(record, environment_info, channel=SLACK_CHANNEL, username=SLACK_USERNAME):
    fields = [
        {
            "title": "Version Label",
            "value": environment_info.get("version_label"),
        },
        {
            "title": "Application",
            "value": build_application_link(record.application_name),
            "short": True,
        },
        {
            "title": "Environment",
            "value": build_environment_link(
                record.application_name,
                record.environment_name,
                environment_info.get("environment_id"),
            ),
            "short": True,
        },
        {
            "title": "Environment URL",
            "value": record.environment_url,
        },
        {
            "title": "Timestamp",
            "value": format_timestamp(record.timestamp),
        },
    ]

    return {
        "channel": channel,
        "username": username,
        "attachments": [
            {
                "color": record.severity.color,
                "text": record.message,
                "fields": fields,
            }
        ],
    }
