import os

# Configurações globais de ambiente
SLACK_WEBHOOK_URL = os.getenv("SLACK_WEBHOOK_URL", "https://hooks.slack.com/services/XXXXX")
SLACK_CHANNEL = os.getenv("SLACK_CHANNEL", "#random")
SLACK_USERNAME = os.getenv("SLACK_USERNAME", "Elastic Beanstalk")
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"
HTTP_TIMEOUT_SECONDS = int(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# Integração com AWS Elastic Beanstalk
AWS_REGION = os.getenv("AWS_REGION", "ap-northeast-1")
BEANSTALK_CONSOLE_URL = os.getenv(
    "BEANSTALK_CONSOLE_URL",
    f"https://{AWS_REGION}.console.aws.amazon.com/elasticbeanstalk/home?region={AWS_REGION}",
)

# Confirma automaticamente assinaturas HTTP(S) do SNS
SNS_AUTO_CONFIRM = os.getenv("SNS_AUTO_CONFIRM", "false").lower() == "true"

# Rótulos do corpo da notificação, na ordem em que o Beanstalk os envia
MESSAGE_LABELS = ("Timestamp", "Message", "Environment", "Application", "Environment URL")
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S UTC %Y"
