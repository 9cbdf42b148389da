"""Relay de notificações do Elastic Beanstalk (via SNS) -> Slack.

Este pacote contém:
- constants: variáveis de ambiente e configuração
- utils: utilitários de formatação e helpers
- parsing: extração dos campos do corpo da notificação e do envelope SNS
- detection: classificação de severidade por palavras-chave
- beanstalk: consulta de versão/ID do ambiente no Elastic Beanstalk
- formatters: montagem do payload do Slack
- services: integração com serviços externos (Slack, SNS)
- controller: pipeline e criação do Flask app
- handler: entrypoint para AWS Lambda
"""
