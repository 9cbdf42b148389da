from typing import Dict, Optional

import boto3

from .constants import AWS_REGION, DEBUG_MODE


class EnvironmentNotFoundError(Exception):
    def __init__(self, application: str, environment: str):
        super().__init__(f"Ambiente '{environment}' não encontrado na aplicação '{application}'")
        self.application = application
        self.environment = environment


class BeanstalkClient:
    def __init__(self, region_name: Optional[str] = None, client=None):
        self.region_name = region_name or AWS_REGION
        self._client = client

    @property
    def client(self):
        # criado sob demanda para não exigir credenciais no import
        if self._client is None:
            self._client = boto3.client("elasticbeanstalk", region_name=self.region_name)
        return self._client

    def describe_environment(self, application: str, environment: str) -> Dict[str, str]:
        """Retorna ``version_label`` e ``environment_id`` do ambiente informado.

        Erros do botocore não são tratados aqui; a invocação inteira falha.
        """
        response = self.client.describe_environments(
            ApplicationName=application,
            EnvironmentNames=[environment],
        )
        environments = response.get("Environments") or []
        if not environments:
            raise EnvironmentNotFoundError(application, environment)

        env = environments[0]
        if DEBUG_MODE:
            print(f"[DEBUG] Beanstalk: {application}/{environment} -> {env.get('EnvironmentId')} ({env.get('VersionLabel')})")
        return {
            "version_label": env.get("VersionLabel"),
            "environment_id": env.get("EnvironmentId"),
        }


beanstalk_client = BeanstalkClient()
