# ============================================================================
# KubeNotify - Notifier Authentication Modes
#
# Purpose: Resolve configuration into one of two mutually exclusive auth modes
#          and build the matching request authenticator
# Inputs: ElasticSearchConfig
# Outputs: BasicAuth | SignedAuth, http_auth objects for opensearch-py
# Dependencies: boto3, botocore, opensearch-py
# Usage: auth = resolve_auth_mode(config.elasticsearch); http_auth = auth.http_auth()
#
# Changelog:
#   2026-10-08: Initial basic and SigV4 auth modes
#   2026-10-10: Role-assumed credentials refresh themselves before expiry
# ============================================================================

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

import boto3
from botocore.credentials import RefreshableCredentials
from opensearchpy import AWSV4SignerAuth

from KubeNotify.config import ElasticSearchConfig
from KubeNotify.logging_utils import get_logger

logger = get_logger(__name__)

# Service name AWS OpenSearch Service signs requests against
AWS_SERVICE = "es"

ROLE_SESSION_NAME = "kubenotify"


@dataclass(frozen=True)
class BasicAuth:
    """Static username/password sent with every request."""

    username: str = ""
    password: str = ""

    def http_auth(self) -> Optional[Tuple[str, str]]:
        if not self.username and not self.password:
            return None
        return (self.username, self.password)


@dataclass(frozen=True)
class SignedAuth:
    """AWS SigV4-signed requests, optionally with an assumed role."""

    region: Optional[str] = None
    role_arn: Optional[str] = None

    def http_auth(self, session: Any = None) -> Any:
        """
        Build an ``AWSV4SignerAuth`` for this mode.

        Args:
            session: Optional boto3 session (a default session is created otherwise)

        Returns:
            opensearchpy.AWSV4SignerAuth instance
        """
        if session is None:
            session = boto3.Session()

        region = self.region or session.region_name
        if not region:
            raise ValueError("AWS region is not configured and no default region is set")

        if self.role_arn:
            credentials = assume_role_credentials(session, self.role_arn)
        else:
            credentials = session.get_credentials()
            if credentials is None:
                raise ValueError("No AWS credentials found in the environment or instance metadata")

        logger.info(f"Signing requests for service '{AWS_SERVICE}' in {region}")
        return AWSV4SignerAuth(credentials, region, AWS_SERVICE)


AuthMode = Union[BasicAuth, SignedAuth]


def resolve_auth_mode(config: ElasticSearchConfig) -> AuthMode:
    """Pick the auth mode once, at construction time."""
    if config.aws_signing.enabled:
        return SignedAuth(
            region=config.aws_signing.aws_region or None,
            role_arn=config.aws_signing.role_arn or None,
        )
    return BasicAuth(username=config.username, password=config.password)


def assume_role_credentials(session: Any, role_arn: str) -> Any:
    """
    Short-lived credentials for ``role_arn`` that refresh via STS AssumeRole.

    Args:
        session: boto3 session used to reach STS
        role_arn: ARN of the role to assume

    Returns:
        botocore RefreshableCredentials
    """
    sts = session.client("sts")

    def _refresh() -> dict:
        response = sts.assume_role(RoleArn=role_arn, RoleSessionName=ROLE_SESSION_NAME)
        creds = response["Credentials"]
        logger.debug(f"Assumed role {role_arn}, credentials expire at {creds['Expiration']}")
        return {
            "access_key": creds["AccessKeyId"],
            "secret_key": creds["SecretAccessKey"],
            "token": creds["SessionToken"],
            "expiry_time": creds["Expiration"].isoformat(),
        }

    return RefreshableCredentials.create_from_metadata(
        metadata=_refresh(),
        refresh_using=_refresh,
        method="sts-assume-role",
    )
