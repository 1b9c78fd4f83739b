import os
from logging import Logger, getLogger
from typing import Mapping, Optional

from ecs_container_metadata.domain.container_metadata import ContainerMetadata, ContainerLabels, ContainerLimits
from ecs_container_metadata.domain.ecs_metadata_exception import ECSMetadataException
from ecs_container_metadata.domain.environment_variable_not_set_exception import EnvironmentVariableNotSetException
from ecs_container_metadata.domain.metadata_http_exception import MetadataHttpException
from ecs_container_metadata.domain.metadata_parse_exception import MetadataParseException
from ecs_container_metadata.infrastructure.environment_metadata_uri_source import EnvironmentMetadataUriSource
from ecs_container_metadata.infrastructure.http_container_metadata_source import HttpContainerMetadataSource

__all__ = [
    "fetch",
    "ContainerMetadata",
    "ContainerLabels",
    "ContainerLimits",
    "ECSMetadataException",
    "EnvironmentVariableNotSetException",
    "MetadataHttpException",
    "MetadataParseException",
]


def fetch(logger: Optional[Logger] = None, environment: Optional[Mapping[str, str]] = None) -> ContainerMetadata:
    """Fetch the metadata of the ECS container this process is running in.

    The endpoint is read from ECS_CONTAINER_METADATA_URI_V4 in ``environment`` (``os.environ`` by default).
    Every call makes a fresh request; nothing is cached or retried.

    :raises EnvironmentVariableNotSetException: the endpoint variable is not set
    :raises MetadataHttpException: the endpoint could not be reached or responded with a non-2xx status
    :raises MetadataParseException: the response body does not match the container metadata schema
    """
    logger = logger or getLogger(__name__)

    container_metadata_source = HttpContainerMetadataSource(
        EnvironmentMetadataUriSource(os.environ if environment is None else environment),
        logger
    )

    return container_metadata_source.fetch_container_metadata()
