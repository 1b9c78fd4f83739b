from typing import Mapping

from ecs_container_metadata.domain.environment_variable_not_set_exception import EnvironmentVariableNotSetException
from ecs_container_metadata.domain.metadata_uri_source import MetadataUriSource

ECS_CONTAINER_METADATA_URI_V4 = 'ECS_CONTAINER_METADATA_URI_V4'


class EnvironmentMetadataUriSource(MetadataUriSource):
    def __init__(self, environment: Mapping[str, str]):
        self.__environment = environment

    def get_metadata_uri(self) -> str:
        metadata_uri = self.__environment.get(ECS_CONTAINER_METADATA_URI_V4)

        if metadata_uri is None or not self.__is_valid_text(metadata_uri):
            raise EnvironmentVariableNotSetException(ECS_CONTAINER_METADATA_URI_V4)

        return metadata_uri

    @staticmethod
    def __is_valid_text(value: str) -> bool:
        # os.environ surfaces undecodable bytes as lone surrogates
        try:
            value.encode('utf-8')
        except UnicodeEncodeError:
            return False

        return True
