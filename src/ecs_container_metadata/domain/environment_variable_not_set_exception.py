from ecs_container_metadata.domain.ecs_metadata_exception import ECSMetadataException


class EnvironmentVariableNotSetException(ECSMetadataException):
    def __init__(self, variable_name: str):
        super().__init__(f'Environment variable {variable_name} not set')
        self.variable_name = variable_name
