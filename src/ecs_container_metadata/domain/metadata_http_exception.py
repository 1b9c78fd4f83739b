from ecs_container_metadata.domain.ecs_metadata_exception import ECSMetadataException


class MetadataHttpException(ECSMetadataException):
    pass
