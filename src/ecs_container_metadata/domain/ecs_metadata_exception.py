class ECSMetadataException(Exception):
    """Root of the errors raised while resolving, fetching or parsing ECS container metadata.

    Only the subclasses defined alongside this one are ever raised:
    EnvironmentVariableNotSetException, MetadataHttpException and MetadataParseException.
    """
