"""
Configuration Schemas for kubesubmit.

Typed view over the string key/value configuration carried by a
submission. Values arrive as strings and are coerced and range-checked
by pydantic.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from kubesubmit import constants
from kubesubmit.errors import ValidationError

# Field name -> configuration key
_CONF_KEYS = {
    "namespace": constants.KUBERNETES_NAMESPACE,
    "driver_port": constants.DRIVER_PORT_KEY,
    "block_manager_port": constants.DRIVER_BLOCK_MANAGER_PORT_KEY,
    "jars_download_dir": constants.JARS_DOWNLOAD_LOCATION,
    "files_download_dir": constants.FILES_DOWNLOAD_LOCATION,
    "driver_container_image": constants.DRIVER_CONTAINER_IMAGE,
    "hadoop_token_secret_name": constants.KERBEROS_TOKEN_SECRET_NAME,
}


class SubmissionSettings(BaseModel):
    """
    Settings read from the submission configuration.

    Unset keys fall back to the cluster defaults.
    """

    namespace: str = Field(constants.DEFAULT_NAMESPACE, min_length=1, description="Target namespace")
    driver_port: int = Field(constants.DEFAULT_DRIVER_PORT, ge=1, le=65535)
    block_manager_port: int = Field(constants.DEFAULT_BLOCKMANAGER_PORT, ge=1, le=65535)
    jars_download_dir: str = Field(
        constants.DEFAULT_JARS_DOWNLOAD_DIR,
        min_length=1,
        description="Container directory where remote jars are downloaded",
    )
    files_download_dir: str = Field(
        constants.DEFAULT_FILES_DOWNLOAD_DIR,
        min_length=1,
        description="Container directory where remote files are downloaded",
    )
    driver_container_image: str | None = Field(None, description="Driver container image")
    hadoop_token_secret_name: str | None = Field(
        None, description="Secret holding the Hadoop delegation token"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_conf(cls, conf: Mapping[str, str]) -> SubmissionSettings:
        """
        Build settings from a configuration mapping.

        Raises:
            ValidationError: If a recognised key holds an invalid value
        """
        values = {field: conf[key] for field, key in _CONF_KEYS.items() if key in conf}
        try:
            return cls(**values)
        except PydanticValidationError as e:
            offending = [
                _CONF_KEYS[str(err["loc"][0])] for err in e.errors() if err["loc"]
            ]
            raise ValidationError(
                f"Invalid submission configuration: {', '.join(offending) or e}",
                offending=offending,
            ) from e
