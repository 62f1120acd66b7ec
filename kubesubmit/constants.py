"""
Constants for kubesubmit.

Configuration keys, label keys and the well-known names used when
building the driver spec.
"""

# Labels
SPARK_APP_ID_LABEL = "spark-app-selector"
SPARK_ROLE_LABEL = "spark-role"
SPARK_POD_DRIVER_ROLE = "driver"

RESERVED_LABEL_KEYS = (SPARK_APP_ID_LABEL, SPARK_ROLE_LABEL)

# Configuration key prefixes
KUBERNETES_DRIVER_LABEL_PREFIX = "spark.kubernetes.driver.label."
KUBERNETES_DRIVER_SECRETS_PREFIX = "spark.kubernetes.driver.secrets."

# Configuration keys
SPARK_JARS = "spark.jars"
SPARK_FILES = "spark.files"
KUBERNETES_NAMESPACE = "spark.kubernetes.namespace"
DRIVER_HOST_KEY = "spark.driver.host"
DRIVER_PORT_KEY = "spark.driver.port"
DRIVER_BLOCK_MANAGER_PORT_KEY = "spark.driver.blockManager.port"
JARS_DOWNLOAD_LOCATION = "spark.kubernetes.mountDependencies.jarsDownloadDir"
FILES_DOWNLOAD_LOCATION = "spark.kubernetes.mountDependencies.filesDownloadDir"
DRIVER_CONTAINER_IMAGE = "spark.kubernetes.driver.container.image"
KERBEROS_TOKEN_SECRET_NAME = "spark.kubernetes.kerberos.tokensecret.name"

# Defaults
DEFAULT_NAMESPACE = "default"
DEFAULT_DRIVER_PORT = 7078
DEFAULT_BLOCKMANAGER_PORT = 7079
DEFAULT_JARS_DOWNLOAD_DIR = "/var/spark-data/spark-jars"
DEFAULT_FILES_DOWNLOAD_DIR = "/var/spark-data/spark-files"
DRIVER_CONTAINER_NAME = "spark-kubernetes-driver"

# Main resource placeholder meaning "no primary resource"
NO_RESOURCE = "spark-internal"

# Driver service
DRIVER_SVC_POSTFIX = "-driver-svc"
MAX_SERVICE_NAME_LENGTH = 63
DRIVER_PORT_NAME = "driver-rpc-port"
BLOCK_MANAGER_PORT_NAME = "blockmanager"

# Dependency resolution
ENV_MOUNTED_CLASSPATH = "SPARK_MOUNTED_CLASSPATH"
CLASSPATH_SEPARATOR = ":"

# Secrets
SECRET_VOLUME_SUFFIX = "-volume"
ENV_MOUNTED_SECRET_PREFIX = "SPARK_MOUNTED_SECRET_"

# Hadoop delegation token
SPARK_APP_HADOOP_SECRET_VOLUME_NAME = "hadoop-secret"
SPARK_APP_HADOOP_CREDENTIALS_BASE_DIR = "/mnt/secrets/hadoop-credentials"
SPARK_APP_HADOOP_TOKEN_FILE_SECRET_NAME = "hadoop-token-file"
SPARK_APP_HADOOP_TOKEN_FILE_PATH = (
    f"{SPARK_APP_HADOOP_CREDENTIALS_BASE_DIR}/{SPARK_APP_HADOOP_TOKEN_FILE_SECRET_NAME}"
)
ENV_HADOOP_TOKEN_FILE_LOCATION = "HADOOP_TOKEN_FILE_LOCATION"
