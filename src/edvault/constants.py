"""Constants for edvault backends and request routing."""

from enum import Enum


class DatabaseType(str, Enum):
    """Storage backends selectable through configuration."""

    MEMSTORE = "memstore"
    COUCHDB = "couchdb"


# Path prefix the vault service is mounted under; used to build Location values.
VAULTS_PATH = "/encrypted-data-vaults"
