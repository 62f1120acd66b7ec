"""
Dependency locator handling.

A locator without a scheme refers to the submitting machine's
filesystem and resolves to the ``file`` scheme. ``local://`` locators
point at paths already present inside the container image; every other
scheme is fetched remotely at run time.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

FILE_SCHEME = "file"
LOCAL_SCHEME = "local"


@dataclass(frozen=True, slots=True)
class ResolvedURI:
    scheme: str
    path: str
    original: str

    @property
    def file_name(self) -> str:
        return posixpath.basename(self.path.rstrip("/"))


def resolve_uri(uri: str) -> ResolvedURI:
    """
    Resolve a locator to its scheme and path.

        >>> resolve_uri("hdfs://nn/jars/a.jar").scheme
        'hdfs'
        >>> resolve_uri("jars/a.jar").scheme
        'file'
    """
    try:
        parts = urlsplit(uri)
    except ValueError:
        # Unparseable locators are treated as plain paths
        return ResolvedURI(scheme=FILE_SCHEME, path=uri, original=uri)
    # A one-letter scheme is a Windows drive, not a URI scheme
    if parts.scheme and len(parts.scheme) > 1:
        return ResolvedURI(scheme=parts.scheme.lower(), path=parts.path, original=uri)
    return ResolvedURI(scheme=FILE_SCHEME, path=uri.split("#", 1)[0], original=uri)


def find_submission_local_files(uris: Iterable[str]) -> list[str]:
    """Return the locators that point at the submitting machine's filesystem."""
    return [uri for uri in uris if resolve_uri(uri).scheme == FILE_SCHEME]


def resolve_file_uri(uri: str) -> str:
    """Locator as the driver sees it: container-local entries become plain paths."""
    resolved = resolve_uri(uri)
    if resolved.scheme == LOCAL_SCHEME:
        return resolved.path
    return uri


def resolve_file_path(uri: str, download_path: str) -> str:
    """Container path of a dependency once remote entries are downloaded."""
    resolved = resolve_uri(uri)
    if resolved.scheme == LOCAL_SCHEME:
        return resolved.path
    return f"{download_path.rstrip('/')}/{resolved.file_name}"
