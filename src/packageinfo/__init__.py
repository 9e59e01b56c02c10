"""Package identity and requirement model.

Sources, versions, their requirement counterparts, named requirements,
dependency lists with override semantics, and pinned resolutions.
"""

from .dependencies import Dependencies
from .errors import (
    DecodeError,
    InvalidFormat,
    InvalidRequirement,
    InvalidResolutionKey,
    InvalidResolutionValue,
    PackageInfoError,
)
from .opam_info import OpamInfo
from .req import Req
from .resolutions import Resolutions
from .source import Archive, Git, Github, LocalPath, NoSource, Source
from .source_spec import ArchiveSpec, GitSpec, GithubSpec, LocalPathSpec, NoSourceSpec, SourceSpec
from .version import NpmVersion, OpamVersion, SourceVersion, Version
from .version_spec import NpmVersionSpec, OpamVersionSpec, SourceVersionSpec, VersionSpec, matches

__all__ = [
    "Archive",
    "ArchiveSpec",
    "DecodeError",
    "Dependencies",
    "Git",
    "GitSpec",
    "Github",
    "GithubSpec",
    "InvalidFormat",
    "InvalidRequirement",
    "InvalidResolutionKey",
    "InvalidResolutionValue",
    "LocalPath",
    "LocalPathSpec",
    "NoSource",
    "NoSourceSpec",
    "NpmVersion",
    "NpmVersionSpec",
    "OpamInfo",
    "OpamVersion",
    "OpamVersionSpec",
    "PackageInfoError",
    "Req",
    "Resolutions",
    "Source",
    "SourceSpec",
    "SourceVersion",
    "SourceVersionSpec",
    "Version",
    "matches",
]
