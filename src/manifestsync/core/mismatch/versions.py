"""Version predicates used when comparing a project against the template."""

from __future__ import annotations

import re

from semantic_version import NpmSpec, Version

FILE_DEPENDENCY_PREFIX = "file:"

_IDENT = r"[0-9A-Za-z](?:[0-9A-Za-z-]*[0-9A-Za-z])?"
_SEMVER_RE = re.compile(rf"\d+\.\d+\.\d+(?:-{_IDENT}(?:\.{_IDENT})*)?(?:\+{_IDENT}(?:\.{_IDENT})*)?")
_THREE_PART_RE = re.compile(r"\d+\.\d+\.\d+")


def is_file_dependency(spec: str) -> bool:
    return spec.startswith(FILE_DEPENDENCY_PREFIX)


def extract_version(spec: str) -> Version | None:
    """Return the first full semantic version embedded in *spec*.

    ``"^16.1.0"`` yields ``16.1.0``; ``"latest"`` yields ``None``.
    """
    match = _SEMVER_RE.search(spec)
    if match is None:
        return None
    try:
        return Version(match.group(0))
    except ValueError:
        return None


def is_valid_version(project_spec: str, required_spec: str) -> bool:
    """Check whether the project's declared version satisfies the required range.

    Unparseable versions or ranges count as incompatible rather than errors.
    """
    version = extract_version(project_spec)
    if version is None:
        return False
    try:
        spec = NpmSpec(required_spec)
    except ValueError:
        return False
    return spec.match(version)


def is_mismatched(project_spec: str | None, required_spec: str) -> bool:
    if not project_spec:
        return True
    return not is_valid_version(project_spec, required_spec) and not is_file_dependency(project_spec)


def is_exempt_self_reference(name: str, project_spec: str | None, *, dev: bool, self_name: str) -> bool:
    """Whether the tool's own dependency should be skipped in a dev context.

    Only applies when developing against a linked or local build of the tool:
    any specifier without a three-part numeric version is exempt. Pre-release
    pins such as ``16.0.0-rc.1`` still contain one and are not exempt.
    """
    if not dev or name != self_name:
        return False
    return project_spec is None or _THREE_PART_RE.search(project_spec) is None
